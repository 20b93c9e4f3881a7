"""Shared helpers for the reactorview test-suite."""
