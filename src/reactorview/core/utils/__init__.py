"""Shared utilities for reactorview."""
