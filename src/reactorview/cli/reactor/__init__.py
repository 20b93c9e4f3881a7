"""Reactor commands: inspect the discovered components."""
