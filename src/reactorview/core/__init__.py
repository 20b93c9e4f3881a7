"""Core (non-CLI) functionality for reactorview."""
