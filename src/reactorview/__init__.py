"""
reactorview - lightweight views on huge multi-project trees

Generates a small aggregator descriptor that references only a selected
slice of a reactor's components, so a developer can open or build that slice
without touching the original tree.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
