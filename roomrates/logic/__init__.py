"""Core calendar logic layer.

Subpackages:
- calendar: Monday-aligned week arithmetic and the date-picker month grid
- synthesis: deterministic placeholder inventory and prices

The session module ties both to the room catalog and the overlay store.
"""
__all__ = ["calendar", "synthesis", "session"]
