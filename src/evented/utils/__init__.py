"""Utility functions for evented."""

from evented.utils.ids import unique_id

__all__ = ["unique_id"]
