"""Utility functions for the camera card sync tool."""

from .time import as_local, day_stamp

__all__ = ['as_local', 'day_stamp']
