"""Command implementations for the camera card sync tool."""

from .sync import SyncCommand

__all__ = ['SyncCommand']
