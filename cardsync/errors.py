#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Exception types for the camera card sync tool.

Every failure is fatal; main() turns these into a diagnostic and exit status.
"""


class SyncError(Exception):
    """Base class for all card-sync failures."""
    exit_code = 1


class ArgumentError(SyncError):
    """Source/destination could not be resolved from the command line."""
    exit_code = 2


class WalkError(SyncError):
    """Directory traversal failed."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class StatError(SyncError):
    """A file's size could not be read."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class ExtractionError(SyncError):
    """exiftool failed or printed something that is not a capture time."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class NoMediaError(SyncError):
    """No media files were found, so no destination folder can be named."""


class CopyError(SyncError):
    """The copy tool failed."""
