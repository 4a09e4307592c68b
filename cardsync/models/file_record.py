#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Data structures for walk entries and file records in the card sync pipeline.
"""

import os
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class WalkEntry:
    """One filesystem object seen by the walker."""
    path: str
    name: str
    is_dir: bool


@dataclass(frozen=True)
class FileRecord:
    """Immutable file record for pipeline processing."""
    path: str
    is_media: bool
    size: int
    timestamp: Optional[datetime] = None  # capture time, media only

    def __post_init__(self):
        if self.is_media != (self.timestamp is not None):
            raise ValueError(f"timestamp must be set iff is_media: {self.path}")
        if self.size < 0:
            raise ValueError(f"negative size for {self.path}: {self.size}")

    @property
    def extension(self) -> str:
        """Lowercase extension including the dot, or '' when there is none."""
        return os.path.splitext(self.path)[1].lower()
