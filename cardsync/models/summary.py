#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Aggregated scan totals for the camera card sync tool.
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..errors import NoMediaError
from ..utils.time import day_stamp
from .file_record import FileRecord


@dataclass
class ScanSummary:
    """Running totals over all file records of one scan.

    Owned by a single consumer; never shared between threads.
    """
    total_bytes: int = 0
    metadata_bytes: int = 0
    extension_counts: Counter = field(default_factory=Counter)
    earliest: Optional[datetime] = None
    latest: Optional[datetime] = None
    file_count: int = 0
    media_count: int = 0

    def add(self, record: FileRecord) -> None:
        """Fold one record into the totals."""
        self.file_count += 1
        self.total_bytes += record.size
        if not record.is_media:
            self.extension_counts[record.extension] += 1
            self.metadata_bytes += record.size
            return

        self.media_count += 1
        ts = record.timestamp
        if self.earliest is None or ts < self.earliest:
            self.earliest = ts
        if self.latest is None or ts > self.latest:
            self.latest = ts

    @property
    def has_media(self) -> bool:
        return self.media_count > 0

    @property
    def metadata_percent(self) -> float:
        """Share of non-media bytes in percent; NaN for an empty scan."""
        if self.total_bytes == 0:
            return float("nan")
        return self.metadata_bytes / self.total_bytes * 100

    def date_range_name(self) -> str:
        """Destination folder name, e.g. '20220115_20220320'."""
        if not self.has_media:
            raise NoMediaError("no media files found; cannot name the destination folder")
        return f"{day_stamp(self.earliest)}_{day_stamp(self.latest)}"
