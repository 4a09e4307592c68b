#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Aggregation of scan records for the camera card sync tool.
"""

import logging
import sys
from typing import IO, Iterable, List, Optional

from tqdm import tqdm

from ..models.file_record import FileRecord
from ..models.summary import ScanSummary

logger = logging.getLogger(__name__)

MEDIA_ICON = "🖼"
OTHER_ICON = "🗒"


def format_record(record: FileRecord) -> str:
    icon = MEDIA_ICON if record.is_media else OTHER_ICON
    when = record.timestamp.isoformat() if record.timestamp else "-"
    return f"{icon} {record.path} {record.size} {when}"


def aggregate(records: Iterable[FileRecord], out: Optional[IO[str]] = None,
              progress: bool = False) -> ScanSummary:
    """
    Consume every record, printing one line each, and return the totals.

    Args:
        records: Record stream, in any order.
        out: Stream for the per-file listing (default: stdout).
        progress: Show a tqdm file counter on stderr.
    """
    out = out or sys.stdout
    summary = ScanSummary()
    bar = tqdm(records, desc="Scanning", unit="file", disable=not progress,
               leave=False, file=sys.stderr)
    for record in bar:
        tqdm.write(format_record(record), file=out)
        summary.add(record)

    logger.debug("Aggregated %d files (%d media)", summary.file_count, summary.media_count)
    return summary


def format_summary(summary: ScanSummary) -> List[str]:
    """Render the metadata-bytes line and the per-extension counts."""
    counts = dict(sorted(summary.extension_counts.items()))
    return [
        f"metadata: {summary.metadata_bytes}/{summary.total_bytes} ({summary.metadata_percent:f}%)",
        str(counts),
    ]
