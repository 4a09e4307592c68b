"""Scanning and aggregation modules for the camera card sync tool."""

from .walker import walk
from .extractor import is_media_extension, parse_capture_time, extract_capture_time
from .pipeline import ScanPipeline, classify_entry, scan_records
from .aggregator import aggregate, format_record, format_summary

__all__ = [
    'walk',
    'is_media_extension',
    'parse_capture_time',
    'extract_capture_time',
    'ScanPipeline',
    'classify_entry',
    'scan_records',
    'aggregate',
    'format_record',
    'format_summary'
]
