"""Data models for the camera card sync tool."""

from .file_record import FileRecord, WalkEntry
from .summary import ScanSummary

__all__ = ['FileRecord', 'WalkEntry', 'ScanSummary']
