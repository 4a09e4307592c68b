"""Camera card sync - scan a memory card and copy it into a dated archive folder."""

__version__ = "1.0.0"
__author__ = "Media Tool Team"

# Import key classes for convenient top-level access
from .commands import SyncCommand
from .config import SyncConfig, resolve_config
from .errors import SyncError
from .scanning import ScanPipeline, aggregate, extract_capture_time, scan_records, walk
from .models import FileRecord, WalkEntry, ScanSummary

__all__ = [
    # Core classes
    'SyncCommand',
    'SyncConfig',
    'ScanPipeline',
    'SyncError',

    # Pipeline stages
    'walk',
    'extract_capture_time',
    'scan_records',
    'aggregate',
    'resolve_config',

    # Data models
    'FileRecord',
    'WalkEntry',
    'ScanSummary',

    # Package metadata
    '__version__',
    '__author__'
]
