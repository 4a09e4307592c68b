#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Global configuration and constants for the camera card sync tool.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, NamedTuple, Optional, Set

from .errors import ArgumentError

# File type categories
MEDIA_EXT: Set[str] = {".cr2", ".cr3", ".jpg", ".mov", ".mp4", ".rw2"}

# External tools
EXIFTOOL_BIN = "exiftool"
EXIFTOOL_TAG = "-CreateDate"
RSYNC_BIN = "rsync"
RSYNC_FLAGS = "-Pav"

# Capture time formats reported by exiftool
CAPTURE_TIME_FORMAT = "%Y:%m:%d %H:%M:%S"
CAPTURE_TIME_FORMAT_TZ = "%Y:%m:%d %H:%M:%S%z"
# Exact layouts; strptime alone also takes unpadded fields and a "Z" offset
CAPTURE_TIME_PATTERN = re.compile(r"\d{4}:\d{2}:\d{2} \d{2}:\d{2}:\d{2}([+-]\d{2}:\d{2})?")

# Destination folder naming
FOLDER_DATE_FORMAT = "%Y%m%d"

# Processing defaults
DEFAULT_WORKERS = os.cpu_count() or 1
QUEUE_SLOTS_PER_WORKER = 4

# Camera presets
CARD_MOUNT_ROOT = "/media/keisuke"
PHOTO_ROOT = "/tank/photos/keisuke/Pictures"


class CameraPreset(NamedTuple):
    src: Optional[str]
    dst: str


CAMERA_PRESETS: Dict[str, CameraPreset] = {
    "5dii": CameraPreset(f"{CARD_MOUNT_ROOT}/EOS_DIGITAL", f"{PHOTO_ROOT}/5DII"),
    "gh5": CameraPreset(f"{CARD_MOUNT_ROOT}/LUMIX", f"{PHOTO_ROOT}/GH5"),
    "r6": CameraPreset(f"{CARD_MOUNT_ROOT}/EOS_DIGITAL", f"{PHOTO_ROOT}/R6"),
    "gopro": CameraPreset(f"{CARD_MOUNT_ROOT}/7000-8000", f"{PHOTO_ROOT}/GOPRO"),
    # Cards for these bodies mount under varying names; pass --src explicitly.
    "gm1": CameraPreset(None, f"{PHOTO_ROOT}/GM1"),
    "gx1s": CameraPreset(None, f"{PHOTO_ROOT}/GX1S"),
    "gx1b": CameraPreset(None, f"{PHOTO_ROOT}/GX1B"),
}


@dataclass(frozen=True)
class SyncConfig:
    """Resolved source/destination for one run."""
    src: Path
    dst: Path
    camera: Optional[str] = None


def resolve_config(src: Optional[str], dst: Optional[str],
                   camera: Optional[str] = None) -> SyncConfig:
    """
    Build the run configuration from CLI values and the camera preset table.

    A recognized camera overrides dst, and src where the preset defines one.
    Unknown camera names leave src/dst untouched.

    Raises:
        ArgumentError: if src or dst is still unset after the preset overlay.
    """
    preset = CAMERA_PRESETS.get(camera) if camera else None
    if preset is not None:
        if preset.src is not None:
            src = preset.src
        dst = preset.dst

    if not src or not dst:
        raise ArgumentError("invalid arguments: both --src and --dst (or a known --camera) are required")

    return SyncConfig(src=Path(src), dst=Path(dst), camera=camera if preset else None)
