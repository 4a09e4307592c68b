#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Capture time extraction for the camera card sync tool.
Media files are identified by extension; their capture time comes from exiftool.
"""

import logging
import os
import subprocess
from datetime import datetime

from ..config import (
    CAPTURE_TIME_FORMAT, CAPTURE_TIME_FORMAT_TZ, CAPTURE_TIME_PATTERN, EXIFTOOL_BIN, EXIFTOOL_TAG, MEDIA_EXT
)
from ..errors import ExtractionError
from ..utils.time import as_local

logger = logging.getLogger(__name__)


def is_media_extension(path: str) -> bool:
    """Check if file is a supported camera media type."""
    return os.path.splitext(path)[1].lower() in MEDIA_EXT


def parse_capture_time(text: str, path: str = "") -> datetime:
    """
    Parse exiftool's short-form date output.

    Tries local wall-clock time first, then the form with an explicit UTC
    offset (e.g. '2023:05:01 10:00:00+09:00'). The result is always aware.
    """
    value = text.strip()
    if not CAPTURE_TIME_PATTERN.fullmatch(value):
        raise ExtractionError(path, f"unrecognized capture time: {value!r}")
    try:
        return as_local(datetime.strptime(value, CAPTURE_TIME_FORMAT))
    except ValueError:
        pass
    try:
        return datetime.strptime(value, CAPTURE_TIME_FORMAT_TZ)
    except ValueError:
        raise ExtractionError(path, f"unrecognized capture time: {value!r}") from None


def extract_capture_time(path: str) -> datetime:
    """Run exiftool on a single file and return its capture time."""
    cmd = [EXIFTOOL_BIN, EXIFTOOL_TAG, "-s", "-S", path]
    logger.debug("Running %s", cmd)
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise ExtractionError(path, f"could not run {EXIFTOOL_BIN}: {e}") from e

    if proc.returncode != 0:
        raise ExtractionError(
            path,
            f"{EXIFTOOL_BIN} exited with status {proc.returncode}\n"
            f"Stdout: {proc.stdout!r}\nStderr: {proc.stderr!r}",
        )
    return parse_capture_time(proc.stdout, path)
