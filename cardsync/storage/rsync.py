#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Copying a card into the photo archive with rsync.
"""

import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import List

from ..config import RSYNC_BIN, RSYNC_FLAGS
from ..errors import CopyError

logger = logging.getLogger(__name__)


def build_copy_command(src: Path, dst: Path, folder_name: str) -> List[str]:
    """Archive-copy the contents of src into dst/folder_name/."""
    source = os.path.normpath(str(src)).rstrip(os.sep) + os.sep
    target = os.path.join(str(dst), folder_name) + os.sep
    return [RSYNC_BIN, RSYNC_FLAGS, source, target]


def command_text(command: List[str]) -> str:
    return shlex.join(command)


def run_copy(command: List[str]) -> None:
    """Run the copy with output passed straight through to the terminal."""
    logger.info("Running %s", command_text(command))
    try:
        proc = subprocess.run(command)
    except OSError as e:
        raise CopyError(f"could not run {command[0]}: {e}") from e
    if proc.returncode != 0:
        raise CopyError(f"{command[0]} exited with status {proc.returncode}")
