#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Directory walking for the camera card sync tool.
Enumerates every file and directory under a source root, root included.
"""

import logging
import os
import stat
from typing import Iterator

from ..errors import WalkError
from ..models.file_record import WalkEntry

logger = logging.getLogger(__name__)


def walk(root: str) -> Iterator[WalkEntry]:
    """
    Depth-first, pre-order walk of root.

    Entries of each directory are visited in name order so the sequence is
    deterministic. Symlinks are reported but never followed.

    Raises:
        WalkError: on the first filesystem error; the walk does not continue.
    """
    root = os.fspath(root)
    try:
        st = os.lstat(root)
    except OSError as e:
        raise WalkError(root, e.strerror or str(e)) from e

    is_dir = stat.S_ISDIR(st.st_mode)
    yield WalkEntry(path=root, name=os.path.basename(root.rstrip(os.sep)) or root, is_dir=is_dir)
    if is_dir:
        yield from _walk_dir(root)


def _walk_dir(path: str) -> Iterator[WalkEntry]:
    try:
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise WalkError(path, e.strerror or str(e)) from e

    logger.debug("Walking %s (%d entries)", path, len(entries))
    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            raise WalkError(entry.path, e.strerror or str(e)) from e

        yield WalkEntry(path=entry.path, name=entry.name, is_dir=is_dir)
        if is_dir:
            yield from _walk_dir(entry.path)
