#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Time utility functions for the camera card sync tool.
"""

from datetime import datetime

from ..config import FOLDER_DATE_FORMAT


def as_local(naive: datetime) -> datetime:
    """Attach the local timezone to a wall-clock time."""
    return naive.astimezone()


def day_stamp(moment: datetime) -> str:
    """Return the YYYYMMDD date of moment in its own timezone."""
    return moment.strftime(FOLDER_DATE_FORMAT)
