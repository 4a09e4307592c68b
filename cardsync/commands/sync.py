#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Sync command: scan a card, summarize it, confirm, then copy it into the archive.
"""

import logging
import sys
from typing import IO, Callable, List, Optional

from ..config import DEFAULT_WORKERS, SyncConfig
from ..models.summary import ScanSummary
from ..scanning.aggregator import aggregate, format_summary
from ..scanning.extractor import extract_capture_time
from ..scanning.pipeline import Extractor, scan_records
from ..storage.rsync import build_copy_command, command_text, run_copy

logger = logging.getLogger(__name__)


class SyncCommand:
    def __init__(
        self,
        config: SyncConfig,
        workers: Optional[int] = None,
        extract: Extractor = extract_capture_time,
        runner: Callable[[List[str]], None] = run_copy,
        stdin: Optional[IO[str]] = None,
        out: Optional[IO[str]] = None,
    ):
        self.config = config
        self.workers = workers or DEFAULT_WORKERS
        self.extract = extract
        self.runner = runner
        self.stdin = stdin or sys.stdin
        self.out = out or sys.stdout

    def scan(self, progress: Optional[bool] = None) -> ScanSummary:
        """Walk the source, print the per-file listing and return the totals."""
        if progress is None:
            progress = sys.stderr.isatty()
        logger.info("Scanning %s (camera: %s) with %d workers",
                    self.config.src, self.config.camera or "-", self.workers)
        records = scan_records(str(self.config.src), workers=self.workers, extract=self.extract)
        return aggregate(records, out=self.out, progress=progress)

    def execute(self, dry_run: bool = False, assume_yes: bool = False,
                progress: Optional[bool] = None) -> int:
        """
        Run the whole sync.

        Returns:
            0 when the copy ran, was declined, was skipped by dry_run, or the
            card held no media to date a destination folder with.

        Raises:
            SyncError: any scan or copy failure.
        """
        summary = self.scan(progress)
        for line in format_summary(summary):
            print(line, file=self.out)

        if not summary.has_media:
            print("No media files found, nothing to copy.", file=self.out)
            return 0

        folder_name = summary.date_range_name()
        command = build_copy_command(self.config.src, self.config.dst, folder_name)
        print(f"Running the command (y/n): {command_text(command)}", file=self.out)

        if dry_run:
            logger.info("Dry run, not copying.")
            return 0

        if assume_yes:
            answer = "y"
        else:
            print("> ", end="", file=self.out, flush=True)
            answer = self._read_answer()

        if answer != "y":
            logger.info("Copy declined.")
            return 0

        self.runner(command)
        logger.info("Copied %s to %s", self.config.src, command[-1])
        return 0

    def _read_answer(self) -> str:
        line = self.stdin.readline()
        # EOF reads as an empty answer; only the line ending is dropped
        return line.rstrip("\r\n")
