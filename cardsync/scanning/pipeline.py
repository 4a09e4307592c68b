#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Concurrent scan pipeline for the camera card sync tool.

    walker thread -> entry queue -> N worker threads -> record queue -> caller

Records reach the caller in no particular order. The first error raised in
any thread stops the whole pipeline and is re-raised to the caller.
"""

import logging
import os
import threading
from datetime import datetime
from queue import Empty, Full, Queue
from typing import Callable, Iterator, List, Optional

from ..config import DEFAULT_WORKERS, QUEUE_SLOTS_PER_WORKER
from ..errors import StatError
from ..models.file_record import FileRecord, WalkEntry
from .extractor import extract_capture_time, is_media_extension
from .walker import walk

logger = logging.getLogger(__name__)

Extractor = Callable[[str], datetime]

_POLL_SECONDS = 0.1


class _Done:
    """End-of-stream marker, one per worker."""


class _Failure:
    def __init__(self, exc: BaseException):
        self.exc = exc


_DONE = _Done()


def classify_entry(entry: WalkEntry, extract: Extractor = extract_capture_time) -> Optional[FileRecord]:
    """Turn a walk entry into a file record; directories yield None."""
    if entry.is_dir:
        return None

    try:
        size = os.lstat(entry.path).st_size
    except OSError as e:
        raise StatError(entry.path, e.strerror or str(e)) from e

    if not is_media_extension(entry.path):
        return FileRecord(path=entry.path, is_media=False, size=size)

    # Blocks this worker until exiftool returns
    return FileRecord(path=entry.path, is_media=True, size=size, timestamp=extract(entry.path))


class ScanPipeline:
    """Single-use producer / worker pool / consumer pipeline over one directory tree."""

    def __init__(self, root: str, workers: Optional[int] = None,
                 extract: Extractor = extract_capture_time, queue_size: Optional[int] = None):
        self.root = root
        self.workers = workers or DEFAULT_WORKERS
        self.extract = extract
        size = queue_size or self.workers * QUEUE_SLOTS_PER_WORKER
        self._entries: "Queue[object]" = Queue(maxsize=size)
        self._records: "Queue[object]" = Queue(maxsize=size)
        self._stop = threading.Event()
        self._threads: List[threading.Thread] = []
        self._started = False

    def __iter__(self) -> Iterator[FileRecord]:
        if self._started:
            raise RuntimeError("ScanPipeline can only be iterated once")
        self._started = True
        return self._consume()

    def _consume(self) -> Iterator[FileRecord]:
        self._start()
        finished = 0
        try:
            while finished < self.workers:
                item = self._records.get()
                if item is _DONE:
                    finished += 1
                elif isinstance(item, _Failure):
                    raise item.exc
                else:
                    yield item
        finally:
            self._shutdown()

    def _start(self):
        logger.debug("Starting scan of %s with %d workers", self.root, self.workers)
        self._threads.append(threading.Thread(target=self._walk, name="cardsync-walker", daemon=True))
        for i in range(self.workers):
            self._threads.append(
                threading.Thread(target=self._work, name=f"cardsync-worker-{i}", daemon=True)
            )
        for th in self._threads:
            th.start()

    def _shutdown(self):
        self._stop.set()
        for th in self._threads:
            th.join()
        logger.debug("Scan pipeline for %s stopped", self.root)

    def _put(self, q: Queue, item: object) -> bool:
        """Blocking put that gives up once the pipeline is stopping."""
        while not self._stop.is_set():
            try:
                q.put(item, timeout=_POLL_SECONDS)
                return True
            except Full:
                continue
        return False

    def _fail(self, exc: BaseException):
        # Queue the error before raising the stop flag so the consumer sees it
        # ahead of any missing end-of-stream markers.
        self._put(self._records, _Failure(exc))
        self._stop.set()

    def _walk(self):
        try:
            for entry in walk(self.root):
                if not self._put(self._entries, entry):
                    return
        except Exception as e:
            logger.debug("Walker failed: %s", e)
            self._fail(e)
            return
        for _ in range(self.workers):
            if not self._put(self._entries, _DONE):
                return

    def _work(self):
        while True:
            try:
                item = self._entries.get(timeout=_POLL_SECONDS)
            except Empty:
                if self._stop.is_set():
                    return
                continue

            if item is _DONE:
                self._put(self._records, _DONE)
                return
            if self._stop.is_set():
                return

            try:
                record = classify_entry(item, self.extract)
            except Exception as e:
                logger.debug("Worker %s failed on %s: %s",
                             threading.current_thread().name, item.path, e)
                self._fail(e)
                return

            if record is not None and not self._put(self._records, record):
                return


def scan_records(root: str, workers: Optional[int] = None,
                 extract: Extractor = extract_capture_time,
                 queue_size: Optional[int] = None) -> Iterator[FileRecord]:
    """Yield one FileRecord per non-directory entry under root, in any order."""
    return iter(ScanPipeline(root, workers=workers, extract=extract, queue_size=queue_size))
