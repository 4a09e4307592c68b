#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Unit tests for media detection and capture time extraction.
"""

import subprocess
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import patch

import pytest

# Add the cardsync package to Python path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from cardsync.errors import ExtractionError
from cardsync.scanning.extractor import (
    extract_capture_time, is_media_extension, parse_capture_time
)
from cardsync.tests.fixtures.media_tree import local


class TestMediaExtension:
    """Media detection is by lowercase extension only."""

    @pytest.mark.parametrize("name", [
        "a.cr2", "a.cr3", "a.jpg", "a.mov", "a.mp4", "a.rw2",
        "IMG_0001.CR3", "P1000001.RW2", "/card/DCIM/clip.MOV",
    ])
    def test_media_files(self, name):
        assert is_media_extension(name)

    @pytest.mark.parametrize("name", [
        "notes.txt", "IMG_0001.THM", "a.jpeg", "a.png", "README", "dir.jpg/file", "jpg",
    ])
    def test_non_media_files(self, name):
        assert not is_media_extension(name)


class TestParseCaptureTime:
    """Parsing of exiftool short-form output."""

    def test_local_time(self):
        """Offset-less values are local wall-clock times."""
        assert parse_capture_time("2023:05:01 10:00:00\n") == local(2023, 5, 1, 10, 0, 0)

    def test_result_is_aware(self):
        assert parse_capture_time("2023:05:01 10:00:00").tzinfo is not None

    def test_explicit_offset(self):
        """Falls back to the form with a UTC offset."""
        parsed = parse_capture_time("  2022:01:15 08:00:00+09:00  ")
        assert parsed == datetime(2022, 1, 15, 8, 0, 0, tzinfo=timezone(timedelta(hours=9)))
        assert parsed.utcoffset() == timedelta(hours=9)

    def test_local_and_offset_values_compare(self):
        """Values from both formats can be ordered against each other."""
        a = parse_capture_time("2022:01:15 08:00:00")
        b = parse_capture_time("2022:01:16 08:00:00+00:00")
        assert a < b

    @pytest.mark.parametrize("text", [
        "", "   ", "2023-05-01 10:00:00", "0000:00:00 00:00:00", "garbage",
        "2023:5:1 10:0:0", "2023:05:01 10:00:00Z", "2023:05:01 10:00:00+0900",
        "2023:05:01 10:00:00.123", "2023:05:01T10:00:00",
    ])
    def test_unrecognized(self, text):
        with pytest.raises(ExtractionError) as exc:
            parse_capture_time(text, "/card/a.jpg")
        assert "/card/a.jpg" in str(exc.value)
        assert "unrecognized capture time" in str(exc.value)


class TestExtractCaptureTime:
    """exiftool invocation."""

    @patch("cardsync.scanning.extractor.subprocess.run")
    def test_runs_exiftool(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(
            args=[], returncode=0, stdout="2023:05:01 10:00:00\n", stderr=""
        )

        assert extract_capture_time("/card/photo.jpg") == local(2023, 5, 1, 10, 0, 0)

        cmd = mock_run.call_args.args[0]
        assert cmd == ["exiftool", "-CreateDate", "-s", "-S", "/card/photo.jpg"]
        assert mock_run.call_args.kwargs["capture_output"] is True

    @patch("cardsync.scanning.extractor.subprocess.run")
    def test_nonzero_exit_is_fatal(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(
            args=[], returncode=1, stdout="", stderr="Error: File not found"
        )

        with pytest.raises(ExtractionError) as exc:
            extract_capture_time("/card/photo.jpg")
        assert "status 1" in str(exc.value)
        assert "File not found" in str(exc.value)

    @patch("cardsync.scanning.extractor.subprocess.run")
    def test_missing_tag_is_fatal(self, mock_run):
        """exiftool prints nothing when the file has no CreateDate."""
        mock_run.return_value = subprocess.CompletedProcess(args=[], returncode=0, stdout="", stderr="")

        with pytest.raises(ExtractionError):
            extract_capture_time("/card/photo.jpg")

    @patch("cardsync.scanning.extractor.subprocess.run", side_effect=FileNotFoundError(2, "No such file"))
    def test_missing_binary(self, mock_run):
        with pytest.raises(ExtractionError) as exc:
            extract_capture_time("/card/photo.jpg")
        assert "could not run exiftool" in str(exc.value)
