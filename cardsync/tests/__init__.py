"""Tests for the camera card sync tool."""
