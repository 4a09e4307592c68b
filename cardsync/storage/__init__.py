"""Copy-tool integration for the camera card sync tool."""

from .rsync import build_copy_command, command_text, run_copy

__all__ = ['build_copy_command', 'command_text', 'run_copy']
