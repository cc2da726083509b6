"""Utility module for macos-exec."""

from .memo import MemoCell
from .shell import COMMAND_NOT_FOUND, ShellResult, run

__all__ = ["MemoCell", "ShellResult", "COMMAND_NOT_FOUND", "run"]
