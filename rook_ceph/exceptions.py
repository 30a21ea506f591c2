# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by the rook-ceph kubectl plugin.

Exception Hierarchy:
- RookCephError
    ├── CommandLineError
    ├── CommandExecutionError
    └── ConfigError

`CommandLineError` is the single tagged error for every user-input problem
detected while parsing flags or walking the command tree. Its `kind` tells the
caller which condition was hit; only the entry point turns it into usage text,
an `ERROR:` line and a non-zero exit.
"""
from __future__ import annotations

from enum import Enum
from typing import Sequence


class ErrorKind(Enum):
    """Classification of command-line errors."""

    AMBIGUOUS_VALUE = "ambiguous_value"
    MISSING_VALUE = "missing_value"
    UNSUPPORTED_FLAG = "unsupported_flag"
    FLAG_TAKES_NO_VALUE = "flag_takes_no_value"
    EXTRANEOUS_ARGUMENTS = "extraneous_arguments"
    UNKNOWN_COMMAND = "unknown_command"
    UNKNOWN_SUBCOMMAND = "unknown_subcommand"
    DOUBLE_VALUE_REQUEST = "double_value_request"
    MISSING_COMMAND = "missing_command"
    MISSING_ARGUMENT = "missing_argument"
    INVALID_ARGUMENT = "invalid_argument"

    def __str__(self) -> str:
        return self.value


class RookCephError(Exception):
    """Base exception for the rook-ceph plugin."""


class CommandLineError(RookCephError):
    """Exception raised when the command line cannot be parsed or dispatched."""

    def __init__(self, message: str, kind: ErrorKind) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind

    def __repr__(self) -> str:
        return f"CommandLineError(kind={self.kind.value!r}, message={self.message!r})"


class CommandExecutionError(RookCephError):
    """Exception raised when an external command exits with a non-zero status."""

    def __init__(
        self, command: Sequence[str], returncode: int, stderr: str = ""
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command '{' '.join(self.command)}' failed with exit code {returncode}"
        if stderr:
            message = f"{message}: {stderr}"
        super().__init__(message)


class ConfigError(RookCephError):
    """Exception raised when the plugin configuration is invalid."""
