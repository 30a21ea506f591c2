"""
Rook-Ceph kubectl plugin

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .flag_action import FlagAction
from .flag_parser import (
    ParsedFlag,
    TokenKind,
    classify_token,
    end_of_command_parsing,
    is_flag,
    parse_flags,
    split_flag,
)
from .flag_table import FlagSpec, FlagTable
from .handler_result import (
    ACCEPTED,
    NEEDS_VALUE,
    Accepted,
    FlagHandler,
    HandlerResult,
    NeedsValue,
    Rejected,
    flag_no_value,
    unsupported_flag,
    value_exists,
)

__all__ = [
    "ACCEPTED",
    "NEEDS_VALUE",
    "Accepted",
    "FlagAction",
    "FlagHandler",
    "FlagSpec",
    "FlagTable",
    "HandlerResult",
    "NeedsValue",
    "ParsedFlag",
    "Rejected",
    "TokenKind",
    "classify_token",
    "end_of_command_parsing",
    "flag_no_value",
    "is_flag",
    "parse_flags",
    "split_flag",
    "unsupported_flag",
    "value_exists",
]
