"""
Rook-Ceph kubectl plugin

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .ceph import run_ceph_command, run_rbd_command
from .context import CommandContext
from .debug import run_debug_command
from .dispatch import CommandFunction, dispatch_subcommand
from .main import MAIN_COMMANDS, run_main_command
from .mons import fetch_mon_endpoints
from .operator import run_operator_command
from .rook import run_rook_command

__all__ = [
    "CommandContext",
    "CommandFunction",
    "MAIN_COMMANDS",
    "dispatch_subcommand",
    "fetch_mon_endpoints",
    "run_ceph_command",
    "run_debug_command",
    "run_main_command",
    "run_operator_command",
    "run_rbd_command",
    "run_rook_command",
]
