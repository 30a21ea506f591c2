# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""Top level of the command tree."""
from __future__ import annotations

from typing import Sequence

from rook_ceph.commands.ceph import run_ceph_command, run_rbd_command
from rook_ceph.commands.context import CommandContext
from rook_ceph.commands.debug import run_debug_command
from rook_ceph.commands.dispatch import CommandFunction
from rook_ceph.commands.mons import fetch_mon_endpoints
from rook_ceph.commands.operator import run_operator_command
from rook_ceph.commands.rook import run_rook_command
from rook_ceph.exceptions import CommandLineError, ErrorKind
from rook_ceph.logger import logger

MAIN_COMMANDS: dict[str, CommandFunction] = {
    "ceph": run_ceph_command,
    "rbd": run_rbd_command,
    "operator": run_operator_command,
    "mons": fetch_mon_endpoints,
    "debug": run_debug_command,
    "rook": run_rook_command,
}


def run_main_command(context: CommandContext, args: Sequence[str]) -> None:
    """Run the command named by the first argument left after the main flags."""
    if not args:
        raise CommandLineError("No command to run", ErrorKind.MISSING_COMMAND)
    command, *rest = args
    function = MAIN_COMMANDS.get(command)
    if function is None:
        raise CommandLineError(f"Unknown command '{command}'", ErrorKind.UNKNOWN_COMMAND)
    logger.debug("Running command '%s' with %s", command, rest)
    function(context, rest)
