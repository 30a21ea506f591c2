# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Subcommand selection for one level of the command tree.

A level maps subcommand names to functions taking `(context, args)`, where
`args` are the arguments left after the subcommand name.
"""
from __future__ import annotations

from typing import Callable, Mapping, Sequence

from rook_ceph.commands.context import CommandContext
from rook_ceph.exceptions import CommandLineError, ErrorKind
from rook_ceph.logger import logger

CommandFunction = Callable[[CommandContext, list[str]], None]


def dispatch_subcommand(
    level: str,
    subcommands: Mapping[str, CommandFunction],
    context: CommandContext,
    args: Sequence[str],
) -> None:
    """
    Run the subcommand named by the first argument.

    Raises:
        CommandLineError: If no subcommand is given or it is not known at
            this level.
    """
    if not args:
        raise CommandLineError(
            f"'{level} <subcommand>' - Missing <subcommand>", ErrorKind.MISSING_ARGUMENT
        )
    name, *rest = args
    function = subcommands.get(name)
    if function is None:
        raise CommandLineError(
            f"'{level}' subcommand '{name}' does not exist",
            ErrorKind.UNKNOWN_SUBCOMMAND,
        )
    logger.debug("Dispatching '%s %s' with %s", level, name, rest)
    function(context, rest)


def require_argument(args: Sequence[str], index: int, message: str) -> str:
    """Return `args[index]` or raise a missing-argument error."""
    if len(args) <= index or not args[index]:
        raise CommandLineError(message, ErrorKind.MISSING_ARGUMENT)
    return args[index]
