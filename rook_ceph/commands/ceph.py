# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""`ceph` and `rbd` passthrough commands.

All remaining arguments are handed to the tool unexamined, so these commands
do not check for extraneous arguments.
"""
from rook_ceph.commands.context import CommandContext


def run_ceph_command(context: CommandContext, args: list[str]) -> None:
    context.run_ceph(*args)


def run_rbd_command(context: CommandContext, args: list[str]) -> None:
    context.run_rbd(*args)
