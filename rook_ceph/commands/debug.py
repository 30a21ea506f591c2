# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""
`debug` subcommands: raise or reset Ceph daemon debug levels.

- `debug node <svc> <nodeName> [--unset]` targets every `<svc>` daemon
  scheduled on one node.
- `debug svc <svc> [--unset]` targets the whole `<svc>` daemon type.

`--unset` follows the positional arguments and is parsed with the same
flag parser used at the top level.
"""
from __future__ import annotations

from typing import Any

from rook_ceph.commands.context import CommandContext
from rook_ceph.commands.dispatch import dispatch_subcommand, require_argument
from rook_ceph.exceptions import CommandLineError, ErrorKind
from rook_ceph.logger import logger
from rook_ceph.parser import FlagAction, FlagTable, end_of_command_parsing

VALID_SERVICES = ("mon", "mgr", "osd", "mds")
DEBUG_LEVEL = "20/20"


def _unset_flags(level: str) -> FlagTable:
    table = FlagTable(level)
    table.add_flag("--unset", action=FlagAction.STORE_TRUE, help="remove override")
    return table


NODE_FLAGS = _unset_flags("debug node")
SVC_FLAGS = _unset_flags("debug svc")


def validate_service(svc: str) -> str:
    if svc not in VALID_SERVICES:
        raise CommandLineError(
            f"'debug' - unsupported svc provided: {svc}. "
            f"Valid options: {{{','.join(VALID_SERVICES)}}}",
            ErrorKind.INVALID_ARGUMENT,
        )
    return svc


def daemon_ids_on_node(pods: dict[str, Any], svc: str, node: str) -> list[str]:
    """Return the `<svc>` label of every pod scheduled on `node`."""
    ids = []
    for pod in pods.get("items", []):
        if pod.get("spec", {}).get("nodeName") != node:
            continue
        labels = pod.get("metadata", {}).get("labels", {})
        if labels.get(svc):
            ids.append(labels[svc])
    return ids


def set_debug_level(context: CommandContext, target: str, svc: str, unset: bool) -> None:
    if unset:
        context.run_ceph("config", "rm", target, f"debug_{svc}")
    else:
        context.run_ceph("config", "set", target, f"debug_{svc}", DEBUG_LEVEL)


def run_debug_node(context: CommandContext, args: list[str]) -> None:
    svc = validate_service(require_argument(args, 0, "'debug node' - Missing svc arg."))
    node = require_argument(args, 1, "'debug node' - Missing nodeName.")
    flags, remaining = NODE_FLAGS.parse(args[2:])
    end_of_command_parsing(remaining)

    pods = context.kubectl.get_json(
        context.cluster_namespace, "pods", "-l", f"app=rook-ceph-{svc}"
    )
    daemon_ids = daemon_ids_on_node(pods, svc, node)
    if not daemon_ids:
        logger.warning("No '%s' daemons found on node '%s'", svc, node)
        return
    for daemon_id in daemon_ids:
        set_debug_level(context, f"{svc}.{daemon_id}", svc, flags["unset"])


def run_debug_svc(context: CommandContext, args: list[str]) -> None:
    svc = validate_service(require_argument(args, 0, "'debug svc' - Missing svc."))
    flags, remaining = SVC_FLAGS.parse(args[1:])
    end_of_command_parsing(remaining)
    set_debug_level(context, svc, svc, flags["unset"])


DEBUG_SUBCOMMANDS = {
    "node": run_debug_node,
    "svc": run_debug_svc,
}


def run_debug_command(context: CommandContext, args: list[str]) -> None:
    dispatch_subcommand("debug", DEBUG_SUBCOMMANDS, context, args)
