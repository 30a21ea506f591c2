# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""`operator` subcommands: restart the operator and patch its configmap."""
from __future__ import annotations

import json

from rook_ceph.commands.context import CommandContext
from rook_ceph.commands.dispatch import dispatch_subcommand, require_argument
from rook_ceph.config import OPERATOR_CONFIGMAP, OPERATOR_DEPLOYMENT
from rook_ceph.parser import end_of_command_parsing


def run_operator_restart(context: CommandContext, args: list[str]) -> None:
    end_of_command_parsing(args)
    context.kubectl.run(
        context.operator_namespace, "rollout", "restart", OPERATOR_DEPLOYMENT
    )


def build_config_patch(property_name: str, value: str) -> str:
    """Return a JSON patch replacing one key of the operator configmap."""
    return json.dumps([{"op": "replace", "path": f"/data/{property_name}", "value": value}])


def run_operator_set(context: CommandContext, args: list[str]) -> None:
    """Set `<property>` to `<value>` in the rook-ceph-operator-config configmap."""
    property_name = require_argument(args, 0, "'operator set' - Missing <property>")
    value = require_argument(args, 1, "'operator set' - Missing <value>")
    end_of_command_parsing(args[2:])
    context.kubectl.run(
        context.operator_namespace,
        "patch",
        "configmaps",
        OPERATOR_CONFIGMAP,
        "--type",
        "json",
        "--patch",
        build_config_patch(property_name, value),
    )


OPERATOR_SUBCOMMANDS = {
    "restart": run_operator_restart,
    "set": run_operator_set,
}


def run_operator_command(context: CommandContext, args: list[str]) -> None:
    dispatch_subcommand("operator", OPERATOR_SUBCOMMANDS, context, args)
