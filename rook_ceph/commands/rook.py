# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""`rook` subcommands: operator version, CR status and OSD removal."""
from __future__ import annotations

import re
import shlex

from rook_ceph.commands.context import CommandContext
from rook_ceph.commands.dispatch import dispatch_subcommand, require_argument
from rook_ceph.config import MON_ENDPOINTS_CONFIGMAP
from rook_ceph.exceptions import CommandLineError, ErrorKind, RookCephError
from rook_ceph.parser import FlagAction, FlagTable, end_of_command_parsing

CEPH_CLUSTER_CR = "cephclusters.ceph.rook.io"
OSD_IDS_PATTERN = re.compile(r"^\d+(,\d+)*$")

PURGE_OSD_FLAGS = FlagTable("rook purge-osd")
PURGE_OSD_FLAGS.add_flag(
    "--force", action=FlagAction.STORE_TRUE, help="force removal of the OSD"
)


def run_rook_version(context: CommandContext, args: list[str]) -> None:
    end_of_command_parsing(args)
    context.exec_in_operator("rook", "version")


def print_cr_status(context: CommandContext, resource: str) -> None:
    crs = context.kubectl.get_json(context.cluster_namespace, resource)
    for item in crs.get("items", []):
        context.console.print_json(data=item.get("status"))


def run_rook_cr_status(context: CommandContext, args: list[str]) -> None:
    """
    Print the status of Rook CRs.

    - no argument: the CephCluster CR
    - `all`: every CR of every installed CRD
    - `<CR>`: every CR of the given kind, e.g. `cephobjectstore`
    """
    if not args:
        print_cr_status(context, CEPH_CLUSTER_CR)
        return
    end_of_command_parsing(args[1:])
    if args[0] != "all":
        print_cr_status(context, args[0])
        return

    crds = context.kubectl.get_json(context.cluster_namespace, "crd")
    context.print("CR status")
    for crd in crds.get("items", []):
        name = crd.get("metadata", {}).get("name")
        if not name:
            continue
        context.print(f"{name}:")
        print_cr_status(context, name)


def parse_keyring_secret(keyring: str) -> str:
    """Return the key from a Ceph keyring, e.g. `key = AQD...==`."""
    for line in keyring.splitlines():
        fields = line.split()
        if len(fields) >= 3 and fields[0] == "key" and fields[1] == "=":
            return fields[2]
    raise RookCephError("Could not find the admin key in the keyring")


def build_purge_osd_script(
    mon_endpoints: str, ceph_secret: str, osd_ids: str, force: bool
) -> str:
    """Shell script run in the operator pod to remove OSDs."""
    return (
        f"export ROOK_MON_ENDPOINTS={shlex.quote(mon_endpoints)} "
        "ROOK_CEPH_USERNAME=client.admin "
        f"ROOK_CEPH_SECRET={shlex.quote(ceph_secret)} "
        "ROOK_CONFIG_DIR=/var/lib/rook && "
        f"rook ceph osd remove --osd-ids={osd_ids} "
        f"--force-osd-removal={str(force).lower()}"
    )


def run_purge_osd(context: CommandContext, args: list[str]) -> None:
    """Permanently remove one or more OSDs (comma-separated ids)."""
    osd_ids = require_argument(args, 0, "'rook purge-osd' - Missing <osd-id>")
    if not OSD_IDS_PATTERN.match(osd_ids):
        raise CommandLineError(
            f"'rook purge-osd' - invalid OSD id list: {osd_ids}",
            ErrorKind.INVALID_ARGUMENT,
        )
    flags, remaining = PURGE_OSD_FLAGS.parse(args[1:])
    end_of_command_parsing(remaining)

    mon_endpoints = context.kubectl.output(
        context.cluster_namespace,
        "get",
        "configmap",
        MON_ENDPOINTS_CONFIGMAP,
        "-o",
        "jsonpath={.data.data}",
    ).split(",")[0]
    keyring = context.exec_in_operator_output(
        "cat", f"/var/lib/rook/{context.cluster_namespace}/client.admin.keyring"
    )
    script = build_purge_osd_script(
        mon_endpoints, parse_keyring_secret(keyring), osd_ids, flags["force"]
    )
    context.exec_in_operator("sh", "-c", script)


ROOK_SUBCOMMANDS = {
    "version": run_rook_version,
    "status": run_rook_cr_status,
    "purge-osd": run_purge_osd,
}


def run_rook_command(context: CommandContext, args: list[str]) -> None:
    dispatch_subcommand("rook", ROOK_SUBCOMMANDS, context, args)
