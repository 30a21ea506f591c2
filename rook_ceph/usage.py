# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Usage text for the rook-ceph plugin.

The main flags are rendered from the main-level `FlagTable`; the command list
is static.
"""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rook_ceph.parser import FlagTable

DESCRIPTION = "kubectl rook-ceph provides common management and troubleshooting tools for Ceph."

COMMAND_ROWS: list[tuple[str, str]] = [
    ("ceph <args>", "call a 'ceph' CLI command with arbitrary args"),
    ("rbd <args>", "call a 'rbd' CLI command with arbitrary args"),
    ("operator <subcommand>...", ""),
    ("  restart", "restart the Rook-Ceph operator"),
    (
        "  set <property> <value>",
        "Set the property in the rook-ceph-operator-config configmap.",
    ),
    ("mons", "output mon endpoints"),
    ("debug <subcommand>...", ""),
    (
        "  node <svc> <nodeName> [--unset]",
        "set debug_<svc>=20 for pod/<svc> on nodeName. "
        "valid <svc> options: {mon,mgr,osd,mds}. --unset to remove override.",
    ),
    (
        "  svc <svc> [--unset]",
        "set debug_<svc>=20. valid <svc> options: {mon,mgr,osd,mds}. "
        "--unset to remove override.",
    ),
    ("rook <subcommand>...", ""),
    ("  version", "print the version of Rook"),
    ("  status", "print the phase and conditions of the CephCluster CR"),
    ("  status all", "print the phase and conditions of all CRs"),
    (
        "  status <CR>",
        "print the phase and conditions of CRs of a specific type, "
        "such as 'cephobjectstore', 'cephfilesystem', etc",
    ),
    (
        "  purge-osd <osd-id> [--force]",
        "Permanently remove an OSD from the cluster. "
        "Multiple OSDs can be removed with a comma-separated list of IDs.",
    ),
]


def _rows_table(rows: list[tuple[str, str]], style: str) -> Table:
    table = Table.grid(padding=(0, 2))
    table.add_column(style=style, no_wrap=True)
    table.add_column(style="usage.help")
    for left, right in rows:
        table.add_row(escape(left), escape(right))
    return table


def render_usage(console: Console, main_flags: FlagTable) -> None:
    """Print the plugin usage text."""
    console.print()
    console.print("DESCRIPTION", style="usage.heading")
    console.print(f"  {DESCRIPTION}", highlight=False)
    console.print("USAGE", style="usage.heading")
    console.print(
        "  kubectl rook-ceph <main args> <command> <command args>", highlight=False
    )
    console.print("MAIN ARGS", style="usage.heading")
    console.print(_rows_table(main_flags.usage_rows(), "usage.flag"))
    console.print("COMMANDS", style="usage.heading")
    console.print(_rows_table(COMMAND_ROWS, "usage.command"))
    console.print()
