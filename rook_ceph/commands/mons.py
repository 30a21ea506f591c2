# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""`mons` command: print the mon endpoints of the cluster."""
from __future__ import annotations

from rook_ceph.commands.context import CommandContext
from rook_ceph.config import MON_ENDPOINTS_CONFIGMAP
from rook_ceph.parser import end_of_command_parsing


def parse_mon_endpoints(raw: str) -> list[str]:
    """
    Extract `ip:port` endpoints from the configmap's `data` value.

    The value has the form `a=10.0.0.1:6789,b=10.0.0.2:6789`.
    """
    endpoints = []
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        _, _, endpoint = entry.rpartition("=")
        endpoints.append(endpoint)
    return endpoints


def fetch_mon_endpoints(context: CommandContext, args: list[str]) -> None:
    end_of_command_parsing(args)
    configmap = context.kubectl.get_json(
        context.cluster_namespace, "configmap", MON_ENDPOINTS_CONFIGMAP
    )
    raw = (configmap.get("data") or {}).get("data", "")
    context.print(",".join(parse_mon_endpoints(raw)))
