# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `CommandContext`, the state threaded through the command tree.

The context carries the resolved configuration, the kubectl wrapper and the
output console, plus the helpers shared by terminal commands for running
tools inside the Rook operator pod.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Console

from rook_ceph.config import OPERATOR_DEPLOYMENT, PluginConfig
from rook_ceph.console import console
from rook_ceph.exceptions import ConfigError
from rook_ceph.kubectl import Kubectl


@dataclass
class CommandContext:
    """Configuration and collaborators available to every command."""

    config: PluginConfig
    kubectl: Kubectl
    console: Console = field(default=console)

    @property
    def cluster_namespace(self) -> str:
        return self.config.cluster_namespace

    @property
    def operator_namespace(self) -> str:
        if not self.config.operator_namespace:
            raise ConfigError("Operator namespace is not set")
        return self.config.operator_namespace

    def exec_in_operator(self, *command: str) -> None:
        """Run a command inside the operator pod."""
        self.kubectl.run(
            self.operator_namespace, "exec", OPERATOR_DEPLOYMENT, "--", *command
        )

    def exec_in_operator_output(self, *command: str) -> str:
        """Run a command inside the operator pod and return its output."""
        return self.kubectl.output(
            self.operator_namespace, "exec", OPERATOR_DEPLOYMENT, "--", *command
        )

    def run_ceph(self, *args: str) -> None:
        """Run a `ceph` CLI command in the operator pod."""
        self.exec_in_operator("ceph", *args, f"--conf={self.config.ceph_conf_path}")

    def run_rbd(self, *args: str) -> None:
        """Run an `rbd` CLI command in the operator pod."""
        self.exec_in_operator("rbd", *args, f"--conf={self.config.ceph_conf_path}")

    def print(self, text: str) -> None:
        """Print command output verbatim."""
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)
