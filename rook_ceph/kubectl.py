# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""kubectl.py
Thin wrapper around the `kubectl` executable.

Every invocation is namespaced and built from the configured command prefix
(e.g. `kubectl --context=prod`). The subprocess runner is injectable so tests
can record invocations instead of executing them.
"""
from __future__ import annotations

import json
import subprocess
from typing import Any, Callable, Sequence

from rook_ceph.exceptions import CommandExecutionError, RookCephError
from rook_ceph.logger import logger

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


class Kubectl:
    """
    Runs kubectl commands against a cluster.

    Args:
        command (Sequence[str]): Command prefix, e.g. ["kubectl", "--context=prod"].
        runner (Runner): Callable with the signature of `subprocess.run`.
    """

    def __init__(self, command: Sequence[str], runner: Runner = subprocess.run) -> None:
        if not command:
            raise RookCephError("kubectl command must not be empty")
        self.command: list[str] = list(command)
        self.runner: Runner = runner

    def build(self, namespace: str, *args: str) -> list[str]:
        """Return the full argv for a namespaced kubectl call."""
        return [*self.command, "--namespace", namespace, *args]

    def run(self, namespace: str, *args: str) -> None:
        """Run a kubectl command with its output going straight to the terminal."""
        argv = self.build(namespace, *args)
        logger.debug("Running: %s", " ".join(argv))
        result = self.runner(argv, check=False)
        if result.returncode != 0:
            logger.error("Command exited with %s: %s", result.returncode, " ".join(argv))
            raise CommandExecutionError(argv, result.returncode)

    def output(self, namespace: str, *args: str) -> str:
        """Run a kubectl command and return its stripped stdout."""
        argv = self.build(namespace, *args)
        logger.debug("Running: %s", " ".join(argv))
        result = self.runner(argv, capture_output=True, text=True, check=False)
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            logger.error("Command exited with %s: %s", result.returncode, " ".join(argv))
            raise CommandExecutionError(argv, result.returncode, stderr)
        return (result.stdout or "").strip()

    def get_json(self, namespace: str, *args: str) -> Any:
        """Run `kubectl get ... -o json` and decode the result."""
        raw = self.output(namespace, "get", *args, "-o", "json")
        try:
            return json.loads(raw)
        except json.JSONDecodeError as error:
            raise RookCephError(f"kubectl returned invalid JSON: {error}") from error

    def __str__(self) -> str:
        return f"Kubectl(command={self.command!r})"
