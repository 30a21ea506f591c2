# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `RookCephCLI`, the application object behind `kubectl rook-ceph`.

`run()` parses the main flags, applies them on top of the loaded
configuration and walks the command tree; it raises on every failure.
`main()` is the only place that turns errors into usage text, `ERROR:` lines
and exit codes:

- `HelpSignal`            → usage on stdout, exit 0
- `CommandLineError`      → usage and `ERROR: <message>` on stderr, exit 1
- `CommandExecutionError` → `ERROR: <message>` on stderr, the child's exit code
- other `RookCephError`   → `ERROR: <message>` on stderr, exit 1
- `KeyboardInterrupt`     → exit 130
"""
from __future__ import annotations

import subprocess
from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape

from rook_ceph.commands import CommandContext, run_main_command
from rook_ceph.config import PluginConfig
from rook_ceph.console import console, error_console
from rook_ceph.exceptions import CommandExecutionError, CommandLineError, RookCephError
from rook_ceph.kubectl import Kubectl, Runner
from rook_ceph.logger import logger
from rook_ceph.parser import FlagAction, FlagTable
from rook_ceph.signals import HelpSignal
from rook_ceph.usage import render_usage
from rook_ceph.utils import enable_debug_logging


def get_main_flags() -> FlagTable:
    """Flags accepted before the command name."""
    flags = FlagTable()
    flags.add_flag("-h", "--help", action=FlagAction.HELP, help="output help")
    flags.add_flag(
        "-n",
        "--namespace",
        dest="cluster_namespace",
        metavar="'rook-ceph'",
        help="the namespace of the CephCluster",
    )
    flags.add_flag(
        "-o",
        "--operator-namespace",
        dest="operator_namespace",
        metavar="'rook-ceph'",
        help="the namespace of the rook operator",
    )
    flags.add_flag(
        "--context",
        metavar="<context_name>",
        help="the name of the Kubernetes context to be used",
    )
    flags.add_flag(
        "-v", "--verbose", action=FlagAction.STORE_TRUE, help="enable debug logging"
    )
    return flags


class RookCephCLI:
    """
    The rook-ceph kubectl plugin.

    Args:
        config (PluginConfig | None): Configuration before flags are applied.
        runner (Runner): Subprocess runner handed to `Kubectl`.
        console (Console): Console for command output and help.
        error_console (Console): Console for usage and errors on failure.
    """

    def __init__(
        self,
        config: PluginConfig | None = None,
        runner: Runner = subprocess.run,
        console: Console = console,
        error_console: Console = error_console,
    ) -> None:
        self.config: PluginConfig = config or PluginConfig()
        self.runner: Runner = runner
        self.console: Console = console
        self.error_console: Console = error_console
        self.main_flags: FlagTable = get_main_flags()

    def apply_main_flags(self, values: dict[str, Any]) -> PluginConfig:
        """Return a copy of the configuration with main flag values applied."""
        update = {
            key: value
            for key, value in values.items()
            if key in PluginConfig.model_fields and value is not None
        }
        return self.config.model_copy(update=update)

    def build_context(self) -> CommandContext:
        kubectl = Kubectl(self.config.kubectl_command, runner=self.runner)
        return CommandContext(config=self.config, kubectl=kubectl, console=self.console)

    def run(self, argv: Sequence[str]) -> None:
        """Parse main flags and run the selected command."""
        values, remaining = self.main_flags.parse(argv)
        if values.get("verbose"):
            enable_debug_logging()
        self.config = self.apply_main_flags(values)
        logger.debug("Using config: %s", self.config)
        run_main_command(self.build_context(), remaining)

    def render_usage(self, console: Console | None = None) -> None:
        render_usage(console or self.console, self.main_flags)

    def print_error(self, message: str) -> None:
        self.error_console.print(f"[error]ERROR:[/] {escape(message)}", soft_wrap=True)

    def main(self, argv: Sequence[str]) -> int:
        """Run the plugin and return the process exit code."""
        try:
            self.run(argv)
        except HelpSignal:
            self.render_usage()
            return 0
        except CommandLineError as error:
            logger.debug("Command line error (%s): %s", error.kind, error.message)
            self.render_usage(self.error_console)
            self.print_error(error.message)
            return 1
        except CommandExecutionError as error:
            self.print_error(str(error))
            return error.returncode
        except RookCephError as error:
            self.print_error(str(error))
            return 1
        except KeyboardInterrupt:
            logger.info("Interrupted.")
            return 130
        return 0
