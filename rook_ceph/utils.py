# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""Logging setup for the rook-ceph plugin."""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

from rook_ceph.console import error_console

LOG_MODE_ENV = "ROOK_CEPH_LOG_MODE"
LOG_FILE_ENV = "ROOK_CEPH_LOG_FILE"
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
            return (
                "docker" in content
                or "kubepods" in content
                or "containerd" in content
                or "podman" in content
            )
    except OSError:
        return False


def _json_formatter() -> pythonjsonlogger.json.JsonFormatter:
    return pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            console=error_console,
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(_json_formatter())
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def _file_handler(log_filename: str, as_json: bool) -> logging.FileHandler:
    handler = logging.FileHandler(log_filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(_json_formatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Configure the root logger for a `kubectl rook-ceph` run.

    Plugin output (usage text, `ceph` results, CR status) goes to stdout
    through the rich console; logging only ever writes to stderr or a file,
    so command output stays pipeable. Only warnings reach stderr unless `-v`
    is given (see `enable_debug_logging()`).

    Args:
        mode (str | None): "cli" for rich log lines on stderr, "json" for one
            JSON object per line. Read from `ROOK_CEPH_LOG_MODE` when omitted;
            otherwise JSON when the plugin runs inside a pod.
        log_filename (str | None): Also log to this file. Read from
            `ROOK_CEPH_LOG_FILE` when omitted; no file is written if neither
            is set.
        json_log_to_file (bool): Write the file as JSON lines.
        file_log_level (int): Level for the file. Defaults to DEBUG, so a
            log file records every kubectl invocation.
        console_log_level (int): Level for stderr. Defaults to WARNING.

    Raises:
        ValueError: If `mode` is neither "cli" nor "json".
    """
    if not mode:
        mode = os.getenv(LOG_MODE_ENV) or ("json" if running_in_container() else "cli")
    log_filename = log_filename or os.getenv(LOG_FILE_ENV) or None

    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console_handler)

    if log_filename:
        file_handler = _file_handler(log_filename, json_log_to_file)
        file_handler.setLevel(file_log_level)
        root.addHandler(file_handler)

    logger = logging.getLogger("rook_ceph")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)


def enable_debug_logging() -> None:
    """Lower the package logger and console handlers to DEBUG."""
    logging.getLogger("rook_ceph").setLevel(logging.DEBUG)
    for handler in logging.getLogger().handlers:
        if not isinstance(handler, logging.FileHandler):
            handler.setLevel(logging.DEBUG)
