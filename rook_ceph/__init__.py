"""
Rook-Ceph kubectl plugin

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .cli import RookCephCLI
from .config import PluginConfig, load_config
from .exceptions import CommandLineError, ErrorKind, RookCephError
from .parser import parse_flags
from .version import __version__

logger = logging.getLogger("rook_ceph")


__all__ = [
    "CommandLineError",
    "ErrorKind",
    "PluginConfig",
    "RookCephCLI",
    "RookCephError",
    "__version__",
    "load_config",
    "parse_flags",
]
