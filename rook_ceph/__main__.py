"""
Rook-Ceph kubectl plugin

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import sys
from typing import Sequence

from rich.markup import escape

from rook_ceph.cli import RookCephCLI
from rook_ceph.config import load_config
from rook_ceph.console import error_console
from rook_ceph.exceptions import ConfigError
from rook_ceph.utils import setup_logging


def main(argv: Sequence[str] | None = None) -> None:
    setup_logging()
    try:
        config = load_config()
    except ConfigError as error:
        error_console.print(f"[error]ERROR:[/] {escape(str(error))}", soft_wrap=True)
        sys.exit(1)
    cli = RookCephCLI(config)
    sys.exit(cli.main(sys.argv[1:] if argv is None else argv))


if __name__ == "__main__":
    main()
