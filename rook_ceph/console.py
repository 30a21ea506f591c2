# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for the rook-ceph plugin."""
from rich.console import Console

from rook_ceph.themes import get_theme

console = Console(theme=get_theme())
error_console = Console(theme=get_theme(), stderr=True)
