# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package-wide logger."""
import logging

logger: logging.Logger = logging.getLogger("rook_ceph")
