# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used by the rook-ceph plugin.

Signals inherit from `FlowSignal`, a subclass of `BaseException`, so they
bypass `except Exception` blocks on their way to the entry point.

Signals:
- HelpSignal: Stop parsing and display usage text with a successful exit.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals.

    These are not errors. They stop command processing early without
    being reported as a failure.
    """


class HelpSignal(FlowSignal):
    """Raised to display help information."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)
