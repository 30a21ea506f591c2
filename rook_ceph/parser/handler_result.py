# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Outcome types returned by flag handlers to `parse_flags`.

A handler is called with `(flag, value)` and answers with one of:

- `Accepted`: the flag was consumed with the given value (possibly empty).
- `NeedsValue`: the flag is valid but needs a value that was not attached;
  the parser pulls the next token and calls the handler again.
- `Rejected`: the flag cannot be used; `message` and `kind` become the
  `CommandLineError` raised by the parser.

Handlers usually return the `ACCEPTED` and `NEEDS_VALUE` singletons and build
`Rejected` through `unsupported_flag()` and `flag_no_value()`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from rook_ceph.exceptions import ErrorKind


@dataclass(frozen=True)
class Accepted:
    """The flag was fully consumed."""


@dataclass(frozen=True)
class NeedsValue:
    """The flag requires a value pulled from the next token."""


@dataclass(frozen=True)
class Rejected:
    """The flag or its value is not valid at this command level."""

    message: str
    kind: ErrorKind = ErrorKind.UNSUPPORTED_FLAG


HandlerResult = Union[Accepted, NeedsValue, Rejected]
FlagHandler = Callable[[str, str], HandlerResult]

ACCEPTED = Accepted()
NEEDS_VALUE = NeedsValue()


def value_exists(value: str) -> bool:
    """Return True if a flag value is present."""
    return bool(value)


def unsupported_flag(flag: str, level: str | None = None) -> Rejected:
    """Reject a flag not known at this command level."""
    if level:
        return Rejected(f"Unsupported '{level}' flag '{flag}'")
    return Rejected(f"Flag {flag} is not supported")


def flag_no_value(flag: str, value: str) -> Rejected | None:
    """Return a rejection if a value was given to a flag that takes none."""
    if value_exists(value):
        return Rejected(
            f"Flag '{flag}' does not take a value", ErrorKind.FLAG_TAKES_NO_VALUE
        )
    return None
