# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Declarative flag tables for a single command level.

A `FlagTable` lists the flags valid at one level of the command tree and turns
them into a handler for `parse_flags()`. Values land in a plain dict keyed by
each flag's `dest`. The table also renders its flags as usage rows.

Example:
    table = FlagTable("debug svc")
    table.add_flag("--unset", action=FlagAction.STORE_TRUE, help="remove override")
    values, remaining = table.parse(["--unset"])
    # values == {"unset": True}, remaining == []
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from rook_ceph.exceptions import RookCephError
from rook_ceph.parser.flag_action import FlagAction
from rook_ceph.parser.flag_parser import parse_flags
from rook_ceph.parser.handler_result import (
    ACCEPTED,
    NEEDS_VALUE,
    FlagHandler,
    HandlerResult,
    flag_no_value,
    unsupported_flag,
)
from rook_ceph.signals import HelpSignal


@dataclass
class FlagSpec:
    """
    Represents one declared flag.

    Attributes:
        flags (tuple[str, ...]): Short and long spellings, e.g. ("-n", "--namespace").
        dest (str): Key used to store the value.
        action (FlagAction): What to do when the flag is seen.
        default (Any): Value used when the flag is absent.
        metavar (str | None): Placeholder shown in usage for value flags.
        help (str): Help text shown in usage.
    """

    flags: tuple[str, ...]
    dest: str
    action: FlagAction = FlagAction.STORE
    default: Any = None
    metavar: str | None = None
    help: str = ""

    def usage_text(self) -> str:
        """Flag spellings as shown in the usage text."""
        text = ", ".join(self.flags)
        if self.action.takes_value:
            text = f"{text}={self.metavar or '<' + self.dest + '>'}"
        return text


class FlagTable:
    """
    Declared flags for one command level.

    `handler()` returns a closure storing accepted values into a dict;
    `parse()` runs `parse_flags()` with it and returns `(values, remaining)`.
    Unknown flags are rejected as unsupported; value flags without a value ask
    the parser for the next token; flags that take no value reject one.
    """

    def __init__(self, level: str | None = None) -> None:
        self.level: str | None = level
        self._flags: list[FlagSpec] = []
        self._flag_map: dict[str, FlagSpec] = {}

    def _get_dest_from_flags(self, flags: tuple[str, ...], dest: str | None) -> str:
        if dest:
            if not dest.replace("_", "").isalnum():
                raise RookCephError(
                    "dest must be a valid identifier (letters, digits, and underscores only)"
                )
            return dest
        long_flags = [flag for flag in flags if flag.startswith("--")]
        name = long_flags[0] if long_flags else flags[0]
        return name.lstrip("-").replace("-", "_").lower()

    def add_flag(
        self,
        *flags: str,
        dest: str | None = None,
        action: str | FlagAction = FlagAction.STORE,
        default: Any = None,
        metavar: str | None = None,
        help: str = "",
    ) -> FlagSpec:
        """Declare a flag for this level."""
        if not flags:
            raise RookCephError("No flags provided")
        for flag in flags:
            if not flag.startswith("-") or flag in ("-", "--"):
                raise RookCephError(f"Invalid flag '{flag}'")
            if flag in self._flag_map:
                raise RookCephError(f"Flag '{flag}' is already defined")
            if not flag.startswith("--") and len(flag) != 2:
                raise RookCephError(f"Short flag '{flag}' must be a single character")
        action = FlagAction(action)
        spec = FlagSpec(
            flags=tuple(flags),
            dest=self._get_dest_from_flags(tuple(flags), dest),
            action=action,
            default=False if action is FlagAction.STORE_TRUE and default is None else default,
            metavar=metavar,
            help=help,
        )
        self._flags.append(spec)
        for flag in flags:
            self._flag_map[flag] = spec
        return spec

    def get_flag(self, flag: str) -> FlagSpec | None:
        return self._flag_map.get(flag)

    @property
    def flags(self) -> list[FlagSpec]:
        return list(self._flags)

    def defaults(self) -> dict[str, Any]:
        return {
            spec.dest: spec.default
            for spec in self._flags
            if spec.action is not FlagAction.HELP
        }

    def handler(self, values: dict[str, Any]) -> FlagHandler:
        """Return a `parse_flags()` handler writing into `values`."""

        def _handle(flag: str, value: str) -> HandlerResult:
            spec = self._flag_map.get(flag)
            if spec is None:
                return unsupported_flag(flag, self.level)
            if spec.action is FlagAction.STORE:
                if not value:
                    return NEEDS_VALUE
                values[spec.dest] = value
                return ACCEPTED
            rejection = flag_no_value(flag, value)
            if rejection:
                return rejection
            if spec.action is FlagAction.HELP:
                raise HelpSignal()
            values[spec.dest] = True
            return ACCEPTED

        return _handle

    def parse(self, args: Sequence[str]) -> tuple[dict[str, Any], list[str]]:
        """Parse the leading flags of `args` into a dict of values."""
        values = self.defaults()
        remaining = parse_flags(self.handler(values), args)
        return values, remaining

    def usage_rows(self) -> list[tuple[str, str]]:
        """Return `(flags, help)` pairs for usage rendering."""
        return [(spec.usage_text(), spec.help) for spec in self._flags]

    def __str__(self) -> str:
        return f"FlagTable(level={self.level!r}, flags={len(self._flags)})"

    def __repr__(self) -> str:
        return str(self)
