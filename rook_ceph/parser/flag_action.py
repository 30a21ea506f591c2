# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FlagAction`, the behavior of a flag declared in a `FlagTable`.

Supports alias coercion for shorthand values.

Example:
    FlagAction("store_true") → FlagAction.STORE_TRUE
    FlagAction("true")       → FlagAction.STORE_TRUE (via alias)
"""
from __future__ import annotations

from enum import Enum


class FlagAction(Enum):
    """
    Defines the action to be taken when a flag is encountered.

    Members:
        STORE: Store the flag's value. A value is required.
        STORE_TRUE: Store `True`. The flag takes no value.
        HELP: Display usage and stop. The flag takes no value.

    Aliases:
        - "true" → "store_true"
    """

    STORE = "store"
    STORE_TRUE = "store_true"
    HELP = "help"

    @property
    def takes_value(self) -> bool:
        return self is FlagAction.STORE

    @classmethod
    def _missing_(cls, value: object) -> FlagAction:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        if normalized == "true":
            normalized = "store_true"
        for member in cls:
            if member.value == normalized:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value
