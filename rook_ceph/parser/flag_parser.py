# Rook-Ceph kubectl plugin — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Incremental flag parser used at every level of the command tree.

`parse_flags()` consumes the leading run of flag tokens from an argument
vector and hands each flag to a caller-supplied handler. Parsing stops at the
first token that does not start with `-`; that token and everything after it
are returned untouched so the caller can pick the next subcommand and, if that
subcommand takes flags of its own, call `parse_flags()` again on the rest.

Supported token shapes:
- `--name=value`   long flag with an attached value (split on the first `=`)
- `--name`         long flag, value may be pulled from the next token
- `-n`             short flag, value may be pulled from the next token
- `-nvalue`        short flag with an attached value
- `-n=value`       short flag with an attached value (one leading `=` stripped)

`--name=` hands the handler an empty value like `--name` does, but the value
is never pulled from the next token: a handler that asks for one fails with
"does not specify a value". `-n=` may still pull the next token.

Short flags are never bundled: `-abc` is flag `-a` with value `bc`.

Any value that starts with `-` is rejected as ambiguous, whether it was
attached or pulled from the next token. This also rejects negative numbers.

Example:
    def handler(flag: str, value: str) -> HandlerResult:
        if flag in ("-n", "--namespace"):
            if not value:
                return NEEDS_VALUE
            config["namespace"] = value
            return ACCEPTED
        return unsupported_flag(flag)

    remaining = parse_flags(handler, ["-n", "my-ns", "mons"])
    # remaining == ["mons"]
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from rook_ceph.exceptions import CommandLineError, ErrorKind
from rook_ceph.logger import logger
from rook_ceph.parser.handler_result import Accepted, FlagHandler, NeedsValue, Rejected


class TokenKind(Enum):
    """Syntactic classification of a single argument token."""

    LONG_WITH_VALUE = "long_with_value"
    LONG = "long"
    SHORT = "short"
    SHORT_WITH_VALUE = "short_with_value"
    NON_FLAG = "non_flag"


@dataclass(frozen=True)
class ParsedFlag:
    """A flag name and its attached value, if any, derived from one token."""

    name: str
    value: str
    kind: TokenKind

    @property
    def has_attached_value(self) -> bool:
        """True if the token used an attachment syntax, even with an empty value."""
        return self.kind in (TokenKind.LONG_WITH_VALUE, TokenKind.SHORT_WITH_VALUE)


def is_flag(token: str) -> bool:
    """Return True if the token looks like a flag."""
    return token.startswith("-")


def classify_token(token: str) -> TokenKind:
    """Classify a token by its shape alone."""
    if not is_flag(token):
        return TokenKind.NON_FLAG
    if token.startswith("--"):
        return TokenKind.LONG_WITH_VALUE if "=" in token else TokenKind.LONG
    if len(token) <= 2:
        return TokenKind.SHORT
    return TokenKind.SHORT_WITH_VALUE


def split_flag(token: str) -> ParsedFlag | None:
    """
    Split a flag token into its name and attached value.

    Returns None for non-flag tokens.
    """
    kind = classify_token(token)
    if kind is TokenKind.NON_FLAG:
        return None
    if kind is TokenKind.LONG_WITH_VALUE:
        name, _, value = token.partition("=")
        return ParsedFlag(name, value, kind)
    if kind is TokenKind.SHORT_WITH_VALUE:
        value = token[2:]
        if value.startswith("="):
            value = value[1:]
        return ParsedFlag(token[:2], value, kind)
    return ParsedFlag(token, "", kind)


def _check_value_not_flag(flag: str, value: str) -> None:
    if is_flag(value):
        raise CommandLineError(
            f"Flag '{flag}' value '{value}' looks like another flag",
            ErrorKind.AMBIGUOUS_VALUE,
        )


def _raise_if_rejected(flag: str, result: object) -> None:
    if isinstance(result, Rejected):
        raise CommandLineError(result.message, result.kind)
    if not isinstance(result, Accepted):
        raise TypeError(
            f"Handler returned {result!r} for flag '{flag}'; "
            "expected Accepted, NeedsValue or Rejected"
        )


def parse_flags(handler: FlagHandler, args: Sequence[str]) -> list[str]:
    """
    Parse flags from the beginning of `args` until a non-flag token is reached.

    Args:
        handler (FlagHandler): Called with `(flag, value)` for every flag.
            Returns `ACCEPTED`, `NEEDS_VALUE` or a `Rejected` instance.
        args (Sequence[str]): The argument vector. It is never modified.

    Returns:
        list[str]: The arguments starting at the first non-flag token.

    Raises:
        CommandLineError: On an ambiguous or missing value, a rejected flag,
            or a handler that asks for a value twice. `--flag=` never pulls
            the next token; a handler asking for its value fails at once.
        TypeError: If the handler returns something other than a handler
            result.
    """
    tokens = list(args)
    position = 0
    while position < len(tokens):
        parsed = split_flag(tokens[position])
        if parsed is None:
            break
        position += 1
        flag, value = parsed.name, parsed.value
        _check_value_not_flag(flag, value)

        result = handler(flag, value)
        if isinstance(result, NeedsValue):
            if parsed.kind is TokenKind.LONG_WITH_VALUE:
                raise CommandLineError(
                    f"Flag '{flag}' does not specify a value", ErrorKind.MISSING_VALUE
                )
            if position >= len(tokens):
                raise CommandLineError(
                    f"Could not get value for flag '{flag}'", ErrorKind.MISSING_VALUE
                )
            value = tokens[position]
            position += 1
            _check_value_not_flag(flag, value)
            if not value:
                raise CommandLineError(
                    f"Flag '{flag}' does not specify a value", ErrorKind.MISSING_VALUE
                )
            result = handler(flag, value)
            if isinstance(result, NeedsValue):
                raise CommandLineError(
                    f"Flag '{flag}' must have a value", ErrorKind.DOUBLE_VALUE_REQUEST
                )
        _raise_if_rejected(flag, result)
        logger.debug("Parsed flag %s with value %r", flag, value)

    return tokens[position:]


def end_of_command_parsing(args: Sequence[str]) -> None:
    """Raise if any arguments remain at the end of a command tree."""
    if args:
        raise CommandLineError(
            f"Extraneous arguments at end of input: {' '.join(args)}",
            ErrorKind.EXTRANEOUS_ARGUMENTS,
        )
