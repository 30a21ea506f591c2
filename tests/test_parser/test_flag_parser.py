import pytest

from rook_ceph.exceptions import CommandLineError, ErrorKind
from rook_ceph.parser import (
    ACCEPTED,
    NEEDS_VALUE,
    Rejected,
    end_of_command_parsing,
    parse_flags,
)


class RecordingHandler:
    """Accepts every flag; asks for a value for the flags in `value_flags`."""

    def __init__(self, value_flags=()):
        self.calls = []
        self.value_flags = set(value_flags)

    def __call__(self, flag, value):
        self.calls.append((flag, value))
        if flag in self.value_flags and not value:
            return NEEDS_VALUE
        return ACCEPTED


def test_empty_args():
    handler = RecordingHandler()
    assert parse_flags(handler, []) == []
    assert handler.calls == []


def test_non_flag_args_returned_unchanged():
    handler = RecordingHandler()
    assert parse_flags(handler, ["a", "b", "c"]) == ["a", "b", "c"]
    assert handler.calls == []


def test_parse_is_idempotent_on_flag_free_args():
    handler = RecordingHandler()
    remaining = parse_flags(handler, ["mons", "--extra"])
    assert parse_flags(handler, remaining) == remaining
    assert handler.calls == []


def test_args_are_not_mutated():
    args = ["--flag=value", "-n", "ns", "cmd"]
    parse_flags(RecordingHandler(value_flags=["-n"]), args)
    assert args == ["--flag=value", "-n", "ns", "cmd"]


def test_long_flag_attached_value():
    handler = RecordingHandler()
    assert parse_flags(handler, ["--flag=value"]) == []
    assert handler.calls == [("--flag", "value")]


def test_long_flag_splits_on_first_equal():
    handler = RecordingHandler()
    parse_flags(handler, ["--flag=a=b"])
    assert handler.calls == [("--flag", "a=b")]


def test_long_flag_value_from_next_token():
    handler = RecordingHandler(value_flags=["--flag"])
    assert parse_flags(handler, ["--flag", "x", "cmd"]) == ["cmd"]
    assert handler.calls == [("--flag", ""), ("--flag", "x")]


def test_short_flag_attached_value():
    handler = RecordingHandler()
    parse_flags(handler, ["-nmy-ns"])
    assert handler.calls == [("-n", "my-ns")]


def test_short_flag_attached_value_with_equal():
    handler = RecordingHandler()
    parse_flags(handler, ["-n=my-ns"])
    assert handler.calls == [("-n", "my-ns")]


def test_short_flag_strips_only_one_equal():
    handler = RecordingHandler()
    parse_flags(handler, ["-n==x"])
    assert handler.calls == [("-n", "=x")]


def test_short_flags_are_not_bundled():
    handler = RecordingHandler()
    parse_flags(handler, ["-abc"])
    assert handler.calls == [("-a", "bc")]


def test_short_flag_value_from_next_token():
    handler = RecordingHandler(value_flags=["-n"])
    assert parse_flags(handler, ["-n", "my-ns", "mons"]) == ["mons"]
    assert handler.calls == [("-n", ""), ("-n", "my-ns")]


def test_explicit_empty_value_reaches_handler_as_empty():
    explicit = RecordingHandler()
    bare = RecordingHandler()
    parse_flags(explicit, ["--flag="])
    parse_flags(bare, ["--flag"])
    assert explicit.calls == [("--flag", "")]
    assert bare.calls == explicit.calls


def test_explicit_empty_long_value_does_not_pull_next_token():
    handler = RecordingHandler(value_flags=["--namespace"])
    with pytest.raises(CommandLineError) as exc_info:
        parse_flags(handler, ["--namespace=", "mons"])
    assert exc_info.value.kind is ErrorKind.MISSING_VALUE
    assert str(exc_info.value) == "Flag '--namespace' does not specify a value"
    assert handler.calls == [("--namespace", "")]


def test_explicit_empty_short_value_pulls_next_token():
    handler = RecordingHandler(value_flags=["-n"])
    assert parse_flags(handler, ["-n=", "my-ns", "mons"]) == ["mons"]
    assert handler.calls == [("-n", ""), ("-n", "my-ns")]


def test_stops_at_first_non_flag():
    handler = RecordingHandler()
    remaining = parse_flags(handler, ["-v", "ceph", "--format", "json"])
    assert remaining == ["ceph", "--format", "json"]
    assert handler.calls == [("-v", "")]


def test_pulled_value_that_looks_like_flag_is_ambiguous():
    handler = RecordingHandler(value_flags=["--flag"])
    with pytest.raises(CommandLineError) as exc_info:
        parse_flags(handler, ["--flag", "-other", "x"])
    assert exc_info.value.kind is ErrorKind.AMBIGUOUS_VALUE
    assert str(exc_info.value) == "Flag '--flag' value '-other' looks like another flag"
    assert handler.calls == [("--flag", "")]


def test_attached_value_that_looks_like_flag_is_ambiguous():
    handler = RecordingHandler()
    with pytest.raises(CommandLineError) as exc_info:
        parse_flags(handler, ["--flag=-x"])
    assert exc_info.value.kind is ErrorKind.AMBIGUOUS_VALUE
    assert handler.calls == []


def test_short_attached_value_that_looks_like_flag_is_ambiguous():
    with pytest.raises(CommandLineError) as exc_info:
        parse_flags(RecordingHandler(), ["-n-x"])
    assert exc_info.value.kind is ErrorKind.AMBIGUOUS_VALUE
    assert "'-n'" in str(exc_info.value)


def test_negative_number_value_is_rejected():
    handler = RecordingHandler(value_flags=["--count"])
    with pytest.raises(CommandLineError) as exc_info:
        parse_flags(handler, ["--count", "-1"])
    assert exc_info.value.kind is ErrorKind.AMBIGUOUS_VALUE


def test_fails_at_offending_token():
    handler = RecordingHandler()
    with pytest.raises(CommandLineError):
        parse_flags(handler, ["--a", "--b=-x", "--c"])
    assert handler.calls == [("--a", "")]


def test_missing_value_at_end_of_input():
    with pytest.raises(CommandLineError) as exc_info:
        parse_flags(RecordingHandler(value_flags=["--flag"]), ["--flag"])
    assert exc_info.value.kind is ErrorKind.MISSING_VALUE
    assert str(exc_info.value) == "Could not get value for flag '--flag'"


def test_empty_next_token_is_missing_value():
    with pytest.raises(CommandLineError) as exc_info:
        parse_flags(RecordingHandler(value_flags=["--flag"]), ["--flag", "", "cmd"])
    assert exc_info.value.kind is ErrorKind.MISSING_VALUE
    assert str(exc_info.value) == "Flag '--flag' does not specify a value"


def test_handler_asking_for_value_twice():
    def handler(flag, value):
        return NEEDS_VALUE

    with pytest.raises(CommandLineError) as exc_info:
        parse_flags(handler, ["--flag", "x"])
    assert exc_info.value.kind is ErrorKind.DOUBLE_VALUE_REQUEST


def test_rejected_flag():
    def handler(flag, value):
        return Rejected(f"Flag {flag} is not supported")

    with pytest.raises(CommandLineError) as exc_info:
        parse_flags(handler, ["--bogus", "cmd"])
    assert exc_info.value.kind is ErrorKind.UNSUPPORTED_FLAG
    assert exc_info.value.message == "Flag --bogus is not supported"


def test_rejected_after_pulled_value():
    def handler(flag, value):
        if not value:
            return NEEDS_VALUE
        return Rejected("bad value", ErrorKind.INVALID_ARGUMENT)

    with pytest.raises(CommandLineError) as exc_info:
        parse_flags(handler, ["--flag", "x"])
    assert exc_info.value.kind is ErrorKind.INVALID_ARGUMENT


@pytest.mark.parametrize("result", [None, True, "accepted"])
def test_handler_must_return_a_handler_result(result):
    def handler(flag, value):
        return result

    with pytest.raises(TypeError, match="expected Accepted, NeedsValue or Rejected"):
        parse_flags(handler, ["--flag", "cmd"])


def test_pulled_value_must_get_a_handler_result():
    def handler(flag, value):
        return NEEDS_VALUE if not value else None

    with pytest.raises(TypeError):
        parse_flags(handler, ["--flag", "x"])


def test_handler_errors_propagate():
    def handler(flag, value):
        raise CommandLineError("boom", ErrorKind.UNSUPPORTED_FLAG)

    with pytest.raises(CommandLineError, match="boom"):
        parse_flags(handler, ["-x"])


def test_end_of_command_parsing():
    end_of_command_parsing([])
    with pytest.raises(CommandLineError) as exc_info:
        end_of_command_parsing(["a", "b"])
    assert exc_info.value.kind is ErrorKind.EXTRANEOUS_ARGUMENTS
    assert str(exc_info.value) == "Extraneous arguments at end of input: a b"
