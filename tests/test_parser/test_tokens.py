import pytest

from rook_ceph.parser import ParsedFlag, TokenKind, classify_token, is_flag, split_flag


@pytest.mark.parametrize(
    "token, kind",
    [
        ("--namespace=ns", TokenKind.LONG_WITH_VALUE),
        ("--namespace=", TokenKind.LONG_WITH_VALUE),
        ("--namespace", TokenKind.LONG),
        ("--", TokenKind.LONG),
        ("-n", TokenKind.SHORT),
        ("-", TokenKind.SHORT),
        ("-nns", TokenKind.SHORT_WITH_VALUE),
        ("-n=ns", TokenKind.SHORT_WITH_VALUE),
        ("mons", TokenKind.NON_FLAG),
        ("", TokenKind.NON_FLAG),
    ],
)
def test_classify_token(token, kind):
    assert classify_token(token) is kind


def test_is_flag():
    assert is_flag("-1")
    assert is_flag("--x")
    assert not is_flag("x-")
    assert not is_flag("")


def test_split_flag_non_flag():
    assert split_flag("ceph") is None


def test_split_flag_long():
    assert split_flag("--context=prod") == ParsedFlag(
        "--context", "prod", TokenKind.LONG_WITH_VALUE
    )
    assert split_flag("--context") == ParsedFlag("--context", "", TokenKind.LONG)


def test_split_flag_short():
    assert split_flag("-o") == ParsedFlag("-o", "", TokenKind.SHORT)
    assert split_flag("-orook") == ParsedFlag("-o", "rook", TokenKind.SHORT_WITH_VALUE)


def test_has_attached_value():
    assert split_flag("--flag=").has_attached_value
    assert split_flag("-n=").has_attached_value
    assert not split_flag("--flag").has_attached_value
    assert not split_flag("-n").has_attached_value
