import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st

from h5types.errors import H5Error
from h5types.string import (
    FixedAscii,
    FixedUnicode,
    StringError,
    StringErrorKind,
    VarLenAscii,
    VarLenUnicode,
)

CAP = 1024


def _ascii_bytes(raw: bytes) -> bytes:
    return bytes(c % 0x7E + 1 for c in raw)


def _fit_unicode(text: str) -> str:
    text = text.replace("\0", "")
    while len(text.encode("utf-8")) > CAP:
        text = text[:-1]
    return text


ascii_strategy = st.binary(max_size=CAP).map(_ascii_bytes)
unicode_strategy = st.text(max_size=400).map(_fit_unicode)


def check_invariants(s, expected: str, data: bytes):
    assert len(s) == len(expected.encode("utf-8"))
    assert s.is_empty() == (expected == "")
    assert s.is_empty() == (len(data) == 0)
    assert s.as_str() == expected
    assert s.as_bytes() == data
    assert copy.copy(s).as_bytes() == s.as_bytes()
    assert hash(s) == hash(s.as_str())
    assert str(s) == s.as_str()
    assert repr(s) == repr(s.as_str())
    assert s == s
    assert s == s.as_str()
    assert s.as_str() == s
    assert bytes(s) == data


def test_internal_null():
    with pytest.raises(StringError) as exc:
        VarLenAscii.from_ascii("foo\0bar")
    assert exc.value.kind is StringErrorKind.INTERNAL_NULL
    with pytest.raises(StringError) as exc:
        VarLenUnicode.from_str("foo\0bar")
    assert exc.value.kind is StringErrorKind.INTERNAL_NULL


def test_capacity():
    assert FixedAscii.from_ascii("ab", 2).as_str() == "ab"
    with pytest.raises(StringError) as exc:
        FixedAscii.from_ascii("abc", 2)
    assert exc.value.kind is StringErrorKind.INSUFFICIENT_CAPACITY
    assert FixedUnicode.from_str("ab", 2).as_str() == "ab"
    with pytest.raises(StringError):
        FixedUnicode.from_str("abc", 2)
    assert FixedUnicode.from_str("®", 2).as_str() == "®"
    with pytest.raises(StringError) as exc:
        FixedUnicode.from_str("€", 2)
    assert exc.value.kind is StringErrorKind.INSUFFICIENT_CAPACITY


@pytest.mark.parametrize("text", ["®", "€"])
def test_non_ascii(text):
    with pytest.raises(StringError) as exc:
        VarLenAscii.from_ascii(text)
    assert exc.value.kind is StringErrorKind.ASCII_ERROR
    with pytest.raises(StringError) as exc:
        FixedAscii.from_ascii(text, CAP)
    assert exc.value.kind is StringErrorKind.ASCII_ERROR


def test_null_padding():
    assert FixedAscii.from_ascii("a\0b", 3).as_str() == "a\0b"
    assert FixedAscii.from_ascii("a\0\0", 3).as_str() == "a"
    assert FixedAscii.from_ascii("\0\0\0", 3).is_empty()
    assert FixedUnicode.from_str("a\0b", 3).as_str() == "a\0b"
    assert FixedUnicode.from_str("a\0\0", 3).as_str() == "a"
    assert FixedUnicode.from_str("\0\0\0", 3).is_empty()


@pytest.mark.parametrize(
    "make",
    [
        VarLenAscii,
        VarLenUnicode,
        lambda: FixedAscii(CAP),
        lambda: FixedUnicode(CAP),
    ],
)
def test_default(make):
    s = make()
    assert len(s) == 0
    assert s.is_empty()
    assert s.as_bytes() == b""
    assert s.as_str() == ""


def test_fixed_capacity_reported():
    assert FixedAscii(16).capacity() == 16
    assert FixedUnicode.from_str("x", 32).capacity() == 32


def test_invalid_capacity():
    with pytest.raises(ValueError):
        FixedAscii(-1)
    with pytest.raises(TypeError):
        FixedUnicode("3")


def test_error_messages():
    err = StringError(StringErrorKind.INTERNAL_NULL)
    assert str(err) == "string error: variable length string with internal null"
    assert isinstance(err, ValueError) and isinstance(err, H5Error)
    err = StringError(StringErrorKind.INSUFFICIENT_CAPACITY)
    assert err.description() == (
        "string error: insufficient capacity for fixed sized string"
    )
    with pytest.raises(StringError) as exc:
        VarLenAscii.from_ascii(b"ab\xc2")
    assert str(exc.value) == "string error: the byte at index 2 is not ASCII"


def test_unchecked_constructors():
    assert FixedAscii.from_ascii_unchecked(b"abcd", 2).as_bytes() == b"ab"
    assert VarLenAscii.from_ascii_unchecked(b"ab\0cd").as_bytes() == b"ab"
    assert VarLenUnicode.from_str_unchecked("ab\0cd").as_str() == "ab"
    assert FixedUnicode.from_str_unchecked("abcd", 3).as_str() == "abc"


def test_equality_between_types():
    assert VarLenAscii.from_ascii("ab") == VarLenAscii.from_ascii(b"ab")
    assert VarLenAscii.from_ascii("ab") != VarLenAscii.from_ascii("ac")
    assert FixedAscii.from_ascii("ab", 4) == FixedAscii.from_ascii("ab", 8)
    assert VarLenAscii.from_ascii("ab") != VarLenUnicode.from_str("ab")
    assert {VarLenUnicode.from_str("x"): 1}["x"] == 1


@given(ascii_strategy)
def test_quickcheck_va(data):
    s = VarLenAscii.from_ascii(data)
    check_invariants(s, data.decode("ascii"), data)
    assert len(s) == len(data)
    assert VarLenAscii.from_ascii_unchecked(data).as_bytes() == data


@given(ascii_strategy)
def test_quickcheck_fa(data):
    s = FixedAscii.from_ascii(data, CAP)
    check_invariants(s, data.decode("ascii"), data)
    assert len(s) == len(data)
    assert FixedAscii.from_ascii_unchecked(data, CAP).as_bytes() == data


@given(unicode_strategy)
def test_quickcheck_vu(text):
    data = text.encode("utf-8")
    s = VarLenUnicode.from_str(text)
    check_invariants(s, text, data)
    assert VarLenUnicode.from_str_unchecked(text).as_bytes() == data


@given(unicode_strategy)
def test_quickcheck_fu(text):
    data = text.encode("utf-8")
    s = FixedUnicode.from_str(text, CAP)
    check_invariants(s, text, data)
    assert FixedUnicode.from_str_unchecked(text, CAP).as_bytes() == data