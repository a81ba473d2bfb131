"""ASCII and Unicode strings of fixed or variable length.

Variable-length strings behave like null-terminated C strings: they can
never hold a null byte. Fixed-length strings live in a zero-padded buffer
of a given capacity in bytes; trailing null bytes are not part of the text.
Lengths are always counted in bytes of the encoded text.
"""

from __future__ import annotations

import enum
from typing import Optional, TypeVar, Union

from h5types.errors import H5Error

BytesLike = Union[str, bytes, bytearray, memoryview]

_S = TypeVar("_S", bound="_H5String")


class StringErrorKind(enum.Enum):
    """What went wrong when building a string."""

    INTERNAL_NULL = "internal_null"
    INSUFFICIENT_CAPACITY = "insufficient_capacity"
    ASCII_ERROR = "ascii_error"


_MESSAGES = {
    StringErrorKind.INTERNAL_NULL: "variable length string with internal null",
    StringErrorKind.INSUFFICIENT_CAPACITY: "insufficient capacity for fixed sized string",
}


class StringError(H5Error, ValueError):
    """Raised when text cannot be stored in the requested string type."""

    def __init__(self, kind: StringErrorKind, detail: Optional[str] = None) -> None:
        self.kind = kind
        self.detail = detail
        if kind is StringErrorKind.ASCII_ERROR:
            message = detail if detail is not None else "invalid ASCII"
        else:
            message = _MESSAGES[kind]
        super().__init__(f"string error: {message}")


def _to_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected str or bytes-like object, got {type(data).__name__}")


def _check_ascii(data: bytes) -> None:
    if data.isascii():
        return
    index = next(i for i, byte in enumerate(data) if byte > 0x7F)
    raise StringError(
        StringErrorKind.ASCII_ERROR, f"the byte at index {index} is not ASCII"
    )


def _check_capacity(capacity: int) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise TypeError(f"capacity must be an integer, got {capacity!r}")
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    return capacity


def _until_null(data: bytes) -> bytes:
    end = data.find(b"\0")
    return data if end < 0 else data[:end]


def _padded(data: bytes, capacity: int) -> bytes:
    return data[:capacity].ljust(capacity, b"\0")


class _H5String:
    """Behaviour shared by all string types."""

    __slots__ = ()

    def as_bytes(self) -> bytes:
        raise NotImplementedError

    def __len__(self) -> int:
        return len(self.as_bytes())

    def is_empty(self) -> bool:
        """Return True if the string holds no bytes."""
        return not self.as_bytes()

    def as_str(self) -> str:
        """Return the text as a Python string."""
        return self.as_bytes().decode("utf-8", "surrogateescape")

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return repr(self.as_str())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.as_str() == other
        if type(other) is type(self):
            return self.as_bytes() == other.as_bytes()  # type: ignore[attr-defined]
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.as_str())

    def __bytes__(self) -> bytes:
        return self.as_bytes()


class VarLenAscii(_H5String):
    """A variable-length ASCII string without null bytes."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data = b""

    @classmethod
    def _from_bytes(cls, data: bytes) -> "VarLenAscii":
        obj = cls()
        obj._data = _until_null(data)
        return obj

    @classmethod
    def from_ascii(cls, data: BytesLike) -> "VarLenAscii":
        """Build from ASCII text; null bytes and non-ASCII bytes are rejected."""
        raw = _to_bytes(data)
        if b"\0" in raw:
            raise StringError(StringErrorKind.INTERNAL_NULL)
        _check_ascii(raw)
        return cls._from_bytes(raw)

    @classmethod
    def from_ascii_unchecked(cls, data: BytesLike) -> "VarLenAscii":
        """Build without validation; the text ends at the first null byte."""
        return cls._from_bytes(_to_bytes(data))

    def __len__(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def as_bytes(self) -> bytes:
        """Return the encoded text."""
        return self._data

    def as_str(self) -> str:
        return super().as_str()

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return super().__repr__()

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other)

    def __hash__(self) -> int:
        return super().__hash__()

    def __bytes__(self) -> bytes:
        return self._data


class VarLenUnicode(_H5String):
    """A variable-length UTF-8 string without null characters."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data = b""

    @classmethod
    def from_str(cls, text: str) -> "VarLenUnicode":
        """Build from text; a null character is rejected."""
        if "\0" in text:
            raise StringError(StringErrorKind.INTERNAL_NULL)
        obj = cls()
        obj._data = text.encode("utf-8")
        return obj

    @classmethod
    def from_str_unchecked(cls, text: str) -> "VarLenUnicode":
        """Build without validation; the text ends at the first null."""
        obj = cls()
        obj._data = _until_null(text.encode("utf-8", "surrogateescape"))
        return obj

    def __len__(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def as_bytes(self) -> bytes:
        """Return the UTF-8 encoded text."""
        return self._data

    def as_str(self) -> str:
        return super().as_str()

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return super().__repr__()

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other)

    def __hash__(self) -> int:
        return super().__hash__()

    def __bytes__(self) -> bytes:
        return self._data


class FixedAscii(_H5String):
    """An ASCII string stored in a zero-padded buffer of fixed capacity."""

    __slots__ = ("_buf",)

    def __init__(self, capacity: int) -> None:
        self._buf = bytes(_check_capacity(capacity))

    @classmethod
    def _from_bytes(cls, data: bytes, capacity: int) -> "FixedAscii":
        obj = cls(capacity)
        obj._buf = _padded(data, capacity)
        return obj

    @classmethod
    def from_ascii(cls, data: BytesLike, capacity: int) -> "FixedAscii":
        """Build from ASCII text that fits into ``capacity`` bytes."""
        _check_capacity(capacity)
        raw = _to_bytes(data)
        if len(raw) > capacity:
            raise StringError(StringErrorKind.INSUFFICIENT_CAPACITY)
        _check_ascii(raw)
        return cls._from_bytes(raw, capacity)

    @classmethod
    def from_ascii_unchecked(cls, data: BytesLike, capacity: int) -> "FixedAscii":
        """Build without validation; excess bytes are cut off."""
        _check_capacity(capacity)
        return cls._from_bytes(_to_bytes(data), capacity)

    def capacity(self) -> int:
        """Return the buffer size in bytes."""
        return len(self._buf)

    def __len__(self) -> int:
        return len(self.as_bytes())

    def is_empty(self) -> bool:
        return not any(self._buf)

    def as_bytes(self) -> bytes:
        """Return the buffer without its trailing null bytes."""
        return self._buf.rstrip(b"\0")

    def as_str(self) -> str:
        return super().as_str()

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return super().__repr__()

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other)

    def __hash__(self) -> int:
        return super().__hash__()

    def __bytes__(self) -> bytes:
        return self.as_bytes()


class FixedUnicode(_H5String):
    """A UTF-8 string stored in a zero-padded buffer of fixed capacity."""

    __slots__ = ("_buf",)

    def __init__(self, capacity: int) -> None:
        self._buf = bytes(_check_capacity(capacity))

    @classmethod
    def _from_bytes(cls, data: bytes, capacity: int) -> "FixedUnicode":
        obj = cls(capacity)
        obj._buf = _padded(data, capacity)
        return obj

    @classmethod
    def from_str(cls, text: str, capacity: int) -> "FixedUnicode":
        """Build from text whose UTF-8 encoding fits into ``capacity`` bytes."""
        _check_capacity(capacity)
        raw = text.encode("utf-8")
        if len(raw) > capacity:
            raise StringError(StringErrorKind.INSUFFICIENT_CAPACITY)
        return cls._from_bytes(raw, capacity)

    @classmethod
    def from_str_unchecked(cls, text: str, capacity: int) -> "FixedUnicode":
        """Build without validation; excess bytes are cut off."""
        _check_capacity(capacity)
        return cls._from_bytes(text.encode("utf-8", "surrogateescape"), capacity)

    def capacity(self) -> int:
        """Return the buffer size in bytes."""
        return len(self._buf)

    def __len__(self) -> int:
        return len(self.as_bytes())

    def is_empty(self) -> bool:
        return not any(self._buf)

    def as_bytes(self) -> bytes:
        """Return the buffer without its trailing null bytes."""
        return self._buf.rstrip(b"\0")

    def as_str(self) -> str:
        return super().as_str()

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return super().__repr__()

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other)

    def __hash__(self) -> int:
        return super().__hash__()

    def __bytes__(self) -> bytes:
        return self.as_bytes()