"""Error frames, error stacks and the exceptions built from them."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional


class ErrorFrame:
    """A single entry of a library error stack."""

    __slots__ = ("desc", "func", "major", "minor", "_description")

    def __init__(self, desc: str, func: str, major: str, minor: str) -> None:
        self.desc = desc
        self.func = func
        self.major = major
        self.minor = minor
        self._description = f"{func}(): {desc}"

    def description(self) -> str:
        """Return ``"func(): desc"``."""
        return self._description

    def detail(self) -> Optional[str]:
        """Return a long description including major and minor messages."""
        return f"Error in {self.func}(): {self.desc} [{self.major}: {self.minor}]"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorFrame):
            return NotImplemented
        return (self.desc, self.func, self.major, self.minor) == (
            other.desc,
            other.func,
            other.major,
            other.minor,
        )

    def __hash__(self) -> int:
        return hash((self.desc, self.func, self.major, self.minor))

    def __repr__(self) -> str:
        return (
            f"ErrorFrame(desc={self.desc!r}, func={self.func!r}, "
            f"major={self.major!r}, minor={self.minor!r})"
        )


class ErrorStack:
    """An ordered collection of error frames, outermost first."""

    def __init__(self) -> None:
        self._frames: list[ErrorFrame] = []
        self._description: Optional[str] = None

    def push(self, frame: ErrorFrame) -> None:
        """Append a frame and refresh the stack description."""
        self._frames.append(frame)
        top_desc = self._frames[0].description()
        if len(self._frames) == 1:
            self._description = top_desc
        else:
            self._description = f"{top_desc}: {self._frames[-1].desc}"

    def __len__(self) -> int:
        return len(self._frames)

    def __getitem__(self, index: int) -> ErrorFrame:
        return self._frames[index]

    def __iter__(self) -> Iterator[ErrorFrame]:
        return iter(self._frames)

    def is_empty(self) -> bool:
        """Return True if the stack has no frames."""
        return not self._frames

    def top(self) -> Optional[ErrorFrame]:
        """Return the outermost frame, or None for an empty stack."""
        return self._frames[0] if self._frames else None

    def description(self) -> str:
        """Return a short description of the whole stack."""
        if self._description is None:
            return "unknown library error"
        return self._description

    def detail(self) -> Optional[str]:
        """Return the detail of the top frame, or None for an empty stack."""
        top = self.top()
        return top.detail() if top is not None else None

    def __repr__(self) -> str:
        return f"ErrorStack({self._frames!r})"


class H5Error(Exception):
    """Base class for all errors raised by this package."""

    def __init__(self, description: str) -> None:
        super().__init__(description)
        self._text = description

    def description(self) -> str:
        """Return the error message."""
        return self._text

    def __str__(self) -> str:
        return self.description()


class InternalError(H5Error):
    """An error in user input or in the high-level API."""


class LibraryError(H5Error):
    """An error reported by the underlying library, with its full stack."""

    def __init__(self, stack: ErrorStack) -> None:
        super().__init__(stack.description())
        self.stack = stack

    def description(self) -> str:
        return self.stack.description()


def is_err_code(value: int, signed: bool = True) -> bool:
    """Tell whether a library return value signals failure.

    Signed codes fail when negative; unsigned codes fail when zero.
    """
    return value < 0 if signed else value == 0