"""Helpers for shapes: an int, or a sequence of non-negative ints."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Union

Shape = Union[int, Sequence[int]]


def _check_extent(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"dimension must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"dimension must be non-negative, got {value}")
    return value


def dims(shape: Shape) -> list[int]:
    """Return the extents of ``shape`` as a list."""
    if isinstance(shape, int) and not isinstance(shape, bool):
        return [_check_extent(shape)]
    if isinstance(shape, (str, bytes)) or not isinstance(shape, Sequence):
        raise TypeError(f"invalid shape: {shape!r}")
    return [_check_extent(d) for d in shape]


def ndim(shape: Shape) -> int:
    """Return the number of dimensions of ``shape``."""
    return len(dims(shape))


def size(shape: Shape) -> int:
    """Return the number of elements; a scalar (empty) shape has one."""
    extents = dims(shape)
    return math.prod(extents) if extents else 1