"""Enumerations describing datatype properties and conversions.

Member values match the integer codes the storage library uses, so they can
be written to and read from files and property lists unchanged.
"""

from __future__ import annotations

from enum import IntEnum


class TypeClass(IntEnum):
    """The class of a datatype."""

    NO_CLASS = -1
    INTEGER = 0
    FLOAT = 1
    TIME = 2
    STRING = 3
    BITFIELD = 4
    OPAQUE = 5
    COMPOUND = 6
    REFERENCE = 7
    ENUM = 8
    VLEN = 9
    ARRAY = 10
    NCLASSES = 11


class ByteOrder(IntEnum):
    """The byte order of an atomic datatype."""

    ERROR = -1
    LE = 0
    BE = 1
    VAX = 2
    MIXED = 3
    NONE = 4


class Sign(IntEnum):
    """Signedness of an integer datatype."""

    ERROR = -1
    NONE = 0
    TWOS_COMPLEMENT = 1
    NSGN = 2


class Norm(IntEnum):
    """Mantissa normalization of a floating-point datatype."""

    ERROR = -1
    IMPLIED = 0
    MSBSET = 1
    NONE = 2


class CharSet(IntEnum):
    """Character set of a string datatype; ASCII is the default."""

    ERROR = -1
    ASCII = 0
    UTF8 = 1
    RESERVED_2 = 2
    RESERVED_3 = 3
    RESERVED_4 = 4
    RESERVED_5 = 5
    RESERVED_6 = 6
    RESERVED_7 = 7
    RESERVED_8 = 8
    RESERVED_9 = 9
    RESERVED_10 = 10
    RESERVED_11 = 11
    RESERVED_12 = 12
    RESERVED_13 = 13
    RESERVED_14 = 14
    RESERVED_15 = 15
    # Number of character sets actually defined.
    NCSET = 2


class StrPad(IntEnum):
    """How a fixed-length string is terminated or padded."""

    ERROR = -1
    NULLTERM = 0
    NULLPAD = 1
    SPACEPAD = 2
    RESERVED_3 = 3
    RESERVED_4 = 4
    RESERVED_5 = 5
    RESERVED_6 = 6
    RESERVED_7 = 7
    RESERVED_8 = 8
    RESERVED_9 = 9
    RESERVED_10 = 10
    RESERVED_11 = 11
    RESERVED_12 = 12
    RESERVED_13 = 13
    RESERVED_14 = 14
    RESERVED_15 = 15
    # Number of padding types actually defined.
    NSTR = 3


class Pad(IntEnum):
    """What unused bits of an atomic datatype are filled with."""

    ERROR = -1
    ZERO = 0
    ONE = 1
    BACKGROUND = 2
    NPAD = 3


class ConvCommand(IntEnum):
    """The command given to a conversion function."""

    INIT = 0
    CONV = 1
    FREE = 2


class ConvBackground(IntEnum):
    """Whether a conversion needs a background buffer."""

    NO = 0
    TEMP = 1
    YES = 2


class ConvPersistence(IntEnum):
    """Whether a conversion function is hard, soft or either."""

    DONTCARE = -1
    HARD = 0
    SOFT = 1


class ConvDirection(IntEnum):
    """Search direction when picking a native datatype."""

    DEFAULT = 0
    ASCEND = 1
    DESCEND = 2


class ConvException(IntEnum):
    """Kinds of exceptions raised during a datatype conversion."""

    RANGE_HI = 0
    RANGE_LOW = 1
    PRECISION = 2
    TRUNCATE = 3
    PINF = 4
    NINF = 5
    NAN = 6


class ConvReturn(IntEnum):
    """What a conversion exception handler reports back."""

    ABORT = -1
    UNHANDLED = 0
    HANDLED = 1