"""Enumerations and constants for dataspaces, filters, references and plugins.

Member values match the integer codes the storage library uses, so they can
be stored and exchanged unchanged.
"""

from __future__ import annotations

from enum import IntEnum, IntFlag
from typing import Optional

# Dataspaces
ALL = 0
UNLIMITED = (1 << 64) - 1
MAX_RANK = 32
SEL_ITER_GET_SEQ_LIST_SORTED = 0x0001
SEL_ITER_SHARE_WITH_DATASPACE = 0x0002

# Filters
FILTER_ERROR = -1
FILTER_NONE = 0
FILTER_DEFLATE = 1
FILTER_SHUFFLE = 2
FILTER_FLETCHER32 = 3
FILTER_SZIP = 4
FILTER_NBIT = 5
FILTER_SCALEOFFSET = 6
FILTER_RESERVED = 256
FILTER_MAX = 65535
FILTER_ALL = 0
MAX_NFILTERS = 32

SZIP_ALLOW_K13_OPTION_MASK = 1
SZIP_CHIP_OPTION_MASK = 2
SZIP_EC_OPTION_MASK = 4
SZIP_NN_OPTION_MASK = 32
SZIP_MAX_PIXELS_PER_BLOCK = 32

SHUFFLE_USER_NPARMS = 0
SHUFFLE_TOTAL_NPARMS = 1
SZIP_USER_NPARMS = 2
SZIP_TOTAL_NPARMS = 4
SZIP_PARM_MASK = 0
SZIP_PARM_PPB = 1
SZIP_PARM_BPP = 2
SZIP_PARM_PPS = 3
NBIT_USER_NPARMS = 0
SCALEOFFSET_USER_NPARMS = 2
SO_INT_MINBITS_DEFAULT = 0
CLASS_T_VERS = 1

FILTER_CONFIG_ENCODE_ENABLED = 0x0001
FILTER_CONFIG_DECODE_ENABLED = 0x0002

# References
REF_BUF_SIZE = 64
DSET_REGION_REF_SIZE = 12

# Plugins
FILTER_PLUGIN = 0x0001
ALL_PLUGIN = 0xFFFF


class SpaceClass(IntEnum):
    """The class of a dataspace."""

    NO_CLASS = -1
    SCALAR = 0
    SIMPLE = 1
    NULL = 2


class SelectOperator(IntEnum):
    """How a new selection is combined with an existing one."""

    NOOP = -1
    SET = 0
    OR = 1
    AND = 2
    XOR = 3
    NOTB = 4
    NOTA = 5
    APPEND = 6
    PREPEND = 7
    INVALID = 8


class SelectionType(IntEnum):
    """The kind of selection held by a dataspace."""

    ERROR = -1
    NONE = 0
    POINTS = 1
    HYPERSLABS = 2
    ALL = 3
    N = 4


class ScaleType(IntEnum):
    """Scale type used by the scale-offset filter."""

    FLOAT_DSCALE = 0
    FLOAT_ESCALE = 1
    INT = 2


class EdcCheck(IntEnum):
    """Whether error-detection codes are checked on read."""

    ERROR = -1
    DISABLE = 0
    ENABLE = 1
    NO_EDC = 2


class FilterCallbackReturn(IntEnum):
    """What a filter failure callback asks the library to do."""

    ERROR = -1
    FAIL = 0
    CONT = 1
    NO = 2


class FilterFlag(IntFlag):
    """Flags attached to a filter in a pipeline."""

    MANDATORY = 0x0000
    OPTIONAL = 0x0001
    DEFMASK = 0x00FF
    REVERSE = 0x0100
    SKIP_EDC = 0x0200
    INVMASK = 0xFF00


class ReferenceType(IntEnum):
    """The kind of an object, region or attribute reference."""

    BADTYPE = -1
    OBJECT1 = 0
    DATASET_REGION1 = 1
    OBJECT2 = 2
    DATASET_REGION2 = 3
    ATTR = 4
    MAXTYPE = 5
    OBJECT = 0
    DATASET_REGION = 1


class PluginType(IntEnum):
    """The kind of a dynamically loaded plugin."""

    ERROR = -1
    FILTER = 0
    VOL = 1
    NONE = 2


_FILTER_NAMES = {
    FILTER_DEFLATE: "deflate",
    FILTER_SHUFFLE: "shuffle",
    FILTER_FLETCHER32: "fletcher32",
    FILTER_SZIP: "szip",
    FILTER_NBIT: "nbit",
    FILTER_SCALEOFFSET: "scaleoffset",
}


def filter_name(filter_id: int) -> Optional[str]:
    """Return the name of a predefined filter, or None for any other valid id.

    Raises ValueError if ``filter_id`` lies outside the range of filter ids.
    """
    if isinstance(filter_id, bool) or not isinstance(filter_id, int):
        raise TypeError(f"filter id must be an integer, got {filter_id!r}")
    if not FILTER_NONE <= filter_id <= FILTER_MAX:
        raise ValueError(f"invalid filter id: {filter_id}")
    return _FILTER_NAMES.get(filter_id)