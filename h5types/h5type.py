"""Descriptions of in-memory value types: scalars, enums, compounds, arrays, strings."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from typing import Any, Optional, Union

from h5types.string import FixedAscii, FixedUnicode, VarLenAscii, VarLenUnicode

_POINTER_SIZE = struct.calcsize("P")
_SIZE_T_SIZE = struct.calcsize("N")
# A variable-length sequence is stored as a (length, pointer) pair.
_VLEN_SIZE = struct.calcsize("NP")

_MAX_TUPLE_LEN = 12


class IntSize(IntEnum):
    """Width of an integer type in bytes."""

    U1 = 1
    U2 = 2
    U4 = 4
    U8 = 8

    @classmethod
    def from_int(cls, size: int) -> Optional["IntSize"]:
        """Return the member for ``size`` bytes, or None if there is none."""
        try:
            return cls(size)
        except ValueError:
            return None


class FloatSize(IntEnum):
    """Width of a floating-point type in bytes."""

    U4 = 4
    U8 = 8

    @classmethod
    def from_int(cls, size: int) -> Optional["FloatSize"]:
        """Return the member for ``size`` bytes, or None if there is none."""
        try:
            return cls(size)
        except ValueError:
            return None


class TypeKind(Enum):
    """The kind of value a type descriptor describes."""

    INTEGER = "integer"
    UNSIGNED = "unsigned"
    FLOAT = "float"
    BOOLEAN = "boolean"
    ENUM = "enum"
    COMPOUND = "compound"
    FIXED_ARRAY = "fixed_array"
    FIXED_ASCII = "fixed_ascii"
    FIXED_UNICODE = "fixed_unicode"
    VARLEN_ARRAY = "varlen_array"
    VARLEN_ASCII = "varlen_ascii"
    VARLEN_UNICODE = "varlen_unicode"


@dataclass(frozen=True)
class EnumMember:
    """A named value of an enumeration."""

    name: str
    value: int


@dataclass(frozen=True)
class EnumType:
    """An enumeration over an integer base type."""

    size: IntSize
    signed: bool
    members: tuple[EnumMember, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "size", IntSize(self.size))
        object.__setattr__(self, "members", tuple(self.members))

    def base_type(self) -> "TypeDescriptor":
        """Return the integer type the enumeration is stored as."""
        if self.signed:
            return TypeDescriptor.integer(self.size)
        return TypeDescriptor.unsigned(self.size)


@dataclass(frozen=True)
class CompoundField:
    """A named member of a compound type at a byte offset."""

    name: str
    ty: "TypeDescriptor"
    offset: int
    index: int


def _round_up(value: int, align: int) -> int:
    align = max(align, 1)
    return -(-value // align) * align


@dataclass(frozen=True)
class CompoundType:
    """A record of fields with a total size in bytes."""

    fields: tuple[CompoundField, ...] = field(default_factory=tuple)
    size: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    def to_c_repr(self) -> "CompoundType":
        """Lay the fields out in declaration order with C alignment rules."""
        offset = 0
        max_align = 1
        size = self.size
        laid_out = []
        for f in sorted(self.fields, key=lambda f: f.index):
            ty = f.ty.to_c_repr()
            align = max(ty.c_alignment(), 1)
            offset = _round_up(offset, align)
            laid_out.append(replace(f, ty=ty, offset=offset))
            max_align = max(max_align, align)
            offset += ty.size()
            size = _round_up(offset, max_align)
        return CompoundType(tuple(laid_out), size)

    def to_packed_repr(self) -> "CompoundType":
        """Lay the fields out in declaration order without any padding."""
        size = 0
        laid_out = []
        for f in sorted(self.fields, key=lambda f: f.index):
            ty = f.ty.to_packed_repr()
            laid_out.append(replace(f, ty=ty, offset=size))
            size += ty.size()
        return CompoundType(tuple(laid_out), size)


def _check_length(length: Any) -> int:
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"length must be an integer, got {length!r}")
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    return length


def _check_descriptor(base: Any) -> "TypeDescriptor":
    if not isinstance(base, TypeDescriptor):
        raise TypeError(f"expected a TypeDescriptor, got {base!r}")
    return base


_INT_NAMES = {IntSize.U1: "8", IntSize.U2: "16", IntSize.U4: "32", IntSize.U8: "64"}
_FLOAT_NAMES = {FloatSize.U4: "float32", FloatSize.U8: "float64"}


@dataclass(frozen=True)
class TypeDescriptor:
    """Describes the layout of one value type.

    Build instances with the class methods rather than the constructor.
    """

    kind: TypeKind
    width: Optional[Union[IntSize, FloatSize]] = None
    base: Optional["TypeDescriptor"] = None
    length: Optional[int] = None
    enum_type: Optional[EnumType] = None
    compound_type: Optional[CompoundType] = None

    @classmethod
    def integer(cls, size: Union[IntSize, int]) -> "TypeDescriptor":
        """A signed integer of ``size`` bytes."""
        return cls(TypeKind.INTEGER, width=IntSize(size))

    @classmethod
    def unsigned(cls, size: Union[IntSize, int]) -> "TypeDescriptor":
        """An unsigned integer of ``size`` bytes."""
        return cls(TypeKind.UNSIGNED, width=IntSize(size))

    @classmethod
    def float(cls, size: Union[FloatSize, int]) -> "TypeDescriptor":
        """A floating-point number of ``size`` bytes."""
        return cls(TypeKind.FLOAT, width=FloatSize(size))

    @classmethod
    def boolean(cls) -> "TypeDescriptor":
        """A one-byte boolean."""
        return cls(TypeKind.BOOLEAN)

    @classmethod
    def enum(cls, enum_type: EnumType) -> "TypeDescriptor":
        """An enumeration."""
        if not isinstance(enum_type, EnumType):
            raise TypeError(f"expected an EnumType, got {enum_type!r}")
        return cls(TypeKind.ENUM, enum_type=enum_type)

    @classmethod
    def compound(cls, compound_type: CompoundType) -> "TypeDescriptor":
        """A compound record."""
        if not isinstance(compound_type, CompoundType):
            raise TypeError(f"expected a CompoundType, got {compound_type!r}")
        return cls(TypeKind.COMPOUND, compound_type=compound_type)

    @classmethod
    def fixed_array(cls, base: "TypeDescriptor", length: int) -> "TypeDescriptor":
        """An array of ``length`` elements of ``base``."""
        return cls(
            TypeKind.FIXED_ARRAY, base=_check_descriptor(base), length=_check_length(length)
        )

    @classmethod
    def fixed_ascii(cls, length: int) -> "TypeDescriptor":
        """An ASCII string in a buffer of ``length`` bytes."""
        return cls(TypeKind.FIXED_ASCII, length=_check_length(length))

    @classmethod
    def fixed_unicode(cls, length: int) -> "TypeDescriptor":
        """A UTF-8 string in a buffer of ``length`` bytes."""
        return cls(TypeKind.FIXED_UNICODE, length=_check_length(length))

    @classmethod
    def varlen_array(cls, base: "TypeDescriptor") -> "TypeDescriptor":
        """A variable-length array of ``base``."""
        return cls(TypeKind.VARLEN_ARRAY, base=_check_descriptor(base))

    @classmethod
    def varlen_ascii(cls) -> "TypeDescriptor":
        """A variable-length ASCII string."""
        return cls(TypeKind.VARLEN_ASCII)

    @classmethod
    def varlen_unicode(cls) -> "TypeDescriptor":
        """A variable-length UTF-8 string."""
        return cls(TypeKind.VARLEN_UNICODE)

    def size(self) -> int:
        """Return the size of one value in bytes."""
        kind = self.kind
        if kind in (TypeKind.INTEGER, TypeKind.UNSIGNED, TypeKind.FLOAT):
            return int(self.width)  # type: ignore[arg-type]
        if kind is TypeKind.BOOLEAN:
            return 1
        if kind is TypeKind.ENUM:
            return int(self.enum_type.size)  # type: ignore[union-attr]
        if kind is TypeKind.COMPOUND:
            return self.compound_type.size  # type: ignore[union-attr]
        if kind is TypeKind.FIXED_ARRAY:
            return self.base.size() * self.length  # type: ignore[union-attr,operator]
        if kind in (TypeKind.FIXED_ASCII, TypeKind.FIXED_UNICODE):
            return self.length  # type: ignore[return-value]
        if kind is TypeKind.VARLEN_ARRAY:
            return _VLEN_SIZE
        return _POINTER_SIZE

    def c_alignment(self) -> int:
        """Return the alignment a C compiler would give this type."""
        kind = self.kind
        if kind is TypeKind.COMPOUND:
            fields = self.compound_type.fields  # type: ignore[union-attr]
            return max((f.ty.c_alignment() for f in fields), default=1)
        if kind is TypeKind.FIXED_ARRAY:
            return self.base.c_alignment()  # type: ignore[union-attr]
        if kind in (TypeKind.FIXED_ASCII, TypeKind.FIXED_UNICODE):
            return 1
        if kind is TypeKind.VARLEN_ARRAY:
            return _SIZE_T_SIZE
        return self.size()

    def to_c_repr(self) -> "TypeDescriptor":
        """Return this type with every compound laid out by C rules."""
        if self.kind is TypeKind.COMPOUND:
            return TypeDescriptor.compound(self.compound_type.to_c_repr())  # type: ignore[union-attr]
        if self.kind is TypeKind.FIXED_ARRAY:
            return TypeDescriptor.fixed_array(self.base.to_c_repr(), self.length)  # type: ignore[union-attr,arg-type]
        if self.kind is TypeKind.VARLEN_ARRAY:
            return TypeDescriptor.varlen_array(self.base.to_c_repr())  # type: ignore[union-attr]
        return self

    def to_packed_repr(self) -> "TypeDescriptor":
        """Return this type with every compound packed without padding."""
        if self.kind is TypeKind.COMPOUND:
            return TypeDescriptor.compound(self.compound_type.to_packed_repr())  # type: ignore[union-attr]
        if self.kind is TypeKind.FIXED_ARRAY:
            return TypeDescriptor.fixed_array(self.base.to_packed_repr(), self.length)  # type: ignore[union-attr,arg-type]
        if self.kind is TypeKind.VARLEN_ARRAY:
            return TypeDescriptor.varlen_array(self.base.to_packed_repr())  # type: ignore[union-attr]
        return self

    def __str__(self) -> str:
        kind = self.kind
        if kind is TypeKind.INTEGER:
            return "int" + _INT_NAMES[self.width]  # type: ignore[index]
        if kind is TypeKind.UNSIGNED:
            return "uint" + _INT_NAMES[self.width]  # type: ignore[index]
        if kind is TypeKind.FLOAT:
            return _FLOAT_NAMES[self.width]  # type: ignore[index]
        if kind is TypeKind.BOOLEAN:
            return "bool"
        if kind is TypeKind.ENUM:
            return f"enum ({self.enum_type.base_type()})"  # type: ignore[union-attr]
        if kind is TypeKind.COMPOUND:
            return f"compound ({len(self.compound_type.fields)} fields)"  # type: ignore[union-attr]
        if kind is TypeKind.FIXED_ARRAY:
            return f"[{self.base}; {self.length}]"
        if kind is TypeKind.FIXED_ASCII:
            return f"string (len {self.length})"
        if kind is TypeKind.FIXED_UNICODE:
            return f"unicode (len {self.length})"
        if kind is TypeKind.VARLEN_ARRAY:
            return f"[{self.base}] (var len)"
        if kind is TypeKind.VARLEN_ASCII:
            return "string (var len)"
        return "unicode (var len)"


_POINTER_INT = IntSize(_POINTER_SIZE)

_NAMED_TYPES: dict[str, TypeDescriptor] = {
    **{f"int{bits}": TypeDescriptor.integer(size) for size, bits in _INT_NAMES.items()},
    **{f"uint{bits}": TypeDescriptor.unsigned(size) for size, bits in _INT_NAMES.items()},
    "float32": TypeDescriptor.float(FloatSize.U4),
    "float64": TypeDescriptor.float(FloatSize.U8),
    "bool": TypeDescriptor.boolean(),
    "isize": TypeDescriptor.integer(_POINTER_INT),
    "usize": TypeDescriptor.unsigned(_POINTER_INT),
}


def _tuple_descriptor(members: tuple[Any, ...]) -> TypeDescriptor:
    if not members:
        raise TypeError("an empty tuple has no type descriptor")
    if len(members) > _MAX_TUPLE_LEN:
        raise TypeError(f"tuples of more than {_MAX_TUPLE_LEN} members are not supported")
    fields = [
        CompoundField(str(index), type_descriptor(member), 0, index)
        for index, member in enumerate(members)
    ]
    return TypeDescriptor.compound(CompoundType(tuple(fields), 0).to_c_repr())


def type_descriptor(value_type: Any) -> TypeDescriptor:
    """Return the descriptor of a value type.

    Accepted are descriptors themselves, the names ``int8`` to ``uint64``,
    ``float32``, ``float64``, ``bool``, ``isize`` and ``usize``, the Python
    types ``bool``, ``int`` (int64) and ``float`` (float64), the variable-length
    string classes, fixed-length string instances (their capacity is used),
    and tuples of any of these, which become compounds with C layout.
    """
    if isinstance(value_type, TypeDescriptor):
        return value_type
    if isinstance(value_type, str):
        try:
            return _NAMED_TYPES[value_type]
        except KeyError:
            raise ValueError(f"unknown type name: {value_type!r}") from None
    if value_type is bool:
        return TypeDescriptor.boolean()
    if value_type is int:
        return TypeDescriptor.integer(IntSize.U8)
    if value_type is float:
        return TypeDescriptor.float(FloatSize.U8)
    if value_type is VarLenAscii:
        return TypeDescriptor.varlen_ascii()
    if value_type is VarLenUnicode:
        return TypeDescriptor.varlen_unicode()
    if isinstance(value_type, FixedAscii):
        return TypeDescriptor.fixed_ascii(value_type.capacity())
    if isinstance(value_type, FixedUnicode):
        return TypeDescriptor.fixed_unicode(value_type.capacity())
    if isinstance(value_type, tuple):
        return _tuple_descriptor(value_type)
    raise TypeError(f"no type descriptor for {value_type!r}")