# h5types

Python descriptions of HDF5 datatypes, strings, variable-length arrays, shapes,
error stacks and library enumerations. It is pure Python and needs nothing
beyond the standard library.

## Modules

- `h5types.h5type`: `TypeDescriptor` and its parts `TypeKind`, `IntSize`,
  `FloatSize`, `EnumType`, `EnumMember`, `CompoundType` and `CompoundField`.
  A descriptor knows its `size()` in bytes and its `c_alignment()`. It can
  lay out compounds by C rules with `to_c_repr()` or without padding with
  `to_packed_repr()`. `str()` gives a short name such as `int32`,
  `[uint16; 4]` or `compound (3 fields)`. `type_descriptor(...)` maps a
  value type to its descriptor. It accepts a descriptor, a name from `int8`
  to `uint64`, `float32`, `float64`, `bool`, `isize` or `usize`, the Python
  types `bool`, `int` (int64) and `float` (float64), the classes
  `VarLenAscii` and `VarLenUnicode`, fixed-length string instances, and
  tuples of these of up to 12 members. A tuple becomes a compound with C
  layout.
- `h5types.string`: `VarLenAscii`, `VarLenUnicode`, `FixedAscii` and
  `FixedUnicode`. Variable-length strings cannot hold a null byte. A
  fixed-length string lives in a zero-padded buffer of a given capacity, and
  its trailing nulls are not part of the text. Lengths are counted in bytes.
  Invalid input raises `StringError`, whose `kind` is a `StringErrorKind`:
  `INTERNAL_NULL`, `INSUFFICIENT_CAPACITY` or `ASCII_ERROR`.
- `h5types.array`: `VarLenArray`, an immutable sequence that compares equal
  to lists and tuples with the same items.
- `h5types.dim`: `ndim`, `dims` and `size` for shapes given as a
  non-negative integer or a sequence of them. An empty shape has size 1.
- `h5types.errors`: `ErrorFrame`, `ErrorStack`, the exceptions `H5Error`,
  `InternalError` and `LibraryError`, and `is_err_code(value, signed=True)`.
- `h5types.type_enums`: the datatype enumerations `TypeClass`, `ByteOrder`,
  `Sign`, `Norm`, `CharSet`, `StrPad`, `Pad`, `ConvCommand`,
  `ConvBackground`, `ConvPersistence`, `ConvDirection`, `ConvException` and
  `ConvReturn`.
- `h5types.library_enums`: `SpaceClass`, `SelectOperator`, `SelectionType`,
  `ScaleType`, `EdcCheck`, `FilterCallbackReturn`, `FilterFlag`,
  `ReferenceType` and `PluginType`, plus dataspace, filter, reference and
  plugin constants. `filter_name(filter_id)` names the predefined filters,
  such as `filter_name(1) == "deflate"`. It returns `None` for other ids in
  range and raises `ValueError` for ids outside 0 to 65535.

The enumeration values are the integer codes HDF5 uses.

## Installation

```
pip install .
```

## Examples

```python
from h5types.h5type import TypeDescriptor, CompoundType, CompoundField, IntSize, FloatSize

i8 = TypeDescriptor.integer(IntSize.U1)
u64 = TypeDescriptor.unsigned(IntSize.U8)
f32 = TypeDescriptor.float(FloatSize.U4)

ct = CompoundType(
    fields=[
        CompoundField("0", i8, 0, 0),
        CompoundField("1", u64, 1, 1),
        CompoundField("2", f32, 9, 2),
    ],
    size=13,
)
td = TypeDescriptor.compound(ct)
print(td)                          # compound (3 fields)
print(td.to_c_repr().size())       # 24
print(td.to_packed_repr().size())  # 13
```

```python
from h5types.string import FixedAscii, FixedUnicode, VarLenUnicode, StringError

s = FixedAscii.from_ascii(b"ab", 2)
print(s.as_str())                # ab

try:
    FixedUnicode.from_str("\u20ac", 2)   # 3 bytes in UTF-8
except StringError as exc:
    print(exc)                   # string error: insufficient capacity for fixed sized string

print(len(VarLenUnicode.from_str("\u00ae")))  # 2 (length in bytes)
```

```python
from h5types.array import VarLenArray
from h5types.dim import size

a = VarLenArray([1, 2, 3])
print(a, len(a))                  # [1, 2, 3] 3
print(size((2, 3, 4)), size(()))  # 24 1
```

## What it does not do

The package only describes types and values. It does not read or write HDF5
files. It does not load or call the HDF5 library, and it has no command-line
tool. `ErrorStack` and `LibraryError` hold error frames that you build and
push yourself. Nothing in the package fills them from a running library.

## Running the tests

```
pip install ".[test]"
pytest
```