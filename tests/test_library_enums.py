import pytest

from h5types import library_enums as le
from h5types.library_enums import (
    EdcCheck,
    FilterCallbackReturn,
    FilterFlag,
    PluginType,
    ReferenceType,
    ScaleType,
    SelectionType,
    SelectOperator,
    SpaceClass,
    filter_name,
)


@pytest.mark.parametrize(
    "enum_cls",
    [
        SpaceClass,
        SelectOperator,
        SelectionType,
        ScaleType,
        EdcCheck,
        FilterCallbackReturn,
        ReferenceType,
        PluginType,
    ],
)
def test_round_trip_through_int(enum_cls):
    for member in enum_cls:
        assert enum_cls(int(member)) is member


@pytest.mark.parametrize(
    "enum_cls",
    [
        SpaceClass,
        SelectOperator,
        SelectionType,
        ScaleType,
        EdcCheck,
        FilterCallbackReturn,
        ReferenceType,
        PluginType,
    ],
)
def test_unknown_value_rejected(enum_cls):
    with pytest.raises(ValueError):
        enum_cls(1000)


def test_space_class_codes():
    assert SpaceClass(-1) is SpaceClass.NO_CLASS
    assert SpaceClass(1) is SpaceClass.SIMPLE
    assert [int(m) for m in SpaceClass] == [-1, 0, 1, 2]


def test_select_operator_ordering():
    values = [int(m) for m in SelectOperator]
    assert values == sorted(values)
    assert SelectOperator(0) is SelectOperator.SET
    assert SelectOperator(8) is SelectOperator.INVALID
    assert SelectOperator(-1) is SelectOperator.NOOP


def test_selection_type_codes():
    assert SelectionType.ALL == 3
    assert SelectionType(2) is SelectionType.HYPERSLABS


def test_reference_aliases():
    assert ReferenceType(0) is ReferenceType.OBJECT
    assert ReferenceType(0) is ReferenceType.OBJECT1
    assert ReferenceType(1) is ReferenceType.DATASET_REGION
    assert ReferenceType(1) is ReferenceType.DATASET_REGION1
    assert ReferenceType(5) is ReferenceType.MAXTYPE
    assert len(list(ReferenceType)) == 7


def test_plugin_type_codes():
    assert PluginType(0) is PluginType.FILTER
    assert PluginType.ERROR < PluginType.FILTER < PluginType.VOL < PluginType.NONE


def test_filter_flag_masks():
    assert FilterFlag(0x0001) is FilterFlag.OPTIONAL
    assert FilterFlag.OPTIONAL & FilterFlag.DEFMASK == FilterFlag.OPTIONAL
    assert FilterFlag.REVERSE & FilterFlag.DEFMASK == 0
    assert FilterFlag.REVERSE & FilterFlag.INVMASK == FilterFlag.REVERSE
    assert FilterFlag.SKIP_EDC & FilterFlag.INVMASK == FilterFlag.SKIP_EDC
    combined = FilterFlag(0x0201)
    assert combined == FilterFlag.OPTIONAL | FilterFlag.SKIP_EDC
    assert FilterFlag.OPTIONAL in combined


def test_filter_name_known():
    assert filter_name(le.FILTER_DEFLATE) == "deflate"
    assert filter_name(le.FILTER_SHUFFLE) == "shuffle"


def test_filter_names_distinct():
    ids = [
        le.FILTER_DEFLATE,
        le.FILTER_SHUFFLE,
        le.FILTER_FLETCHER32,
        le.FILTER_SZIP,
        le.FILTER_NBIT,
        le.FILTER_SCALEOFFSET,
    ]
    names = [filter_name(i) for i in ids]
    assert all(isinstance(n, str) and n for n in names)
    assert len(set(names)) == len(ids)


@pytest.mark.parametrize("filter_id", [le.FILTER_NONE, le.FILTER_RESERVED, le.FILTER_MAX])
def test_filter_name_unknown_in_range(filter_id):
    assert filter_name(filter_id) is None


@pytest.mark.parametrize("filter_id", [le.FILTER_ERROR, le.FILTER_MAX + 1])
def test_filter_name_out_of_range(filter_id):
    with pytest.raises(ValueError):
        filter_name(filter_id)


def test_filter_name_rejects_non_int():
    with pytest.raises(TypeError):
        filter_name("deflate")


def test_unlimited_is_max_hsize():
    assert le.UNLIMITED == 2**64 - 1
    assert le.MAX_RANK == 32
    assert le.MAX_NFILTERS == 32
    with pytest.raises(ValueError):
        filter_name(le.UNLIMITED)