"""Tests for the flag registry and the SzFlag definitions."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from szflags import values
from szflags.definitions import SzFlag, single_bit_index
from szflags.flag_set import FlagSet
from szflags.formatting import format_mask, hex_format
from szflags.registry import FlagRegistry
from szflags.usage_groups import UsageGroup

ALL_FLAGS = list(FlagRegistry.get_all_flags().values())


def test_registry_size_and_order():
    assert len(ALL_FLAGS) == 44
    assert ALL_FLAGS[0] is FlagRegistry.SZ_WITH_INFO
    assert ALL_FLAGS[-1] is FlagRegistry.SZ_SEARCH_INCLUDE_REQUEST_DETAILS


def test_flag_names_match_attributes():
    for attr_name, attr in vars(FlagRegistry).items():
        if isinstance(attr, SzFlag):
            assert attr.name == attr_name


@pytest.mark.parametrize("sz_flag", ALL_FLAGS, ids=lambda f: f.name)
def test_flag_values_match_raw_constants(sz_flag):
    assert sz_flag.value == getattr(values, sz_flag.name)
    assert sz_flag.to_mask() == sz_flag.value


@pytest.mark.parametrize("sz_flag", ALL_FLAGS, ids=lambda f: f.name)
def test_every_flag_is_a_single_bit(sz_flag):
    assert sz_flag.is_atomic
    assert sz_flag.value == 1 << sz_flag.bit_index


@pytest.mark.parametrize("sz_flag", ALL_FLAGS, ids=lambda f: f.name)
def test_flag_round_trips_through_each_of_its_groups(sz_flag):
    """A flag's own value names the flag in every group it belongs to."""
    for group in sz_flag.groups:
        assert sz_flag in group.flags
        assert FlagSet.from_mask(sz_flag.value, group) == FlagSet([sz_flag])
        assert format_mask(sz_flag.value, group) == f"{sz_flag.name} [{hex_format(sz_flag.value)}]"


def test_get_flag():
    assert FlagRegistry.get_flag('SZ_WITH_INFO') is FlagRegistry.SZ_WITH_INFO
    assert FlagRegistry.get_flag(' sz_with_info ') is FlagRegistry.SZ_WITH_INFO


@pytest.mark.parametrize("name", ['SZ_NOT_A_FLAG', 'get_flag', ''])
def test_get_flag_unknown(name):
    with pytest.raises(KeyError):
        FlagRegistry.get_flag(name)


def test_get_flags_by_group():
    by_group = FlagRegistry.get_flags_by_group()
    assert UsageGroup.SZ_FIND_INTERESTING_ENTITIES_FLAGS not in by_group
    assert by_group[UsageGroup.SZ_ADD_RECORD_FLAGS] == [FlagRegistry.SZ_WITH_INFO]
    assert by_group[UsageGroup.SZ_HOW_FLAGS] == [
        FlagRegistry.SZ_INCLUDE_MATCH_KEY_DETAILS,
        FlagRegistry.SZ_INCLUDE_FEATURE_SCORES,
    ]
    for group, flags in by_group.items():
        assert FlagSet(flags) == group.flags


def test_flag_repr_and_str():
    sz_flag = FlagRegistry.SZ_ENTITY_INCLUDE_ENTITY_NAME
    assert str(sz_flag) == 'SZ_ENTITY_INCLUDE_ENTITY_NAME'
    assert repr(sz_flag) == '<SzFlag SZ_ENTITY_INCLUDE_ENTITY_NAME: 0x0000000000001000>'
    assert sz_flag.help_text


@pytest.mark.parametrize("value,expected", [
    (0, None),
    (1, 0),
    (1 << 63, 63),
    (0x3, None),
    (1 << 64, None),
    (-1, None),
])
def test_single_bit_index(value, expected):
    assert single_bit_index(value) == expected
