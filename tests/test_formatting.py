"""Tests for mask and flag set diagnostic text."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from szflags import values
from szflags.config import FormatConfig
from szflags.flag_set import EMPTY, FlagSet
from szflags.formatting import format_flag_set, format_mask, hex_format, normalize_mask
from szflags.registry import FlagRegistry as R
from szflags.usage_groups import UsageGroup
from catalog_builder import SampleGroup, build_sample_catalog, flag


@pytest.fixture
def two_flag_catalog():
    """A group with A=0x1 and B=0x2 and nothing else."""
    return build_sample_catalog(flag('SZ_A', 0x1), flag('SZ_B', 0x2))


def test_hex_format():
    assert hex_format(0x3) == "0000 0000 0000 0003"
    assert hex_format(1 << 62) == "4000 0000 0000 0000"


def test_hex_format_treats_none_as_zero():
    assert hex_format(None) == "0000 0000 0000 0000"


def test_negative_masks_are_unsigned():
    assert normalize_mask(-1) == (1 << 64) - 1
    assert hex_format(-1) == "ffff ffff ffff ffff"


def test_named_bits(two_flag_catalog):
    text = format_mask(0x3, SampleGroup.SZ_ALPHA_FLAGS, catalog=two_flag_catalog)
    assert text == "SZ_A | SZ_B [0000 0000 0000 0003]"


def test_unnamed_bit_rendered_as_hex(two_flag_catalog):
    text = format_mask(0x4, SampleGroup.SZ_ALPHA_FLAGS, catalog=two_flag_catalog)
    assert text == "0000000000000004 [0000 0000 0000 0004]"


def test_named_and_unnamed_bits_in_ascending_order(two_flag_catalog):
    text = format_mask(0x7, SampleGroup.SZ_ALPHA_FLAGS, catalog=two_flag_catalog)
    assert text == "SZ_A | SZ_B | 0000000000000004 [0000 0000 0000 0007]"


@pytest.mark.parametrize("zero", [0, None])
def test_zero_mask_uses_no_flags_label(two_flag_catalog, zero):
    text = format_mask(zero, SampleGroup.SZ_ALPHA_FLAGS, catalog=two_flag_catalog)
    assert text == "{ NONE } [0000 0000 0000 0000]"


def test_group_specific_no_flags_label():
    catalog = build_sample_catalog(
        flag('SZ_A', 0x1),
        no_flags_labels={SampleGroup.SZ_ALPHA_FLAGS: "SZ_NO_FLAGS"},
    )
    assert format_mask(0, SampleGroup.SZ_ALPHA_FLAGS, catalog=catalog) == "SZ_NO_FLAGS [0000 0000 0000 0000]"
    assert format_mask(0, SampleGroup.SZ_BETA_FLAGS, catalog=catalog) == "{ NONE } [0000 0000 0000 0000]"


def test_bits_named_only_in_other_groups_render_as_hex(two_flag_catalog):
    text = format_mask(0x1, SampleGroup.SZ_BETA_FLAGS, catalog=two_flag_catalog)
    assert text == "0000000000000001 [0000 0000 0000 0001]"


def test_custom_format_config(two_flag_catalog):
    config = FormatConfig(separator=", ", no_flags_label="(none)", group_width=8)
    assert format_mask(0x3, SampleGroup.SZ_ALPHA_FLAGS, config, two_flag_catalog) == "SZ_A, SZ_B [00000000 00000003]"
    assert format_mask(0, SampleGroup.SZ_ALPHA_FLAGS, config, two_flag_catalog) == "(none) [00000000 00000000]"


@pytest.mark.parametrize("group_width", [0, 3, -4])
def test_invalid_group_width_rejected(group_width):
    with pytest.raises(ValueError):
        FormatConfig(group_width=group_width)


def test_empty_no_flags_label_rejected():
    with pytest.raises(ValueError):
        FormatConfig(no_flags_label="")


def test_search_group_names_alias_bits():
    text = UsageGroup.SZ_SEARCH_FLAGS.to_string(values.SZ_SEARCH_INCLUDE_RESOLVED | (1 << 17))
    assert text == "SZ_SEARCH_INCLUDE_RESOLVED | 0000000000020000 [0000 0000 0002 0001]"


def test_export_group_names_alias_bits():
    text = UsageGroup.SZ_EXPORT_FLAGS.to_string(values.SZ_EXPORT_INCLUDE_ALL_ENTITIES)
    assert text == (
        "SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES | SZ_EXPORT_INCLUDE_SINGLE_RECORD_ENTITIES "
        "[0000 0000 0000 0021]"
    )


def test_with_info():
    assert format_mask(values.SZ_WITH_INFO, UsageGroup.SZ_ADD_RECORD_FLAGS) == "SZ_WITH_INFO [4000 0000 0000 0000]"


def test_formatting_is_deterministic():
    mask = values.SZ_ENTITY_DEFAULT_FLAGS | values.SZ_WITH_INFO
    outputs = {format_mask(mask, UsageGroup.SZ_ENTITY_FLAGS) for _ in range(10)}
    assert len(outputs) == 1


def test_format_flag_set_uses_flag_names():
    flags = FlagSet([R.SZ_SEARCH_INCLUDE_RESOLVED, R.SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES])
    assert format_flag_set(flags) == (
        "SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES | SZ_SEARCH_INCLUDE_RESOLVED [0000 0000 0000 0001]"
    )


@pytest.mark.parametrize("empty", [None, EMPTY, []])
def test_format_empty_flag_set(empty):
    assert format_flag_set(empty) == "{ NONE } [0000 0000 0000 0000]"


def test_flag_set_format_with_group():
    flags = FlagSet([R.SZ_SEARCH_INCLUDE_RESOLVED, R.SZ_INCLUDE_FEATURE_SCORES])
    assert flags.format(UsageGroup.SZ_SEARCH_FLAGS) == (
        "SZ_SEARCH_INCLUDE_RESOLVED | SZ_INCLUDE_FEATURE_SCORES [0000 0000 0400 0001]"
    )
    assert repr(flags) == f"FlagSet({flags.format()})"


def test_format_mask_without_group_uses_catalog_names():
    assert format_mask(values.SZ_WITH_INFO) == "SZ_WITH_INFO [4000 0000 0000 0000]"
    assert format_mask(0x1, None) == "SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES [0000 0000 0000 0001]"
    assert format_mask(0) == "{ NONE } [0000 0000 0000 0000]"


def test_format_mask_without_group_keeps_unnamed_bits(two_flag_catalog):
    text = format_mask(0x5, catalog=two_flag_catalog)
    assert text == "SZ_A | 0000000000000004 [0000 0000 0000 0005]"


def test_unknown_group_rejected():
    with pytest.raises(KeyError):
        format_mask(0x1, SampleGroup.SZ_ALPHA_FLAGS)
