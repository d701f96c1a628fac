"""Tests for usage groups, group sets and placeholders."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from szflags import placeholders, presets
from szflags.flag_set import EMPTY
from szflags.registry import FlagRegistry as R
from szflags.usage_groups import (
    GROUP_SET_LOOKUP,
    SZ_RECORD_PREVIEW_SET,
    SZ_WHY_SEARCH_SET,
    UsageGroup,
    primary_prefix,
)


def test_usage_group_count_and_order():
    assert len(UsageGroup) == 19
    assert list(UsageGroup)[0] is UsageGroup.SZ_ADD_RECORD_FLAGS
    assert list(UsageGroup)[-1] is UsageGroup.SZ_VIRTUAL_ENTITY_FLAGS


@pytest.mark.parametrize("group", list(UsageGroup), ids=lambda g: g.name)
def test_display_names(group):
    assert group.display_name != "Unknown"


@pytest.mark.parametrize("name,prefix", [
    ("SZ_SEARCH_FLAGS", "SZ_SEARCH"),
    ("SZ_WHY_RECORD_IN_ENTITY_FLAGS", "SZ_WHY_RECORD_IN_ENTITY"),
    ("SZ_CUSTOM", "SZ_CUSTOM"),
])
def test_primary_prefix(name, prefix):
    assert primary_prefix(name) == prefix


def test_group_primary_prefix_property():
    assert UsageGroup.SZ_EXPORT_FLAGS.primary_prefix == "SZ_EXPORT"


@pytest.mark.parametrize("group", list(UsageGroup), ids=lambda g: g.name)
def test_group_flags_match_all_flags_preset(group):
    """Each group recognizes exactly the flags of its *_ALL_FLAGS preset."""
    preset_name = group.name[:-len("_FLAGS")] + "_ALL_FLAGS"
    assert group.flags == getattr(presets, preset_name)


def test_find_interesting_entities_has_no_flags():
    assert UsageGroup.SZ_FIND_INTERESTING_ENTITIES_FLAGS.flags == EMPTY
    assert UsageGroup.SZ_FIND_INTERESTING_ENTITIES_FLAGS.to_string(0) == "{ NONE } [0000 0000 0000 0000]"


def test_modify_groups_accept_only_with_info():
    for group in (
        UsageGroup.SZ_ADD_RECORD_FLAGS,
        UsageGroup.SZ_DELETE_RECORD_FLAGS,
        UsageGroup.SZ_REEVALUATE_RECORD_FLAGS,
        UsageGroup.SZ_REEVALUATE_ENTITY_FLAGS,
        UsageGroup.SZ_REDO_FLAGS,
    ):
        assert list(group.flags) == [R.SZ_WITH_INFO]


def test_every_placeholder_is_mapped():
    for placeholder in placeholders.ALL_PLACEHOLDERS:
        assert placeholder in GROUP_SET_LOOKUP, placeholder
    assert len(GROUP_SET_LOOKUP) == len(placeholders.ALL_PLACEHOLDERS)


def test_placeholders_are_empty_and_distinct():
    assert len(set(map(id, placeholders.ALL_PLACEHOLDERS))) == len(placeholders.ALL_PLACEHOLDERS)
    for placeholder in placeholders.ALL_PLACEHOLDERS:
        assert len(placeholder) == 0
        assert list(placeholder) == []


def test_group_set_compositions():
    assert GROUP_SET_LOOKUP[placeholders.SZ_ALL_GROUPS_SET] == frozenset(UsageGroup)
    assert GROUP_SET_LOOKUP[placeholders.SZ_PREPROCESS_SET] is SZ_RECORD_PREVIEW_SET
    assert SZ_WHY_SEARCH_SET == {UsageGroup.SZ_SEARCH_FLAGS, UsageGroup.SZ_WHY_SEARCH_FLAGS}
    assert UsageGroup.SZ_HOW_FLAGS in GROUP_SET_LOOKUP[placeholders.SZ_ENTITY_HOW_SET]
    assert UsageGroup.SZ_VIRTUAL_ENTITY_FLAGS not in GROUP_SET_LOOKUP[placeholders.SZ_RELATION_SET]
    assert UsageGroup.SZ_VIRTUAL_ENTITY_FLAGS in GROUP_SET_LOOKUP[placeholders.SZ_ENTITY_SET]


def test_group_set_lookup_is_read_only():
    with pytest.raises(TypeError):
        GROUP_SET_LOOKUP[placeholders.SZ_SEARCH_SET] = frozenset()
