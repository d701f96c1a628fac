"""Tests for FlagSet and the None-tolerant set helpers."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from szflags import presets
from szflags.flag_set import EMPTY, FlagSet, intersect, intersects, to_mask, union
from szflags.registry import FlagRegistry as R
from szflags.usage_groups import UsageGroup


@pytest.fixture
def relations():
    return FlagSet([
        R.SZ_ENTITY_INCLUDE_POSSIBLY_SAME_RELATIONS,
        R.SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS,
    ])


@pytest.fixture
def names():
    return FlagSet([
        R.SZ_ENTITY_INCLUDE_ENTITY_NAME,
        R.SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS,
    ])


def test_to_mask_treats_none_as_empty():
    assert to_mask(None) == 0
    assert to_mask(EMPTY) == 0
    assert to_mask([R.SZ_WITH_INFO, None]) == R.SZ_WITH_INFO.value


def test_to_mask_of_single_flag():
    assert to_mask(R.SZ_WITH_INFO) == 1 << 62


def test_none_members_are_dropped():
    flags = FlagSet([R.SZ_WITH_INFO, None])
    assert len(flags) == 1
    assert flags.to_mask() == R.SZ_WITH_INFO.value


def test_non_flag_members_rejected():
    with pytest.raises(TypeError):
        FlagSet([R.SZ_WITH_INFO, 42])


def test_intersects_with_none_is_false(relations):
    assert intersects(None, relations) is False
    assert intersects(relations, None) is False
    assert intersects(None, None) is False


def test_intersects(relations, names):
    assert intersects(relations, names)
    assert not intersects(relations, FlagSet([R.SZ_WITH_INFO]))
    assert not intersects(relations, EMPTY)


def test_intersect_with_none_is_empty(relations):
    assert intersect(None, relations) == EMPTY
    assert intersect(relations, None) == EMPTY


def test_intersect(relations, names):
    assert intersect(relations, names) == FlagSet([R.SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS])


def test_union_with_none(relations):
    assert union(None, None) == EMPTY
    assert union(None, relations) == relations
    assert union(relations, None) == relations


def test_set_operations_are_idempotent(relations):
    assert union(relations, relations) == relations
    assert intersect(relations, relations) == relations


def test_set_operations_do_not_mutate_inputs(relations, names):
    before_relations = set(relations)
    before_names = set(names)

    combined = union(relations, names)
    common = intersect(relations, names)

    assert set(relations) == before_relations
    assert set(names) == before_names
    assert combined is not relations
    assert len(combined) == 3
    assert len(common) == 1


def test_helpers_accept_single_flags_and_plain_iterables(relations):
    assert union(R.SZ_WITH_INFO, None) == FlagSet([R.SZ_WITH_INFO])
    assert intersects([R.SZ_ENTITY_INCLUDE_POSSIBLY_SAME_RELATIONS], relations)


def test_or_operator_builds_flag_sets():
    combined = R.SZ_WITH_INFO | R.SZ_ENTITY_INCLUDE_ENTITY_NAME
    assert isinstance(combined, FlagSet)
    assert combined.to_mask() == (1 << 62) | (1 << 12)
    assert isinstance(combined | R.SZ_INCLUDE_FEATURE_SCORES, FlagSet)
    assert len(combined | R.SZ_INCLUDE_FEATURE_SCORES) == 3


def test_set_algebra_returns_flag_sets(relations, names):
    assert isinstance(relations | names, FlagSet)
    assert isinstance(relations & names, FlagSet)
    assert isinstance(relations - names, FlagSet)


def test_flag_sets_are_hashable_and_compare_to_frozensets(relations):
    copy = FlagSet(list(relations))
    assert hash(copy) == hash(relations)
    assert copy == relations
    assert relations == frozenset(relations)
    assert len({copy, relations}) == 1


def test_flag_sets_are_immutable(relations):
    assert not hasattr(relations, 'add')
    with pytest.raises(AttributeError):
        relations.extra = 1


def test_iteration_is_ordered_by_value_then_name():
    flags = FlagSet([
        R.SZ_WITH_INFO,
        R.SZ_SEARCH_INCLUDE_RESOLVED,
        R.SZ_ENTITY_INCLUDE_ENTITY_NAME,
        R.SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES,
    ])
    assert [flag.name for flag in flags] == [
        'SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES',
        'SZ_SEARCH_INCLUDE_RESOLVED',
        'SZ_ENTITY_INCLUDE_ENTITY_NAME',
        'SZ_WITH_INFO',
    ]


def test_from_mask_uses_group_canonical_names():
    assert FlagSet.from_mask(0x1, UsageGroup.SZ_SEARCH_FLAGS) == FlagSet([R.SZ_SEARCH_INCLUDE_RESOLVED])
    assert FlagSet.from_mask(0x1, UsageGroup.SZ_EXPORT_FLAGS) == FlagSet([R.SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES])


def test_from_mask_without_group_uses_first_declared_flag():
    assert FlagSet.from_mask(0x1) == FlagSet([R.SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES])


def test_from_mask_falls_back_outside_the_group():
    flags = FlagSet.from_mask(R.SZ_WITH_INFO.value, UsageGroup.SZ_SEARCH_FLAGS)
    assert flags == FlagSet([R.SZ_WITH_INFO])


def test_from_mask_drops_unregistered_bits():
    assert FlagSet.from_mask(1 << 17) == EMPTY
    assert FlagSet.from_mask((1 << 17) | (1 << 62)) == FlagSet([R.SZ_WITH_INFO])


@pytest.mark.parametrize("empty_value", [None, 0])
def test_from_mask_of_nothing(empty_value):
    assert FlagSet.from_mask(empty_value, UsageGroup.SZ_ENTITY_FLAGS) is EMPTY


def test_from_mask_round_trips_a_preset():
    preset = presets.SZ_SEARCH_BY_ATTRIBUTES_ALL
    assert FlagSet.from_mask(preset.to_mask(), UsageGroup.SZ_SEARCH_FLAGS) == preset
    assert UsageGroup.SZ_SEARCH_FLAGS.to_flag_set(preset.to_mask()) == preset
