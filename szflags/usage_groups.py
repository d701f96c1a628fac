"""Usage groups: the families of operations that accept flags."""

from enum import IntEnum
from types import MappingProxyType
from typing import FrozenSet, Optional

from . import placeholders
from .config import PRIMARY_SUFFIX


class UsageGroup(IntEnum):
    """Categories of operations, each recognizing a subset of the flags."""
    SZ_ADD_RECORD_FLAGS = 1
    SZ_DELETE_RECORD_FLAGS = 2
    SZ_REEVALUATE_RECORD_FLAGS = 3
    SZ_REEVALUATE_ENTITY_FLAGS = 4
    SZ_REDO_FLAGS = 5
    SZ_RECORD_FLAGS = 6
    SZ_RECORD_PREVIEW_FLAGS = 7
    SZ_ENTITY_FLAGS = 8
    SZ_FIND_PATH_FLAGS = 9
    SZ_FIND_NETWORK_FLAGS = 10
    SZ_FIND_INTERESTING_ENTITIES_FLAGS = 11
    SZ_SEARCH_FLAGS = 12
    SZ_EXPORT_FLAGS = 13
    SZ_WHY_RECORD_IN_ENTITY_FLAGS = 14
    SZ_WHY_RECORDS_FLAGS = 15
    SZ_WHY_ENTITIES_FLAGS = 16
    SZ_WHY_SEARCH_FLAGS = 17
    SZ_HOW_FLAGS = 18
    SZ_VIRTUAL_ENTITY_FLAGS = 19

    @property
    def display_name(self) -> str:
        """Get user-friendly display name for the group."""
        names = {
            UsageGroup.SZ_ADD_RECORD_FLAGS: "Add Record",
            UsageGroup.SZ_DELETE_RECORD_FLAGS: "Delete Record",
            UsageGroup.SZ_REEVALUATE_RECORD_FLAGS: "Reevaluate Record",
            UsageGroup.SZ_REEVALUATE_ENTITY_FLAGS: "Reevaluate Entity",
            UsageGroup.SZ_REDO_FLAGS: "Process Redo Record",
            UsageGroup.SZ_RECORD_FLAGS: "Get Record",
            UsageGroup.SZ_RECORD_PREVIEW_FLAGS: "Get Record Preview",
            UsageGroup.SZ_ENTITY_FLAGS: "Get Entity",
            UsageGroup.SZ_FIND_PATH_FLAGS: "Find Path",
            UsageGroup.SZ_FIND_NETWORK_FLAGS: "Find Network",
            UsageGroup.SZ_FIND_INTERESTING_ENTITIES_FLAGS: "Find Interesting Entities",
            UsageGroup.SZ_SEARCH_FLAGS: "Search By Attributes",
            UsageGroup.SZ_EXPORT_FLAGS: "Export",
            UsageGroup.SZ_WHY_RECORD_IN_ENTITY_FLAGS: "Why Record In Entity",
            UsageGroup.SZ_WHY_RECORDS_FLAGS: "Why Records",
            UsageGroup.SZ_WHY_ENTITIES_FLAGS: "Why Entities",
            UsageGroup.SZ_WHY_SEARCH_FLAGS: "Why Search",
            UsageGroup.SZ_HOW_FLAGS: "How Entity",
            UsageGroup.SZ_VIRTUAL_ENTITY_FLAGS: "Get Virtual Entity",
        }
        return names.get(self, "Unknown")

    @property
    def primary_prefix(self) -> str:
        """Name prefix marking a flag as this group's own name for a bit."""
        return primary_prefix(self.name)

    @property
    def flags(self):
        """The FlagSet of flags recognized by operations in this group."""
        from .catalog import get_catalog
        return get_catalog().group_table(self).flags

    def to_string(self, flags_value: Optional[int]) -> str:
        """Describe a raw mask using this group's canonical flag names."""
        from .formatting import format_mask
        return format_mask(flags_value, self)

    def to_flag_set(self, flags_value: Optional[int]):
        """Convert a raw mask to the flags this group associates with its bits."""
        from .flag_set import FlagSet
        return FlagSet.from_mask(flags_value, self)


def primary_prefix(group_name: str) -> str:
    """Strip the usage group suffix from a group name."""
    if group_name.endswith(PRIMARY_SUFFIX):
        return group_name[:-len(PRIMARY_SUFFIX)]
    return group_name


def _group_set(*groups: UsageGroup) -> FrozenSet[UsageGroup]:
    return frozenset(groups)


SZ_ALL_GROUPS_SET = frozenset(UsageGroup)

SZ_MODIFY_SET = _group_set(
    UsageGroup.SZ_ADD_RECORD_FLAGS,
    UsageGroup.SZ_DELETE_RECORD_FLAGS,
    UsageGroup.SZ_REEVALUATE_RECORD_FLAGS,
    UsageGroup.SZ_REEVALUATE_ENTITY_FLAGS,
    UsageGroup.SZ_REDO_FLAGS)

SZ_RELATION_SET = _group_set(
    UsageGroup.SZ_ENTITY_FLAGS,
    UsageGroup.SZ_SEARCH_FLAGS,
    UsageGroup.SZ_EXPORT_FLAGS,
    UsageGroup.SZ_FIND_PATH_FLAGS,
    UsageGroup.SZ_FIND_NETWORK_FLAGS,
    UsageGroup.SZ_WHY_RECORDS_FLAGS,
    UsageGroup.SZ_WHY_ENTITIES_FLAGS,
    UsageGroup.SZ_WHY_RECORD_IN_ENTITY_FLAGS,
    UsageGroup.SZ_WHY_SEARCH_FLAGS)

SZ_ENTITY_SET = SZ_RELATION_SET | {UsageGroup.SZ_VIRTUAL_ENTITY_FLAGS}

SZ_ENTITY_HOW_SET = SZ_RELATION_SET | {UsageGroup.SZ_HOW_FLAGS}

SZ_ENTITY_RECORD_SET = SZ_ENTITY_SET | {UsageGroup.SZ_RECORD_FLAGS}

SZ_RECORD_PREVIEW_SET = SZ_ENTITY_RECORD_SET | {UsageGroup.SZ_RECORD_PREVIEW_FLAGS}

SZ_HOW_WHY_SEARCH_SET = _group_set(
    UsageGroup.SZ_WHY_RECORDS_FLAGS,
    UsageGroup.SZ_WHY_ENTITIES_FLAGS,
    UsageGroup.SZ_WHY_RECORD_IN_ENTITY_FLAGS,
    UsageGroup.SZ_SEARCH_FLAGS,
    UsageGroup.SZ_WHY_SEARCH_FLAGS,
    UsageGroup.SZ_HOW_FLAGS)

SZ_SEARCH_SET = _group_set(UsageGroup.SZ_SEARCH_FLAGS)

SZ_WHY_SEARCH_SET = _group_set(UsageGroup.SZ_SEARCH_FLAGS, UsageGroup.SZ_WHY_SEARCH_FLAGS)

SZ_EXPORT_SET = _group_set(UsageGroup.SZ_EXPORT_FLAGS)

SZ_FIND_PATH_SET = _group_set(UsageGroup.SZ_FIND_PATH_FLAGS)

SZ_FIND_NETWORK_SET = _group_set(UsageGroup.SZ_FIND_NETWORK_FLAGS)


# Placeholders hash and compare by identity, so this is an identity-keyed map.
GROUP_SET_LOOKUP = MappingProxyType({
    placeholders.SZ_ALL_GROUPS_SET: SZ_ALL_GROUPS_SET,
    placeholders.SZ_MODIFY_SET: SZ_MODIFY_SET,
    placeholders.SZ_ENTITY_SET: SZ_ENTITY_SET,
    placeholders.SZ_ENTITY_HOW_SET: SZ_ENTITY_HOW_SET,
    placeholders.SZ_RELATION_SET: SZ_RELATION_SET,
    placeholders.SZ_ENTITY_RECORD_SET: SZ_ENTITY_RECORD_SET,
    placeholders.SZ_PREPROCESS_SET: SZ_RECORD_PREVIEW_SET,
    placeholders.SZ_HOW_WHY_SEARCH_SET: SZ_HOW_WHY_SEARCH_SET,
    placeholders.SZ_SEARCH_SET: SZ_SEARCH_SET,
    placeholders.SZ_WHY_SEARCH_SET: SZ_WHY_SEARCH_SET,
    placeholders.SZ_EXPORT_SET: SZ_EXPORT_SET,
    placeholders.SZ_FIND_PATH_SET: SZ_FIND_PATH_SET,
    placeholders.SZ_FIND_NETWORK_SET: SZ_FIND_NETWORK_SET,
})
