"""Placeholder group memberships used while the flag catalog is authored.

A flag must name its usage groups when it is defined, but the usage groups
cannot list their flags until every flag exists. Flag definitions therefore
reference one of the placeholders below. Each placeholder stands for one
recurring "this flag applies to exactly these groups" combination and is
swapped for the real set of groups during bootstrap.

Placeholders are empty and compare by identity only, so two placeholders
never collide in the bootstrap lookup even though they look alike.
"""

from typing import Iterator


class GroupSetPlaceholder:
    """Empty stand-in for a set of usage groups, resolved during bootstrap."""

    __slots__ = ('label',)

    def __init__(self, label: str):
        self.label = label

    def __iter__(self) -> Iterator:
        return iter(())

    def __len__(self) -> int:
        return 0

    def __repr__(self) -> str:
        return f"GroupSetPlaceholder({self.label!r})"


SZ_ALL_GROUPS_SET = GroupSetPlaceholder('SZ_ALL_GROUPS_SET')
SZ_MODIFY_SET = GroupSetPlaceholder('SZ_MODIFY_SET')
SZ_ENTITY_SET = GroupSetPlaceholder('SZ_ENTITY_SET')
SZ_ENTITY_HOW_SET = GroupSetPlaceholder('SZ_ENTITY_HOW_SET')
SZ_RELATION_SET = GroupSetPlaceholder('SZ_RELATION_SET')
SZ_ENTITY_RECORD_SET = GroupSetPlaceholder('SZ_ENTITY_RECORD_SET')
SZ_PREPROCESS_SET = GroupSetPlaceholder('SZ_PREPROCESS_SET')
SZ_HOW_WHY_SEARCH_SET = GroupSetPlaceholder('SZ_HOW_WHY_SEARCH_SET')
SZ_SEARCH_SET = GroupSetPlaceholder('SZ_SEARCH_SET')
SZ_WHY_SEARCH_SET = GroupSetPlaceholder('SZ_WHY_SEARCH_SET')
SZ_EXPORT_SET = GroupSetPlaceholder('SZ_EXPORT_SET')
SZ_FIND_PATH_SET = GroupSetPlaceholder('SZ_FIND_PATH_SET')
SZ_FIND_NETWORK_SET = GroupSetPlaceholder('SZ_FIND_NETWORK_SET')

ALL_PLACEHOLDERS = (
    SZ_ALL_GROUPS_SET,
    SZ_MODIFY_SET,
    SZ_ENTITY_SET,
    SZ_ENTITY_HOW_SET,
    SZ_RELATION_SET,
    SZ_ENTITY_RECORD_SET,
    SZ_PREPROCESS_SET,
    SZ_HOW_WHY_SEARCH_SET,
    SZ_SEARCH_SET,
    SZ_WHY_SEARCH_SET,
    SZ_EXPORT_SET,
    SZ_FIND_PATH_SET,
    SZ_FIND_NETWORK_SET,
)
