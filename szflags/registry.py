"""Central registry of all flag definitions."""

from typing import Dict, List

from . import values
from .definitions import SzFlag
from .placeholders import (
    SZ_ENTITY_HOW_SET,
    SZ_ENTITY_RECORD_SET,
    SZ_ENTITY_SET,
    SZ_EXPORT_SET,
    SZ_FIND_NETWORK_SET,
    SZ_FIND_PATH_SET,
    SZ_HOW_WHY_SEARCH_SET,
    SZ_MODIFY_SET,
    SZ_PREPROCESS_SET,
    SZ_RELATION_SET,
    SZ_SEARCH_SET,
    SZ_WHY_SEARCH_SET,
)
from .usage_groups import UsageGroup


class FlagRegistry:
    """Central registry of all flag definitions.

    Declaration order below is the catalog order. Group membership is given
    as a placeholder and only becomes readable once the catalog has been
    bootstrapped (see ``catalog.py``).
    """

    # Modify operations
    SZ_WITH_INFO = SzFlag(
        'SZ_WITH_INFO',
        values.SZ_WITH_INFO,
        SZ_MODIFY_SET,
        'Produce and return the INFO document describing the entities affected by the operation.'
    )

    # Export
    SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES = SzFlag(
        'SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES',
        values.SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES,
        SZ_EXPORT_SET,
        'Include "resolved" entities (entities with multiple records) in the export.'
    )

    SZ_EXPORT_INCLUDE_POSSIBLY_SAME = SzFlag(
        'SZ_EXPORT_INCLUDE_POSSIBLY_SAME',
        values.SZ_EXPORT_INCLUDE_POSSIBLY_SAME,
        SZ_EXPORT_SET,
        'Include entities having "possibly same" relationships in the export.'
    )

    SZ_EXPORT_INCLUDE_POSSIBLY_RELATED = SzFlag(
        'SZ_EXPORT_INCLUDE_POSSIBLY_RELATED',
        values.SZ_EXPORT_INCLUDE_POSSIBLY_RELATED,
        SZ_EXPORT_SET,
        'Include entities having "possibly related" relationships in the export.'
    )

    SZ_EXPORT_INCLUDE_NAME_ONLY = SzFlag(
        'SZ_EXPORT_INCLUDE_NAME_ONLY',
        values.SZ_EXPORT_INCLUDE_NAME_ONLY,
        SZ_EXPORT_SET,
        'Include entities having "name only" relationships in the export.'
    )

    SZ_EXPORT_INCLUDE_DISCLOSED = SzFlag(
        'SZ_EXPORT_INCLUDE_DISCLOSED',
        values.SZ_EXPORT_INCLUDE_DISCLOSED,
        SZ_EXPORT_SET,
        'Include entities having "disclosed" relationships in the export.'
    )

    SZ_EXPORT_INCLUDE_SINGLE_RECORD_ENTITIES = SzFlag(
        'SZ_EXPORT_INCLUDE_SINGLE_RECORD_ENTITIES',
        values.SZ_EXPORT_INCLUDE_SINGLE_RECORD_ENTITIES,
        SZ_EXPORT_SET,
        'Include single-record entities in the export.'
    )

    # Entity relations
    SZ_ENTITY_INCLUDE_POSSIBLY_SAME_RELATIONS = SzFlag(
        'SZ_ENTITY_INCLUDE_POSSIBLY_SAME_RELATIONS',
        values.SZ_ENTITY_INCLUDE_POSSIBLY_SAME_RELATIONS,
        SZ_RELATION_SET,
        'Include "possibly same" relations for entities.'
    )

    SZ_ENTITY_INCLUDE_POSSIBLY_RELATED_RELATIONS = SzFlag(
        'SZ_ENTITY_INCLUDE_POSSIBLY_RELATED_RELATIONS',
        values.SZ_ENTITY_INCLUDE_POSSIBLY_RELATED_RELATIONS,
        SZ_RELATION_SET,
        'Include "possibly related" relations for entities.'
    )

    SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS = SzFlag(
        'SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS',
        values.SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS,
        SZ_RELATION_SET,
        'Include "name only" relations for entities.'
    )

    SZ_ENTITY_INCLUDE_DISCLOSED_RELATIONS = SzFlag(
        'SZ_ENTITY_INCLUDE_DISCLOSED_RELATIONS',
        values.SZ_ENTITY_INCLUDE_DISCLOSED_RELATIONS,
        SZ_RELATION_SET,
        'Include "disclosed" relations for entities.'
    )

    # Entity detail
    SZ_ENTITY_INCLUDE_ALL_FEATURES = SzFlag(
        'SZ_ENTITY_INCLUDE_ALL_FEATURES',
        values.SZ_ENTITY_INCLUDE_ALL_FEATURES,
        SZ_ENTITY_SET,
        'Include all features for entities.'
    )

    SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES = SzFlag(
        'SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES',
        values.SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES,
        SZ_ENTITY_SET,
        'Include representative features for entities.'
    )

    SZ_ENTITY_INCLUDE_ENTITY_NAME = SzFlag(
        'SZ_ENTITY_INCLUDE_ENTITY_NAME',
        values.SZ_ENTITY_INCLUDE_ENTITY_NAME,
        SZ_ENTITY_SET,
        'Include the name of the entity.'
    )

    SZ_ENTITY_INCLUDE_RECORD_SUMMARY = SzFlag(
        'SZ_ENTITY_INCLUDE_RECORD_SUMMARY',
        values.SZ_ENTITY_INCLUDE_RECORD_SUMMARY,
        SZ_ENTITY_SET,
        'Include the record summary of the entity.'
    )

    SZ_ENTITY_INCLUDE_RECORD_TYPES = SzFlag(
        'SZ_ENTITY_INCLUDE_RECORD_TYPES',
        values.SZ_ENTITY_INCLUDE_RECORD_TYPES,
        SZ_ENTITY_SET,
        'Include the record types of the entity.'
    )

    SZ_ENTITY_INCLUDE_RECORD_DATA = SzFlag(
        'SZ_ENTITY_INCLUDE_RECORD_DATA',
        values.SZ_ENTITY_INCLUDE_RECORD_DATA,
        SZ_ENTITY_SET,
        'Include the basic record data for the entity.'
    )

    SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO = SzFlag(
        'SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO',
        values.SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO,
        SZ_ENTITY_SET,
        'Include the record matching info for the entity.'
    )

    # Record detail
    SZ_ENTITY_INCLUDE_RECORD_DATES = SzFlag(
        'SZ_ENTITY_INCLUDE_RECORD_DATES',
        values.SZ_ENTITY_INCLUDE_RECORD_DATES,
        SZ_ENTITY_RECORD_SET,
        'Include first seen and last seen timestamps for returned records.'
    )

    SZ_ENTITY_INCLUDE_RECORD_JSON_DATA = SzFlag(
        'SZ_ENTITY_INCLUDE_RECORD_JSON_DATA',
        values.SZ_ENTITY_INCLUDE_RECORD_JSON_DATA,
        SZ_PREPROCESS_SET,
        'Include the record JSON data.'
    )

    SZ_ENTITY_INCLUDE_RECORD_UNMAPPED_DATA = SzFlag(
        'SZ_ENTITY_INCLUDE_RECORD_UNMAPPED_DATA',
        values.SZ_ENTITY_INCLUDE_RECORD_UNMAPPED_DATA,
        SZ_PREPROCESS_SET,
        'Include the record unmapped data.'
    )

    SZ_ENTITY_INCLUDE_RECORD_FEATURES = SzFlag(
        'SZ_ENTITY_INCLUDE_RECORD_FEATURES',
        values.SZ_ENTITY_INCLUDE_RECORD_FEATURES,
        SZ_PREPROCESS_SET,
        'Include feature identifiers in the records segment, referencing back to the entity features.'
    )

    SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS = SzFlag(
        'SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS',
        values.SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS,
        SZ_PREPROCESS_SET,
        'Include record-level feature details. Affected by SZ_ENTITY_INCLUDE_INTERNAL_FEATURES.'
    )

    SZ_ENTITY_INCLUDE_RECORD_FEATURE_STATS = SzFlag(
        'SZ_ENTITY_INCLUDE_RECORD_FEATURE_STATS',
        values.SZ_ENTITY_INCLUDE_RECORD_FEATURE_STATS,
        SZ_PREPROCESS_SET,
        'Include record-level feature statistics. Affected by SZ_ENTITY_INCLUDE_INTERNAL_FEATURES.'
    )

    # Related entity detail
    SZ_ENTITY_INCLUDE_RELATED_ENTITY_NAME = SzFlag(
        'SZ_ENTITY_INCLUDE_RELATED_ENTITY_NAME',
        values.SZ_ENTITY_INCLUDE_RELATED_ENTITY_NAME,
        SZ_RELATION_SET,
        'Include the name of the related entities.'
    )

    SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO = SzFlag(
        'SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO',
        values.SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO,
        SZ_RELATION_SET,
        'Include the record matching info of the related entities.'
    )

    SZ_ENTITY_INCLUDE_RELATED_RECORD_SUMMARY = SzFlag(
        'SZ_ENTITY_INCLUDE_RELATED_RECORD_SUMMARY',
        values.SZ_ENTITY_INCLUDE_RELATED_RECORD_SUMMARY,
        SZ_RELATION_SET,
        'Include the record summary of the related entities.'
    )

    SZ_ENTITY_INCLUDE_RELATED_RECORD_TYPES = SzFlag(
        'SZ_ENTITY_INCLUDE_RELATED_RECORD_TYPES',
        values.SZ_ENTITY_INCLUDE_RELATED_RECORD_TYPES,
        SZ_RELATION_SET,
        'Include the record types of the related entities.'
    )

    SZ_ENTITY_INCLUDE_RELATED_RECORD_DATA = SzFlag(
        'SZ_ENTITY_INCLUDE_RELATED_RECORD_DATA',
        values.SZ_ENTITY_INCLUDE_RELATED_RECORD_DATA,
        SZ_RELATION_SET,
        'Include the basic record data of the related entities.'
    )

    # Features and match keys
    SZ_ENTITY_INCLUDE_INTERNAL_FEATURES = SzFlag(
        'SZ_ENTITY_INCLUDE_INTERNAL_FEATURES',
        values.SZ_ENTITY_INCLUDE_INTERNAL_FEATURES,
        SZ_PREPROCESS_SET,
        'Include internal features in an entity or record response.'
    )

    SZ_ENTITY_INCLUDE_FEATURE_STATS = SzFlag(
        'SZ_ENTITY_INCLUDE_FEATURE_STATS',
        values.SZ_ENTITY_INCLUDE_FEATURE_STATS,
        SZ_ENTITY_SET,
        'Include feature statistics in entity output.'
    )

    SZ_INCLUDE_MATCH_KEY_DETAILS = SzFlag(
        'SZ_INCLUDE_MATCH_KEY_DETAILS',
        values.SZ_INCLUDE_MATCH_KEY_DETAILS,
        SZ_ENTITY_HOW_SET,
        'Include match key details in addition to the standard match key.'
    )

    # Find path / find network
    SZ_FIND_PATH_STRICT_AVOID = SzFlag(
        'SZ_FIND_PATH_STRICT_AVOID',
        values.SZ_FIND_PATH_STRICT_AVOID,
        SZ_FIND_PATH_SET,
        'Strictly avoid the avoided entities, even when they are the only means to find a path.'
    )

    SZ_FIND_PATH_INCLUDE_MATCHING_INFO = SzFlag(
        'SZ_FIND_PATH_INCLUDE_MATCHING_INFO',
        values.SZ_FIND_PATH_INCLUDE_MATCHING_INFO,
        SZ_FIND_PATH_SET,
        'Include matching info on entity paths.'
    )

    SZ_FIND_NETWORK_INCLUDE_MATCHING_INFO = SzFlag(
        'SZ_FIND_NETWORK_INCLUDE_MATCHING_INFO',
        values.SZ_FIND_NETWORK_INCLUDE_MATCHING_INFO,
        SZ_FIND_NETWORK_SET,
        'Include matching info on the entity paths of the network.'
    )

    # Why / how / search
    SZ_INCLUDE_FEATURE_SCORES = SzFlag(
        'SZ_INCLUDE_FEATURE_SCORES',
        values.SZ_INCLUDE_FEATURE_SCORES,
        SZ_HOW_WHY_SEARCH_SET,
        'Include feature scores.'
    )

    SZ_SEARCH_INCLUDE_STATS = SzFlag(
        'SZ_SEARCH_INCLUDE_STATS',
        values.SZ_SEARCH_INCLUDE_STATS,
        SZ_WHY_SEARCH_SET,
        'Include statistics from search results.'
    )

    SZ_SEARCH_INCLUDE_RESOLVED = SzFlag(
        'SZ_SEARCH_INCLUDE_RESOLVED',
        values.SZ_SEARCH_INCLUDE_RESOLVED,
        SZ_SEARCH_SET,
        'Include "resolved" match level results in search results.'
    )

    SZ_SEARCH_INCLUDE_POSSIBLY_SAME = SzFlag(
        'SZ_SEARCH_INCLUDE_POSSIBLY_SAME',
        values.SZ_SEARCH_INCLUDE_POSSIBLY_SAME,
        SZ_SEARCH_SET,
        'Include "possibly same" match level results in search results.'
    )

    SZ_SEARCH_INCLUDE_POSSIBLY_RELATED = SzFlag(
        'SZ_SEARCH_INCLUDE_POSSIBLY_RELATED',
        values.SZ_SEARCH_INCLUDE_POSSIBLY_RELATED,
        SZ_SEARCH_SET,
        'Include "possibly related" match level results in search results.'
    )

    SZ_SEARCH_INCLUDE_NAME_ONLY = SzFlag(
        'SZ_SEARCH_INCLUDE_NAME_ONLY',
        values.SZ_SEARCH_INCLUDE_NAME_ONLY,
        SZ_SEARCH_SET,
        'Include "name only" match level results in search results.'
    )

    SZ_SEARCH_INCLUDE_ALL_CANDIDATES = SzFlag(
        'SZ_SEARCH_INCLUDE_ALL_CANDIDATES',
        values.SZ_SEARCH_INCLUDE_ALL_CANDIDATES,
        SZ_SEARCH_SET,
        'Also include candidates that failed to satisfy a resolution rule.'
    )

    SZ_SEARCH_INCLUDE_REQUEST = SzFlag(
        'SZ_SEARCH_INCLUDE_REQUEST',
        values.SZ_SEARCH_INCLUDE_REQUEST,
        SZ_WHY_SEARCH_SET,
        'Include basic feature information for the search criteria features.'
    )

    SZ_SEARCH_INCLUDE_REQUEST_DETAILS = SzFlag(
        'SZ_SEARCH_INCLUDE_REQUEST_DETAILS',
        values.SZ_SEARCH_INCLUDE_REQUEST_DETAILS,
        SZ_WHY_SEARCH_SET,
        'Include detailed feature information for the search criteria. No effect without SZ_SEARCH_INCLUDE_REQUEST.'
    )

    @classmethod
    def get_all_flags(cls) -> Dict[str, SzFlag]:
        """Get all flag definitions as a dictionary, in catalog order."""
        flags = {}
        for attr in vars(cls).values():
            if isinstance(attr, SzFlag):
                flags[attr.name] = attr
        return flags

    @classmethod
    def get_flag(cls, name: str) -> SzFlag:
        """Look up a flag by its symbolic name."""
        flag = vars(cls).get(name.strip().upper())
        if not isinstance(flag, SzFlag):
            raise KeyError(f"Flag '{name}' not found.")
        return flag

    @classmethod
    def get_flags_by_group(cls) -> Dict[UsageGroup, List[SzFlag]]:
        """Get flags organized by usage group."""
        from .catalog import get_catalog
        get_catalog()
        by_group = {}
        for flag in cls.get_all_flags().values():
            for group in sorted(flag.groups):
                by_group.setdefault(group, []).append(flag)
        return by_group
