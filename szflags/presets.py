"""Named FlagSet presets: the "all flags" set and recommended defaults per operation.

Presets are built once at import, after the catalog has been bootstrapped,
and are immutable FlagSets from then on.
"""

from typing import Dict

from .catalog import get_catalog
from .flag_set import EMPTY, FlagSet, union
from .registry import FlagRegistry as R

# Presets are only built from bootstrapped flags.
get_catalog()

SZ_NO_FLAGS = EMPTY

# ==========================================================================
# Every flag recognized by each operation
# ==========================================================================

SZ_ADD_RECORD_ALL_FLAGS = FlagSet([R.SZ_WITH_INFO])
SZ_DELETE_RECORD_ALL_FLAGS = FlagSet([R.SZ_WITH_INFO])
SZ_REEVALUATE_RECORD_ALL_FLAGS = FlagSet([R.SZ_WITH_INFO])
SZ_REEVALUATE_ENTITY_ALL_FLAGS = FlagSet([R.SZ_WITH_INFO])
SZ_REDO_ALL_FLAGS = FlagSet([R.SZ_WITH_INFO])

SZ_RECORD_PREVIEW_ALL_FLAGS = FlagSet([
    R.SZ_ENTITY_INCLUDE_INTERNAL_FEATURES,
    R.SZ_ENTITY_INCLUDE_RECORD_FEATURES,
    R.SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS,
    R.SZ_ENTITY_INCLUDE_RECORD_FEATURE_STATS,
    R.SZ_ENTITY_INCLUDE_RECORD_JSON_DATA,
    R.SZ_ENTITY_INCLUDE_RECORD_UNMAPPED_DATA,
])

SZ_RECORD_ALL_FLAGS = SZ_RECORD_PREVIEW_ALL_FLAGS | {R.SZ_ENTITY_INCLUDE_RECORD_DATES}

SZ_ENTITY_ALL_FLAGS = FlagSet([
    R.SZ_ENTITY_INCLUDE_POSSIBLY_SAME_RELATIONS,
    R.SZ_ENTITY_INCLUDE_POSSIBLY_RELATED_RELATIONS,
    R.SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS,
    R.SZ_ENTITY_INCLUDE_DISCLOSED_RELATIONS,
    R.SZ_ENTITY_INCLUDE_ALL_FEATURES,
    R.SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES,
    R.SZ_ENTITY_INCLUDE_ENTITY_NAME,
    R.SZ_ENTITY_INCLUDE_RECORD_SUMMARY,
    R.SZ_ENTITY_INCLUDE_RECORD_TYPES,
    R.SZ_ENTITY_INCLUDE_RECORD_DATA,
    R.SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO,
    R.SZ_ENTITY_INCLUDE_RECORD_DATES,
    R.SZ_ENTITY_INCLUDE_RECORD_JSON_DATA,
    R.SZ_ENTITY_INCLUDE_RECORD_UNMAPPED_DATA,
    R.SZ_ENTITY_INCLUDE_RECORD_FEATURES,
    R.SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS,
    R.SZ_ENTITY_INCLUDE_RECORD_FEATURE_STATS,
    R.SZ_ENTITY_INCLUDE_RELATED_ENTITY_NAME,
    R.SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO,
    R.SZ_ENTITY_INCLUDE_RELATED_RECORD_SUMMARY,
    R.SZ_ENTITY_INCLUDE_RELATED_RECORD_TYPES,
    R.SZ_ENTITY_INCLUDE_RELATED_RECORD_DATA,
    R.SZ_ENTITY_INCLUDE_INTERNAL_FEATURES,
    R.SZ_ENTITY_INCLUDE_FEATURE_STATS,
    R.SZ_INCLUDE_MATCH_KEY_DETAILS,
])

SZ_FIND_PATH_ALL_FLAGS = SZ_ENTITY_ALL_FLAGS | {
    R.SZ_FIND_PATH_STRICT_AVOID,
    R.SZ_FIND_PATH_INCLUDE_MATCHING_INFO,
}

SZ_FIND_NETWORK_ALL_FLAGS = SZ_ENTITY_ALL_FLAGS | {R.SZ_FIND_NETWORK_INCLUDE_MATCHING_INFO}

SZ_FIND_INTERESTING_ENTITIES_ALL_FLAGS = EMPTY

SZ_SEARCH_ALL_FLAGS = SZ_ENTITY_ALL_FLAGS | {
    R.SZ_INCLUDE_FEATURE_SCORES,
    R.SZ_SEARCH_INCLUDE_STATS,
    R.SZ_SEARCH_INCLUDE_RESOLVED,
    R.SZ_SEARCH_INCLUDE_POSSIBLY_SAME,
    R.SZ_SEARCH_INCLUDE_POSSIBLY_RELATED,
    R.SZ_SEARCH_INCLUDE_NAME_ONLY,
    R.SZ_SEARCH_INCLUDE_ALL_CANDIDATES,
    R.SZ_SEARCH_INCLUDE_REQUEST,
    R.SZ_SEARCH_INCLUDE_REQUEST_DETAILS,
}

SZ_EXPORT_ALL_FLAGS = SZ_ENTITY_ALL_FLAGS | {
    R.SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES,
    R.SZ_EXPORT_INCLUDE_POSSIBLY_SAME,
    R.SZ_EXPORT_INCLUDE_POSSIBLY_RELATED,
    R.SZ_EXPORT_INCLUDE_NAME_ONLY,
    R.SZ_EXPORT_INCLUDE_DISCLOSED,
    R.SZ_EXPORT_INCLUDE_SINGLE_RECORD_ENTITIES,
}

SZ_WHY_RECORDS_ALL_FLAGS = SZ_ENTITY_ALL_FLAGS | {R.SZ_INCLUDE_FEATURE_SCORES}
SZ_WHY_ENTITIES_ALL_FLAGS = SZ_ENTITY_ALL_FLAGS | {R.SZ_INCLUDE_FEATURE_SCORES}
SZ_WHY_RECORD_IN_ENTITY_ALL_FLAGS = SZ_ENTITY_ALL_FLAGS | {R.SZ_INCLUDE_FEATURE_SCORES}

SZ_WHY_SEARCH_ALL_FLAGS = SZ_ENTITY_ALL_FLAGS | {
    R.SZ_INCLUDE_FEATURE_SCORES,
    R.SZ_SEARCH_INCLUDE_STATS,
    R.SZ_SEARCH_INCLUDE_REQUEST,
    R.SZ_SEARCH_INCLUDE_REQUEST_DETAILS,
}

SZ_HOW_ALL_FLAGS = FlagSet([R.SZ_INCLUDE_MATCH_KEY_DETAILS, R.SZ_INCLUDE_FEATURE_SCORES])

SZ_VIRTUAL_ENTITY_ALL_FLAGS = FlagSet([
    R.SZ_ENTITY_INCLUDE_ALL_FEATURES,
    R.SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES,
    R.SZ_ENTITY_INCLUDE_ENTITY_NAME,
    R.SZ_ENTITY_INCLUDE_RECORD_SUMMARY,
    R.SZ_ENTITY_INCLUDE_RECORD_TYPES,
    R.SZ_ENTITY_INCLUDE_RECORD_DATA,
    R.SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO,
    R.SZ_ENTITY_INCLUDE_RECORD_DATES,
    R.SZ_ENTITY_INCLUDE_RECORD_JSON_DATA,
    R.SZ_ENTITY_INCLUDE_RECORD_UNMAPPED_DATA,
    R.SZ_ENTITY_INCLUDE_RECORD_FEATURES,
    R.SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS,
    R.SZ_ENTITY_INCLUDE_RECORD_FEATURE_STATS,
    R.SZ_ENTITY_INCLUDE_INTERNAL_FEATURES,
    R.SZ_ENTITY_INCLUDE_FEATURE_STATS,
])

# ==========================================================================
# Building blocks mirroring the composite masks in values.py
# ==========================================================================

SZ_WITH_INFO_FLAGS = FlagSet([R.SZ_WITH_INFO])

SZ_EXPORT_INCLUDE_ALL_ENTITIES = FlagSet([
    R.SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES,
    R.SZ_EXPORT_INCLUDE_SINGLE_RECORD_ENTITIES,
])

SZ_EXPORT_INCLUDE_ALL_HAVING_RELATIONSHIPS = FlagSet([
    R.SZ_EXPORT_INCLUDE_POSSIBLY_SAME,
    R.SZ_EXPORT_INCLUDE_POSSIBLY_RELATED,
    R.SZ_EXPORT_INCLUDE_NAME_ONLY,
    R.SZ_EXPORT_INCLUDE_DISCLOSED,
])

SZ_ENTITY_INCLUDE_ALL_RELATIONS = FlagSet([
    R.SZ_ENTITY_INCLUDE_POSSIBLY_SAME_RELATIONS,
    R.SZ_ENTITY_INCLUDE_POSSIBLY_RELATED_RELATIONS,
    R.SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS,
    R.SZ_ENTITY_INCLUDE_DISCLOSED_RELATIONS,
])

SZ_SEARCH_INCLUDE_ALL_ENTITIES = FlagSet([
    R.SZ_SEARCH_INCLUDE_RESOLVED,
    R.SZ_SEARCH_INCLUDE_POSSIBLY_SAME,
    R.SZ_SEARCH_INCLUDE_POSSIBLY_RELATED,
    R.SZ_SEARCH_INCLUDE_NAME_ONLY,
])

# ==========================================================================
# Recommended defaults per operation
# ==========================================================================

SZ_RECORD_DEFAULT_FLAGS = FlagSet([R.SZ_ENTITY_INCLUDE_RECORD_JSON_DATA])

SZ_ENTITY_CORE_FLAGS = FlagSet([
    R.SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES,
    R.SZ_ENTITY_INCLUDE_ENTITY_NAME,
    R.SZ_ENTITY_INCLUDE_RECORD_SUMMARY,
    R.SZ_ENTITY_INCLUDE_RECORD_DATA,
    R.SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO,
])

SZ_ENTITY_DEFAULT_FLAGS = SZ_ENTITY_CORE_FLAGS | SZ_ENTITY_INCLUDE_ALL_RELATIONS | {
    R.SZ_ENTITY_INCLUDE_RELATED_ENTITY_NAME,
    R.SZ_ENTITY_INCLUDE_RELATED_RECORD_SUMMARY,
    R.SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO,
}

SZ_ENTITY_BRIEF_DEFAULT_FLAGS = SZ_ENTITY_INCLUDE_ALL_RELATIONS | {
    R.SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO,
    R.SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO,
}

SZ_EXPORT_DEFAULT_FLAGS = union(SZ_EXPORT_INCLUDE_ALL_ENTITIES, SZ_ENTITY_DEFAULT_FLAGS)

SZ_FIND_PATH_DEFAULT_FLAGS = FlagSet([
    R.SZ_FIND_PATH_INCLUDE_MATCHING_INFO,
    R.SZ_ENTITY_INCLUDE_ENTITY_NAME,
    R.SZ_ENTITY_INCLUDE_RECORD_SUMMARY,
])

SZ_FIND_NETWORK_DEFAULT_FLAGS = FlagSet([
    R.SZ_FIND_NETWORK_INCLUDE_MATCHING_INFO,
    R.SZ_ENTITY_INCLUDE_ENTITY_NAME,
    R.SZ_ENTITY_INCLUDE_RECORD_SUMMARY,
])

SZ_WHY_ENTITIES_DEFAULT_FLAGS = FlagSet([R.SZ_INCLUDE_FEATURE_SCORES])
SZ_WHY_RECORDS_DEFAULT_FLAGS = FlagSet([R.SZ_INCLUDE_FEATURE_SCORES])
SZ_WHY_RECORD_IN_ENTITY_DEFAULT_FLAGS = FlagSet([R.SZ_INCLUDE_FEATURE_SCORES])

SZ_WHY_SEARCH_DEFAULT_FLAGS = FlagSet([
    R.SZ_INCLUDE_FEATURE_SCORES,
    R.SZ_SEARCH_INCLUDE_REQUEST_DETAILS,
    R.SZ_SEARCH_INCLUDE_STATS,
])

SZ_HOW_ENTITY_DEFAULT_FLAGS = FlagSet([R.SZ_INCLUDE_FEATURE_SCORES])

SZ_VIRTUAL_ENTITY_DEFAULT_FLAGS = SZ_ENTITY_CORE_FLAGS

SZ_SEARCH_BY_ATTRIBUTES_ALL = SZ_SEARCH_INCLUDE_ALL_ENTITIES | {
    R.SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES,
    R.SZ_ENTITY_INCLUDE_ENTITY_NAME,
    R.SZ_ENTITY_INCLUDE_RECORD_SUMMARY,
    R.SZ_INCLUDE_FEATURE_SCORES,
    R.SZ_SEARCH_INCLUDE_STATS,
}

SZ_SEARCH_BY_ATTRIBUTES_STRONG = FlagSet([
    R.SZ_SEARCH_INCLUDE_RESOLVED,
    R.SZ_SEARCH_INCLUDE_POSSIBLY_SAME,
    R.SZ_SEARCH_INCLUDE_STATS,
    R.SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES,
    R.SZ_ENTITY_INCLUDE_ENTITY_NAME,
    R.SZ_ENTITY_INCLUDE_RECORD_SUMMARY,
    R.SZ_INCLUDE_FEATURE_SCORES,
])

SZ_SEARCH_BY_ATTRIBUTES_MINIMAL_ALL = SZ_SEARCH_INCLUDE_ALL_ENTITIES | {R.SZ_SEARCH_INCLUDE_STATS}

SZ_SEARCH_BY_ATTRIBUTES_MINIMAL_STRONG = FlagSet([
    R.SZ_SEARCH_INCLUDE_RESOLVED,
    R.SZ_SEARCH_INCLUDE_POSSIBLY_SAME,
    R.SZ_SEARCH_INCLUDE_STATS,
])

SZ_SEARCH_BY_ATTRIBUTES_DEFAULT_FLAGS = SZ_SEARCH_BY_ATTRIBUTES_ALL

SZ_ADD_RECORD_DEFAULT_FLAGS = SZ_NO_FLAGS
SZ_DELETE_RECORD_DEFAULT_FLAGS = SZ_NO_FLAGS
SZ_RECORD_PREVIEW_DEFAULT_FLAGS = FlagSet([R.SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS])
SZ_REEVALUATE_RECORD_DEFAULT_FLAGS = SZ_NO_FLAGS
SZ_REEVALUATE_ENTITY_DEFAULT_FLAGS = SZ_REEVALUATE_RECORD_DEFAULT_FLAGS
SZ_FIND_INTERESTING_ENTITIES_DEFAULT_FLAGS = SZ_NO_FLAGS
SZ_REDO_DEFAULT_FLAGS = SZ_NO_FLAGS


def get_all_presets() -> Dict[str, FlagSet]:
    """Get every preset by name, in definition order."""
    return {
        name: value
        for name, value in globals().items()
        if name.startswith('SZ_') and isinstance(value, FlagSet)
    }


def get_preset(name: str) -> FlagSet:
    """Look up a preset by name."""
    presets = get_all_presets()
    key = name.strip().upper()
    if key not in presets:
        raise KeyError(f"Preset '{name}' not found.")
    return presets[key]
