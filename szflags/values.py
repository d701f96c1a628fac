"""Raw 64-bit values for every flag, plus the composite masks built from them.

These are plain integers so they can be combined with ``|`` and passed to
operations that take a numeric mask. The atomic values back the ``SzFlag``
definitions in ``registry.py``; the composite masks are derived constants and
are not flag identities of their own.
"""

SZ_NO_FLAGS = 0

# ==========================================================================
# Modify operations (add / delete / reevaluate / redo)
# ==========================================================================

SZ_WITH_INFO = 1 << 62

# ==========================================================================
# Export
# ==========================================================================

SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES = 1 << 0
SZ_EXPORT_INCLUDE_POSSIBLY_SAME = 1 << 1
SZ_EXPORT_INCLUDE_POSSIBLY_RELATED = 1 << 2
SZ_EXPORT_INCLUDE_NAME_ONLY = 1 << 3
SZ_EXPORT_INCLUDE_DISCLOSED = 1 << 4
SZ_EXPORT_INCLUDE_SINGLE_RECORD_ENTITIES = 1 << 5

SZ_EXPORT_INCLUDE_ALL_ENTITIES = (
    SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES
    | SZ_EXPORT_INCLUDE_SINGLE_RECORD_ENTITIES)

SZ_EXPORT_INCLUDE_ALL_HAVING_RELATIONSHIPS = (
    SZ_EXPORT_INCLUDE_POSSIBLY_SAME
    | SZ_EXPORT_INCLUDE_POSSIBLY_RELATED
    | SZ_EXPORT_INCLUDE_NAME_ONLY
    | SZ_EXPORT_INCLUDE_DISCLOSED)

# ==========================================================================
# Entity relations
# ==========================================================================

SZ_ENTITY_INCLUDE_POSSIBLY_SAME_RELATIONS = 1 << 6
SZ_ENTITY_INCLUDE_POSSIBLY_RELATED_RELATIONS = 1 << 7
SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS = 1 << 8
SZ_ENTITY_INCLUDE_DISCLOSED_RELATIONS = 1 << 9

SZ_ENTITY_INCLUDE_ALL_RELATIONS = (
    SZ_ENTITY_INCLUDE_POSSIBLY_SAME_RELATIONS
    | SZ_ENTITY_INCLUDE_POSSIBLY_RELATED_RELATIONS
    | SZ_ENTITY_INCLUDE_NAME_ONLY_RELATIONS
    | SZ_ENTITY_INCLUDE_DISCLOSED_RELATIONS)

# ==========================================================================
# Entity and record detail
# ==========================================================================

SZ_ENTITY_INCLUDE_ALL_FEATURES = 1 << 10
SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES = 1 << 11
SZ_ENTITY_INCLUDE_ENTITY_NAME = 1 << 12
SZ_ENTITY_INCLUDE_RECORD_SUMMARY = 1 << 13
SZ_ENTITY_INCLUDE_RECORD_TYPES = 1 << 28
SZ_ENTITY_INCLUDE_RECORD_DATA = 1 << 14
SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO = 1 << 15
SZ_ENTITY_INCLUDE_RECORD_DATES = 1 << 39
SZ_ENTITY_INCLUDE_RECORD_JSON_DATA = 1 << 16
SZ_ENTITY_INCLUDE_RECORD_UNMAPPED_DATA = 1 << 31
SZ_ENTITY_INCLUDE_RECORD_FEATURES = 1 << 18
SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS = 1 << 35
SZ_ENTITY_INCLUDE_RECORD_FEATURE_STATS = 1 << 36
SZ_ENTITY_INCLUDE_RELATED_ENTITY_NAME = 1 << 19
SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO = 1 << 20
SZ_ENTITY_INCLUDE_RELATED_RECORD_SUMMARY = 1 << 21
SZ_ENTITY_INCLUDE_RELATED_RECORD_TYPES = 1 << 29
SZ_ENTITY_INCLUDE_RELATED_RECORD_DATA = 1 << 22
SZ_ENTITY_INCLUDE_INTERNAL_FEATURES = 1 << 23
SZ_ENTITY_INCLUDE_FEATURE_STATS = 1 << 24
SZ_INCLUDE_MATCH_KEY_DETAILS = 1 << 34

# ==========================================================================
# Find path / find network
# ==========================================================================

SZ_FIND_PATH_STRICT_AVOID = 1 << 25
SZ_FIND_PATH_INCLUDE_MATCHING_INFO = 1 << 30
SZ_FIND_NETWORK_INCLUDE_MATCHING_INFO = 1 << 33

# ==========================================================================
# Why / how / search
# ==========================================================================

SZ_INCLUDE_FEATURE_SCORES = 1 << 26
SZ_SEARCH_INCLUDE_STATS = 1 << 27
SZ_SEARCH_INCLUDE_ALL_CANDIDATES = 1 << 32
SZ_SEARCH_INCLUDE_REQUEST = 1 << 37
SZ_SEARCH_INCLUDE_REQUEST_DETAILS = 1 << 38

# The search match-level flags share bits with the export entity flags.
SZ_SEARCH_INCLUDE_RESOLVED = SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES
SZ_SEARCH_INCLUDE_POSSIBLY_SAME = SZ_EXPORT_INCLUDE_POSSIBLY_SAME
SZ_SEARCH_INCLUDE_POSSIBLY_RELATED = SZ_EXPORT_INCLUDE_POSSIBLY_RELATED
SZ_SEARCH_INCLUDE_NAME_ONLY = SZ_EXPORT_INCLUDE_NAME_ONLY

SZ_SEARCH_INCLUDE_ALL_ENTITIES = (
    SZ_SEARCH_INCLUDE_RESOLVED
    | SZ_SEARCH_INCLUDE_POSSIBLY_SAME
    | SZ_SEARCH_INCLUDE_POSSIBLY_RELATED
    | SZ_SEARCH_INCLUDE_NAME_ONLY)

# ==========================================================================
# Recommended default masks per operation
# ==========================================================================

SZ_WITH_INFO_FLAGS = SZ_WITH_INFO

SZ_ADD_RECORD_DEFAULT_FLAGS = SZ_NO_FLAGS
SZ_DELETE_RECORD_DEFAULT_FLAGS = SZ_NO_FLAGS
SZ_REEVALUATE_RECORD_DEFAULT_FLAGS = SZ_NO_FLAGS
SZ_REEVALUATE_ENTITY_DEFAULT_FLAGS = SZ_NO_FLAGS
SZ_REDO_DEFAULT_FLAGS = SZ_NO_FLAGS
SZ_FIND_INTERESTING_ENTITIES_DEFAULT_FLAGS = SZ_NO_FLAGS

SZ_RECORD_DEFAULT_FLAGS = SZ_ENTITY_INCLUDE_RECORD_JSON_DATA

SZ_RECORD_PREVIEW_DEFAULT_FLAGS = SZ_ENTITY_INCLUDE_RECORD_FEATURE_DETAILS

SZ_ENTITY_CORE_FLAGS = (
    SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES
    | SZ_ENTITY_INCLUDE_ENTITY_NAME
    | SZ_ENTITY_INCLUDE_RECORD_SUMMARY
    | SZ_ENTITY_INCLUDE_RECORD_DATA
    | SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO)

SZ_ENTITY_DEFAULT_FLAGS = (
    SZ_ENTITY_CORE_FLAGS
    | SZ_ENTITY_INCLUDE_ALL_RELATIONS
    | SZ_ENTITY_INCLUDE_RELATED_ENTITY_NAME
    | SZ_ENTITY_INCLUDE_RELATED_RECORD_SUMMARY
    | SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO)

SZ_ENTITY_BRIEF_DEFAULT_FLAGS = (
    SZ_ENTITY_INCLUDE_RECORD_MATCHING_INFO
    | SZ_ENTITY_INCLUDE_ALL_RELATIONS
    | SZ_ENTITY_INCLUDE_RELATED_MATCHING_INFO)

SZ_EXPORT_DEFAULT_FLAGS = (
    SZ_EXPORT_INCLUDE_ALL_ENTITIES
    | SZ_ENTITY_DEFAULT_FLAGS)

SZ_FIND_PATH_DEFAULT_FLAGS = (
    SZ_FIND_PATH_INCLUDE_MATCHING_INFO
    | SZ_ENTITY_INCLUDE_ENTITY_NAME
    | SZ_ENTITY_INCLUDE_RECORD_SUMMARY)

SZ_FIND_NETWORK_DEFAULT_FLAGS = (
    SZ_FIND_NETWORK_INCLUDE_MATCHING_INFO
    | SZ_ENTITY_INCLUDE_ENTITY_NAME
    | SZ_ENTITY_INCLUDE_RECORD_SUMMARY)

SZ_WHY_ENTITIES_DEFAULT_FLAGS = SZ_INCLUDE_FEATURE_SCORES
SZ_WHY_RECORDS_DEFAULT_FLAGS = SZ_INCLUDE_FEATURE_SCORES
SZ_WHY_RECORD_IN_ENTITY_DEFAULT_FLAGS = SZ_INCLUDE_FEATURE_SCORES

SZ_WHY_SEARCH_DEFAULT_FLAGS = (
    SZ_INCLUDE_FEATURE_SCORES
    | SZ_SEARCH_INCLUDE_REQUEST_DETAILS
    | SZ_SEARCH_INCLUDE_STATS)

SZ_HOW_ENTITY_DEFAULT_FLAGS = SZ_INCLUDE_FEATURE_SCORES

SZ_VIRTUAL_ENTITY_DEFAULT_FLAGS = SZ_ENTITY_CORE_FLAGS

SZ_SEARCH_BY_ATTRIBUTES_ALL = (
    SZ_SEARCH_INCLUDE_ALL_ENTITIES
    | SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES
    | SZ_ENTITY_INCLUDE_ENTITY_NAME
    | SZ_ENTITY_INCLUDE_RECORD_SUMMARY
    | SZ_INCLUDE_FEATURE_SCORES
    | SZ_SEARCH_INCLUDE_STATS)

SZ_SEARCH_BY_ATTRIBUTES_STRONG = (
    SZ_SEARCH_INCLUDE_RESOLVED
    | SZ_SEARCH_INCLUDE_POSSIBLY_SAME
    | SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES
    | SZ_ENTITY_INCLUDE_ENTITY_NAME
    | SZ_ENTITY_INCLUDE_RECORD_SUMMARY
    | SZ_INCLUDE_FEATURE_SCORES
    | SZ_SEARCH_INCLUDE_STATS)

SZ_SEARCH_BY_ATTRIBUTES_MINIMAL_ALL = (
    SZ_SEARCH_INCLUDE_ALL_ENTITIES
    | SZ_SEARCH_INCLUDE_STATS)

SZ_SEARCH_BY_ATTRIBUTES_MINIMAL_STRONG = (
    SZ_SEARCH_INCLUDE_RESOLVED
    | SZ_SEARCH_INCLUDE_POSSIBLY_SAME
    | SZ_SEARCH_INCLUDE_STATS)

SZ_SEARCH_BY_ATTRIBUTES_DEFAULT_FLAGS = SZ_SEARCH_BY_ATTRIBUTES_ALL
