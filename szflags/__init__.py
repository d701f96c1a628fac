"""
Capability flag registry with usage groups and diagnostic formatting.

Key features:
- One catalog of 64-bit flags, each declaring the usage groups that accept it
- Per-group member sets and canonical bit names, derived once at import
- Deterministic naming for flags that alias the same bit in different groups
- None-tolerant set algebra over flags
- Human-readable rendering of raw masks, e.g. ``A | B [0000 0000 0000 0003]``
"""

from .usage_groups import UsageGroup
from .definitions import SzFlag, CatalogNotReadyError
from .registry import FlagRegistry
from .bootstrap import BootstrapError, ConflictingSymbolError, UnresolvedPlaceholderError, build_catalog
from .catalog import get_catalog
from .flag_set import FlagSet, to_mask, intersects, intersect, union
from .formatting import format_mask, format_flag_set, hex_format
from .config import FormatConfig
from .version import __version__

__all__ = [
    'UsageGroup',
    'SzFlag',
    'CatalogNotReadyError',
    'FlagRegistry',
    'BootstrapError',
    'ConflictingSymbolError',
    'UnresolvedPlaceholderError',
    'build_catalog',
    'get_catalog',
    'FlagSet',
    'to_mask',
    'intersects',
    'intersect',
    'union',
    'format_mask',
    'format_flag_set',
    'hex_format',
    'FormatConfig',
    '__version__',
]
