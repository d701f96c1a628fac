"""Small, self-contained flag catalogs for exercising bootstrap and formatting.

The production catalog is built once at import, so tests that need to
provoke bootstrap failures build their own catalogs from the helpers here.
"""

import sys
from enum import Enum
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from szflags.bootstrap import build_catalog
from szflags.definitions import SzFlag


class SampleGroup(Enum):
    SZ_ALPHA_FLAGS = 1
    SZ_BETA_FLAGS = 2


ALPHA = frozenset({SampleGroup.SZ_ALPHA_FLAGS})
BETA = frozenset({SampleGroup.SZ_BETA_FLAGS})
BOTH = frozenset(SampleGroup)


def flag(name, value, groups=ALPHA):
    """Create a flag with real (already resolved) group membership."""
    return SzFlag(name, value, groups)


def build_sample_catalog(*flags, group_set_lookup=None, no_flags_labels=None):
    return build_catalog(flags, SampleGroup, group_set_lookup, no_flags_labels)
