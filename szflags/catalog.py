"""The process-wide flag catalog, bootstrapped once at import.

Importing this module runs the bootstrap sequence for ``FlagRegistry`` and
``UsageGroup``. Python's import lock makes the finished catalog visible to
every thread that imports it afterwards; nothing here is mutated again.
"""

import logging as log

from .bootstrap import BootstrapError, FlagCatalog, build_catalog
from .definitions import SzFlag
from .registry import FlagRegistry
from .usage_groups import GROUP_SET_LOOKUP, UsageGroup


def _check_registry_names() -> None:
    for attr_name, attr in vars(FlagRegistry).items():
        if isinstance(attr, SzFlag) and attr.name != attr_name:
            raise BootstrapError(
                f"FlagRegistry.{attr_name} is defined with mismatched name '{attr.name}'"
            )


def _bootstrap() -> FlagCatalog:
    _check_registry_names()
    catalog = build_catalog(
        FlagRegistry.get_all_flags().values(),
        UsageGroup,
        GROUP_SET_LOOKUP,
    )
    log.debug(f"Flag catalog ready with {len(catalog.flags)} flags")
    return catalog


_CATALOG = _bootstrap()


def get_catalog() -> FlagCatalog:
    """The bootstrapped catalog for ``FlagRegistry`` and ``UsageGroup``."""
    return _CATALOG
