"""Diagnostic text for raw masks and flag sets.

Group-scoped output lists the canonical flag name for each set bit, in
ascending bit order, falling back to the bit's hex value when the group has no
name for it::

    SZ_SEARCH_INCLUDE_RESOLVED | 0000000000020000 [0000 0000 0002 0001]

The full mask is always appended in brackets as four space-separated groups of
four hex digits.
"""

from typing import Any, Optional

from .config import DEFAULT_FORMAT_CONFIG, FLAGS_BIT_COUNT, MASK_64, FormatConfig
from .flag_set import FlagSet, FlagsLike


def normalize_mask(flags_value: Optional[int]) -> int:
    """Treat None as 0 and negative values as unsigned 64-bit."""
    if flags_value is None:
        return 0
    return flags_value & MASK_64


def hex_format(flags_value: Optional[int], config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> str:
    """Render a mask as fixed-width, space-grouped hex: ``0000 0000 0000 0003``."""
    digits = f"{normalize_mask(flags_value):0{config.hex_digits}x}"
    width = config.group_width
    return " ".join(digits[index:index + width] for index in range(0, len(digits), width))


def bit_hex(bit_value: int) -> str:
    """Render one unnamed bit as 16 unspaced hex digits."""
    return f"{bit_value:016x}"


def format_mask(
    flags_value: Optional[int],
    group: Any = None,
    config: FormatConfig = DEFAULT_FORMAT_CONFIG,
    catalog=None
) -> str:
    """Describe a raw mask using the canonical names of a usage group.

    Without a group each set bit is named by the first flag declared for it
    in the catalog. Bits with no name are shown as hex either way.
    """
    if catalog is None:
        from .catalog import get_catalog
        catalog = get_catalog()
    table = catalog.group_table(group) if group is not None else None
    mask = normalize_mask(flags_value)

    if mask == 0:
        label = table.no_flags_label if table is not None else None
        text = label or config.no_flags_label
    else:
        names = []
        for index in range(FLAGS_BIT_COUNT):
            bit_value = 1 << index
            if not mask & bit_value:
                continue
            if table is not None:
                flag = table.symbol_for_bit(index)
            else:
                flag = catalog.global_symbol(index)
            names.append(flag.name if flag is not None else bit_hex(bit_value))
        text = config.separator.join(names)

    return f"{text} [{hex_format(mask, config)}]"


def format_flag_set(flags: FlagsLike, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> str:
    """Describe a set of flags by their own names, with no group context."""
    flag_set = FlagSet._coerce(flags)
    if not flag_set:
        text = config.no_flags_label
    else:
        text = config.separator.join(flag.name for flag in flag_set)
    return f"{text} [{hex_format(flag_set.to_mask(), config)}]"
