"""Formatting and catalog constants.

The flag catalog is a static 64-bit bitmask space. The constants below fix the
shape of that space and of the diagnostic strings rendered from it.

Lookup Convention:
    bit slots: indices 0-63, one per bit of the mask
    zero slot: index 64, reserved for the "no flags" label of a usage group
    Relationship: LOOKUP_BIN_COUNT = FLAGS_BIT_COUNT + 1
"""

from dataclasses import dataclass


FLAGS_BIT_COUNT = 64
LOOKUP_BIN_COUNT = FLAGS_BIT_COUNT + 1
ZERO_SLOT = FLAGS_BIT_COUNT

# Unsigned 64-bit range for flag values and masks
MASK_64 = (1 << FLAGS_BIT_COUNT) - 1

# Usage group names end with this suffix; the remainder is the group's
# primary prefix used to break ties between aliased flags.
PRIMARY_SUFFIX = "_FLAGS"


@dataclass(frozen=True)
class FormatConfig:
    """Settings for rendering masks and flag sets as diagnostic text.

    Attributes:
        separator: Text placed between symbol names
        no_flags_label: Label used for a zero mask or an empty flag set
        group_width: Hex digits per space-separated group in the mask suffix
    """
    separator: str = " | "
    no_flags_label: str = "{ NONE }"
    group_width: int = 4

    def __post_init__(self):
        """Verify the hex grouping evenly divides a 64-bit mask."""
        if self.group_width <= 0 or (FLAGS_BIT_COUNT // 4) % self.group_width != 0:
            raise ValueError(
                f"group_width {self.group_width} must evenly divide "
                f"{FLAGS_BIT_COUNT // 4} hex digits"
            )
        if not self.no_flags_label:
            raise ValueError("no_flags_label cannot be empty")

    @property
    def hex_digits(self) -> int:
        """Total hex digits in a fully rendered 64-bit mask."""
        return FLAGS_BIT_COUNT // 4


DEFAULT_FORMAT_CONFIG = FormatConfig()
