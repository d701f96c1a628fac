"""Flag definition class for the capability flag catalog."""

from typing import Any, FrozenSet, Optional, Union

from .config import FLAGS_BIT_COUNT, MASK_64
from .placeholders import GroupSetPlaceholder


class CatalogNotReadyError(RuntimeError):
    """Raised when a flag's usage groups are read before bootstrap completes."""
    pass


class SzFlag:
    """A named capability switch with a 64-bit value and its usage groups.

    The groups passed at construction are normally a placeholder from
    ``placeholders.py``. Bootstrap swaps it for the real set of usage groups;
    until then ``groups`` is unavailable.
    """

    __slots__ = ('name', '_value', '_groups', 'help_text')

    def __init__(
        self,
        name: str,
        value: int,
        groups: Union[GroupSetPlaceholder, FrozenSet[Any]],
        help_text: str = ""
    ):
        self.name = name
        self._value = value
        self._groups = groups
        self.help_text = help_text

    @property
    def value(self) -> int:
        """The 64-bit value of this flag."""
        return self._value

    def to_mask(self) -> int:
        return self._value

    @property
    def groups(self) -> FrozenSet[Any]:
        """The usage groups this flag belongs to."""
        if isinstance(self._groups, GroupSetPlaceholder):
            raise CatalogNotReadyError(
                f"Usage groups for flag '{self.name}' are not resolved yet; "
                f"the flag catalog has not been bootstrapped"
            )
        return self._groups

    @property
    def declared_groups(self) -> Union[GroupSetPlaceholder, FrozenSet[Any]]:
        """The group reference as currently held: a placeholder before bootstrap."""
        return self._groups

    @property
    def is_resolved(self) -> bool:
        return not isinstance(self._groups, GroupSetPlaceholder)

    def _resolve_groups(self, groups: FrozenSet[Any]) -> None:
        # Only bootstrap calls this, exactly once per flag.
        self._groups = frozenset(groups)

    @property
    def bit_index(self) -> Optional[int]:
        """Index of the single set bit, or None for zero and multi-bit values."""
        return single_bit_index(self._value)

    @property
    def is_atomic(self) -> bool:
        return self.bit_index is not None

    def __or__(self, other):
        from .flag_set import FlagSet
        return FlagSet([self]) | FlagSet._coerce(other)

    __ror__ = __or__

    def __repr__(self) -> str:
        return f"<SzFlag {self.name}: 0x{self._value:016x}>"

    def __str__(self) -> str:
        return self.name


def single_bit_index(value: int) -> Optional[int]:
    """Return the bit index if exactly one bit in the 64-bit range is set."""
    if value <= 0 or value > MASK_64:
        return None
    if value & (value - 1):
        return None
    index = value.bit_length() - 1
    return index if index < FLAGS_BIT_COUNT else None
