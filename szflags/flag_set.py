"""FlagSet: an immutable set of flags, and the set algebra over it.

All helpers treat ``None`` as the empty set and never mutate their inputs.
"""

from collections.abc import Set as AbstractSet
from typing import Any, Iterable, Iterator, Optional, Union

from .config import FLAGS_BIT_COUNT, MASK_64
from .definitions import SzFlag

FlagsLike = Union[None, SzFlag, Iterable[Optional[SzFlag]]]


def _sort_key(flag: SzFlag):
    return (flag.value, flag.name)


class FlagSet(AbstractSet):
    """Immutable set of ``SzFlag`` objects.

    Iteration order is ascending value, then name, so formatting a FlagSet
    is reproducible across runs. ``None`` members are dropped.
    """

    __slots__ = ('_members', '_ordered')

    def __init__(self, flags: Iterable[Optional[SzFlag]] = ()):
        members = frozenset(flag for flag in flags if flag is not None)
        for flag in members:
            if not isinstance(flag, SzFlag):
                raise TypeError(f"FlagSet members must be SzFlag, got {type(flag).__name__}")
        self._members = members
        self._ordered = tuple(sorted(members, key=_sort_key))

    @classmethod
    def _from_iterable(cls, it):
        return cls(it)

    @classmethod
    def _coerce(cls, value: FlagsLike) -> "FlagSet":
        if value is None:
            return EMPTY
        if isinstance(value, FlagSet):
            return value
        if isinstance(value, SzFlag):
            return cls([value])
        return cls(value)

    @classmethod
    def from_mask(cls, flags_value: Optional[int], group: Any = None, catalog=None) -> "FlagSet":
        """Convert a raw mask back to flags.

        With a usage group, each set bit maps to that group's canonical flag,
        falling back to the first flag declared for the bit in the catalog.
        Without a group only the catalog-wide fallback is used. Bits with no
        flag at all are dropped.
        """
        if not flags_value:
            return EMPTY
        if catalog is None:
            from .catalog import get_catalog
            catalog = get_catalog()
        table = catalog.group_table(group) if group is not None else None
        mask = flags_value & MASK_64
        result = []
        for index in range(FLAGS_BIT_COUNT):
            if not (mask >> index) & 1:
                continue
            flag = table.lookup[index] if table is not None else None
            if flag is None:
                flag = catalog.global_symbol(index)
            if flag is not None:
                result.append(flag)
        return cls(result)

    def __contains__(self, flag) -> bool:
        return flag in self._members

    def __iter__(self) -> Iterator[SzFlag]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._members)

    __hash__ = AbstractSet._hash

    def to_mask(self) -> int:
        return to_mask(self)

    def format(self, group: Any = None) -> str:
        """Diagnostic text; group-scoped when a usage group is given."""
        from .formatting import format_flag_set, format_mask
        if group is None:
            return format_flag_set(self)
        return format_mask(self.to_mask(), group)

    def __repr__(self) -> str:
        return f"FlagSet({self.format()})"


EMPTY = FlagSet()


def to_mask(flags: FlagsLike) -> int:
    """Bitwise OR of every flag value; ``None`` is the empty set."""
    if flags is None:
        return 0
    if isinstance(flags, SzFlag):
        return flags.value
    value = 0
    for flag in flags:
        if flag is None:
            continue
        value |= flag.value
    return value


def intersects(first: FlagsLike, second: FlagsLike) -> bool:
    """True if the two sets share at least one flag."""
    if first is None or second is None:
        return False
    second = FlagSet._coerce(second)
    return any(flag in second for flag in FlagSet._coerce(first))


def intersect(first: FlagsLike, second: FlagsLike) -> FlagSet:
    """New FlagSet of the flags in both sets."""
    if first is None or second is None:
        return EMPTY
    return FlagSet._coerce(first) & FlagSet._coerce(second)


def union(first: FlagsLike, second: FlagsLike) -> FlagSet:
    """New FlagSet of the flags in either set."""
    return FlagSet._coerce(first) | FlagSet._coerce(second)
