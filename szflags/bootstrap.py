"""One-time resolution of flag/usage-group cross references.

Flags name their usage groups through placeholders, and usage groups derive
their members from the flags. ``build_catalog`` breaks that cycle in a fixed
order:

1. Validate the flag records (unique names, values in the 64-bit range).
2. Swap every flag's placeholder for its real set of usage groups.
3. Fold over the flags to derive each group's members and its per-bit
   canonical flag, applying the primary-prefix tie-break for aliased bits.
4. Freeze the result into a ``FlagCatalog``.

Any authoring mistake found on the way raises a ``BootstrapError`` and no
catalog is produced.
"""

import logging as log
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .config import FLAGS_BIT_COUNT, LOOKUP_BIN_COUNT, MASK_64, ZERO_SLOT
from .definitions import SzFlag
from .flag_set import FlagSet
from .placeholders import GroupSetPlaceholder
from .usage_groups import primary_prefix


class BootstrapError(Exception):
    """Raised when the flag catalog is inconsistent and cannot be initialized."""
    pass


class ConflictingSymbolError(BootstrapError):
    """Raised when two flags claim the same bit of a group and neither is the primary name."""
    pass


class UnresolvedPlaceholderError(BootstrapError):
    """Raised when a flag references a placeholder with no group mapping."""
    pass


class GroupTable:
    """Frozen per-group data derived during bootstrap.

    Attributes:
        group: The usage group this table describes
        flags: FlagSet of every flag declaring membership in the group
        lookup: Canonical flag per bit index (``FLAGS_BIT_COUNT`` slots)
        no_flags_label: Label for the zero slot, or None for the formatter default
        mask: Bitwise OR of every member flag value

    Attributes cannot be reassigned once the table is built.
    """

    __slots__ = ('group', 'flags', 'lookup', 'no_flags_label', 'mask')

    def __init__(
        self,
        group: Any,
        flags: FlagSet,
        lookup: Tuple[Optional[SzFlag], ...],
        no_flags_label: Optional[str] = None
    ):
        object.__setattr__(self, 'group', group)
        object.__setattr__(self, 'flags', flags)
        object.__setattr__(self, 'lookup', tuple(lookup))
        object.__setattr__(self, 'no_flags_label', no_flags_label)
        object.__setattr__(self, 'mask', flags.to_mask())

    def __setattr__(self, key: str, value: Any):
        raise AttributeError(f"GroupTable is read-only; cannot set '{key}'")

    def __delattr__(self, key: str):
        raise AttributeError(f"GroupTable is read-only; cannot delete '{key}'")

    def symbol_for_bit(self, bit: int) -> Optional[SzFlag]:
        """Canonical flag for a bit index; ``ZERO_SLOT`` is never a flag."""
        if not 0 <= bit < LOOKUP_BIN_COUNT:
            raise IndexError(f"Bit index {bit} outside 0..{LOOKUP_BIN_COUNT - 1}")
        if bit == ZERO_SLOT:
            return None
        return self.lookup[bit]

    def __repr__(self) -> str:
        return f"<GroupTable {self.group.name}: {len(self.flags)} flags>"


class FlagCatalog:
    """Immutable view over a bootstrapped set of flags and usage groups."""

    def __init__(
        self,
        flags: Sequence[SzFlag],
        tables: Mapping[Any, GroupTable],
        global_lookup: Tuple[Optional[SzFlag], ...]
    ):
        self._flags = tuple(flags)
        self._by_name = MappingProxyType({flag.name: flag for flag in self._flags})
        self._tables = MappingProxyType(dict(tables))
        self._global_lookup = global_lookup

    @property
    def flags(self) -> Tuple[SzFlag, ...]:
        """All flags in declaration order."""
        return self._flags

    @property
    def groups(self) -> Tuple[Any, ...]:
        return tuple(self._tables.keys())

    def get_flag(self, name: str) -> SzFlag:
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"Flag '{name}' not found.") from None

    def group_table(self, group: Any) -> GroupTable:
        try:
            return self._tables[group]
        except KeyError:
            raise KeyError(f"Usage group '{getattr(group, 'name', group)}' is not part of this catalog.") from None

    def global_symbol(self, bit: int) -> Optional[SzFlag]:
        """First declared flag for a bit index, regardless of group."""
        return self._global_lookup[bit]


def resolve_group_sets(
    flags: Iterable[SzFlag],
    group_set_lookup: Mapping[GroupSetPlaceholder, frozenset]
) -> None:
    """Swap each flag's placeholder for the real set of usage groups.

    Every placeholder is resolved before any flag is changed, so an unmapped
    placeholder leaves all flags untouched.
    """
    flags = list(flags)
    resolved: List[Tuple[SzFlag, frozenset]] = []
    for flag in flags:
        declared = flag.declared_groups
        if isinstance(declared, GroupSetPlaceholder):
            # dict lookup on placeholders is by identity
            if declared not in group_set_lookup:
                log.error(f"No usage group mapping for {declared!r} on flag {flag.name}")
                raise UnresolvedPlaceholderError(
                    f"Flag '{flag.name}' references {declared!r}, which has no usage group mapping"
                )
            groups = group_set_lookup[declared]
        else:
            groups = declared
        resolved.append((flag, frozenset(groups)))

    for flag, groups in resolved:
        flag._resolve_groups(groups)


def _validate_flags(flags: Sequence[SzFlag]) -> None:
    seen: Dict[str, SzFlag] = {}
    for flag in flags:
        if flag.name in seen:
            raise BootstrapError(f"Duplicate flag name in catalog: {flag.name}")
        seen[flag.name] = flag
        if not isinstance(flag.value, int) or flag.value < 0 or flag.value > MASK_64:
            raise BootstrapError(
                f"Flag '{flag.name}' value {flag.value!r} is not an unsigned 64-bit integer"
            )


def _record_symbol(
    lookup: List[Optional[SzFlag]],
    group: Any,
    flag: SzFlag,
    bit: int
) -> bool:
    """Record ``flag`` as the canonical symbol for ``bit`` in ``group``.

    A flag named with the group's primary prefix always takes the slot, so of
    two primary flags the later one wins. A non-primary flag never displaces
    a primary one.

    Returns True when an existing alias was replaced by the group's primary flag.
    """
    current = lookup[bit]
    if current is None or current is flag:
        lookup[bit] = flag
        return False

    prefix = primary_prefix(group.name)
    incoming_primary = flag.name.startswith(prefix)
    current_primary = current.name.startswith(prefix)

    if incoming_primary:
        if current_primary:
            log.debug(
                f"{flag.name} replaces {current.name} at bit {bit} in usage group {group.name}"
            )
        lookup[bit] = flag
        return not current_primary
    if current_primary:
        return False

    log.error(
        f"Conflicting symbols {current.name} and {flag.name} at bit {bit} "
        f"in usage group {group.name}"
    )
    raise ConflictingSymbolError(
        f"Conflicting symbol ({current.name}) at bit ({bit}) for value "
        f"(0x{flag.value:016x}) in usage group {group.name}: {flag.name}"
    )


def derive_group_tables(
    flags: Sequence[SzFlag],
    groups: Sequence[Any],
    no_flags_labels: Optional[Mapping[Any, str]] = None
) -> Tuple[Dict[Any, GroupTable], Tuple[Optional[SzFlag], ...]]:
    """Fold the resolved flags into per-group member sets and bit tables."""
    no_flags_labels = no_flags_labels or {}
    known_groups = set(groups)
    members: Dict[Any, List[SzFlag]] = {group: [] for group in groups}
    lookups: Dict[Any, List[Optional[SzFlag]]] = {
        group: [None] * FLAGS_BIT_COUNT for group in groups
    }
    global_lookup: List[Optional[SzFlag]] = [None] * FLAGS_BIT_COUNT
    replaced = 0

    for flag in flags:
        bit = flag.bit_index
        if bit is not None and global_lookup[bit] is None:
            global_lookup[bit] = flag

        flag_groups = flag.groups
        if not flag_groups:
            raise BootstrapError(f"Flag '{flag.name}' does not belong to any usage group")

        # sorted for a deterministic conflict report
        for group in sorted(flag_groups, key=lambda g: g.name):
            if group not in known_groups:
                raise BootstrapError(
                    f"Flag '{flag.name}' references unknown usage group {group!r}"
                )
            members[group].append(flag)
            if bit is not None:
                replaced += _record_symbol(lookups[group], group, flag, bit)

    tables = {
        group: GroupTable(
            group,
            FlagSet(members[group]),
            tuple(lookups[group]),
            no_flags_labels.get(group),
        )
        for group in groups
    }
    if replaced:
        log.debug(f"Primary group names replaced {replaced} aliased bit symbols")
    return tables, tuple(global_lookup)


def build_catalog(
    flags: Iterable[SzFlag],
    groups: Iterable[Any],
    group_set_lookup: Optional[Mapping[GroupSetPlaceholder, frozenset]] = None,
    no_flags_labels: Optional[Mapping[Any, str]] = None
) -> FlagCatalog:
    """Run the full bootstrap sequence and return the frozen catalog.

    Args:
        flags: Flag definitions in catalog order
        groups: Every usage group the flags may reference
        group_set_lookup: Placeholder to real group set mapping
        no_flags_labels: Optional per-group label for the zero mask

    Raises:
        BootstrapError: If the catalog is inconsistent
    """
    flags = list(flags)
    groups = list(groups)
    _validate_flags(flags)
    resolve_group_sets(flags, group_set_lookup or {})
    tables, global_lookup = derive_group_tables(flags, groups, no_flags_labels)
    log.debug(f"Bootstrapped flag catalog: {len(flags)} flags across {len(groups)} usage groups")
    return FlagCatalog(flags, tables, global_lookup)
