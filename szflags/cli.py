#!/usr/bin/env python3
"""Command-line interface for inspecting flags, usage groups and masks."""

import argparse
import logging
import sys
import traceback

from .catalog import get_catalog
from .formatting import format_mask, hex_format
from .presets import get_preset
from .registry import FlagRegistry
from .usage_groups import UsageGroup
from .version import __version_display__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="szflags",
        description="Inspect capability flags, usage groups and option masks.")
    parser.add_argument(
        "--version",
        action="version",
        version=f"szflags {__version_display__}")
    parser.add_argument( '-log',
        '--loglevel',
        default='warning',
        help='Provide logging level. Example --loglevel debug, default=warning' )

    subparsers = parser.add_subparsers(dest="command", required=True)

    describe = subparsers.add_parser(
        "describe",
        help="Render a raw mask as symbolic flag names.")
    describe.add_argument(
        "mask",
        help="Mask value, decimal or 0x-prefixed hex.")
    describe.add_argument(
        "--group",
        help="Usage group to name bits with, e.g. SZ_SEARCH_FLAGS or search. "
             "Without a group the catalog-wide names are used.")

    subparsers.add_parser(
        "groups",
        help="List usage groups and how many flags each recognizes.")

    flags = subparsers.add_parser(
        "flags",
        help="List flags with their values and usage groups.")
    flags.add_argument(
        "--group",
        help="Only list flags recognized by this usage group.")

    preset = subparsers.add_parser(
        "preset",
        help="Show the flags in a named preset.")
    preset.add_argument(
        "name",
        help="Preset name, e.g. SZ_ENTITY_DEFAULT_FLAGS.")

    return parser


def parse_mask(text: str) -> int:
    try:
        value = int(text.strip().replace('_', ''), 0)
    except ValueError:
        raise ValueError(f"Invalid mask value: {text!r}") from None
    if value < 0 or value >= 1 << 64:
        raise ValueError(f"Mask value out of unsigned 64-bit range: {text!r}")
    return value


def parse_group(text: str) -> UsageGroup:
    normalized = text.strip().upper().replace('-', '_')
    candidates = (normalized, f"SZ_{normalized}", f"SZ_{normalized}_FLAGS", f"{normalized}_FLAGS")
    for candidate in candidates:
        if candidate in UsageGroup.__members__:
            return UsageGroup[candidate]
    valid = ", ".join(UsageGroup.__members__)
    raise ValueError(f"Unknown usage group {text!r}. Expected one of: {valid}")


def describe(mask: int, group: UsageGroup = None) -> str:
    return format_mask(mask, group)


def list_groups() -> list:
    catalog = get_catalog()
    lines = []
    for group in UsageGroup:
        table = catalog.group_table(group)
        lines.append(
            f"{group.name:<36} {len(table.flags):>3} flags  [{hex_format(table.mask)}]  "
            f"{group.display_name}")
    return lines


def list_flags(group: UsageGroup = None) -> list:
    flags = FlagRegistry.get_all_flags().values()
    if group is not None:
        flags = [flag for flag in flags if group in flag.groups]
    lines = []
    for flag in flags:
        group_names = ", ".join(g.name for g in sorted(flag.groups))
        lines.append(f"{flag.name:<46} [{hex_format(flag.value)}]  {group_names}")
    return lines


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(level=args.loglevel.upper())

        if args.command == "describe":
            group = parse_group(args.group) if args.group else None
            lines = [describe(parse_mask(args.mask), group)]
        elif args.command == "groups":
            lines = list_groups()
        elif args.command == "flags":
            group = parse_group(args.group) if args.group else None
            lines = list_flags(group)
        else:
            try:
                lines = [get_preset(args.name).format()]
            except KeyError as exc:
                raise ValueError(exc.args[0]) from exc
    except ValueError as exc:
        parser.error(str(exc))
    except Exception as exc:  # pragma: no cover
        print(f"Error: {exc}", file=sys.stderr)
        traceback.print_exc()
        return 1
    else:
        for line in lines:
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
