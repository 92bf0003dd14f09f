#!/usr/bin/env python3
"""
Remnant 2 Snapshot Viewer

Displays a telemetry snapshot without modifying anything.
Shows archetype, character type, biome, and the zone tree with waypoints,
items, events and event rewards, all under their display names.
"""

import argparse
import logging
import sys

from . import config
from .naming import (
    CLASS_SUFFIX,
    NamingCategory,
    archetype_name,
    character_type_label,
    classify,
    humanize,
    zone_link_label,
)
from .snapshot import (
    SnapshotError,
    load_snapshot_data,
    resolve_snapshot_path,
    walk_zones,
)


logger = logging.getLogger(__name__)

OWNED_MARK = '[x]'
MISSING_MARK = '[ ]'
INDENT = '  '


def display_name(raw: str, show_raw: bool = False) -> str:
    """Humanized name, optionally followed by the raw identifier."""
    name = humanize(raw)
    if raw.endswith(CLASS_SUFFIX) and classify(raw) is NamingCategory.UNCLASSIFIED:
        logger.debug("No naming rule for %s", raw)
    if show_raw and name != raw:
        return f"{name} <{raw}>"
    return name


def owned_mark(entry: dict) -> str:
    return OWNED_MARK if entry.get('ownedByCharacter') else MISSING_MARK


def format_item(item: dict, show_raw: bool = False) -> str:
    """'[x] Iron Ore x3'"""
    name = display_name(item.get('name') or '', show_raw)
    return f"{owned_mark(item)} {name} x{item.get('quantity', 0)}"


def format_reward(reward: dict, show_raw: bool = False) -> str:
    name = display_name(reward.get('actorBp') or '', show_raw)
    return f"{owned_mark(reward)} {name} x{reward.get('quantity', 0)}"


def format_waypoint(link: dict) -> str:
    """'Label (destinationLink)'"""
    return f"{zone_link_label(link)} ({link.get('destinationLink', '')})"


def print_zone(zone: dict, depth: int = 0, show_raw: bool = False):
    """Print a single zone (without its children)."""
    pad = INDENT * depth
    print(f"{pad}{zone.get('label') or '?'}")

    links = zone.get('zoneLinks') or []
    if links:
        print(f"{pad}{INDENT}Waypoints:")
        for link in links:
            print(f"{pad}{INDENT * 2}- {format_waypoint(link)}")

    items = zone.get('items') or []
    if items:
        print(f"{pad}{INDENT}Items:")
        for item in items:
            print(f"{pad}{INDENT * 2}{format_item(item, show_raw)}")

    events = zone.get('events') or []
    if events:
        print(f"{pad}{INDENT}Events:")
        for event in events:
            print(f"{pad}{INDENT * 2}{display_name(event.get('name') or '', show_raw)}")
            for reward in event.get('rewards') or []:
                print(f"{pad}{INDENT * 3}{format_reward(reward, show_raw)}")


def format_archetype(archetype: str) -> str:
    """'Archetype_Hunter_UI_C / Archetype_Medic_UI_C' -> 'Hunter / Medic'."""
    if not archetype:
        return ''
    return ' / '.join(archetype_name(part) for part in archetype.split(' / '))


def display_character(snapshot):
    """Print the character details block."""
    print(f"{'Archetype:':<11} {format_archetype(snapshot.get_archetype()) or '-'}")
    print(f"{'Character:':<11} {character_type_label(snapshot.get_character_type()) or '-'}")
    print(f"{'Biome:':<11} {snapshot.get_biome() or '-'}")
    if snapshot.has_blood_moon_cycle():
        print(f"{'Blood Moon:':<11} {'Yes' if snapshot.is_blood_moon() else 'No'}")


def display_zones(snapshot, show_raw: bool = False, zone_label: str | None = None):
    """Print the zone tree, or the subtree under zone_label."""
    if zone_label:
        start = snapshot.find_zone(zone_label)
        if start is None:
            print(f"No zone named '{zone_label}'.")
            return
        for zone, depth in walk_zones(start):
            print_zone(zone, depth, show_raw)
        return

    if snapshot.get_root_zone() is None:
        print("No zone data in snapshot.")
        return

    for zone, depth in snapshot.iter_zones():
        print_zone(zone, depth, show_raw)


def display_snapshot(snapshot, source=None, show_raw: bool = False, zone_label: str | None = None):
    """Print everything in a snapshot."""
    print()
    print("=" * 60)
    print("REMNANT 2 ADVENTURE")
    print("=" * 60)
    if source:
        print(f"Snapshot: {source}")
    display_character(snapshot)
    print()

    print("ZONES")
    print("-" * 40)
    display_zones(snapshot, show_raw, zone_label)
    print()

    print("-" * 40)
    print(f"  Items: {len(snapshot.get_items())}")
    print(f"  Events: {len(snapshot.get_events())}")
    print("=" * 60)


def main(args=None):
    """Main entry point for the viewer."""
    config.setup_logger()

    parser = argparse.ArgumentParser(description='View a Remnant 2 telemetry snapshot')
    parser.add_argument(
        'snapshot_file',
        nargs='?',
        default=None,
        help='Path to a snapshot JSON file or folder (defaults to REFINDER_SNAPSHOT or current directory)'
    )
    parser.add_argument(
        '--raw',
        action='store_true',
        help='Show raw identifiers next to display names'
    )
    parser.add_argument(
        '--zone',
        default=None,
        help='Only show the zone with this label and its children'
    )
    parsed_args = parser.parse_args(args)

    try:
        snapshot_path = resolve_snapshot_path(parsed_args.snapshot_file)
        snapshot = load_snapshot_data(snapshot_path)
    except (FileNotFoundError, SnapshotError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    display_snapshot(snapshot, snapshot_path, parsed_args.raw, parsed_args.zone)


if __name__ == "__main__":
    main()
