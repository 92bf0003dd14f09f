#!/usr/bin/env python3
"""
Telemetry snapshot loading for refinder.

A snapshot is one 'character' payload as emitted by the save watcher:

    {
        "character": {"id": 0, "archetype": "...", "items": [...], "type": "..."},
        "zone": {"zoneActor": {...}, "biome": "Yaesha", "bloodMoon": false}
    }

This module handles:
- Resolving a snapshot path (file, directory, or the configured default)
- Parsing the JSON into a SnapshotData wrapper with easy accessors
- Building the zone tree when the snapshot carries a flat zone list
- Filling in ownership flags from the character's inventory
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterator, Optional

from . import config


logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

# Files looked for when a directory is given
SNAPSHOT_FILENAMES = ('snapshot.json', 'character.json')

# Link destination used by the game for "nowhere"
NO_DESTINATION = 'None'

# Biomes that have a blood moon cycle
BLOOD_MOON_BIOMES = frozenset({'Yaesha'})


class SnapshotError(Exception):
    """Exception raised when a snapshot file can't be used."""
    pass


# =============================================================================
# Path Resolution
# =============================================================================

def resolve_snapshot_path(path_input: str | Path | None = None) -> Path:
    """
    Resolve a user-provided path to a snapshot file.

    Accepts:
    - None or empty: uses REFINDER_SNAPSHOT, then the current directory
    - A file path: returns it directly
    - A directory path: searches for snapshot.json or character.json inside

    Raises:
        FileNotFoundError: if the path doesn't exist or holds no snapshot
    """
    if path_input is None or (isinstance(path_input, str) and not path_input.strip()):
        path_input = config.DEFAULT_SNAPSHOT or '.'

    if isinstance(path_input, str):
        path = Path(path_input.replace('\\', '/')).resolve()
    else:
        path = Path(path_input).resolve()

    if not path.exists():
        raise FileNotFoundError(f"Path not found: {path}")

    if path.is_file():
        return path

    if path.is_dir():
        for filename in SNAPSHOT_FILENAMES:
            candidate = path / filename
            if candidate.is_file():
                return candidate

        raise FileNotFoundError(
            f"No snapshot found in directory: {path}\n"
            f"Expected one of: {', '.join(SNAPSHOT_FILENAMES)}"
        )

    raise FileNotFoundError(f"Path is neither file nor directory: {path}")


# =============================================================================
# Zone Tree
# =============================================================================

def has_destination(zone: dict) -> bool:
    """True if any of the zone's links leads somewhere."""
    for link in zone.get('zoneLinks') or []:
        if (link.get('destinationLink', '') != NO_DESTINATION
                or link.get('destinationZone', '') != NO_DESTINATION):
            return True
    return False


def build_zone_tree(zones: list) -> Optional[dict]:
    """
    Link a flat list of zone actors into a tree.

    The root is a zone without a parent (parentZoneId 0) that links somewhere;
    if several qualify, the last one wins. Every other zone is attached to its
    parent's 'children' in list order. Zones whose parent is missing are
    dropped. The input dicts are not modified.
    """
    nodes = [dict(zone, children=[]) for zone in zones]
    by_id = {node.get('id'): node for node in nodes}

    root = None
    for node in nodes:
        parent_id = node.get('parentZoneId', 0)
        if parent_id == 0:
            if has_destination(node):
                root = node
        elif parent_id in by_id:
            by_id[parent_id]['children'].append(node)
        else:
            logger.debug("Zone %s has unknown parent %s", node.get('id'), parent_id)

    return root


def walk_zones(zone: Optional[dict], depth: int = 0) -> Iterator[tuple]:
    """Yield (zone, depth) for a zone and its descendants, parents first."""
    if not zone:
        return
    stack = [(zone, depth)]
    while stack:
        current, current_depth = stack.pop()
        yield current, current_depth
        for child in reversed(current.get('children') or []):
            stack.append((child, current_depth + 1))


# Lists of dicts a zone may carry; nested rewards are checked per event
ZONE_LISTS = ('items', 'events', 'zoneLinks', 'children')


def _check_entries(owner: dict, key: str, where: str) -> list:
    entries = owner.get(key)
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise SnapshotError(f"{where}: '{key}' must be a list")
    for entry in entries:
        if not isinstance(entry, dict):
            raise SnapshotError(f"{where}: '{key}' entries must be objects")
    return entries


def validate_zone(zone: dict) -> None:
    """
    Check that a zone and its descendants have the expected shape.

    Raises:
        SnapshotError: if a zone or one of its lists holds the wrong type
    """
    stack = [zone]
    while stack:
        current = stack.pop()
        if not isinstance(current, dict):
            raise SnapshotError("Zones must be objects")
        where = f"Zone {current.get('id', '?')}"
        for key in ZONE_LISTS:
            _check_entries(current, key, where)
        for event in current.get('events') or []:
            _check_entries(event, 'rewards', where)
        stack.extend(current.get('children') or [])


def apply_ownership(zone: Optional[dict], character_items) -> None:
    """
    Fill in missing 'ownedByCharacter' flags on items and event rewards.

    An entry is owned when its identifier is in the character's inventory.
    Flags already present in the snapshot are kept.
    """
    if not zone:
        return
    owned = set(character_items or [])

    for item in zone.get('items') or []:
        if item.get('ownedByCharacter') is None:
            item['ownedByCharacter'] = item.get('name') in owned

    for event in zone.get('events') or []:
        for reward in event.get('rewards') or []:
            if reward.get('ownedByCharacter') is None:
                reward['ownedByCharacter'] = reward.get('actorBp') in owned

    for child in zone.get('children') or []:
        apply_ownership(child, owned)


# =============================================================================
# Snapshot Wrapper
# =============================================================================

class SnapshotData:
    """
    Parsed snapshot with easy access to character and zone data.

    The zone tree is built on construction (from 'zoneActor', or from a flat
    'zones' list) and ownership flags are filled in from the inventory.
    """

    def __init__(self, json_data: Any):
        if not isinstance(json_data, dict):
            raise SnapshotError("Snapshot must be a JSON object")

        character = json_data.get('character')
        zone = json_data.get('zone')
        if not isinstance(character, dict):
            raise SnapshotError("Snapshot has no 'character' object")
        if not isinstance(zone, dict):
            raise SnapshotError("Snapshot has no 'zone' object")

        items = character.get('items')
        if items is not None and not isinstance(items, list):
            raise SnapshotError("Character 'items' must be a list")
        if any(not isinstance(item, str) for item in items or []):
            raise SnapshotError("Character 'items' must be identifier strings")

        self._raw = json_data
        self._character = character
        self._zone = zone
        self._root = zone.get('zoneActor')
        if self._root is not None:
            validate_zone(self._root)
        elif isinstance(zone.get('zones'), list):
            for entry in zone['zones']:
                validate_zone(entry)
            self._root = build_zone_tree(zone['zones'])
            logger.debug("Built zone tree from %d zones", len(zone['zones']))

        apply_ownership(self._root, self.get_character_items())

    # === Character Info ===

    def get_character(self) -> dict:
        return self._character

    def get_character_id(self) -> Optional[int]:
        return self._character.get('id')

    def get_archetype(self) -> str:
        """Archetype pair as shown in-game, e.g. 'Hunter / Medic'."""
        return self._character.get('archetype') or ''

    def get_character_type(self) -> str:
        """Raw character type enum, e.g. 'ERemnantCharacterType::Standard'."""
        return self._character.get('type') or ''

    def get_character_items(self) -> list:
        return list(self._character.get('items') or [])

    # === Zone Info ===

    def get_biome(self) -> str:
        return self._zone.get('biome') or ''

    def is_blood_moon(self) -> bool:
        return bool(self._zone.get('bloodMoon'))

    def has_blood_moon_cycle(self) -> bool:
        """Only some biomes track the blood moon."""
        return self.get_biome() in BLOOD_MOON_BIOMES

    def get_root_zone(self) -> Optional[dict]:
        return self._root

    def iter_zones(self) -> Iterator[tuple]:
        """Walk the zone tree depth-first, yielding (zone, depth)."""
        return walk_zones(self._root)

    def find_zone(self, label: str) -> Optional[dict]:
        """Find a zone by label (case-insensitive)."""
        wanted = label.lower()
        for zone, _ in self.iter_zones():
            if (zone.get('label') or '').lower() == wanted:
                return zone
        return None

    # === Items & Events ===

    def get_items(self) -> list:
        """All items across the tree, each as (zone label, item)."""
        return [
            (zone.get('label') or '', item)
            for zone, _ in self.iter_zones()
            for item in zone.get('items') or []
        ]

    def get_events(self) -> list:
        """All events across the tree, each as (zone label, event)."""
        return [
            (zone.get('label') or '', event)
            for zone, _ in self.iter_zones()
            for event in zone.get('events') or []
        ]

    def get_identifiers(self) -> list:
        """Every raw identifier in the tree (items, events, rewards), in order."""
        identifiers = []
        for zone, _ in self.iter_zones():
            for item in zone.get('items') or []:
                identifiers.append(item.get('name') or '')
            for event in zone.get('events') or []:
                identifiers.append(event.get('name') or '')
                for reward in event.get('rewards') or []:
                    identifiers.append(reward.get('actorBp') or '')
        return identifiers


# =============================================================================
# Loading
# =============================================================================

def load_json(json_path: Path) -> Any:
    """Load and parse a snapshot JSON file."""
    with open(json_path, 'r', encoding='utf-8') as f:
        try:
            return json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SnapshotError(f"Invalid snapshot JSON in {json_path}: {e}") from e


def load_snapshot_data(path_input: str | Path | None = None) -> SnapshotData:
    """
    Resolve, read and parse a snapshot.

    Raises:
        FileNotFoundError: if no snapshot file can be found
        SnapshotError: if the file is not a valid snapshot
    """
    path = resolve_snapshot_path(path_input)
    snapshot = SnapshotData(load_json(path))
    logger.info("Loaded snapshot %s (%d zones)", path, sum(1 for _ in snapshot.iter_zones()))
    return snapshot
