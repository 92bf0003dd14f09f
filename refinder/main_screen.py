#!/usr/bin/env python3
"""
refinder - Main Console Screen

This is the main entry point for refinder.
It provides a simple console menu to load a telemetry snapshot, browse its
zones, items and events, and look up display names for raw identifiers.
"""

import sys
from pathlib import Path

from . import config

# Module-level state for the loaded snapshot
_loaded_snapshot_path = None
_loaded_snapshot = None


def get_loaded_path():
    """Get the currently loaded snapshot path."""
    return _loaded_snapshot_path


def get_loaded_snapshot():
    """Get the currently loaded snapshot data."""
    return _loaded_snapshot


def set_loaded_snapshot(path, snapshot=None):
    """Set the currently loaded snapshot path and data."""
    global _loaded_snapshot_path, _loaded_snapshot
    _loaded_snapshot_path = path
    _loaded_snapshot = snapshot


def print_banner():
    """Print the application banner."""
    print()
    print("=" * 60)
    print("  refinder - Remnant 2 Adventure Viewer")
    print("=" * 60)
    print()


def print_help():
    """Print help information."""
    print()
    print("Available commands:")
    print()
    print("  load <path>    - Load a snapshot for subsequent commands")
    print()
    print("  unload         - Forget the loaded snapshot")
    print()
    print("  view [path]    - Show character details and the full zone tree")
    print("                   Uses the loaded snapshot if no path is given.")
    print()
    print("  zones          - List zone labels in tree order")
    print("  zone <label>   - Show one zone and its children")
    print()
    print("  items          - List every item with its zone")
    print("  events         - List every event with its rewards")
    print()
    print("  name <id> ...  - Show the display name for raw identifiers")
    print("                   e.g. name Quest_Miniboss_SwampBoss_C")
    print()
    print("  help, h        - Show this help message")
    print()
    print("  quit, q        - Exit the program")
    print("  done, exit")
    print()
    print("Path argument:")
    print("  - Can be a folder (will look for snapshot.json or character.json)")
    print("  - Can be a direct path to a snapshot JSON file")
    print("  - If omitted, uses REFINDER_SNAPSHOT or the current directory")
    print()


def load_snapshot(args=None):
    """Load a snapshot as context for subsequent commands."""
    from .snapshot import SnapshotError, load_snapshot_data, resolve_snapshot_path

    if not args:
        loaded = get_loaded_path()
        if loaded:
            print(f"Currently loaded: {loaded}")
        else:
            print("No snapshot is currently loaded.")
            print("Usage: load <path>")
        return

    try:
        resolved = resolve_snapshot_path(args[0])
        snapshot = load_snapshot_data(resolved)
    except (FileNotFoundError, SnapshotError) as e:
        print(f"Error: {e}")
        return

    set_loaded_snapshot(str(resolved), snapshot)
    print(f"Loaded: {resolved}")


def unload_snapshot():
    """Forget the loaded snapshot."""
    if get_loaded_path():
        print(f"Unloaded: {get_loaded_path()}")
        set_loaded_snapshot(None, None)
    else:
        print("No snapshot is currently loaded.")


def require_snapshot():
    """Return the loaded snapshot, or print a hint and return None."""
    snapshot = get_loaded_snapshot()
    if snapshot is None:
        print("No snapshot is currently loaded.")
        print("Usage: load <path>")
    return snapshot


def run_viewer(args=None):
    """Run the viewer module."""
    from .viewer import main as viewer_main

    if not args and get_loaded_path():
        args = [get_loaded_path()]

    try:
        viewer_main(args)
    except SystemExit:
        pass  # Don't exit the main loop


def run_zones():
    """List zone labels, indented by depth."""
    snapshot = require_snapshot()
    if snapshot is None:
        return
    zones = list(snapshot.iter_zones())
    if not zones:
        print("No zone data in snapshot.")
        return
    for zone, depth in zones:
        print(f"{'  ' * depth}{zone.get('label') or '?'}")


def run_zone(args=None):
    """Show a single zone subtree."""
    from .viewer import display_zones

    snapshot = require_snapshot()
    if snapshot is None:
        return
    if not args:
        print("Usage: zone <label>")
        return
    display_zones(snapshot, zone_label=' '.join(args))


def run_items():
    """List every item in the loaded snapshot."""
    from .viewer import format_item

    snapshot = require_snapshot()
    if snapshot is None:
        return
    items = snapshot.get_items()
    if not items:
        print("No items found.")
        return
    for zone_label, item in items:
        print(f"  {format_item(item):<40} [{zone_label}]")
    print()
    print(f"Total items: {len(items)}")


def run_events():
    """List every event and its rewards."""
    from .viewer import display_name, format_reward

    snapshot = require_snapshot()
    if snapshot is None:
        return
    events = snapshot.get_events()
    if not events:
        print("No events found.")
        return
    for zone_label, event in events:
        print(f"  {display_name(event.get('name') or ''):<40} [{zone_label}]")
        for reward in event.get('rewards') or []:
            print(f"      {format_reward(reward)}")
    print()
    print(f"Total events: {len(events)}")


def run_name(args=None):
    """Print display names for raw identifiers."""
    from .naming import classify, humanize

    if not args:
        print("Usage: name <identifier> [identifier ...]")
        return
    for raw in args:
        category = classify(raw)
        print(f"  {raw} -> {humanize(raw)}  ({category.value})")


def get_prompt():
    """Generate the command prompt, showing the loaded snapshot if any."""
    loaded = get_loaded_path()
    if loaded:
        p = Path(loaded)
        # Show the folder for default file names, the file name otherwise
        if p.name in ('snapshot.json', 'character.json'):
            name = p.parent.name
        else:
            name = p.stem
        return f"refinder [{name}]> "
    return "refinder> "


def handle_command(user_input: str) -> bool:
    """
    Run one console command.

    Returns False when the user asked to quit.
    """
    quit_commands = {'quit', 'q', 'done', 'exit'}
    help_commands = {'help', 'h', '?'}

    parts = user_input.split(maxsplit=1)
    command = parts[0].lower()
    args = parts[1].split() if len(parts) > 1 else None

    if command in quit_commands:
        print("Goodbye!")
        return False

    elif command in help_commands:
        print_help()

    elif command == 'load':
        load_snapshot(args)
        print()

    elif command == 'unload':
        unload_snapshot()
        print()

    elif command == 'view':
        run_viewer(args)
        print()

    elif command == 'zones':
        run_zones()
        print()

    elif command == 'zone':
        run_zone(args)
        print()

    elif command == 'items':
        run_items()
        print()

    elif command == 'events':
        run_events()
        print()

    elif command == 'name':
        run_name(args)
        print()

    else:
        print(f"Unknown command: '{command}'")
        print("Type 'help' for available commands.")
        print()

    return True


def main():
    """Main entry point - runs the interactive console."""
    config.setup_logger()
    print_banner()

    # Pick up a snapshot path passed on the command line
    if len(sys.argv) > 1:
        load_snapshot(sys.argv[1:2])
        print()

    print("Type 'help' for available commands, or 'quit' to exit.")
    print()

    while True:
        try:
            user_input = input(get_prompt()).strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye!")
            break

        if not user_input:
            continue

        if not handle_command(user_input):
            break


if __name__ == "__main__":
    main()
