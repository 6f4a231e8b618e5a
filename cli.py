"""Lightweight CLI for Moonshot data and preferences.

Usage:
    moonshot validate             # check bundled data decodes and every crew reference resolves
    moonshot missions             # print the mission table
    moonshot missions --astronauts  # print flights per astronaut
    moonshot view-mode            # show the saved collection layout
    moonshot view-mode list       # save the list layout
    moonshot log-level DEBUG      # set log level in settings.toml
"""

import argparse
import logging
import re
import sys

from settings_service import SETTINGS_PATH, SettingsService, _load_settings

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VIEW_MODES = ("grid", "list")


def _load(args: argparse.Namespace):
    """Load the catalog from the configured bundle; returns a StartupResult."""
    if not args.verbose:
        # Keep library and app INFO logs out of CLI output
        logging.disable(logging.INFO)

    from repositories.mission_repo import MissionRepository
    from services.startup_service import load_catalog

    return load_catalog(MissionRepository.create_default())


def cmd_validate(args: argparse.Namespace) -> int:
    """Decode the bundled documents and check every crew reference."""
    from services.crew_service import find_integrity_faults

    result = _load(args)
    if not result.is_ok:
        print(f"startup data fault: {result.message}")
        return 1

    catalog = result.catalog
    faults = find_integrity_faults(catalog.missions, catalog.astronauts)
    for fault in faults:
        print(f"integrity fault: {fault}")
    if faults:
        print(f"\nfailed: {len(faults)} missing crew reference(s)")
        return 1

    print(f"ok ({len(catalog.missions)} missions, {len(catalog.astronauts)} astronauts)")
    return 0


def cmd_missions(args: argparse.Namespace) -> int:
    """Print the mission table, or flights per astronaut."""
    from services.catalog_service import astronaut_flights, missions_frame

    result = _load(args)
    if not result.is_ok:
        print(f"startup data fault: {result.message}")
        return 1

    df = astronaut_flights(result.catalog) if args.astronauts else missions_frame(result.catalog)
    print(df.to_string(index=False))
    return 0


def cmd_view_mode(args: argparse.Namespace) -> int:
    """Get or set the persisted grid/list preference."""
    from state.view_state import ViewStateStore

    settings = SettingsService()
    store = ViewStateStore(settings.preferences_path, key=settings.view_mode_key)
    current = "grid" if store.showing_grid else "list"

    if args.mode is None:
        print(current)
        return 0

    mode = args.mode.lower()
    if mode not in VIEW_MODES:
        print(f"invalid mode: {args.mode} (expected one of {', '.join(VIEW_MODES)})")
        return 1
    if mode == current:
        print(f"already {mode}")
        return 0

    store.showing_grid = mode == "grid"
    print(f"{current} → {mode}")
    return 0


def cmd_log_level(args: argparse.Namespace) -> int:
    """Get or set the log level in settings.toml."""
    settings = _load_settings()
    current = settings["env"]["log_level"]

    if args.level is None:
        print(current)
        return 0

    level = args.level.upper()
    if level not in VALID_LOG_LEVELS:
        print(f"invalid level: {args.level} (expected one of {', '.join(VALID_LOG_LEVELS)})")
        return 1

    if level == current:
        print(f"already {level}")
        return 0

    content = SETTINGS_PATH.read_text()
    updated = re.sub(
        r'(log_level\s*=\s*)"[^"]*"',
        rf'\1"{level}"',
        content,
    )
    SETTINGS_PATH.write_text(updated)
    print(f"{current} → {level}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="moonshot", description="Moonshot CLI tools")
    sub = parser.add_subparsers(dest="command")

    validate_parser = sub.add_parser("validate", help="Check the bundled mission and astronaut data")
    validate_parser.add_argument("-v", "--verbose", action="store_true", help="Show load logs")

    missions_parser = sub.add_parser("missions", help="Print the mission table")
    missions_parser.add_argument("--astronauts", action="store_true", help="Print flights per astronaut instead")
    missions_parser.add_argument("-v", "--verbose", action="store_true", help="Show load logs")

    vm_parser = sub.add_parser("view-mode", help="Get or set the saved collection layout")
    vm_parser.add_argument("mode", nargs="?", default=None, help="grid or list")

    ll_parser = sub.add_parser("log-level", help="Get or set the log level in settings.toml")
    ll_parser.add_argument("level", nargs="?", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "validate":
        return cmd_validate(args)
    if args.command == "missions":
        return cmd_missions(args)
    if args.command == "view-mode":
        return cmd_view_mode(args)
    if args.command == "log-level":
        return cmd_log_level(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
