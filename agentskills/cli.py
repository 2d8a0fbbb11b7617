"""
agentskills CLI.

Usage:
    agentskills list                       # Plugins with command/skill/agent counts
    agentskills show NAME                  # Manifest + discovered files as JSON
    agentskills validate                   # Validate every plugin
    agentskills validate NAME [NAME ...]   # Validate specific plugins
    agentskills validate --strict          # Fail on warnings too
    agentskills validate --json            # Machine-readable report
    agentskills config show                # Show effective settings

Global options:
    --path DIR       Repository root (default: AGENTSKILLS_BASE_PATH or CWD)
    -v, --verbose    Debug logging
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from agentskills.config import Settings, get_config_path, get_settings
from agentskills.core.discovery import (
    PLUGINS_DIR,
    collect_plugin_files,
    discover_plugins,
    plugin_path,
)
from agentskills.core.manifest import load_manifest
from agentskills.core.validation import validate_all
from agentskills.lib.logger import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


# --- Helpers ---


def _get_settings(args: argparse.Namespace) -> Settings:
    """Settings with --path applied on top of env/config."""
    if getattr(args, "path", None):
        return Settings(base_path=Path(args.path))
    return get_settings()


def _base_path(args: argparse.Namespace) -> Path:
    return _get_settings(args).base_path.expanduser().resolve()


# --- Commands ---


def cmd_list(args: argparse.Namespace) -> int:
    """List plugins with their entity counts."""
    base_path = _base_path(args)
    plugins = sorted(discover_plugins(base_path))

    if not plugins:
        print(f"No plugins found in {base_path / PLUGINS_DIR}")
        return EXIT_OK

    name_width = max(len(p) for p in plugins)
    for name in plugins:
        files = collect_plugin_files(plugin_path(base_path, name))
        print(
            f"  {name:<{name_width}}  "
            f"commands: {len(files.commands):<3}  "
            f"skills: {len(files.skills):<3}  "
            f"agents: {len(files.agents)}"
        )

    print(f"\n{len(plugins)} plugin(s)")
    return EXIT_OK


def cmd_show(args: argparse.Namespace) -> int:
    """Print a plugin's manifest and discovered files."""
    base_path = _base_path(args)
    if args.name not in discover_plugins(base_path):
        print(f"Plugin not found: {args.name}", file=sys.stderr)
        return EXIT_USAGE

    plugin_dir = plugin_path(base_path, args.name)
    try:
        manifest = load_manifest(plugin_dir)
    except (FileNotFoundError, ValueError) as e:
        print(f"Invalid manifest for {args.name}: {e}", file=sys.stderr)
        return EXIT_INVALID
    files = collect_plugin_files(plugin_dir)

    output = {
        "name": args.name,
        "path": str(plugin_dir),
        "manifest": manifest.model_dump(exclude_none=True),
        "commands": sorted(files.commands),
        "skills": sorted(files.skills),
        "agents": sorted(files.agents),
    }
    print(json.dumps(output, indent=2, default=str))
    return EXIT_OK


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate plugins and report issues. Exit 1 on failure."""
    settings = _get_settings(args)
    base_path = settings.base_path.expanduser().resolve()
    strict = args.strict or settings.strict

    logger.debug(f"Validating plugins in {base_path} (strict={strict})")
    available = discover_plugins(base_path)
    if args.names:
        missing = [n for n in args.names if n not in available]
        if missing:
            print(f"Plugin not found: {', '.join(missing)}", file=sys.stderr)
            return EXIT_USAGE
        reports = validate_all(base_path, args.names)
    else:
        reports = validate_all(base_path)

    failed = [
        r for r in reports
        if not r.ok or (strict and r.warnings)
    ]

    if args.json:
        print(json.dumps([r.model_dump(mode="json") for r in reports], indent=2))
    else:
        if not reports:
            print(f"No plugins found in {base_path / PLUGINS_DIR}")
        for report in reports:
            status = "FAIL" if report in failed else "ok"
            print(f"{status:<4}  {report.plugin}")
            for issue in report.issues:
                print(f"        {issue}")
        print(f"\n{len(reports) - len(failed)}/{len(reports)} plugin(s) passed")

    return EXIT_INVALID if failed else EXIT_OK


def cmd_config_show(args: argparse.Namespace) -> int:
    """Show effective settings."""
    settings = _get_settings(args)
    config_file = get_config_path(settings.base_path)
    print(f"Config file: {config_file} ({'found' if config_file.exists() else 'not found'})")
    for key, value in settings.model_dump().items():
        print(f"  {key}: {value}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agentskills",
        description="Discover and validate agent plugins in .github/plugins",
    )
    parser.add_argument("--path", help="Repository root (default: CWD)")
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command")

    # list
    subparsers.add_parser("list", help="List plugins")

    # show
    show_parser = subparsers.add_parser("show", help="Show a plugin's manifest and files")
    show_parser.add_argument("name", help="Plugin directory name")

    # validate
    validate_parser = subparsers.add_parser("validate", help="Validate plugins")
    validate_parser.add_argument("names", nargs="*", help="Plugins to validate (default: all)")
    validate_parser.add_argument(
        "--strict", action="store_true",
        help="Treat warnings as failures",
    )
    validate_parser.add_argument(
        "--json", action="store_true",
        help="Print the report as JSON",
    )

    # config subcommand
    config_parser = subparsers.add_parser("config", help="Configuration")
    config_sub = config_parser.add_subparsers(dest="action")
    config_sub.add_parser("show", help="Show effective settings")

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level="DEBUG" if args.verbose else None)

    if args.command == "list":
        code = cmd_list(args)
    elif args.command == "show":
        code = cmd_show(args)
    elif args.command == "validate":
        code = cmd_validate(args)
    elif args.command == "config" and args.action == "show":
        code = cmd_config_show(args)
    else:
        parser.print_help()
        code = EXIT_USAGE

    sys.exit(code)


if __name__ == "__main__":
    main()
