"""CLI for jsoneditor-options - inspect and check editor option files."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .applicability import is_applicable, modes_for
from .config import export_options, resolve_checked
from .editor_types import EditorMode
from .fields import NO_DEFAULT, FieldRegistry

__all__ = ["main"]


def _load_options(path: str) -> Any:
    with Path(path).open("r", encoding="utf-8") as fh:
        return json.load(fh)


def _print_issues(issues) -> None:
    for issue in issues:
        print(f"  - {issue.path}: {issue.message}", file=sys.stderr)


# =============================================================================
# Subcommand: fields
# =============================================================================

def cmd_fields(args: argparse.Namespace) -> int:
    """List registered options."""
    fields = FieldRegistry.get_all()
    if args.mode:
        mode = EditorMode.parse(args.mode)
        fields = {name: info for name, info in fields.items() if mode in info.modes}

    if args.as_json:
        payload = {
            name: {
                "alias": info.alias,
                "category": info.category,
                "type": info.type_hint,
                "default": None if info.default is NO_DEFAULT else info.default,
                "has_default": info.has_default,
                "modes": sorted(mode.value for mode in info.modes),
            }
            for name, info in fields.items()
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    for name, info in fields.items():
        default = f" = {info.default!r}" if info.has_default else ""
        print(f"{name} ({info.alias}): {info.type_hint}{default}")
    return 0


# =============================================================================
# Subcommand: resolve / check
# =============================================================================

def cmd_resolve(args: argparse.Namespace) -> int:
    """Resolve an options file against the defaults."""
    try:
        raw = _load_options(args.file)
    except FileNotFoundError:
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.file}: {e}", file=sys.stderr)
        return 1

    resolution = resolve_checked(raw)
    options = resolution.options if args.canonical else export_options(resolution.options)
    print(json.dumps(options, ensure_ascii=False, indent=2, default=repr))

    if resolution.issues:
        print(f"{len(resolution.issues)} issue(s):", file=sys.stderr)
        _print_issues(resolution.issues)
        return 1
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Validate an options file."""
    try:
        raw = _load_options(args.file)
    except FileNotFoundError:
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.file}: {e}", file=sys.stderr)
        return 1

    resolution = resolve_checked(raw)
    if resolution.issues:
        print(f"{args.file}: {len(resolution.issues)} issue(s)", file=sys.stderr)
        _print_issues(resolution.issues)
        return 1

    print(f"{args.file}: OK")
    return 0


# =============================================================================
# Subcommand: applicable
# =============================================================================

def cmd_applicable(args: argparse.Namespace) -> int:
    """Show the modes an option applies to."""
    info = FieldRegistry.get(args.field)
    if info is None:
        print(f"Error: Unknown option: {args.field}", file=sys.stderr)
        return 1

    if args.mode is None:
        modes = sorted(mode.value for mode in modes_for(info.name))
        print(f"{info.name}: {', '.join(modes)}")
        return 0

    applicable = is_applicable(info.name, args.mode)
    print(f"{info.name} in {args.mode}: {'yes' if applicable else 'no'}")
    return 0 if applicable else 2


# =============================================================================
# Main entry point
# =============================================================================

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="jsoneditor-options",
        description="Inspect and check JSON editor options.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    mode_choices = [mode.value for mode in EditorMode]

    fields_parser = subparsers.add_parser("fields", help="List recognised options")
    fields_parser.add_argument(
        "--mode",
        choices=mode_choices,
        help="Only list options that apply to this mode",
    )
    fields_parser.add_argument(
        "--as-json",
        action="store_true",
        help="Output as JSON",
    )
    fields_parser.set_defaults(func=cmd_fields)

    resolve_parser = subparsers.add_parser("resolve", help="Resolve an options file against the defaults")
    resolve_parser.add_argument("file", help="JSON file with (partial) editor options")
    resolve_parser.add_argument(
        "--canonical",
        action="store_true",
        help="Print canonical python names instead of host aliases",
    )
    resolve_parser.set_defaults(func=cmd_resolve)

    check_parser = subparsers.add_parser("check", help="Validate an options file")
    check_parser.add_argument("file", help="JSON file with (partial) editor options")
    check_parser.set_defaults(func=cmd_check)

    applicable_parser = subparsers.add_parser("applicable", help="Show where an option applies")
    applicable_parser.add_argument("field", help="Option name or alias")
    applicable_parser.add_argument("mode", nargs="?", choices=mode_choices, help="Editor mode")
    applicable_parser.set_defaults(func=cmd_applicable)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # No command specified - show help
    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
