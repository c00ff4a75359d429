"""CLI entry-point for abi_export.

Usage:
    python -m abi_export export <module:Name> [--output FILE]
    python -m abi_export export <manifest.json|manifest.yaml> --manifest [--output FILE]
    python -m abi_export escape <name> [<name> ...] [--json]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import jsonschema

from abi_export import __version__
from abi_export.core.config import ExportConfig
from abi_export.core.resolve import TargetError, resolve_target
from abi_export.escape import underscore_if_sol
from abi_export.export import FormatError, print_abi
from abi_export.manifest import ManifestError, load_manifest
from abi_export.utils.exit_codes import ExitCode
from abi_export.utils.json_norm import stable_json_dumps

_logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="abi-export",
        description="Print Solidity interfaces for contract entities.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log debug output to stderr.",
    )
    sub = p.add_subparsers(dest="command")

    # ── export subcommand ───────────────────────────────────────────
    export_p = sub.add_parser(
        "export",
        help="Print the interface of an entity or manifest.",
    )
    export_p.add_argument(
        "target",
        help="Entity import path 'module:Name', or a manifest file with --manifest.",
    )
    export_p.add_argument(
        "--manifest",
        action="store_true",
        default=False,
        help="Treat TARGET as a JSON/YAML manifest file.",
    )
    export_p.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write to FILE instead of stdout.",
    )

    # ── escape subcommand ───────────────────────────────────────────
    escape_p = sub.add_parser(
        "escape",
        help="Show how identifiers are written into the interface.",
    )
    escape_p.add_argument("names", nargs="+", help="Identifiers to escape.")
    escape_p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print a JSON object mapping each name to its escaped form.",
    )

    return p


def _handle_export(args: argparse.Namespace) -> int:
    """Dispatch ``abi-export export <target>``."""
    try:
        if args.manifest:
            entity = load_manifest(Path(args.target))
        else:
            entity = resolve_target(args.target)
    except (ManifestError, TargetError) as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR
    except jsonschema.ValidationError as e:
        print(f"FAIL: manifest violates schema: {e.message}", file=sys.stderr)
        return ExitCode.VIOLATION

    config = ExportConfig.from_env()
    try:
        if args.output is not None:
            out: Path = args.output
            out.parent.mkdir(parents=True, exist_ok=True)
            with out.open("w", encoding="utf-8") as fp:
                print_abi(entity, fp, config=config)
            print(f"Interface written to {out}", file=sys.stderr)
        else:
            print_abi(entity, config=config)
    except FormatError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR
    except OSError as e:
        print(f"error: cannot write {args.output}: {e}", file=sys.stderr)
        return ExitCode.ERROR

    return ExitCode.SUCCESS


def _handle_escape(args: argparse.Namespace) -> int:
    """Dispatch ``abi-export escape <name> ...``."""
    escaped = {name: underscore_if_sol(name) for name in args.names}
    _logger.debug(
        "escaped %d name(s), %d with underscore",
        len(escaped),
        sum(1 for v in escaped.values() if v.startswith(" _")),
    )
    if args.json_out:
        sys.stdout.write(stable_json_dumps(escaped))
    else:
        for name in args.names:
            print(repr(escaped[name]))
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = ok, 1 = schema violation, 2 = error)."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command == "export":
        return _handle_export(args)
    if args.command == "escape":
        return _handle_escape(args)

    parser.print_help(sys.stderr)
    return ExitCode.ERROR


if __name__ == "__main__":
    raise SystemExit(main())
