"""wxr CLI — wxr build.

Entry point for the ``wxr`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the wxr CLI."""
    parser = argparse.ArgumentParser(
        prog="wxr",
        description="Generate WordPress eXtended RSS (WXR) export files.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # wxr build
    build_parser = subparsers.add_parser(
        "build",
        help="Build a WXR document from a YAML, TOML or JSON manifest",
    )
    build_parser.add_argument("manifest", help="Manifest file")
    build_parser.add_argument(
        "-o", "--output", default=None, help="Output file (default: stdout)",
    )
    build_parser.add_argument(
        "--pretty", action="store_true", help="Indent the output",
    )
    build_parser.add_argument(
        "--indent", type=int, default=4, help="Spaces per indent level with --pretty",
    )
    build_parser.add_argument(
        "--seed", default=None, help="Seed for generated ids (reproducible output)",
    )

    return parser


def _get_version() -> str:
    """Get the package version."""
    from wxr import __version__

    return __version__


def _build(args: argparse.Namespace) -> int:
    from wxr._errors import WxrError
    from wxr.config_loader import build_from_manifest, load_manifest
    from wxr.ids import seeded

    ids = seeded(args.seed) if args.seed is not None else None
    render = {"pretty": args.pretty, "indent": " " * args.indent}

    try:
        manifest = load_manifest(args.manifest)
        generator = build_from_manifest(manifest, ids=ids)
        if args.output is None:
            sys.stdout.write(generator.stringify(render) + "\n")
            return 0
        summary = generator.write(args.output, render)
    except WxrError as exc:
        print(f"  Error: {exc}", file=sys.stderr)
        return 1

    print(
        f"  Wrote {summary.entities} entities to {summary.output_path}"
        f" ({summary.size_bytes} bytes, {summary.duration_ms:.1f}ms)",
        file=sys.stderr,
    )
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "build":
        sys.exit(_build(args))


if __name__ == "__main__":
    main()
