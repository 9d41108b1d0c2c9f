"""CLI for outlinemd - keep Markdown files and Outline documents in sync."""

import argparse
import json
import logging
import platform
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .adapters.outline_api import update_payload
from .publish import parse_url_id, prepare_update, render_fetched
from .runtime import build_runtime


def cmd_get(args: argparse.Namespace, rt: Any) -> int:
    """Download a single document."""
    doc_id = parse_url_id(args.document)
    doc = rt.client().fetch_document(doc_id)
    text = render_fetched(doc)

    if args.output and args.output != "-":
        Path(args.output).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
    return 0


def cmd_update(args: argparse.Namespace, rt: Any) -> int:
    """Replace a document with the content of a local file."""
    doc_id = parse_url_id(args.id)
    if not doc_id:
        print("Error: --id must name a document", file=sys.stderr)
        return 1

    source = Path(args.source).read_text(encoding="utf-8")
    prepared = prepare_update(source, rt.parser, rt.formatter)

    if args.dry_run:
        payload = update_payload(doc_id, prepared.text, prepared.title)
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    rt.client().update_document(doc_id, prepared.text, title=prepared.title)
    return 0


def _version_string() -> str:
    return (
        f"outlinemd {__version__} "
        f"(python {platform.python_version()}, platform {platform.platform()})"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="outlinemd", description="Sync Markdown documents with Outline"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: ./outlinemd.toml)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log requests and rewrites"
    )
    parser.add_argument(
        "--version", action="version", version=_version_string()
    )

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    # get command
    parser_get = subparsers.add_parser("get", help="Download a single document")
    parser_get.add_argument("document", help="Document url or url-id")
    parser_get.add_argument(
        "-o", "--output", default=None,
        help="File to save result to (default: stdout)"
    )

    # update command
    parser_update = subparsers.add_parser(
        "update", help="Replace document with the content of a file"
    )
    parser_update.add_argument("source", help="Source Markdown document")
    parser_update.add_argument(
        "--id", required=True, help="Document url or url-id"
    )
    parser_update.add_argument(
        "--dry-run", action="store_true",
        help="Print the update request instead of sending it"
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handlers = {
        "get": cmd_get,
        "update": cmd_update,
    }
    handler = handlers.get(args.cmd)
    if handler is None:
        print(f"Unknown command: {args.cmd}", file=sys.stderr)
        sys.exit(1)

    rt = None
    try:
        rt = build_runtime(config_path=args.config)
        exit_code = handler(args, rt)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        exit_code = 1
    finally:
        if rt is not None:
            rt.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
