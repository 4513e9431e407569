"""Thin CLI entry point — loads a transcript payload and calls the engine."""

import argparse
import json
import logging
import sys
from pathlib import Path

from tubesage.engine import EmptyTranscriptError, process
from tubesage.payload import DisplayDefaults, PayloadError, load_defaults, load_payload
from tubesage.render import OUTPUT_FORMATS, render, write_reading


def _build_defaults(args: argparse.Namespace) -> DisplayDefaults:
    defaults = load_defaults(args.defaults) if args.defaults else DisplayDefaults()
    if args.default_title:
        defaults.title = args.default_title
    if args.default_description:
        defaults.description = args.default_description
    return defaults


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="tubesage",
        description="TubeSage — group timestamped transcripts into reading blocks.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    group = sub.add_parser("group", help="Group a transcript payload JSON file")
    group.add_argument("payload", type=Path, help="Transcript payload JSON file")
    group.add_argument("--output", "-o", type=Path, help="Write the result to this file")
    group.add_argument("--format", "-f", choices=OUTPUT_FORMATS, default="text", help="Output format")

    serve = sub.add_parser("serve", help="Launch the reading API")
    serve.add_argument("--port", type=int, default=5000, help="Port to listen on")
    serve.add_argument("--host", type=str, default="127.0.0.1", help="Host to bind to")
    serve.add_argument("--max-readings", type=int, default=100, help="Readings kept in memory")

    for p in (group, serve):
        p.add_argument("--defaults", type=Path, help="JSON file with default title/description")
        p.add_argument("--default-title", type=str, help="Title used when the payload has none")
        p.add_argument("--default-description", type=str, help="Description used when the payload has none")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        defaults = _build_defaults(args)
    except (OSError, ValueError, TypeError) as e:
        print(f"Error: invalid defaults config: {e}", file=sys.stderr)
        sys.exit(1)

    if args.command == "serve":
        from tubesage.web import create_app
        app = create_app(defaults, max_readings=args.max_readings)
        print(f"TubeSage API: http://{args.host}:{args.port}")
        app.run(host=args.host, port=args.port, debug=False)
        return

    try:
        reading = process(load_payload(args.payload), defaults)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: cannot read {args.payload}: {e}", file=sys.stderr)
        sys.exit(1)
    except (PayloadError, EmptyTranscriptError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        write_reading(reading, args.output, args.format)
        print(f"Done! {len(reading.blocks)} blocks written to {args.output}")
    else:
        print(render(reading, args.format))
