"""CLI commands for decoding GitHub API payloads."""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import BaseModel

from .envelope import Envelope
from .errors import ClientError, DecodeError
from .settings import get_settings


def _jsonable(value):
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, Envelope):
        return {
            "total_count": value.total_count,
            "incomplete_results": value.incomplete_results,
            "items": [_jsonable(item) for item in value.items],
        }
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


def _dump(value):
    json.dump(_jsonable(value), sys.stdout, indent=2)
    sys.stdout.write("\n")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Decode GitHub API payloads into typed records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # decode subcommand
    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode a saved JSON response as a named resource",
    )
    decode_parser.add_argument(
        "resource",
        help="Resource name (see the resources command)",
    )
    decode_parser.add_argument(
        "file",
        type=Path,
        nargs="?",
        default=None,
        help="JSON file to decode (default: stdin)",
    )

    # api subcommand
    api_parser = subparsers.add_parser(
        "api",
        help="Fetch a GitHub API endpoint and decode the response",
    )
    api_parser.add_argument(
        "endpoint",
        help="API endpoint path (e.g., repos/owner/repo/pulls/1)",
    )
    api_parser.add_argument(
        "--as",
        dest="resource",
        required=True,
        help="Resource name to decode the response as",
    )
    api_parser.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter (repeatable, e.g., --param per_page=100)",
    )

    # resources subcommand
    subparsers.add_parser(
        "resources",
        help="List resource names accepted by decode and api",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    from .resources import DECODERS

    if args.command == "resources":
        for name in sorted(DECODERS):
            print(name)
        return 0
    if args.command is None:
        parser.print_help()
        return 0

    decoder = DECODERS.get(args.resource)
    if decoder is None:
        print(f"Unknown resource: {args.resource}", file=sys.stderr)
        return 2

    try:
        if args.command == "decode":
            body = args.file.read_bytes() if args.file else sys.stdin.buffer.read()
            _dump(decoder(body))
        elif args.command == "api":
            from .client import GitHubClient

            params = {}
            for p in args.param:
                k, _, v = p.partition("=")
                params[k] = v

            with GitHubClient() as client:
                _dump(client.get(args.endpoint, decoder, params=params or None))
    except DecodeError as e:
        print(f"Decode failed: {e}", file=sys.stderr)
        return 1
    except ClientError as e:
        print(str(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
