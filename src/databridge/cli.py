from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from databridge.core.definition import StreamDefinition
from databridge.core.errors import MalformedStreamDefinition
from databridge.core.serde import to_json
from databridge.io.config import BridgeSettings
from databridge.io.errors import IoError
from databridge.io.files import read_definition, write_definition


def _load(path: str) -> StreamDefinition | None:
    """Read a definition file, printing the failure instead of raising."""
    try:
        return read_definition(Path(path))
    except (IoError, MalformedStreamDefinition) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return None


def _cmd_stream_id(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="stream-id", description="Print the id for a name/version.")
    p.add_argument("name", type=str, help="Stream name (must not contain '-').")
    p.add_argument("version", type=str, help="Stream version in x.x.x format.")
    args = p.parse_args(argv)

    try:
        definition = StreamDefinition(args.name, args.version)
    except MalformedStreamDefinition as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2
    print(definition.stream_id)
    return 0


def _cmd_show(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="show", description="Print a definition file as JSON.")
    p.add_argument("path", type=str, help="Path to a definition JSON file.")
    p.add_argument("--indent", type=int, default=2, help="JSON indent (0 for compact).")
    args = p.parse_args(argv)

    definition = _load(args.path)
    if definition is None:
        return 2
    print(to_json(definition, indent=args.indent or None))
    return 0


def _cmd_check(argv: list[str]) -> int:
    p = argparse.ArgumentParser(
        prog="check",
        description="Validate a definition file; optionally store it under the settings root_dir.",
    )
    p.add_argument("path", type=str, help="Path to a definition JSON file.")
    p.add_argument(
        "--store",
        action="store_true",
        help="Write the normalized definition to <root_dir>/<stream_id>.json.",
    )
    p.add_argument("--config", type=str, default=None, help="Explicit TOML settings file.")
    args = p.parse_args(argv)

    definition = _load(args.path)
    if definition is None:
        return 2
    print(f"[INFO] {definition.stream_id} is valid")
    if args.store:
        try:
            settings = BridgeSettings.load(args.config)
            out = write_definition(settings, definition)
        except IoError as exc:
            print(f"[ERROR] {exc}", file=sys.stderr)
            return 2
        print(f"[INFO] Wrote definition to {out}")
    return 0


def _cmd_compare(argv: list[str]) -> int:
    p = argparse.ArgumentParser(
        prog="compare", description="Report whether two definition files describe the same schema."
    )
    p.add_argument("left", type=str, help="First definition file.")
    p.add_argument("right", type=str, help="Second definition file.")
    args = p.parse_args(argv)

    left = _load(args.left)
    right = _load(args.right)
    if left is None or right is None:
        return 2
    if left == right:
        print("duplicate")
        return 0
    print("different")
    return 1


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="databridge", description="Stream definition utilities CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("stream-id")
    sub.add_parser("show")
    sub.add_parser("check")
    sub.add_parser("compare")
    return p


_COMMANDS = {
    "stream-id": _cmd_stream_id,
    "show": _cmd_show,
    "check": _cmd_check,
    "compare": _cmd_compare,
}


def main(argv: list[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        build_argparser().print_help()
        return
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    cmd, rest = argv[0], argv[1:]
    handler = _COMMANDS.get(cmd)
    if handler is None:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        code = 2
    else:
        code = handler(rest)
    raise SystemExit(code)


if __name__ == "__main__":
    main()
