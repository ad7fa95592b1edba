"""Command-line interface for transmark."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from transmark.errors import HighlightError
from transmark.kinds import Annotation, TextKind, kind_name, parse_kinds, split_lines


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    format_flag: str
    kinds: TextKind
    json: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="transmark",
        description="Show highlight ranges for translatable strings, one per line",
    )
    p.add_argument("input", help="Input text file, or - for stdin")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        default=None,
        metavar="DIALECT",
        help="Format flag of the strings: c, php, python, ruby (default: none)",
    )
    p.add_argument(
        "-k",
        "--kinds",
        action="append",
        default=[],
        metavar="KIND",
        help="Kinds to highlight: whitespace, escape, markup, placeholder, all "
        "(repeatable or comma-separated, default: all)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover transmark.toml)",
    )
    p.add_argument("--json", action="store_true", help="Write annotations as JSON")
    p.add_argument("--debug", action="store_true", help="Dump annotations to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "transmark.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = None if args.input == "-" else Path(args.input)
    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    cfg_highlight = config.get("highlight")
    if not isinstance(cfg_highlight, dict):
        cfg_highlight = {}
    cfg_output = config.get("output")
    if not isinstance(cfg_output, dict):
        cfg_output = {}

    # Format flag: config < CLI
    format_flag = ""
    cfg_format = cfg_highlight.get("format")
    if isinstance(cfg_format, str):
        format_flag = cfg_format
    if args.format is not None:
        format_flag = args.format

    # Kinds: config < CLI, all when neither says
    kind_names: list[str] = []
    cfg_kinds = cfg_highlight.get("kinds")
    if isinstance(cfg_kinds, list):
        kind_names = [str(k) for k in cfg_kinds]
    if args.kinds:
        kind_names = list(args.kinds)
    try:
        kinds = parse_kinds(kind_names) if kind_names else TextKind.ALL
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc

    use_json = bool(cfg_output.get("json", False)) or args.json

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        format_flag=format_flag,
        kinds=kinds,
        json=use_json,
        debug=args.debug,
    )


def highlight_lines(options: CliOptions, lines: list[str]) -> list[tuple[int, Annotation]]:
    """Highlight each line as its own item; return (1-based line, annotation) pairs."""
    from transmark.debug import dump_annotations
    from transmark.items import TextItem
    from transmark.selection import for_item

    found: list[tuple[int, Annotation]] = []
    for lineno, line in enumerate(lines, start=1):
        h = for_item(TextItem(line, format_flag=options.format_flag), options.kinds)
        annotations = h.scan(line) if h is not None else []
        if options.debug:
            dump_annotations(line, annotations, label=f"{lineno}:")
        found.extend((lineno, ann) for ann in annotations)
    return found


def format_text(lines: list[str], found: list[tuple[int, Annotation]]) -> str:
    out = []
    for lineno, ann in found:
        snippet = lines[lineno - 1][ann.start : ann.end]
        out.append(f"{lineno}:{ann.start}-{ann.end} {kind_name(ann.kind)} {snippet!r}\n")
    return "".join(out)


def format_json(lines: list[str], found: list[tuple[int, Annotation]]) -> str:
    records = [
        {
            "line": lineno,
            "start": ann.start,
            "end": ann.end,
            "kind": kind_name(ann.kind),
            "text": lines[lineno - 1][ann.start : ann.end],
        }
        for lineno, ann in found
    ]
    return json.dumps(records, ensure_ascii=False, indent=2) + "\n"


def _read_lines(options: CliOptions, stdin: TextIO) -> list[str]:
    if options.input_file is None:
        source = stdin.read()
    else:
        source = options.input_file.read_text(encoding="utf-8")
    return split_lines(source)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        lines = _read_lines(options, sys.stdin)
    except OSError as exc:
        print(f"error: cannot read input: {exc}", file=sys.stderr)
        return 2

    try:
        found = highlight_lines(options, lines)
    except HighlightError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    rendered = format_json(lines, found) if options.json else format_text(lines, found)
    if options.output_file:
        options.output_file.write_text(rendered, encoding="utf-8")
    else:
        sys.stdout.write(rendered)

    return 0


def _entry() -> None:
    sys.exit(main())
