"""Command-line interface for writing the svgscene demo picture."""
from __future__ import annotations

import argparse
import json
import os
import sys
import traceback
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .demo import demo_document
from .writer import render

DEFAULT_OUTPUT = "result.svg"


@dataclass
class CliError(Exception):
    code: str
    message: str
    hint: Optional[str] = None
    exit_code: int = 1
    file: Optional[str] = None
    retryable: bool = True


class UsageError(Exception):
    pass


class FriendlyArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # pragma: no cover - argparse callback
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = FriendlyArgumentParser(
        prog="svgscene",
        description="Build sample vector scenes and write them as SVG.",
    )
    parser.add_argument("--error-format", choices=["text", "json"], default="text")
    parser.add_argument("--debug", action="store_true")

    subparsers = parser.add_subparsers(dest="command")

    demo_parser = subparsers.add_parser("demo", help="Write the Sierpinski/curve demo")
    demo_parser.add_argument("--depth", type=int, default=7, help="Triangle subdivision depth")
    demo_parser.add_argument("--size", type=int, default=3000, help="Document width and height")
    demo_parser.add_argument("--stdout", action="store_true", help="Write SVG to stdout")
    demo_parser.add_argument("-o", "--output", help=f"Output .svg path (default {DEFAULT_OUTPUT})")

    return parser


def _write_text(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise CliError(
            "E_IO_WRITE",
            f"failed to write output file: {path}",
            hint=str(exc),
            exit_code=4,
            file=str(path),
        )


def _error_from_exception(exc: Exception) -> CliError:
    if isinstance(exc, CliError):
        return exc
    if isinstance(exc, ValueError):
        return CliError(
            "E_ARGS",
            str(exc),
            hint="Check the demo options and retry.",
            exit_code=2,
        )
    return CliError(
        "E_INTERNAL",
        str(exc) or exc.__class__.__name__,
        hint="Re-run with --debug to see traceback.",
        exit_code=1,
        retryable=False,
    )


def _emit_error(err: CliError, *, error_format: str) -> None:
    if error_format == "json":
        payload = {
            "ok": False,
            "code": err.code,
            "message": err.message,
            "file": err.file,
            "hint": err.hint,
            "retryable": err.retryable,
        }
        sys.stderr.write(json.dumps(payload) + "\n")
        return

    sys.stderr.write(f"error[{err.code}]: {err.message}\n")
    if err.hint:
        sys.stderr.write(f"hint: {err.hint}\n")


def _handle_demo(args: argparse.Namespace) -> int:
    if args.stdout and args.output:
        raise CliError(
            "E_ARGS",
            "--stdout and --output are mutually exclusive",
            hint="Choose either --stdout or --output.",
            exit_code=2,
        )
    if args.depth < 0:
        raise CliError(
            "E_ARGS",
            "--depth must be >= 0",
            hint="Use a small non-negative depth like 5 or 7.",
            exit_code=2,
        )
    if args.size <= 0:
        raise CliError(
            "E_ARGS",
            "--size must be > 0",
            hint="Use a positive pixel size like 3000.",
            exit_code=2,
        )

    svg_text = render(demo_document(depth=args.depth, size=args.size))

    if args.stdout:
        sys.stdout.write(svg_text)
        return 0

    output_path = Path(args.output or DEFAULT_OUTPUT)
    _write_text(output_path, svg_text)
    print(f"Wrote {output_path}")
    return 0


def main(argv: Optional[Iterable[str]] = None) -> int:
    raw_argv = list(argv) if argv is not None else sys.argv[1:]
    parser = _build_parser()

    if not raw_argv:
        err = CliError(
            "E_ARGS",
            "missing subcommand",
            hint="Use: svgscene demo [--depth N] [--size N] [-o PATH | --stdout].",
            exit_code=2,
        )
        _emit_error(err, error_format="text")
        return err.exit_code

    debug_enabled = "--debug" in raw_argv or os.getenv("SVGSCENE_DEBUG") == "1"
    error_format = "text"
    if "--error-format" in raw_argv:
        idx = raw_argv.index("--error-format")
        if idx + 1 < len(raw_argv):
            error_format = raw_argv[idx + 1]

    try:
        args = parser.parse_args(raw_argv)
        error_format = args.error_format

        if args.command == "demo":
            return _handle_demo(args)

        raise CliError(
            "E_ARGS",
            "missing subcommand",
            hint="Use: svgscene demo [--depth N] [--size N] [-o PATH | --stdout].",
            exit_code=2,
        )
    except UsageError as exc:
        err = CliError(
            "E_ARGS",
            str(exc),
            hint="Use subcommand: demo.",
            exit_code=2,
        )
        _emit_error(err, error_format=error_format)
        return err.exit_code
    except Exception as exc:  # pragma: no cover - exercised in acceptance tests
        err = _error_from_exception(exc)
        _emit_error(err, error_format=error_format)
        if debug_enabled:
            traceback.print_exc(file=sys.stderr)
        return err.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
