"""Command-line entry point for repolint."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import List

from .errors import RepolintError
from .filesystem import FileSystem
from .result import LintResult, format_summary_table
from .ruleset import DEFAULT_RULESET, load_ruleset
from .runner import lint


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check a repository against a ruleset of compliance rules",
    )
    parser.add_argument(
        "target_dir",
        nargs="?",
        default=".",
        help="Repository directory to lint (defaults to the current directory).",
    )
    parser.add_argument(
        "--ruleset",
        "-r",
        default=None,
        help=f"Path to the ruleset manifest (defaults to <target_dir>/{DEFAULT_RULESET}).",
    )
    parser.add_argument(
        "--format",
        choices=["json"],
        default="json",
        help="Report format for file output (defaults to json).",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        type=str,
        default=None,
        help="Path to write the structured report (e.g., artifacts/lint.json).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log rule evaluation details to stderr.",
    )
    return parser


def run_lint(target_dir: str, ruleset_path: str | None = None) -> LintResult:
    ruleset_file = Path(ruleset_path) if ruleset_path else Path(target_dir) / DEFAULT_RULESET
    ruleset = load_ruleset(ruleset_file)
    return asyncio.run(lint(FileSystem(target_dir), ruleset))


def write_output(result: LintResult, output_path: str | None, report_format: str) -> None:
    summary = format_summary_table(result)
    print(summary)

    if report_format == "json":
        payload = json.dumps(result.to_dict(), indent=2)
        if output_path:
            output_file = Path(output_path)
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(payload, encoding="utf-8")
            print(f"\nReport written to {output_path}")
        else:
            print("\nJSON Report")
            print(payload)


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        result = run_lint(args.target_dir, args.ruleset)
    except RepolintError as exc:
        raise SystemExit(str(exc)) from exc
    write_output(result, args.output_path, args.format)
    return result.exit_code()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
