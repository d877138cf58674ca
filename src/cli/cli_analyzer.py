# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Command line front end for the code quality analyzer."""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.style import Style
from rich.table import Table
from rich.text import Text

from cqa.config import ALLOW_LIST_MODES, AnalyzerConfig
from cqa.discovery import (
    IgnoreRules,
    SourceFile,
    SourceReadError,
    discover_python_files,
    read_source,
)
from cqa.model import SEVERITY_RANK, AnalysisResult, Severity
from cqa.report import CodeAnalyzer

logger = logging.getLogger(__name__)

EXAMPLE_CODE = """def calculate_factorial(n):
    if n < 0:
        return None
    if n == 0 or n == 1:
        return 1
    return n * calculate_factorial(n - 1)

# Test the function
result = calculate_factorial(5)
print(f"Factorial of 5 is: {result}")"""

SEVERITY_STYLES: dict[Severity, Style] = {
    "critical": Style(color="red", bold=True),
    "high": Style(color="dark_orange"),
    "medium": Style(color="yellow"),
    "low": Style(color="blue"),
}
VALIDITY_STYLES: dict[bool, Style] = {
    True: Style(color="green"),
    False: Style(color="red"),
}

ISSUE_COLUMN_RATIOS: dict[str, int] = {
    "type": 1,
    "severity": 1,
    "message": 3,
    "impact": 3,
    "fix": 3,
}


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="cqa")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    analyze_parser = subparsers.add_parser("analyze")
    source_group = analyze_parser.add_mutually_exclusive_group(required=True)
    source_group.add_argument(
        "--path", help="Python file, or directory walked for *.py files."
    )
    source_group.add_argument(
        "--stdin", action="store_true", help="Read source text from standard input."
    )
    source_group.add_argument(
        "--example", action="store_true", help="Analyze the bundled example snippet."
    )
    analyze_parser.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format.",
    )
    analyze_parser.add_argument(
        "--output",
        required=False,
        help="Optional output file path for raw JSON when --format json is used.",
    )
    analyze_parser.add_argument(
        "--allow-list",
        choices=ALLOW_LIST_MODES,
        default="compat",
        help="Semantic scanner allow-list mode.",
    )
    analyze_parser.add_argument(
        "--fail-on",
        choices=tuple(SEVERITY_RANK),
        required=False,
        help="Exit with code 1 when any issue reaches this severity.",
    )
    return parser


def run(
    argv: list[str],
    stdout: TextIO,
    stderr: TextIO,
    stdin: TextIO | None = None,
) -> int:
    """Run CLI command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.
        stdin: Standard input stream used by ``--stdin``.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.command == "analyze":
        return _run_analyze(
            args=args, stdout=stdout, stderr=stderr, stdin=stdin or sys.stdin
        )

    logger.warning(f"Unsupported command (command={args.command})")
    stderr.write(f"Unsupported command: {args.command}\n")
    return 2


def _run_analyze(
    args: argparse.Namespace, stdout: TextIO, stderr: TextIO, stdin: TextIO
) -> int:
    """Run analyze command.

    Args:
        args: Parsed CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.
        stdin: Standard input stream.

    Returns:
        Exit code.
    """
    try:
        sources, read_errors = _load_sources(args=args, stdin=stdin)
    except SourceReadError as exc:
        stderr.write(f"Failed to read source: {exc}\n")
        return 2
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        logger.warning(f"Failed to load sources (path={args.path} error={exc})")
        stderr.write(f"{exc}\n")
        return 2

    analyzer = CodeAnalyzer(config=AnalyzerConfig(allow_list=args.allow_list))
    reports = [(source.label, analyzer.analyze(source.text)) for source in sources]
    issue_count = sum(len(result.suggestions) for _, result in reports)
    logger.info(
        f"Analysis completed (sources={len(reports)} issues={issue_count} errors={len(read_errors)})"
    )
    for error in read_errors:
        stderr.write(f"read_error: {error}\n")

    if args.format == "json":
        if args.output:
            try:
                _write_json_file(
                    reports=reports, errors=read_errors, output_path=Path(args.output)
                )
            except OSError as exc:
                logger.warning(
                    f"Failed to write JSON output file (output_path={args.output} error={exc})"
                )
                stderr.write(f"Failed to write JSON output file: {args.output}\n")
                return 2
        else:
            _write_json(reports=reports, errors=read_errors, stdout=stdout)
    else:
        _write_tables(reports=reports, stdout=stdout)

    if args.fail_on and _reaches_severity(reports=reports, threshold=args.fail_on):
        return 1
    return 0


def _load_sources(
    args: argparse.Namespace, stdin: TextIO
) -> tuple[list[SourceFile], list[str]]:
    """Load the source texts selected by CLI arguments.

    Args:
        args: Parsed CLI arguments.
        stdin: Standard input stream.

    Returns:
        Loaded sources and messages for directory files that failed to read.

    Raises:
        SourceReadError: If a single-file source cannot be read.
        ValueError: If ``--path`` does not exist.
    """
    if args.example:
        return [SourceFile(label="<example>", text=EXAMPLE_CODE)], []
    if args.stdin:
        return [SourceFile(label="<stdin>", text=stdin.read())], []

    root_path = Path(args.path)
    if not root_path.exists():
        raise ValueError(f"Path does not exist: {root_path}")
    if root_path.is_file():
        return [read_source(root_path)], []

    rules = IgnoreRules.load(root_path)
    sources: list[SourceFile] = []
    errors: list[str] = []
    for file_path in discover_python_files(root=root_path, rules=rules):
        try:
            sources.append(
                read_source(file_path, label=file_path.relative_to(root_path).as_posix())
            )
        except SourceReadError as exc:
            errors.append(str(exc))
    return sources, errors


def _reaches_severity(
    reports: list[tuple[str, AnalysisResult]], threshold: Severity
) -> bool:
    minimum = SEVERITY_RANK[threshold]
    return any(
        SEVERITY_RANK[issue.severity] >= minimum
        for _, result in reports
        for issue in result.suggestions
    )


def _build_payload(
    reports: list[tuple[str, AnalysisResult]], errors: list[str]
) -> dict[str, object]:
    return {
        "reports": [
            {"source": label, "result": asdict(result)} for label, result in reports
        ],
        "errors": errors,
    }


def _write_json(
    reports: list[tuple[str, AnalysisResult]], errors: list[str], stdout: TextIO
) -> None:
    """Write reports and read errors in JSON format.

    Args:
        reports: Source labels paired with their analysis results.
        errors: Read error messages.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.print(
        json.dumps(_build_payload(reports=reports, errors=errors), indent=2, sort_keys=True),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def _write_json_file(
    reports: list[tuple[str, AnalysisResult]], errors: list[str], output_path: Path
) -> None:
    """Write raw JSON payload to an output file.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(_build_payload(reports=reports, errors=errors), indent=2, sort_keys=True),
        encoding="utf-8",
    )


def _write_tables(reports: list[tuple[str, AnalysisResult]], stdout: TextIO) -> None:
    """Write one summary table and one issue table per analyzed source."""
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    for label, result in reports:
        console.rule(Text(label), style=Style(color="cyan"), characters="-")
        verdict = "Valid Python code" if result.is_valid else "Invalid Python code"
        console.print(verdict, style=VALIDITY_STYLES[result.is_valid])

        summary = Table(show_header=True, expand=True)
        summary.add_column("metric")
        summary.add_column("value", justify="right")
        metrics = result.metrics
        for name, value in (
            ("issues_found", str(len(result.suggestions))),
            ("confidence", f"{result.confidence:.1f}%"),
            ("time_complexity", result.time_complexity),
            ("space_complexity", result.space_complexity),
            ("cyclomatic_complexity", str(metrics.cyclomatic_complexity)),
            ("maintainability_index", f"{metrics.maintainability_index:.1f}"),
            ("lines_of_code", str(metrics.lines_of_code)),
            ("number_of_functions", str(metrics.number_of_functions)),
            ("average_function_length", f"{metrics.average_function_length:.1f} lines"),
            ("comment_coverage", f"{metrics.comment_coverage:.1f}%"),
            ("test_coverage", f"{metrics.test_coverage:.1f}%"),
            ("security_score", str(metrics.security_score)),
        ):
            summary.add_row(name, value)
        console.print(summary)

        if not result.suggestions:
            continue
        issues = Table(show_header=True, show_lines=True, expand=True)
        for column, ratio in ISSUE_COLUMN_RATIOS.items():
            issues.add_column(column, ratio=ratio, overflow="fold")
        for issue in result.suggestions:
            issues.add_row(
                *(
                    Text(cell)
                    for cell in (
                        issue.type,
                        issue.severity,
                        issue.message,
                        issue.impact,
                        issue.fix,
                    )
                ),
                style=SEVERITY_STYLES[issue.severity],
            )
        console.print(issues)


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
