# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for analysis results."""

from dataclasses import dataclass
from typing import Literal

IssueType = Literal[
    "security",
    "error",
    "performance",
    "style",
    "logic",
    "best_practice",
    "complexity",
    "memory",
    "syntax",
    "semantic",
    "documentation",
    "concurrency",
    "validation",
    "dependency",
]
Severity = Literal["low", "medium", "high", "critical"]

SEVERITY_RANK: dict[Severity, int] = {
    "low": 0,
    "medium": 1,
    "high": 2,
    "critical": 3,
}


@dataclass(frozen=True)
class CodeIssue:
    """Represent one detected problem.

    Attributes:
        type: Issue category tag.
        severity: Issue severity tag.
        message: Human readable description of the problem.
        fix: Suggested remedy.
        impact: Consequence of leaving the problem in place.
        category: Display grouping label.
        line: Source line of the problem; no rule currently sets it.
    """

    type: IssueType
    severity: Severity
    message: str
    fix: str
    impact: str
    category: str
    line: int | None = None


@dataclass(frozen=True)
class AnalysisMetrics:
    """Represent numeric scores derived from source text.

    Attributes:
        cyclomatic_complexity: Decision keyword count plus one.
        maintainability_index: Size/complexity composite, floored at 0.
        lines_of_code: Total line count including blank and comment lines.
        number_of_functions: Count of ``def`` headers.
        average_function_length: Lines per function.
        comment_coverage: Percentage of lines holding a comment marker.
        duplicate_code: Placeholder, always 0.
        unused_code: Placeholder, always 0.
        test_coverage: Percentage of functions named ``test_*``.
        security_score: 100 minus 20 per security issue; may go negative.
    """

    cyclomatic_complexity: int
    maintainability_index: float
    lines_of_code: int
    number_of_functions: int
    average_function_length: float
    comment_coverage: float
    duplicate_code: float
    unused_code: float
    test_coverage: float
    security_score: int


@dataclass(frozen=True)
class AnalysisResult:
    """Represent the aggregate report for one analysis call.

    Attributes:
        is_valid: Structural validation verdict.
        has_bug: ``True`` when invalid or when any issue was found.
        confidence: ``100 - 10 * len(suggestions)`` clamped to [0, 100].
        suggestions: Ordered issues; a syntax issue, when present, is first.
        metrics: Derived metrics.
        time_complexity: Guessed time complexity label.
        space_complexity: Space complexity label, always ``O(1)``.
        syntax_validity: Mirrors ``is_valid``.
        semantic_validity: ``True`` when no semantic issue was found.
    """

    is_valid: bool
    has_bug: bool
    confidence: int
    suggestions: tuple[CodeIssue, ...]
    metrics: AnalysisMetrics
    time_complexity: str
    space_complexity: str
    syntax_validity: bool
    semantic_validity: bool
