# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Count-based metrics and complexity class guesses."""

import math

from cqa.model import AnalysisMetrics
from cqa.rules import (
    COMMENT_PATTERN,
    CONSTANT_COMPLEXITY,
    DECISION_KEYWORD_PATTERN,
    FUNCTION_DEF_PATTERN,
    LINEAR_COMPLEXITY,
    LOOP_PATTERN,
    NESTED_LOOP_PATTERN,
    QUADRATIC_COMPLEXITY,
    TEST_FUNCTION_DEF_PATTERN,
)

SECURITY_PENALTY = 20


def calculate_metrics(text: str, security_issue_count: int) -> AnalysisMetrics:
    """Derive metrics from token and line counts.

    Args:
        text: Non-empty source text.
        security_issue_count: Number of security issues found in ``text``.

    Returns:
        Metrics record. Only ``maintainability_index`` is floored at 0.
    """
    line_count = len(text.split("\n"))
    complexity = cyclomatic_complexity(text)
    function_count = len(FUNCTION_DEF_PATTERN.findall(text))
    test_count = len(TEST_FUNCTION_DEF_PATTERN.findall(text))
    comment_lines = len(COMMENT_PATTERN.findall(text))
    return AnalysisMetrics(
        cyclomatic_complexity=complexity,
        maintainability_index=maintainability_index(
            length=len(text), complexity=complexity, line_count=line_count
        ),
        lines_of_code=line_count,
        number_of_functions=function_count,
        average_function_length=line_count / max(1, function_count),
        comment_coverage=comment_lines / line_count * 100,
        duplicate_code=0.0,
        unused_code=0.0,
        test_coverage=test_count / max(1, function_count) * 100,
        security_score=100 - security_issue_count * SECURITY_PENALTY,
    )


def cyclomatic_complexity(text: str) -> int:
    """Return 1 plus the number of branching and boolean keyword tokens."""
    return len(DECISION_KEYWORD_PATTERN.findall(text)) + 1


def maintainability_index(length: int, complexity: int, line_count: int) -> float:
    """Return the classic maintainability index rescaled to 0-100.

    Args:
        length: Text length in characters, at least 1.
        complexity: Cyclomatic complexity proxy.
        line_count: Number of lines, at least 1.

    Returns:
        Index floored at 0.
    """
    raw = 171 - 5.2 * math.log(length) - 0.23 * complexity - 16.2 * math.log(line_count)
    return max(0.0, raw * 100 / 171)


def guess_time_complexity(text: str) -> str:
    """Guess a time complexity label from loop headers."""
    if NESTED_LOOP_PATTERN.search(text):
        return QUADRATIC_COMPLEXITY
    if LOOP_PATTERN.search(text):
        return LINEAR_COMPLEXITY
    return CONSTANT_COMPLEXITY


def guess_space_complexity(text: str) -> str:
    """Return the space complexity label, which is always constant."""
    return CONSTANT_COMPLEXITY
