# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for count-based metrics and complexity guesses."""

import math

import pytest

from cqa.metrics import (
    calculate_metrics,
    cyclomatic_complexity,
    guess_space_complexity,
    guess_time_complexity,
    maintainability_index,
)


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("x = 1", 1),
        ("diff = format_or_default()", 1),
        ("if a and b:\n    pass", 3),
        ("for x in y:\n    pass", 2),
        ("try:\n    pass\nexcept ValueError:\n    pass\nwhile x or y:\n    pass", 4),
    ],
)
def test_met_001_cyclomatic_complexity_counts_whole_keywords(
    code: str, expected: int
) -> None:
    assert cyclomatic_complexity(code) == expected


def test_met_002_function_counts_and_test_coverage() -> None:
    code = "def a():\n    pass\ndef test_a():\n    pass"

    metrics = calculate_metrics(code, security_issue_count=0)

    assert metrics.lines_of_code == 4
    assert metrics.number_of_functions == 2
    assert metrics.average_function_length == pytest.approx(2.0)
    assert metrics.test_coverage == pytest.approx(50.0)
    assert metrics.duplicate_code == 0
    assert metrics.unused_code == 0


def test_met_003_lines_include_blank_and_trailing_lines() -> None:
    metrics = calculate_metrics("x = 1\n\ny = 2\n", security_issue_count=0)

    assert metrics.lines_of_code == 4
    assert metrics.average_function_length == pytest.approx(4.0)
    assert metrics.test_coverage == 0


def test_met_004_comment_coverage_counts_lines_with_marker() -> None:
    metrics = calculate_metrics("x = 1  # c\ny = 2\nz = 3\n# d", security_issue_count=0)

    assert metrics.comment_coverage == pytest.approx(50.0)


def test_met_005_maintainability_index_follows_formula() -> None:
    code = "def f(x):\n    if x:\n        return 1\n    return 0"
    complexity = cyclomatic_complexity(code)
    expected = (
        171
        - 5.2 * math.log(len(code))
        - 0.23 * complexity
        - 16.2 * math.log(len(code.split("\n")))
    ) * 100 / 171

    metrics = calculate_metrics(code, security_issue_count=0)

    assert metrics.maintainability_index == pytest.approx(expected)


def test_met_006_maintainability_index_is_floored_at_zero() -> None:
    assert maintainability_index(length=10**60, complexity=10**6, line_count=10**6) == 0.0


def test_met_007_security_score_is_not_floored() -> None:
    assert calculate_metrics("x = 1", security_issue_count=2).security_score == 60
    assert calculate_metrics("x = 1", security_issue_count=6).security_score == -20


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("for i in a:\n    for j in b:\n        pass", "O(n²)"),
        ("for i in a:\n    for j in b:", "O(n²)"),
        ("for i in a:\n    total = i", "O(n)"),
        ("while running:\n    step()", "O(n)"),
        ("x = 1\ny = x + 1", "O(1)"),
    ],
)
def test_met_008_time_complexity_guess(code: str, expected: str) -> None:
    assert guess_time_complexity(code) == expected


def test_met_009_space_complexity_is_always_constant() -> None:
    code = "for i in a:\n    for j in b:\n        cache.append([0] * n)"

    assert guess_space_complexity(code) == "O(1)"
