# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for syntax plausibility and structural validation."""

import pytest

from cqa.syntax import is_syntax_plausible, validate_python_code


@pytest.mark.parametrize("text", ["", "   ", "\n\t\n"])
def test_syn_001_validator_rejects_empty_input(text: str) -> None:
    assert validate_python_code(text) is False


def test_syn_002_validator_rejects_unbalanced_brackets() -> None:
    assert validate_python_code("def f(:\n    return 1") is False


def test_syn_003_validator_accepts_simple_function() -> None:
    assert validate_python_code("def add(a, b):\n    return a + b\n") is True


def test_syn_004_validator_rejects_colon_line_without_block_keyword() -> None:
    code = "with open(path) as fh:\n    data = fh.read()"

    assert validate_python_code(code) is False


def test_syn_005_validator_rejects_odd_quote_count() -> None:
    assert validate_python_code('def f():\n    return "abc\n') is False


@pytest.mark.parametrize(
    "code",
    [
        "def 1bad():\n    return 1",
        "class 9Thing:\n    pass",
    ],
)
def test_syn_006_validator_rejects_malformed_definition_headers(code: str) -> None:
    assert validate_python_code(code) is False


def test_syn_007_validator_rejects_assignment_in_condition() -> None:
    code = "def f(x):\n    if x = 1:\n        return x"

    assert validate_python_code(code) is False


def test_syn_008_validator_accepts_comparison_in_condition() -> None:
    code = "def f(x):\n    if x == 1:\n        return x"

    assert validate_python_code(code) is True


def test_syn_009_checker_rejects_header_without_content() -> None:
    assert is_syntax_plausible("if:\n    pass") is False
    assert validate_python_code("while:\n    pass") is False


@pytest.mark.parametrize("text", ["(]", "([)]", "x = [1, 2", "}"])
def test_syn_010_checker_rejects_mismatched_brackets(text: str) -> None:
    assert is_syntax_plausible(text) is False


def test_syn_011_checker_requires_python_looking_construct() -> None:
    assert is_syntax_plausible("hello world") is False
    assert validate_python_code('print("hi")') is False


def test_syn_012_checker_accepts_four_space_or_tab_indentation() -> None:
    assert is_syntax_plausible("values = (\n    1\n)") is True
    assert is_syntax_plausible("values = [\n\t1]") is True


def test_syn_013_error_patterns_stay_on_one_line() -> None:
    assert validate_python_code("x = 1\n\n\n\nif:\n    pass") is False
    assert is_syntax_plausible("def f(x):\n\n\n    return x") is True
    assert is_syntax_plausible("x = 1\n\n\nif y:\n\n") is True
