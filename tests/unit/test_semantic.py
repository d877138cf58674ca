# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for the undefined-name scanner."""

import pytest

from cqa.config import AnalyzerConfig
from cqa.scanners import SemanticScanner, find_semantic_issues


def _names(code: str, allow_list: str = "compat") -> list[str]:
    scanner = SemanticScanner(config=AnalyzerConfig(allow_list=allow_list))
    return [issue.message.split("'")[1] for issue in scanner.scan(code)]


def test_sem_001_undefined_name_in_body_is_flagged() -> None:
    issues = find_semantic_issues("def f(x):\n    return y")

    assert len(issues) == 1
    issue = issues[0]
    assert issue.type == "semantic"
    assert issue.severity == "medium"
    assert issue.message == "Variable 'y' might need to be defined"
    assert issue.category == "Semantic"


def test_sem_002_parameters_and_assignments_are_local() -> None:
    code = "def f(a, b=2, *args, c: int = 3):\n    total = a + b + c\n    return total"

    assert find_semantic_issues(code) == []


def test_sem_003_repeated_unknown_name_is_not_deduplicated() -> None:
    assert _names("def f():\n    return z + z") == ["z", "z"]


def test_sem_004_augmented_assignment_binds_name() -> None:
    assert _names("def f():\n    count += 1\n    return count") == []


def test_sem_005_comparison_does_not_bind_name() -> None:
    assert _names("def f(a):\n    if a == b:\n        return a") == ["b"]


def test_sem_006_attribute_access_is_a_known_false_positive() -> None:
    assert _names("def f(items):\n    items.append(1)") == ["append"]


def test_sem_007_body_stops_at_next_unindented_line() -> None:
    code = "def f(x):\n    return x\nresult = other"

    assert _names(code) == []


def test_sem_008_compat_mode_flags_loop_targets() -> None:
    code = "def f(n):\n    for i in range(n):\n        print(i)"

    assert _names(code) == ["i", "i"]


def test_sem_009_extended_mode_binds_loop_and_alias_targets() -> None:
    loop = "def f(n):\n    for i, j in range(n):\n        print(i, j, abs(n))"
    alias = "def f(path):\n    with open(path) as fh:\n        return fh.read()"

    assert _names(loop, allow_list="extended") == []
    assert _names(alias, allow_list="extended") == ["read"]


def test_sem_010_code_without_functions_is_clean() -> None:
    assert find_semantic_issues("x = y + z") == []


def test_sem_011_config_rejects_unknown_allow_list_mode() -> None:
    with pytest.raises(ValueError):
        AnalyzerConfig(allow_list="strict")  # type: ignore[arg-type]
