# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for the best-practice and security scanners."""

from cqa.scanners import find_best_practice_issues, find_security_issues


def test_scan_001_mutable_default_argument_is_flagged_once() -> None:
    code = "\n".join(
        [
            "def f(items=[]):",
            "    return items",
            "def g(a, cache=[ ]):",
            "    return cache",
        ]
    )

    issues = find_best_practice_issues(code)

    assert len(issues) == 1
    assert issues[0].type == "best_practice"
    assert issues[0].severity == "medium"
    assert issues[0].message == "Mutable default argument used"
    assert issues[0].line is None


def test_scan_002_bare_except_is_flagged_with_low_severity() -> None:
    code = "try:\n    run()\nexcept:\n    pass"

    issues = find_best_practice_issues(code)

    assert [(issue.type, issue.severity) for issue in issues] == [
        ("best_practice", "low")
    ]


def test_scan_003_typed_except_and_none_default_are_clean() -> None:
    code = "def f(items=None):\n    try:\n        run()\n    except ValueError:\n        pass"

    assert find_best_practice_issues(code) == []


def test_scan_004_best_practice_rules_report_in_catalogue_order() -> None:
    code = "def f(x=[]):\n    try:\n        pass\n    except:\n        pass"

    messages = [issue.message for issue in find_best_practice_issues(code)]

    assert messages == ["Mutable default argument used", "Bare except clause used"]


def test_scan_005_dynamic_evaluation_is_one_critical_issue() -> None:
    code = "a = eval(x)\nb = eval (y)\nexec(z)"

    issues = find_security_issues(code)

    assert len(issues) == 1
    assert issues[0].type == "security"
    assert issues[0].severity == "critical"
    assert "dynamic evaluation" in issues[0].message.lower()


def test_scan_006_literal_eval_is_not_dynamic_evaluation() -> None:
    assert find_security_issues("value = ast.literal_eval(text)") == []


def test_scan_007_single_credential_pattern_yields_one_high_issue() -> None:
    issues = find_security_issues('password = "abc123"')

    assert len(issues) == 1
    assert issues[0].severity == "high"
    assert issues[0].message == "Hardcoded credentials detected"


def test_scan_008_each_credential_pattern_contributes_an_issue() -> None:
    code = "\n".join(
        [
            'password = "abc123"',
            "api_key='k-123'",
            'secret = "s3cr3t"',
            'password = "again"',
        ]
    )

    issues = find_security_issues(code)

    assert len(issues) == 3
    assert all(issue.type == "security" for issue in issues)
    assert all(issue.severity == "high" for issue in issues)


def test_scan_009_empty_credential_literal_is_not_flagged() -> None:
    assert find_security_issues('password = ""') == []
