# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Anti-pattern scanner."""

from cqa.model import CodeIssue
from cqa.rules import BEST_PRACTICE_RULES


class BestPracticeScanner:
    """Flag known anti-patterns, at most one issue per rule."""

    def scan(self, text: str) -> list[CodeIssue]:
        return [
            template.to_issue()
            for pattern, template in BEST_PRACTICE_RULES
            if pattern.search(text)
        ]


def find_best_practice_issues(text: str) -> list[CodeIssue]:
    """Return best-practice issues for ``text``."""
    return BestPracticeScanner().scan(text)
