# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unsafe construct scanner."""

from cqa.model import CodeIssue
from cqa.rules import (
    CREDENTIAL_PATTERNS,
    DYNAMIC_EVALUATION,
    DYNAMIC_EVALUATION_PATTERN,
    HARDCODED_CREDENTIALS,
)


class SecurityScanner:
    """Flag dynamic evaluation and hardcoded credentials."""

    def scan(self, text: str) -> list[CodeIssue]:
        """Scan text for unsafe constructs.

        Dynamic evaluation yields one issue however often it occurs. Each
        credential pattern that matches contributes its own issue.

        Args:
            text: Source text.

        Returns:
            Security issues in rule order.
        """
        issues: list[CodeIssue] = []
        if DYNAMIC_EVALUATION_PATTERN.search(text):
            issues.append(DYNAMIC_EVALUATION.to_issue())
        issues.extend(
            HARDCODED_CREDENTIALS.to_issue()
            for pattern in CREDENTIAL_PATTERNS
            if pattern.search(text)
        )
        return issues


def find_security_issues(text: str) -> list[CodeIssue]:
    """Return security issues for ``text``."""
    return SecurityScanner().scan(text)
