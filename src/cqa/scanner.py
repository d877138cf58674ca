# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Scanner interface shared by the issue scanners."""

from typing import Protocol

from cqa.model import CodeIssue


class Scanner(Protocol):
    """Text-based issue scanner contract."""

    def scan(self, text: str) -> list[CodeIssue]:
        """Scan source text and return detected issues in rule order."""
