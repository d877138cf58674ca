# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Undefined-name scanner over textually extracted function bodies.

This is a textual approximation. It does not track scoping, imports or
closures, and every occurrence of an unrecognised name is reported on its own.
"""

import logging

from cqa.config import AnalyzerConfig
from cqa.model import CodeIssue
from cqa.rules import (
    ASSIGNMENT_TARGET_PATTERN,
    BINDING_TARGET_PATTERN,
    COMPAT_ALLOWED_NAMES,
    EXTENDED_ALLOWED_NAMES,
    FUNCTION_WITH_BODY_PATTERN,
    IDENTIFIER_PATTERN,
    PARAMETER_NAME_PATTERN,
    UNDEFINED_NAME,
)

logger = logging.getLogger(__name__)


class SemanticScanner:
    """Flag identifiers used in a function body but never bound there."""

    def __init__(self, config: AnalyzerConfig | None = None) -> None:
        """Initialize scanner.

        Args:
            config: Analyzer options; defaults to the compat allow-list.
        """
        self._config = config or AnalyzerConfig()
        self._extended = self._config.allow_list == "extended"
        self._allowed = EXTENDED_ALLOWED_NAMES if self._extended else COMPAT_ALLOWED_NAMES

    def scan(self, text: str) -> list[CodeIssue]:
        """Scan every function body in text.

        Args:
            text: Source text.

        Returns:
            One semantic issue per unrecognised identifier occurrence.
        """
        issues: list[CodeIssue] = []
        for match in FUNCTION_WITH_BODY_PATTERN.finditer(text):
            body = match.group("body")
            local_names = self._collect_local_names(match.group("params"), body)
            for token in IDENTIFIER_PATTERN.findall(body):
                if token in local_names or token in self._allowed:
                    continue
                issues.append(UNDEFINED_NAME.to_issue(name=token))
        logger.debug(
            f"Semantic scan completed (issues={len(issues)} allow_list={self._config.allow_list})"
        )
        return issues

    def _collect_local_names(self, params: str, body: str) -> set[str]:
        names: set[str] = set()
        for piece in params.split(","):
            param = PARAMETER_NAME_PATTERN.match(piece)
            if param:
                names.add(param.group(1))
        names.update(ASSIGNMENT_TARGET_PATTERN.findall(body))
        if self._extended:
            names.update(self._collect_binding_targets(body))
        return names

    def _collect_binding_targets(self, body: str) -> set[str]:
        targets: set[str] = set()
        for match in BINDING_TARGET_PATTERN.finditer(body):
            if match.group("alias"):
                targets.add(match.group("alias"))
                continue
            for part in match.group("loop").split(","):
                if part.strip():
                    targets.add(part.strip())
        return targets


def find_semantic_issues(text: str, config: AnalyzerConfig | None = None) -> list[CodeIssue]:
    """Return semantic issues for ``text``."""
    return SemanticScanner(config=config).scan(text)
