# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Issue scanners for the code quality analyzer."""

from cqa.scanners.best_practice import BestPracticeScanner, find_best_practice_issues
from cqa.scanners.security import SecurityScanner, find_security_issues
from cqa.scanners.semantic import SemanticScanner, find_semantic_issues

__all__ = [
    "BestPracticeScanner",
    "SecurityScanner",
    "SemanticScanner",
    "find_best_practice_issues",
    "find_security_issues",
    "find_semantic_issues",
]
