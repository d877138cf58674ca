# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Report assembly: run every pass over the text and merge the results."""

import logging

from cqa.config import AnalyzerConfig
from cqa.metrics import calculate_metrics, guess_space_complexity, guess_time_complexity
from cqa.model import AnalysisMetrics, AnalysisResult, CodeIssue
from cqa.rules import CONSTANT_COMPLEXITY, SYNTAX_ERROR
from cqa.scanner import Scanner
from cqa.scanners import BestPracticeScanner, SecurityScanner, SemanticScanner
from cqa.syntax import validate_python_code

logger = logging.getLogger(__name__)

CONFIDENCE_PENALTY = 10

EMPTY_METRICS = AnalysisMetrics(
    cyclomatic_complexity=0,
    maintainability_index=100.0,
    lines_of_code=0,
    number_of_functions=0,
    average_function_length=0.0,
    comment_coverage=0.0,
    duplicate_code=0.0,
    unused_code=0.0,
    test_coverage=0.0,
    security_score=100,
)

EMPTY_RESULT = AnalysisResult(
    is_valid=True,
    has_bug=False,
    confidence=100,
    suggestions=(),
    metrics=EMPTY_METRICS,
    time_complexity=CONSTANT_COMPLEXITY,
    space_complexity=CONSTANT_COMPLEXITY,
    syntax_validity=True,
    semantic_validity=True,
)


class CodeAnalyzer:
    """Build an analysis report from raw source text."""

    def __init__(self, config: AnalyzerConfig | None = None) -> None:
        """Initialize analyzer.

        Args:
            config: Analyzer options; defaults to :class:`AnalyzerConfig`.
        """
        self._config = config or AnalyzerConfig()
        # Order matters: semantic, best-practice, security.
        self._scanners: tuple[Scanner, Scanner, Scanner] = (
            SemanticScanner(config=self._config),
            BestPracticeScanner(),
            SecurityScanner(),
        )

    def analyze(self, text: str) -> AnalysisResult:
        """Analyze source text.

        Args:
            text: Source text of any size or shape.

        Returns:
            Complete report. Invalid-looking source is reported as a leading
            ``syntax`` issue rather than raised.
        """
        if not text.strip():
            return EMPTY_RESULT

        is_valid = validate_python_code(text)
        semantic_issues, best_practice_issues, security_issues = (
            scanner.scan(text) for scanner in self._scanners
        )

        issues: list[CodeIssue] = []
        if not is_valid:
            issues.append(SYNTAX_ERROR.to_issue())
        issues.extend(semantic_issues)
        issues.extend(best_practice_issues)
        issues.extend(security_issues)

        confidence = max(0, min(100, 100 - CONFIDENCE_PENALTY * len(issues)))
        logger.debug(
            f"Analysis completed (valid={is_valid} issues={len(issues)} confidence={confidence})"
        )
        return AnalysisResult(
            is_valid=is_valid,
            has_bug=not is_valid or bool(issues),
            confidence=confidence,
            suggestions=tuple(issues),
            metrics=calculate_metrics(text, security_issue_count=len(security_issues)),
            time_complexity=guess_time_complexity(text),
            space_complexity=guess_space_complexity(text),
            syntax_validity=is_valid,
            semantic_validity=not semantic_issues,
        )


def analyze_code(text: str, config: AnalyzerConfig | None = None) -> AnalysisResult:
    """Analyze source text with a fresh :class:`CodeAnalyzer`."""
    return CodeAnalyzer(config=config).analyze(text)
