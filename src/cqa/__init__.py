# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for the code quality analyzer."""

from cqa.config import AnalyzerConfig
from cqa.model import AnalysisMetrics, AnalysisResult, CodeIssue
from cqa.report import CodeAnalyzer, analyze_code

__all__ = [
    "AnalysisMetrics",
    "AnalysisResult",
    "AnalyzerConfig",
    "CodeAnalyzer",
    "CodeIssue",
    "analyze_code",
]
