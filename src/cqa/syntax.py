# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Heuristic syntax plausibility and structural validation.

Neither check parses Python. Both are filters over superficial patterns, so
false positives and false negatives are expected.
"""

import logging

from cqa.rules import (
    BLOCK_HEADER_PATTERN,
    BRACKET_PAIRS,
    CLASS_HEADER_PATTERN,
    CLOSING_BRACKETS,
    COMMON_ERROR_PATTERNS,
    FUNCTION_HEADER_PATTERN,
    PLAUSIBLE_PYTHON_PATTERNS,
    QUOTE_PATTERN,
    WELL_FORMED_CLASS_HEADER,
    WELL_FORMED_FUNCTION_HEADER,
)

logger = logging.getLogger(__name__)


def is_syntax_plausible(text: str) -> bool:
    """Return whether text superficially looks like valid Python.

    Args:
        text: Source text. Callers reject empty input beforehand.

    Returns:
        ``True`` when brackets balance, no common error pattern matches and at
        least one Python-looking construct is present.
    """
    if not _brackets_balanced(text):
        logger.debug("Syntax plausibility failed (reason=unbalanced_brackets)")
        return False
    for pattern in COMMON_ERROR_PATTERNS:
        if pattern.search(text):
            logger.debug(
                f"Syntax plausibility failed (reason=common_error pattern={pattern.pattern!r})"
            )
            return False
    return any(pattern.search(text) for pattern in PLAUSIBLE_PYTHON_PATTERNS)


def validate_python_code(text: str) -> bool:
    """Run line and definition level checks, then the plausibility check.

    Args:
        text: Source text.

    Returns:
        ``False`` for empty input or when any structural check fails,
        otherwise the result of :func:`is_syntax_plausible`.
    """
    if not text.strip():
        return False

    for line in text.split("\n"):
        stripped = line.strip()
        if stripped.endswith(":") and not BLOCK_HEADER_PATTERN.match(stripped):
            logger.debug(f"Structural validation failed (reason=colon_line line={stripped!r})")
            return False

    for header in FUNCTION_HEADER_PATTERN.findall(text):
        if not WELL_FORMED_FUNCTION_HEADER.search(header):
            logger.debug(f"Structural validation failed (reason=function_header header={header!r})")
            return False
    for header in CLASS_HEADER_PATTERN.findall(text):
        if not WELL_FORMED_CLASS_HEADER.search(header):
            logger.debug(f"Structural validation failed (reason=class_header header={header!r})")
            return False

    if len(QUOTE_PATTERN.findall(text)) % 2 != 0:
        logger.debug("Structural validation failed (reason=odd_quote_count)")
        return False

    return is_syntax_plausible(text)


def _brackets_balanced(text: str) -> bool:
    stack: list[str] = []
    for char in text:
        if char in BRACKET_PAIRS:
            stack.append(char)
        elif char in CLOSING_BRACKETS:
            if not stack or BRACKET_PAIRS[stack.pop()] != char:
                return False
    return not stack
