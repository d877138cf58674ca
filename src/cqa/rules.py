# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Static rule tables: regex catalogues, canned issue texts and allow-lists."""

import builtins
import keyword
import re
from dataclasses import dataclass

from cqa.model import CodeIssue, IssueType, Severity


@dataclass(frozen=True)
class IssueTemplate:
    """Canned issue text for one rule.

    Attributes:
        type: Issue category tag.
        severity: Issue severity tag.
        message: Message text; may contain ``{name}`` placeholders.
        fix: Suggested remedy.
        impact: Consequence of leaving the problem in place.
        category: Display grouping label.
    """

    type: IssueType
    severity: Severity
    message: str
    fix: str
    impact: str
    category: str

    def to_issue(self, **values: str) -> CodeIssue:
        """Build an issue, interpolating ``values`` into the message only."""
        return CodeIssue(
            type=self.type,
            severity=self.severity,
            message=self.message.format(**values) if values else self.message,
            fix=self.fix,
            impact=self.impact,
            category=self.category,
        )


# Syntax plausibility

BRACKET_PAIRS: dict[str, str] = {"(": ")", "[": "]", "{": "}"}
CLOSING_BRACKETS: frozenset[str] = frozenset(BRACKET_PAIRS.values())

COMMON_ERROR_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"^[ \t]*(?:if|elif|while)\b(?=[^\n]*:[ \t]*$)[^\n]*?[^=!<>:]=[^=]", re.MULTILINE
    ),
    re.compile(r"^[ \t]*while[ \t]*:[ \t]*$", re.MULTILINE),
    re.compile(r"^[ \t]*if[ \t]*:[ \t]*$", re.MULTILINE),
    re.compile(r"^[ \t]*for[ \t]*:[ \t]*$", re.MULTILINE),
    re.compile(r"^[ \t]*def[ \t]*:[ \t]*$", re.MULTILINE),
    re.compile(r"^[ \t]*class[ \t]*:[ \t]*$", re.MULTILINE),
)

PLAUSIBLE_PYTHON_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^(?: {4}|\t)\S", re.MULTILINE),
    re.compile(r"\bdef\s+[a-zA-Z_]\w*\s*\([^)]*\)\s*:"),
    re.compile(r"\bclass\s+[a-zA-Z_]\w*(?:\s*\([^)]*\))?\s*:"),
    re.compile(r"^[ \t]*if\s[^\n]*:", re.MULTILINE),
    re.compile(r"^[ \t]*for\s[^\n]*:", re.MULTILINE),
    re.compile(r"^[ \t]*while\s[^\n]*:", re.MULTILINE),
)

# Structural validation

BLOCK_HEADER_PATTERN = re.compile(
    r"^(?:if|elif|else|while|for|def|class|try|except|finally)\b"
)
FUNCTION_HEADER_PATTERN = re.compile(r"def\s+\w+\s*\([^)]*\)\s*:")
WELL_FORMED_FUNCTION_HEADER = re.compile(r"def\s+[a-zA-Z_]\w*\s*\([^)]*\)\s*:")
CLASS_HEADER_PATTERN = re.compile(r"class\s+\w+(?:\s*\([^)]*\))?\s*:")
WELL_FORMED_CLASS_HEADER = re.compile(r"class\s+[a-zA-Z_]\w*(?:\s*\([^)]*\))?\s*:")
QUOTE_PATTERN = re.compile(r"[\"']")

SYNTAX_ERROR = IssueTemplate(
    type="syntax",
    severity="critical",
    message="Invalid Python syntax detected",
    fix="Review and correct syntax errors",
    impact="Code will not execute",
    category="Syntax",
)

# Semantic scan

FUNCTION_WITH_BODY_PATTERN = re.compile(
    r"def\s+\w+\s*\((?P<params>[^)]*)\)[^:\n]*:(?P<body>[\s\S]*?)(?=\n\S|\Z)"
)
PARAMETER_NAME_PATTERN = re.compile(r"\s*\**\s*([A-Za-z_]\w*)")
ASSIGNMENT_TARGET_PATTERN = re.compile(
    r"\b([A-Za-z_]\w*)[ \t]*(?://|\*\*|>>|<<|[-+*/%&|^@])?=(?!=)"
)
BINDING_TARGET_PATTERN = re.compile(
    r"\b(?:for\s+(?P<loop>[A-Za-z_][\w\s,]*?)\s+in\b|as\s+(?P<alias>[A-Za-z_]\w*))"
)
IDENTIFIER_PATTERN = re.compile(r"\b[A-Za-z_]\w*\b")

COMPAT_ALLOWED_NAMES: frozenset[str] = frozenset(
    {
        "print",
        "def",
        "class",
        "return",
        "if",
        "else",
        "elif",
        "while",
        "for",
        "in",
        "and",
        "or",
        "not",
        "True",
        "False",
        "None",
        "len",
        "range",
        "str",
        "int",
        "float",
        "list",
        "dict",
        "set",
        "tuple",
    }
)
EXTENDED_ALLOWED_NAMES: frozenset[str] = COMPAT_ALLOWED_NAMES | frozenset(
    keyword.kwlist + keyword.softkwlist + dir(builtins)
)

UNDEFINED_NAME = IssueTemplate(
    type="semantic",
    severity="medium",
    message="Variable '{name}' might need to be defined",
    fix="Ensure the variable is defined before use or imported if it comes from a module",
    impact="Potential runtime error if variable is undefined",
    category="Semantic",
)

# Best practices

BEST_PRACTICE_RULES: tuple[tuple[re.Pattern[str], IssueTemplate], ...] = (
    (
        re.compile(r"def\s+\w+\s*\([^)]*=\s*\[\s*\][^)]*\)"),
        IssueTemplate(
            type="best_practice",
            severity="medium",
            message="Mutable default argument used",
            fix="Use None as default and initialize mutable object inside function",
            impact="Potential unexpected behavior with shared mutable state",
            category="Best Practices",
        ),
    ),
    (
        re.compile(r"\bexcept\s*:"),
        IssueTemplate(
            type="best_practice",
            severity="low",
            message="Bare except clause used",
            fix="Specify exception types to catch",
            impact="May hide errors or catch unexpected exceptions",
            category="Best Practices",
        ),
    ),
)

# Security

DYNAMIC_EVALUATION_PATTERN = re.compile(r"\b(?:eval|exec)\s*\(")
DYNAMIC_EVALUATION = IssueTemplate(
    type="security",
    severity="critical",
    message="Use of eval() detected: dynamic evaluation of code",
    fix="Avoid using eval() and use safer alternatives such as ast.literal_eval",
    impact="Critical security vulnerability - arbitrary code execution",
    category="Security",
)

CREDENTIAL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"password\s*=\s*[\"'][^\"']+[\"']"),
    re.compile(r"api_key\s*=\s*[\"'][^\"']+[\"']"),
    re.compile(r"secret\s*=\s*[\"'][^\"']+[\"']"),
)
HARDCODED_CREDENTIALS = IssueTemplate(
    type="security",
    severity="high",
    message="Hardcoded credentials detected",
    fix="Use environment variables or secure credential management",
    impact="Security risk - exposed sensitive information",
    category="Security",
)

# Metrics

DECISION_KEYWORD_PATTERN = re.compile(r"\b(?:if|elif|for|while|and|or|except)\b")
FUNCTION_DEF_PATTERN = re.compile(r"\bdef\s+")
TEST_FUNCTION_DEF_PATTERN = re.compile(r"\bdef\s+test_")
COMMENT_PATTERN = re.compile(r"#.*$", re.MULTILINE)
NESTED_LOOP_PATTERN = re.compile(
    r"^[ \t]*for\b[^\n]*:[^\n]*\n(?:[ \t]*\n)*(?:[^\n]*\n)?[ \t]*for\b[^\n]*:",
    re.MULTILINE,
)
LOOP_PATTERN = re.compile(r"^[ \t]*(?:for|while)\b[^\n]*:", re.MULTILINE)

CONSTANT_COMPLEXITY = "O(1)"
LINEAR_COMPLEXITY = "O(n)"
QUADRATIC_COMPLEXITY = "O(n²)"
