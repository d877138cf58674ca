# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Collect Python sources to analyze, honouring .gitignore files."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import pathspec

logger = logging.getLogger(__name__)


class SourceReadError(RuntimeError):
    """Represent a failure to read one source file."""


@dataclass(frozen=True)
class SourceFile:
    """Represent one source text ready for analysis.

    Attributes:
        label: Display label, project-relative for directory walks.
        text: Decoded source text.
    """

    label: str
    text: str


class IgnoreRules:
    """Gitignore rules gathered from every .gitignore beneath a root."""

    def __init__(self, spec: pathspec.GitIgnoreSpec) -> None:
        self._spec = spec

    @classmethod
    def load(cls, root: Path) -> "IgnoreRules":
        """Collect rules from all .gitignore files, rewritten root-relative.

        Args:
            root: Directory being analyzed.

        Returns:
            Compiled rules.

        Raises:
            OSError: If a .gitignore file cannot be read.
            UnicodeDecodeError: If a .gitignore file is not valid UTF-8.
        """
        lines: list[str] = []
        for ignore_file in sorted(root.rglob(".gitignore")):
            directory = ignore_file.parent.relative_to(root).as_posix()
            scope = "" if directory == "." else directory
            lines.extend(
                scope_gitignore_line(line, scope=scope)
                for line in ignore_file.read_text(encoding="utf-8").splitlines()
            )
        return cls(spec=pathspec.GitIgnoreSpec.from_lines(lines))

    def is_ignored(self, relative_path: str, is_dir: bool = False) -> bool:
        """Return whether a root-relative path is excluded."""
        path = relative_path.replace(os.sep, "/").strip("/")
        if not path:
            return False
        candidates = (path, f"{path}/") if is_dir else (path,)
        return any(self._spec.match_file(candidate) for candidate in candidates)


def scope_gitignore_line(line: str, scope: str) -> str:
    """Rewrite one .gitignore line from directory ``scope`` to apply from the root.

    A pattern with no slash except a trailing one matches at any depth below
    its directory. Any other pattern is anchored to that directory.

    Args:
        line: Raw .gitignore line.
        scope: Root-relative POSIX directory holding the .gitignore; empty
            for the root itself.

    Returns:
        Equivalent root-relative line. Blank lines and comments are unchanged.
    """
    if not scope or not line.strip() or line.startswith("#"):
        return line
    negation = "!" if line.startswith("!") else ""
    pattern = line[len(negation) :]
    if pattern.startswith("/"):
        return f"{negation}{scope}{pattern}"
    if "/" in pattern.rstrip("/"):
        return f"{negation}{scope}/{pattern}"
    return f"{negation}{scope}/**/{pattern}"


def discover_python_files(root: Path, rules: IgnoreRules) -> list[Path]:
    """List ``*.py`` files beneath root, skipping ignored paths and ``.git``.

    Args:
        root: Directory to walk.
        rules: Ignore rules loaded for ``root``.

    Returns:
        Sorted file paths.
    """
    found: list[Path] = []
    skipped = 0
    pending: list[Path] = [root]
    while pending:
        directory = pending.pop()
        for child in directory.iterdir():
            if child.name == ".git" and child.is_dir():
                continue
            is_dir = child.is_dir()
            if rules.is_ignored(child.relative_to(root).as_posix(), is_dir=is_dir):
                skipped += 1
            elif is_dir:
                pending.append(child)
            elif child.suffix == ".py":
                found.append(child)
    logger.info(f"Source discovery completed (root={root} files={len(found)} ignored={skipped})")
    return sorted(found)


def read_source(path: Path, label: str | None = None) -> SourceFile:
    """Read one UTF-8 source file.

    Args:
        path: File to read.
        label: Display label; defaults to ``str(path)``.

    Returns:
        Loaded source.

    Raises:
        SourceReadError: If the file cannot be read or decoded.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(f"Failed reading source (path={path} error={exc})")
        raise SourceReadError(f"{path}: {exc}") from exc
    return SourceFile(label=label or str(path), text=text)
