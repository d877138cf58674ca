# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Analyzer options."""

from dataclasses import dataclass
from typing import Literal

AllowListMode = Literal["compat", "extended"]

ALLOW_LIST_MODES: tuple[AllowListMode, ...] = ("compat", "extended")


@dataclass(frozen=True)
class AnalyzerConfig:
    """Options controlling one analyzer instance.

    Attributes:
        allow_list: ``compat`` keeps the small fixed allow-list of the semantic
            scanner; ``extended`` adds every keyword and builtin name and
            treats loop, ``with`` and ``except`` targets as local names.
    """

    allow_list: AllowListMode = "compat"

    def __post_init__(self) -> None:
        if self.allow_list not in ALLOW_LIST_MODES:
            raise ValueError(f"Unsupported allow_list mode: {self.allow_list}")
