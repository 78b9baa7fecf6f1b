"""Pipeline values — the caller's config and the per-session state threaded through runs."""

from __future__ import annotations

import enum
from dataclasses import dataclass

DEFAULT_WIDTH = 150
DEFAULT_HEIGHT = 150
DEFAULT_COLOR = "#000000"

Dimension = int | float | str


class Phase(enum.Enum):
    EMPTY = "empty"
    LOADED = "loaded"
    NORMALIZED = "normalized"


@dataclass(frozen=True)
class NormalizationConfig:
    """User-chosen output settings. Width/height are passed through uninterpreted."""

    width: Dimension = DEFAULT_WIDTH
    height: Dimension = DEFAULT_HEIGHT
    # None = unset; the detected or default color applies
    color: str | None = None


@dataclass(frozen=True)
class PipelineState:
    """Text held between runs plus the one-shot color detection flag."""

    text: str | None = None
    is_first_load: bool = False
    detected_color: str | None = None
    phase: Phase = Phase.EMPTY


@dataclass(frozen=True)
class NormalizationResult:
    svg: str | None = None
    detected_color: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
