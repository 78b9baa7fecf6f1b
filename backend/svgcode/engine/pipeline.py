"""Pipeline orchestrator — parse, detect, flatten, unify, resize, serialize, compact.

Every run reparses the previous run's output, so a config change is always a
full re-normalization rather than an incremental patch.
"""

from __future__ import annotations

import logging
import time
from dataclasses import replace

from svgcode.engine.state import (
    DEFAULT_COLOR,
    Dimension,
    NormalizationConfig,
    NormalizationResult,
    Phase,
    PipelineState,
)
from svgcode.errors import EmptyDocument, NormalizationError
from svgcode.svg.dimensions import set_dimensions
from svgcode.svg.fill import detect_fill_color, unify_fill
from svgcode.svg.flatten import flatten_groups
from svgcode.svg.parser import parse_svg
from svgcode.svg.serializer import serialize_svg
from svgcode.svg.whitespace import compact_whitespace

logger = logging.getLogger(__name__)


def upload(svg_text: str) -> PipelineState:
    """Empty → Loaded. Arms color detection for the new document."""
    return PipelineState(text=svg_text, is_first_load=True, detected_color=None, phase=Phase.LOADED)


def resolve_color(config: NormalizationConfig, detected_color: str | None, default_color: str) -> str:
    """Caller's color, else the detected one, else the default. Empty strings are real values."""
    if config.color is not None:
        return config.color
    if detected_color is not None:
        return detected_color
    return default_color


def normalize(
    state: PipelineState,
    config: NormalizationConfig,
    default_color: str = DEFAULT_COLOR,
) -> tuple[PipelineState, str]:
    """Run the full pipeline on ``state.text``. Returns (new_state, normalized_text).

    Raises NormalizationError subclasses; ``state`` itself is never modified.
    """
    if state.text is None:
        raise EmptyDocument("no SVG loaded")

    start = time.perf_counter()
    doc = parse_svg(state.text)

    detected_color = state.detected_color
    color = resolve_color(config, detected_color, default_color)

    # Detection must see the original tree and run before the fill is overwritten
    if state.is_first_load:
        found = detect_fill_color(doc)
        if found is not None:
            detected_color = found
            color = found
        logger.info("Initial color detection: %r", found)

    groups = flatten_groups(doc)
    stripped = unify_fill(doc, color)
    set_dimensions(doc, config.width, config.height)
    text = compact_whitespace(serialize_svg(doc))

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Normalized SVG: %d group(s) removed, %d path fill(s) stripped, %d chars in %.1fms",
        groups,
        stripped,
        len(text),
        elapsed,
    )

    new_state = replace(
        state,
        text=text,
        is_first_load=False,
        detected_color=detected_color,
        phase=Phase.NORMALIZED,
    )
    return new_state, text


def normalize_text(
    svg_text: str,
    config: NormalizationConfig,
    default_color: str = DEFAULT_COLOR,
) -> tuple[PipelineState, str]:
    """Upload and normalize in one go, for callers with no later edit step.

    Detection runs as usual, but an explicit ``config.color`` is applied on a
    second pass, the same way an editor user re-picks the color after upload.
    """
    state, text = normalize(upload(svg_text), config, default_color)
    if config.color is not None:
        state, text = normalize(state, config, default_color)
    return state, text


class NormalizerSession:
    """One editing session: the held document plus the user's current settings."""

    def __init__(
        self,
        config: NormalizationConfig | None = None,
        default_color: str = DEFAULT_COLOR,
    ) -> None:
        self.config = config or NormalizationConfig()
        self.default_color = default_color
        self.state = PipelineState()
        self.last_error: str | None = None

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def normalized_text(self) -> str | None:
        if self.state.phase is not Phase.NORMALIZED:
            return None
        return self.state.text

    @property
    def detected_color(self) -> str | None:
        return self.state.detected_color

    def on_upload(self, svg_text: str) -> NormalizationResult:
        return self._run(upload(svg_text))

    def on_config_change(
        self,
        width: Dimension,
        height: Dimension,
        color: str | None,
    ) -> NormalizationResult:
        self.config = NormalizationConfig(width=width, height=height, color=color)
        if self.state.phase is Phase.EMPTY:
            return NormalizationResult(detected_color=self.detected_color)
        return self._run(self.state)

    def _run(self, current: PipelineState) -> NormalizationResult:
        try:
            state, text = normalize(current, self.config, self.default_color)
        except NormalizationError as e:
            logger.warning("Normalization failed, keeping previous text: %s", e)
            self.last_error = str(e)
            return NormalizationResult(
                svg=self.normalized_text,
                detected_color=self.detected_color,
                error=str(e),
            )

        # A detected color seeds the color control, as if the user had picked it
        if current.is_first_load and state.detected_color is not None:
            self.config = replace(self.config, color=state.detected_color)

        self.state = state
        self.last_error = None
        return NormalizationResult(svg=text, detected_color=state.detected_color)
