"""SVG to Code normalization engine."""

from svgcode.errors import EmptyDocument, MissingRootElement, NormalizationError, ParseFailure
from svgcode.engine.pipeline import NormalizerSession, normalize, normalize_text, upload
from svgcode.engine.state import NormalizationConfig, NormalizationResult, Phase, PipelineState

__all__ = [
    "normalize",
    "normalize_text",
    "upload",
    "NormalizerSession",
    "NormalizationConfig",
    "NormalizationResult",
    "Phase",
    "PipelineState",
    "NormalizationError",
    "ParseFailure",
    "MissingRootElement",
    "EmptyDocument",
]
