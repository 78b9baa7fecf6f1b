"""Normalization error taxonomy."""

from __future__ import annotations


class NormalizationError(Exception):
    """Base class for every failure the pipeline reports to its caller."""


class ParseFailure(NormalizationError):
    """Input text is not well-formed XML."""


class MissingRootElement(NormalizationError):
    """Input parsed, but contains no <svg> element."""


class EmptyDocument(NormalizationError):
    """Pipeline triggered before any document was uploaded."""
