"""Locate human-readable text inside shape models and run lint rules over it."""

from .runner import ValidationResult, ValidationRunner
from .text import TextOccurrence, TextOccurrenceExtractor

__all__ = [
    "TextOccurrence",
    "TextOccurrenceExtractor",
    "ValidationResult",
    "ValidationRunner",
]
