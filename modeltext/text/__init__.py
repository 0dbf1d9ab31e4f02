"""Text occurrence extraction over shape models."""

from .extractor import ShapeFilter, TextOccurrenceExtractor
from .occurrence import TextOccurrence
from .walker import PropertyPath, walk_trait_node

__all__ = [
    "PropertyPath",
    "ShapeFilter",
    "TextOccurrence",
    "TextOccurrenceExtractor",
    "walk_trait_node",
]
