"""The located unit of text handed to validators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..models import Shape, ShapeId, Trait


@dataclass(frozen=True)
class TextOccurrence:
    """One piece of text found in a model along with where it was found.

    ``trait`` is None for a shape's own name. ``property_path`` locates the
    text inside the trait value and ``is_trait_key_name`` marks object keys,
    in which case the key is the last path segment.
    """

    text: str
    shape: Shape
    trait: Optional[Trait] = None
    property_path: Tuple[str, ...] = ()
    is_trait_key_name: bool = False

    def __post_init__(self) -> None:
        if self.shape is None:
            raise ValueError("Shape must be specified")
        if self.text is None:
            raise ValueError("Text must be specified")
        path: Optional[Sequence[str]] = self.property_path
        object.__setattr__(self, "property_path", tuple(path) if path is not None else ())
        if self.trait is None and (self.property_path or self.is_trait_key_name):
            raise ValueError("Property paths and key names require a trait")

    @property
    def trait_id(self) -> Optional[ShapeId]:
        return self.trait.id if self.trait is not None else None

    @property
    def is_shape_name(self) -> bool:
        return self.trait is None

    def path_string(self) -> str:
        return "".join(self.property_path)

    def location(self) -> str:
        """Render ``shape`` or ``shape -> trait @ path`` for messages."""
        if self.trait is None:
            return str(self.shape.id)
        rendered = f"{self.shape.id} -> {self.trait.id}"
        path = self.path_string()
        return f"{rendered} @ {path}" if path else rendered


__all__ = ["TextOccurrence"]
