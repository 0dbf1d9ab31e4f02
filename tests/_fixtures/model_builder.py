"""Helper utilities for constructing shape models in tests."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Mapping, Optional

from modeltext.models import DocumentTrait, MemberShape, Model, Shape, ShapeType, Trait

NAMESPACE = "example.weather"


def trait(name: str, value: Any, namespace: str = NAMESPACE) -> DocumentTrait:
    """Build a document trait ``namespace#name`` holding ``value``."""
    return DocumentTrait(f"{namespace}#{name}", value)


class ModelBuilder:
    """Collects shapes in declaration order and builds a model from them."""

    def __init__(self, namespace: str = NAMESPACE) -> None:
        self.namespace = namespace
        self.shapes: List[Shape] = []

    def shape(
        self,
        name: str,
        shape_type: ShapeType = ShapeType.STRUCTURE,
        *,
        traits: Iterable[Trait] = (),
        members: Optional[Mapping[str, str]] = None,
        member_traits: Optional[Mapping[str, Iterable[Trait]]] = None,
        namespace: Optional[str] = None,
    ) -> Shape:
        """Add a shape; ``members`` maps member name -> target shape id."""
        ns = namespace or self.namespace
        shape_id = f"{ns}#{name}"
        member_shapes = [
            MemberShape(
                f"{shape_id}${member}",
                target,
                traits=(member_traits or {}).get(member, ()),
            )
            for member, target in (members or {}).items()
        ]
        built = Shape(shape_id, shape_type, traits=traits, members=member_shapes)
        self.shapes.append(built)
        return built

    def add(self, shape: Shape) -> Shape:
        self.shapes.append(shape)
        return shape

    def build(self) -> Model:
        return Model(self.shapes)


class CountingModel(Model):
    """Model double that counts how often its shapes are enumerated."""

    def __init__(self, shapes: Iterable[Shape] = ()) -> None:
        super().__init__(shapes)
        self.shape_calls = 0

    def shapes(self) -> Iterator[Shape]:
        self.shape_calls += 1
        return super().shapes()


__all__ = ["CountingModel", "ModelBuilder", "NAMESPACE", "trait"]
