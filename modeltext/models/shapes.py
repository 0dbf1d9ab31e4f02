"""Shape identifiers, traits, shapes, and the in-memory shape graph."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .node import ArrayNode, Node, ObjectNode, StringNode

PRELUDE_NAMESPACE = "smithy.api"

_SHAPE_ID_PATTERN = re.compile(
    r"^(?P<namespace>[A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)*)"
    r"#(?P<name>[A-Za-z_][A-Za-z0-9_]*)"
    r"(?:\$(?P<member>[A-Za-z_][A-Za-z0-9_]*))?$"
)


@dataclass(frozen=True, order=True)
class ShapeId:
    """Absolute shape identifier of the form ``namespace#Name$member``."""

    namespace: str
    name: str
    member: Optional[str] = None

    @classmethod
    def from_string(cls, value: str) -> "ShapeId":
        match = _SHAPE_ID_PATTERN.match(value.strip())
        if match is None:
            raise ValueError(f"Invalid shape id: {value!r}")
        return cls(match.group("namespace"), match.group("name"), match.group("member"))

    def with_member(self, member: str) -> "ShapeId":
        return ShapeId(self.namespace, self.name, member)

    def without_member(self) -> "ShapeId":
        return ShapeId(self.namespace, self.name)

    def __str__(self) -> str:
        base = f"{self.namespace}#{self.name}"
        return f"{base}${self.member}" if self.member else base


ShapeIdLike = Union[ShapeId, str]


def _as_shape_id(value: ShapeIdLike) -> ShapeId:
    return value if isinstance(value, ShapeId) else ShapeId.from_string(value)


class ShapeType(Enum):
    BLOB = "blob"
    BOOLEAN = "boolean"
    STRING = "string"
    ENUM = "enum"
    INT_ENUM = "intEnum"
    BYTE = "byte"
    SHORT = "short"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BIG_INTEGER = "bigInteger"
    BIG_DECIMAL = "bigDecimal"
    TIMESTAMP = "timestamp"
    DOCUMENT = "document"
    LIST = "list"
    MAP = "map"
    STRUCTURE = "structure"
    UNION = "union"
    MEMBER = "member"
    OPERATION = "operation"
    RESOURCE = "resource"
    SERVICE = "service"


class Trait:
    """Metadata applied to a shape; every trait can render itself as a node."""

    id: ShapeId

    def to_node(self) -> Node:
        raise NotImplementedError


@dataclass(frozen=True)
class DocumentTrait(Trait):
    """Trait whose payload is an arbitrary node value."""

    id: ShapeId
    value: Node

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", _as_shape_id(self.id))
        object.__setattr__(self, "value", Node.from_value(self.value))

    def to_node(self) -> Node:
        return self.value


@dataclass(frozen=True)
class EnumDefinition:
    """One enumerant of an enum trait."""

    value: str
    name: Optional[str] = None
    documentation: Optional[str] = None
    tags: Tuple[str, ...] = ()
    deprecated: bool = False

    def to_node(self) -> ObjectNode:
        members: Dict[str, Node] = {"value": StringNode(self.value)}
        if self.name is not None:
            members["name"] = StringNode(self.name)
        if self.documentation is not None:
            members["documentation"] = StringNode(self.documentation)
        if self.tags:
            members["tags"] = ArrayNode(tuple(StringNode(tag) for tag in self.tags))
        if self.deprecated:
            members["deprecated"] = Node.from_value(True)
        return ObjectNode(members)


ENUM_TRAIT_ID = ShapeId(PRELUDE_NAMESPACE, "enum")


@dataclass(frozen=True)
class EnumTrait(Trait):
    """The ``smithy.api#enum`` trait: an ordered list of enum definitions."""

    values: Tuple[EnumDefinition, ...]
    id: ShapeId = field(default=ENUM_TRAIT_ID, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    def to_node(self) -> ArrayNode:
        return ArrayNode(tuple(definition.to_node() for definition in self.values))


class Shape:
    """A named entity in the graph, optionally owning member shapes and traits."""

    def __init__(
        self,
        shape_id: ShapeIdLike,
        shape_type: ShapeType,
        *,
        traits: Iterable[Trait] = (),
        members: Iterable["MemberShape"] = (),
    ) -> None:
        self.id = _as_shape_id(shape_id)
        self.type = shape_type
        self._traits: Dict[ShapeId, Trait] = {}
        for trait in traits:
            self._traits[trait.id] = trait
        self._members: List[MemberShape] = list(members)

    @property
    def name(self) -> str:
        return self.id.name

    @property
    def member_name(self) -> Optional[str]:
        return self.id.member

    @property
    def is_member_shape(self) -> bool:
        return False

    def members(self) -> Sequence["MemberShape"]:
        return tuple(self._members)

    def all_traits(self) -> Mapping[ShapeId, Trait]:
        return dict(self._traits)

    def get_trait(self, trait_id: ShapeIdLike) -> Optional[Trait]:
        return self._traits.get(_as_shape_id(trait_id))

    def has_trait(self, trait_id: ShapeIdLike) -> bool:
        return _as_shape_id(trait_id) in self._traits

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self.id)!r}, {self.type.value})"


class MemberShape(Shape):
    """Field or element slot owned by a parent shape, pointing at a target shape."""

    def __init__(
        self,
        shape_id: ShapeIdLike,
        target: ShapeIdLike,
        *,
        traits: Iterable[Trait] = (),
    ) -> None:
        super().__init__(shape_id, ShapeType.MEMBER, traits=traits)
        if self.id.member is None:
            raise ValueError(f"Member shape id must name a member: {self.id}")
        self.target = _as_shape_id(target)

    @property
    def is_member_shape(self) -> bool:
        return True


def is_prelude_shape(shape: Union[Shape, ShapeIdLike]) -> bool:
    """Return True when the shape or id belongs to the built-in prelude namespace."""
    shape_id = shape.id if isinstance(shape, Shape) else _as_shape_id(shape)
    return shape_id.namespace == PRELUDE_NAMESPACE


class Model:
    """Immutable collection of top-level shapes in insertion order.

    Models compare by identity; two separately built models with the same
    shapes are distinct.
    """

    def __init__(self, shapes: Iterable[Shape] = ()) -> None:
        self._shapes: Dict[ShapeId, Shape] = {}
        for shape in shapes:
            if shape.id in self._shapes:
                raise ValueError(f"Duplicate shape id: {shape.id}")
            self._shapes[shape.id] = shape

    def shapes(self) -> Iterator[Shape]:
        return iter(tuple(self._shapes.values()))

    def get_shape(self, shape_id: ShapeIdLike) -> Optional[Shape]:
        parsed = _as_shape_id(shape_id)
        if parsed in self._shapes:
            return self._shapes[parsed]
        parent = self._shapes.get(parsed.without_member())
        if parent is None or parsed.member is None:
            return parent
        for member in parent.members():
            if member.id == parsed:
                return member
        return None

    def shapes_with_trait(self, trait_id: ShapeIdLike) -> List[Shape]:
        parsed = _as_shape_id(trait_id)
        found: List[Shape] = []
        for shape in self._shapes.values():
            if shape.has_trait(parsed):
                found.append(shape)
            found.extend(member for member in shape.members() if member.has_trait(parsed))
        return found

    def is_prelude_shape(self, shape: Shape) -> bool:
        return is_prelude_shape(shape)

    def __len__(self) -> int:
        return len(self._shapes)


__all__ = [
    "DocumentTrait",
    "ENUM_TRAIT_ID",
    "EnumDefinition",
    "EnumTrait",
    "MemberShape",
    "Model",
    "PRELUDE_NAMESPACE",
    "Shape",
    "ShapeId",
    "ShapeType",
    "Trait",
    "is_prelude_shape",
]
