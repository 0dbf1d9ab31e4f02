"""Generic value model used for trait payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Tuple


class NodeKind(Enum):
    """Discriminator for the node variants."""

    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


class Node:
    """Base class for immutable trait values."""

    kind: NodeKind

    @staticmethod
    def from_value(value: Any) -> "Node":
        """Convert plain Python data into a node tree, keeping mapping order."""
        if isinstance(value, Node):
            return value
        if value is None:
            return NullNode()
        # bool is a subclass of int, so check it first
        if isinstance(value, bool):
            return BooleanNode(value)
        if isinstance(value, (int, float)):
            return NumberNode(value)
        if isinstance(value, str):
            return StringNode(value)
        if isinstance(value, Mapping):
            members: Dict[str, Node] = {}
            for key, item in value.items():
                if not isinstance(key, str):
                    raise TypeError(f"Object node keys must be strings, got {type(key).__name__}")
                members[key] = Node.from_value(item)
            return ObjectNode(members)
        if isinstance(value, (list, tuple)):
            return ArrayNode(tuple(Node.from_value(item) for item in value))
        raise TypeError(f"Cannot convert {type(value).__name__} to a node")

    def to_value(self) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class StringNode(Node):
    value: str
    kind: NodeKind = field(default=NodeKind.STRING, init=False, repr=False)

    def to_value(self) -> str:
        return self.value


@dataclass(frozen=True)
class NumberNode(Node):
    value: float
    kind: NodeKind = field(default=NodeKind.NUMBER, init=False, repr=False)

    def to_value(self) -> float:
        return self.value


@dataclass(frozen=True)
class BooleanNode(Node):
    value: bool
    kind: NodeKind = field(default=NodeKind.BOOLEAN, init=False, repr=False)

    def to_value(self) -> bool:
        return self.value


@dataclass(frozen=True)
class NullNode(Node):
    kind: NodeKind = field(default=NodeKind.NULL, init=False, repr=False)

    def to_value(self) -> None:
        return None


@dataclass(frozen=True, eq=False)
class ObjectNode(Node):
    """Ordered mapping of string keys to nodes."""

    members: Mapping[str, Node]
    kind: NodeKind = field(default=NodeKind.OBJECT, init=False, repr=False)

    def __post_init__(self) -> None:
        # Detach from the caller's mapping so later mutation cannot leak in.
        object.__setattr__(self, "members", dict(self.members))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectNode):
            return NotImplemented
        return list(self.members.items()) == list(other.members.items())

    def __hash__(self) -> int:
        return hash(tuple(self.members.items()))

    def entries(self) -> Iterator[Tuple[str, Node]]:
        return iter(self.members.items())

    def get(self, key: str) -> Node | None:
        return self.members.get(key)

    def to_value(self) -> Dict[str, Any]:
        return {key: node.to_value() for key, node in self.members.items()}


@dataclass(frozen=True)
class ArrayNode(Node):
    """Ordered sequence of nodes."""

    elements: Tuple[Node, ...]
    kind: NodeKind = field(default=NodeKind.ARRAY, init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    def __iter__(self) -> Iterator[Node]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def to_value(self) -> list:
        return [node.to_value() for node in self.elements]


__all__ = [
    "ArrayNode",
    "BooleanNode",
    "Node",
    "NodeKind",
    "NullNode",
    "NumberNode",
    "ObjectNode",
    "StringNode",
]
