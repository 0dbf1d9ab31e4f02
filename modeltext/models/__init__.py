"""Node values and the shape graph consumed by text extraction."""

from .node import ArrayNode, BooleanNode, Node, NodeKind, NullNode, NumberNode, ObjectNode, StringNode
from .shapes import (
    ENUM_TRAIT_ID,
    PRELUDE_NAMESPACE,
    DocumentTrait,
    EnumDefinition,
    EnumTrait,
    MemberShape,
    Model,
    Shape,
    ShapeId,
    ShapeType,
    Trait,
    is_prelude_shape,
)

__all__ = [
    "ArrayNode",
    "BooleanNode",
    "DocumentTrait",
    "ENUM_TRAIT_ID",
    "EnumDefinition",
    "EnumTrait",
    "MemberShape",
    "Model",
    "Node",
    "NodeKind",
    "NullNode",
    "NumberNode",
    "ObjectNode",
    "PRELUDE_NAMESPACE",
    "Shape",
    "ShapeId",
    "ShapeType",
    "StringNode",
    "Trait",
    "is_prelude_shape",
]
