"""Recursive descent into a single trait value."""

from __future__ import annotations

from typing import List, Tuple

from ..models import ArrayNode, Node, NodeKind, ObjectNode, Shape, StringNode, Trait
from .occurrence import TextOccurrence

PropertyPath = Tuple[str, ...]


def walk_trait_node(
    node: Node,
    trait: Trait,
    shape: Shape,
    occurrences: List[TextOccurrence],
    path: PropertyPath = (),
) -> None:
    """Append an occurrence for every string and object key under ``node``.

    Paths are immutable tuples extended per call, so each occurrence keeps
    the path it was emitted with while siblings are walked.
    """
    kind = node.kind
    if kind is NodeKind.STRING:
        occurrences.append(_value_occurrence(node, trait, shape, path))
    elif kind is NodeKind.OBJECT:
        _walk_object(node, trait, shape, occurrences, path)
    elif kind is NodeKind.ARRAY:
        _walk_array(node, trait, shape, occurrences, path)
    else:
        # numbers, booleans and nulls carry no text
        return


def _walk_object(
    node: ObjectNode,
    trait: Trait,
    shape: Shape,
    occurrences: List[TextOccurrence],
    path: PropertyPath,
) -> None:
    for key, value in node.entries():
        segment = f".{key}" if path else key
        member_path = path + (segment,)
        occurrences.append(
            TextOccurrence(
                text=key,
                shape=shape,
                trait=trait,
                property_path=member_path,
                is_trait_key_name=True,
            )
        )
        if value.kind is NodeKind.STRING:
            occurrences.append(_value_occurrence(value, trait, shape, member_path))
        else:
            walk_trait_node(value, trait, shape, occurrences, member_path)


def _walk_array(
    node: ArrayNode,
    trait: Trait,
    shape: Shape,
    occurrences: List[TextOccurrence],
    path: PropertyPath,
) -> None:
    for index, element in enumerate(node):
        walk_trait_node(element, trait, shape, occurrences, path + (f"[{index}]",))


def _value_occurrence(
    node: StringNode, trait: Trait, shape: Shape, path: PropertyPath
) -> TextOccurrence:
    return TextOccurrence(text=node.value, shape=shape, trait=trait, property_path=path)


__all__ = ["PropertyPath", "walk_trait_node"]
