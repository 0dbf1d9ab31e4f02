"""Tests for node value conversion."""

from __future__ import annotations

import pytest

from modeltext.models import ArrayNode, BooleanNode, Node, NodeKind, NullNode, NumberNode, ObjectNode, StringNode


def test_from_value_builds_expected_variants() -> None:
    node = Node.from_value({"name": "Forecast", "tags": ["a", 1, True, None]})

    assert isinstance(node, ObjectNode)
    assert node.kind is NodeKind.OBJECT
    assert node.get("name") == StringNode("Forecast")
    tags = node.get("tags")
    assert isinstance(tags, ArrayNode)
    assert [element.kind for element in tags] == [
        NodeKind.STRING,
        NodeKind.NUMBER,
        NodeKind.BOOLEAN,
        NodeKind.NULL,
    ]
    assert isinstance(tags.elements[2], BooleanNode)
    assert isinstance(tags.elements[1], NumberNode)
    assert isinstance(tags.elements[3], NullNode)


def test_object_node_preserves_key_order_and_detaches_source() -> None:
    source = {"zeta": "z", "alpha": "a"}
    node = Node.from_value(source)
    source["beta"] = "b"

    assert isinstance(node, ObjectNode)
    assert [key for key, _ in node.entries()] == ["zeta", "alpha"]
    assert node.to_value() == {"zeta": "z", "alpha": "a"}


def test_object_node_equality_is_order_sensitive() -> None:
    assert Node.from_value({"a": "1", "b": "2"}) == Node.from_value({"a": "1", "b": "2"})
    assert Node.from_value({"a": "1", "b": "2"}) != Node.from_value({"b": "2", "a": "1"})


def test_from_value_rejects_unsupported_types() -> None:
    with pytest.raises(TypeError):
        Node.from_value({"when": object()})
    with pytest.raises(TypeError):
        Node.from_value({1: "numeric key"})
