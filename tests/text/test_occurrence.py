"""Tests for the text occurrence record."""

from __future__ import annotations

import pytest

from modeltext.models import Shape, ShapeType
from modeltext.text import TextOccurrence
from tests._fixtures.model_builder import trait


def _shape() -> Shape:
    return Shape("example.weather#Forecast", ShapeType.STRUCTURE)


def test_occurrence_requires_shape() -> None:
    with pytest.raises(ValueError, match="Shape must be specified"):
        TextOccurrence(text="Forecast", shape=None)  # type: ignore[arg-type]


def test_occurrence_requires_text() -> None:
    with pytest.raises(ValueError, match="Text must be specified"):
        TextOccurrence(text=None, shape=_shape())  # type: ignore[arg-type]


def test_occurrence_defaults_and_snapshot_path() -> None:
    applied = trait("docs", {"a": "b"})
    path = ["a", ".b"]

    occurrence = TextOccurrence(text="b", shape=_shape(), trait=applied, property_path=path)
    path.append("[0]")

    assert occurrence.property_path == ("a", ".b")
    assert occurrence.is_trait_key_name is False
    assert occurrence.location() == "example.weather#Forecast -> example.weather#docs @ a.b"


def test_occurrence_none_path_defaults_to_empty() -> None:
    occurrence = TextOccurrence(text="x", shape=_shape(), trait=trait("docs", "x"), property_path=None)  # type: ignore[arg-type]

    assert occurrence.property_path == ()


def test_shape_name_occurrence_cannot_carry_path() -> None:
    with pytest.raises(ValueError):
        TextOccurrence(text="Forecast", shape=_shape(), property_path=("a",))

    plain = TextOccurrence(text="Forecast", shape=_shape())
    assert plain.is_shape_name
    assert plain.trait_id is None
    assert plain.location() == "example.weather#Forecast"
