"""Tests for validation event rendering."""

from __future__ import annotations

from modeltext.models import ShapeId
from modeltext.validators import Severity, ValidationEvent


def test_format_with_shape_and_trait() -> None:
    event = ValidationEvent(
        id="EnumTraitRecommendedName",
        severity=Severity.WARNING,
        message="The name `bad_name` does not match.",
        shape_id=ShapeId.from_string("example.weather#Status"),
        trait_id=ShapeId.from_string("smithy.api#enum"),
    )

    assert event.format() == (
        "[WARNING] example.weather#Status (smithy.api#enum): "
        "The name `bad_name` does not match. | EnumTraitRecommendedName"
    )


def test_format_without_trait() -> None:
    event = ValidationEvent(
        id="NoninclusiveTerms.master",
        severity=Severity.WARNING,
        message="structure shape uses the non-inclusive term `master`.",
        shape_id=ShapeId.from_string("example.weather#MasterRecord$id"),
    )

    assert event.format() == (
        "[WARNING] example.weather#MasterRecord$id: "
        "structure shape uses the non-inclusive term `master`. | NoninclusiveTerms.master"
    )


def test_format_without_shape() -> None:
    event = ValidationEvent(id="ValidatorFailure", severity=Severity.ERROR, message="boom")

    assert event.format() == "[ERROR] -: boom | ValidatorFailure"
