"""Validator for enum trait definition names."""

from __future__ import annotations

import re
from typing import List

from ..models import ENUM_TRAIT_ID, EnumTrait, Shape
from .base import AbstractValidator, ValidationContext, ValidationEvent

RECOMMENDED_NAME_PATTERN = re.compile(r"^[A-Z]+[A-Z_0-9]*$")


class EnumTraitRecommendedNameValidator(AbstractValidator):
    """Ensures that enum trait names adhere to the recommended pattern."""

    def validate(self, context: ValidationContext) -> List[ValidationEvent]:
        events: List[ValidationEvent] = []
        for shape in context.model.shapes_with_trait(ENUM_TRAIT_ID):
            trait = shape.get_trait(ENUM_TRAIT_ID)
            if isinstance(trait, EnumTrait):
                events.extend(self._validate_enum_trait(shape, trait))
        return events

    def _validate_enum_trait(self, shape: Shape, trait: EnumTrait) -> List[ValidationEvent]:
        events: List[ValidationEvent] = []
        for definition in trait.values:
            name = definition.name
            if name is None or RECOMMENDED_NAME_PATTERN.fullmatch(name):
                continue
            events.append(
                self.warning(
                    shape,
                    f"The name `{name}` does not match the recommended enum name format of beginning "
                    "with an uppercase letter, followed by any number of uppercase letters, numbers, "
                    "or underscores.",
                    trait=trait,
                )
            )
        return events


__all__ = ["EnumTraitRecommendedNameValidator", "RECOMMENDED_NAME_PATTERN"]
