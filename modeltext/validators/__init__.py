"""Validator implementations and discovery utilities."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Set

from ..config import ModelTextConfig
from .base import (
    AbstractValidator,
    ModelTextValidator,
    OccurrenceConsumer,
    Severity,
    ValidationContext,
    ValidationError,
    ValidationEvent,
    Validator,
)
from .enum_names import EnumTraitRecommendedNameValidator
from .noninclusive_terms import NoninclusiveTermsValidator

_ENTRY_POINT_GROUP = "modeltext.validators"

ValidatorFactory = Callable[[Optional[ModelTextConfig]], Validator]


def _noninclusive_terms(config: Optional[ModelTextConfig]) -> Validator:
    if config is None:
        return NoninclusiveTermsValidator()
    settings = config.noninclusive_terms
    return NoninclusiveTermsValidator(settings.terms, exclude_defaults=settings.exclude_defaults)


_BUILTIN_FACTORIES: Dict[str, ValidatorFactory] = {
    "EnumTraitRecommendedName": lambda config: EnumTraitRecommendedNameValidator(),
    "NoninclusiveTerms": _noninclusive_terms,
}


def discover_validators(
    config: Optional[ModelTextConfig] = None,
    *,
    enabled: Sequence[str] | None = None,
    disabled: Sequence[str] | None = None,
) -> List[Validator]:
    """Return instantiated validators, honoring enabled and disabled names.

    Explicit arguments win over the config's validator section.
    """
    if enabled is None and config is not None and config.validators.enabled:
        enabled = config.validators.enabled
    if disabled is None and config is not None:
        disabled = config.validators.disabled

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = {name.lower() for name in enabled}
    disabled_set = {name.lower() for name in disabled or ()}

    validators: List[Validator] = []
    seen: Set[str] = set()

    def _add(name: str, factory: Callable[[], Validator]) -> None:
        key = name.lower()
        if key in seen:
            return
        seen.add(key)
        if enabled_set is not None:
            if key not in enabled_set:
                return
            enabled_set.discard(key)
        if key in disabled_set:
            return
        instance = factory()
        if not callable(getattr(instance, "validate", None)):
            raise TypeError(f"Validator factory for '{name}' did not return a Validator instance")
        validators.append(instance)

    for name, builtin in _BUILTIN_FACTORIES.items():
        _add(name, lambda builtin=builtin: builtin(config))

    for entry in _iter_entry_points():
        try:
            loaded = entry.load()
        except Exception as exc:
            raise RuntimeError(f"Failed to load validator entry point '{entry.name}': {exc}") from exc
        _add(entry.name, lambda obj=loaded: _coerce_validator(obj))

    if enabled_set:
        missing = ", ".join(sorted(enabled_set))
        raise ValueError(f"Unknown validators requested: {missing}")

    return validators


def _coerce_validator(obj: object) -> Validator:
    if isinstance(obj, type):
        return obj()
    if callable(getattr(obj, "validate", None)):
        return obj  # type: ignore[return-value]
    if callable(obj):
        instance = obj()
        if callable(getattr(instance, "validate", None)):
            return instance
    raise TypeError("Validator entry point must be a Validator class, instance, or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points(group=_ENTRY_POINT_GROUP)


__all__ = [
    "AbstractValidator",
    "EnumTraitRecommendedNameValidator",
    "ModelTextValidator",
    "NoninclusiveTermsValidator",
    "OccurrenceConsumer",
    "Severity",
    "ValidationContext",
    "ValidationError",
    "ValidationEvent",
    "Validator",
    "discover_validators",
]
