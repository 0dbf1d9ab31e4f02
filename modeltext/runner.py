"""Runs a set of validators against a model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .config import ModelTextConfig
from .logging import get_logger
from .models import Model
from .stores import OccurrenceCache
from .text import TextOccurrenceExtractor
from .validators import (
    Severity,
    ValidationContext,
    ValidationError,
    ValidationEvent,
    Validator,
    discover_validators,
)

VALIDATOR_FAILURE_ID = "ValidatorFailure"


@dataclass
class ValidationResult:
    """Events produced by one validation pass."""

    events: List[ValidationEvent] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(event.severity is Severity.ERROR for event in self.events)

    def by_severity(self) -> Dict[Severity, List[ValidationEvent]]:
        grouped: Dict[Severity, List[ValidationEvent]] = {severity: [] for severity in Severity}
        for event in self.events:
            grouped[event.severity].append(event)
        return grouped

    def raise_for_errors(self) -> None:
        errors = [event for event in self.events if event.severity is Severity.ERROR]
        if errors:
            raise ValidationError(f"Model validation failed with {len(errors)} error(s)", errors)


class ValidationRunner:
    """Coordinates validators over models and owns the shared occurrence cache.

    The cache lives as long as the runner, so every validator run through the
    same runner against the same model instance reuses one text extraction.
    """

    def __init__(
        self,
        validators: Optional[Iterable[Validator]] = None,
        *,
        cache: OccurrenceCache | None = None,
        extractor: TextOccurrenceExtractor | None = None,
        config: ModelTextConfig | None = None,
    ) -> None:
        self.logger = get_logger("runner")
        self.cache = cache or OccurrenceCache()
        self.extractor = extractor or TextOccurrenceExtractor()
        if validators is None:
            validators = discover_validators(config)
        self.validators: List[Validator] = list(validators)

    def validate(self, model: Model) -> ValidationResult:
        context = ValidationContext(model=model, occurrences=self.cache, extractor=self.extractor)
        result = ValidationResult()
        self.logger.debug("Running %d validator(s)", len(self.validators))
        for validator in self.validators:
            name = getattr(validator, "name", None) or validator.__class__.__name__
            try:
                events = validator.validate(context)
            except Exception as exc:
                self.logger.exception("Validator %s failed", name)
                result.events.append(self._failure_event(name, exc))
                continue
            self.logger.debug("Validator %s emitted %d event(s)", name, len(events))
            result.events.extend(events)
        return result

    def release(self, model: Model) -> None:
        """Drop the cached occurrences for ``model``."""
        self.cache.discard(model)

    @staticmethod
    def _failure_event(name: str, exc: Exception) -> ValidationEvent:
        return ValidationEvent(
            id=VALIDATOR_FAILURE_ID,
            severity=Severity.ERROR,
            message=f"Validator `{name}` failed: {exc}",
        )


__all__ = ["ValidationResult", "ValidationRunner", "VALIDATOR_FAILURE_ID"]
