"""Core validation data structures and helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol, Sequence

from ..models import Model, Shape, ShapeId, Trait
from ..stores import OccurrenceCache, Occurrences
from ..text import TextOccurrence, TextOccurrenceExtractor


class Severity(Enum):
    """Severity of a validation event, ordered from least to most severe."""

    NOTE = 1
    WARNING = 2
    DANGER = 3
    ERROR = 4

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ValidationEvent:
    """A single diagnostic, normally attached to a shape and optionally a trait."""

    id: str
    severity: Severity
    message: str
    shape_id: Optional[ShapeId] = None
    trait_id: Optional[ShapeId] = None

    def format(self) -> str:
        target = str(self.shape_id) if self.shape_id is not None else "-"
        if self.trait_id is not None:
            target = f"{target} ({self.trait_id})"
        return f"[{self.severity}] {target}: {self.message} | {self.id}"


class ValidationError(RuntimeError):
    """Raised when a caller asks to fail on ERROR-level events."""

    def __init__(self, message: str, events: Sequence[ValidationEvent]) -> None:
        super().__init__(message)
        self.events = list(events)


@dataclass
class ValidationContext:
    """Context shared with validators when evaluating a model."""

    model: Model
    occurrences: OccurrenceCache = field(default_factory=OccurrenceCache)
    extractor: TextOccurrenceExtractor = field(default_factory=TextOccurrenceExtractor)

    def text_occurrences(self) -> Occurrences:
        """Return every text occurrence of the model, walking it at most once."""
        return self.occurrences.get_or_compute(self.model, self.extractor.extract)


class Validator(Protocol):
    """Protocol implemented by model validators."""

    name: str

    def validate(self, context: ValidationContext) -> List[ValidationEvent]:
        """Run validation and return any events."""


class OccurrenceConsumer(Protocol):
    """Anything that turns one text occurrence into zero or more events."""

    def evaluate(self, occurrence: TextOccurrence) -> List[ValidationEvent]:
        """Return the events raised by ``occurrence``."""


class AbstractValidator(ABC):
    """Base class giving validators a default name and event helpers.

    The name is the class name without a trailing ``Validator``.
    """

    name: str = ""

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if not cls.__dict__.get("name"):
            class_name = cls.__name__
            cls.name = class_name[: -len("Validator")] if class_name.endswith("Validator") else class_name

    @abstractmethod
    def validate(self, context: ValidationContext) -> List[ValidationEvent]:
        """Run validation and return any events."""

    def event(
        self,
        severity: Severity,
        shape: Shape,
        message: str,
        *,
        trait: Optional[Trait] = None,
        event_id: Optional[str] = None,
    ) -> ValidationEvent:
        return ValidationEvent(
            id=event_id or self.name,
            severity=severity,
            message=message,
            shape_id=shape.id,
            trait_id=trait.id if trait is not None else None,
        )

    def note(self, shape: Shape, message: str, **kwargs) -> ValidationEvent:
        return self.event(Severity.NOTE, shape, message, **kwargs)

    def warning(self, shape: Shape, message: str, **kwargs) -> ValidationEvent:
        return self.event(Severity.WARNING, shape, message, **kwargs)

    def danger(self, shape: Shape, message: str, **kwargs) -> ValidationEvent:
        return self.event(Severity.DANGER, shape, message, **kwargs)

    def error(self, shape: Shape, message: str, **kwargs) -> ValidationEvent:
        return self.event(Severity.ERROR, shape, message, **kwargs)


class ModelTextValidator(AbstractValidator):
    """Base class for validators that search all of a model's text.

    Occurrences come from the context's cache, so several text validators
    over one model share a single traversal. ``evaluate`` is called once per
    occurrence in traversal order with no filtering; subclasses ignore the
    occurrences their rule does not care about.
    """

    def validate(self, context: ValidationContext) -> List[ValidationEvent]:
        events: List[ValidationEvent] = []
        for occurrence in context.text_occurrences():
            events.extend(self.evaluate(occurrence))
        return events

    @abstractmethod
    def evaluate(self, occurrence: TextOccurrence) -> List[ValidationEvent]:
        """Return the events raised by ``occurrence``."""
