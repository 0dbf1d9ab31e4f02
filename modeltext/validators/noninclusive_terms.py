"""Validator that flags non-inclusive terms anywhere in a model's text."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ..text import TextOccurrence
from .base import ModelTextValidator, ValidationEvent

BUILTIN_TERMS: Mapping[str, Tuple[str, ...]] = {
    "master": ("primary", "parent", "main"),
    "slave": ("secondary", "replica", "clone", "child"),
    "blacklist": ("denyList",),
    "whitelist": ("allowList",),
}


class NoninclusiveTermsValidator(ModelTextValidator):
    """Warns when shape names or trait text contain a non-inclusive term.

    Matching is a case-insensitive substring search. Custom terms are merged
    over the built-in list unless ``exclude_defaults`` is set.
    """

    def __init__(
        self,
        terms: Optional[Mapping[str, Sequence[str]]] = None,
        *,
        exclude_defaults: bool = False,
    ) -> None:
        merged: Dict[str, Tuple[str, ...]] = {} if exclude_defaults else dict(BUILTIN_TERMS)
        for term, replacements in (terms or {}).items():
            merged[term] = tuple(replacements)
        self._terms = {term.lower(): replacements for term, replacements in merged.items() if term}

    @property
    def terms(self) -> Mapping[str, Tuple[str, ...]]:
        return dict(self._terms)

    def evaluate(self, occurrence: TextOccurrence) -> List[ValidationEvent]:
        events: List[ValidationEvent] = []
        lowered = occurrence.text.lower()
        for term, replacements in self._terms.items():
            if term not in lowered:
                continue
            events.append(
                self.warning(
                    occurrence.shape,
                    self._message(occurrence, term, replacements),
                    trait=occurrence.trait,
                    event_id=f"{self.name}.{term}",
                )
            )
        return events

    @staticmethod
    def _message(occurrence: TextOccurrence, term: str, replacements: Sequence[str]) -> str:
        if replacements:
            suggestion = f" Consider using one of the following terms instead: {', '.join(replacements)}"
        else:
            suggestion = ""
        if occurrence.trait is None:
            what = f"{occurrence.shape.type.value} shape uses the non-inclusive term `{term}`."
        elif occurrence.is_trait_key_name:
            what = (
                f"'{occurrence.trait.id}' trait has key `{occurrence.text}` at path "
                f"`{occurrence.path_string()}` containing the non-inclusive term `{term}`."
            )
        else:
            path = occurrence.path_string() or "(root)"
            what = (
                f"'{occurrence.trait.id}' trait value at path `{path}` contains the "
                f"non-inclusive term `{term}`."
            )
        return what + suggestion


__all__ = ["BUILTIN_TERMS", "NoninclusiveTermsValidator"]
