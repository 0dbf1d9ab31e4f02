"""Full-model text extraction."""

from __future__ import annotations

from typing import Callable, List, Optional, Set, Tuple

from ..logging import get_logger
from ..models import Model, Shape, ShapeId
from .occurrence import TextOccurrence
from .walker import walk_trait_node

ShapeFilter = Callable[[Shape], bool]


class TextOccurrenceExtractor:
    """Walks every non-prelude shape once and collects its text.

    The traversal has no knowledge of what validators look for: it emits
    shape names, member names, and every string and object key found inside
    trait values. Prelude shape definitions are never examined. An optional
    ``is_excluded`` filter drops further shapes on top of the prelude; it is
    applied to member shapes as well as top-level ones.
    """

    def __init__(self, is_excluded: Optional[ShapeFilter] = None) -> None:
        self._is_excluded = is_excluded
        self.logger = get_logger("text.extractor")

    def extract(self, model: Model) -> Tuple[TextOccurrence, ...]:
        occurrences: List[TextOccurrence] = []
        visited: Set[ShapeId] = set()
        skipped = 0
        for shape in model.shapes():
            if model.is_prelude_shape(shape) or self._excluded(shape):
                skipped += 1
                continue
            self._visit(shape, occurrences, visited)
        self.logger.debug(
            "Extracted %d text occurrence(s) from %d shape(s); skipped %d excluded shape(s)",
            len(occurrences),
            len(visited),
            skipped,
        )
        return tuple(occurrences)

    def _visit(self, shape: Shape, occurrences: List[TextOccurrence], visited: Set[ShapeId]) -> None:
        if shape.id in visited or self._excluded(shape):
            return
        visited.add(shape.id)

        name = shape.member_name if shape.is_member_shape else shape.name
        occurrences.append(TextOccurrence(text=name, shape=shape))  # type: ignore[arg-type]

        for trait in shape.all_traits().values():
            walk_trait_node(trait.to_node(), trait, shape, occurrences)

        for member in shape.members():
            self._visit(member, occurrences, visited)

    def _excluded(self, shape: Shape) -> bool:
        return self._is_excluded is not None and self._is_excluded(shape)


__all__ = ["ShapeFilter", "TextOccurrenceExtractor"]
