"""In-memory cache of text occurrences keyed by model identity."""

from __future__ import annotations

import threading
import weakref
from typing import Callable, Dict, Optional, Sequence, Tuple

from ..logging import get_logger
from ..models import Model
from ..text import TextOccurrence

Occurrences = Tuple[TextOccurrence, ...]


class OccurrenceCache:
    """Stores the extracted occurrences of each model so validators share one walk.

    Entries are keyed by model identity, never by content: two equal but
    separately built models are cached independently. Keys are weak, so an
    entry disappears once its model is garbage collected.
    """

    def __init__(self) -> None:
        self._entries: "weakref.WeakKeyDictionary[Model, Occurrences]" = weakref.WeakKeyDictionary()
        self._key_locks: Dict[int, threading.Lock] = {}
        self._lock = threading.Lock()
        self.logger = get_logger("stores.occurrences")

    def get(self, model: Model) -> Optional[Occurrences]:
        with self._lock:
            return self._entries.get(model)

    def get_or_compute(
        self, model: Model, compute: Callable[[Model], Sequence[TextOccurrence]]
    ) -> Occurrences:
        cached = self.get(model)
        if cached is not None:
            return cached

        key = id(model)
        with self._lock:
            key_lock = self._key_locks.setdefault(key, threading.Lock())

        # Only one caller computes a given model; the rest wait and reuse it.
        with key_lock:
            cached = self.get(model)
            if cached is not None:
                return cached
            self.logger.debug("Extracting text occurrences for model %#x", key)
            computed = tuple(compute(model))
            with self._lock:
                self._entries[model] = computed
                self._key_locks.pop(key, None)
        return computed

    def discard(self, model: Model) -> None:
        with self._lock:
            self._entries.pop(model, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, model: object) -> bool:
        with self._lock:
            return model in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["OccurrenceCache", "Occurrences"]
