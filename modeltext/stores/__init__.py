"""Caches shared across validator runs."""

from .occurrence_cache import OccurrenceCache, Occurrences

__all__ = ["OccurrenceCache", "Occurrences"]
