from __future__ import annotations

import pytest

from tests._fixtures.model_builder import ModelBuilder


@pytest.fixture
def model_builder() -> ModelBuilder:
    """Provide a fresh builder for a user-namespace model."""
    return ModelBuilder()
