"""Global pytest fixtures for SUNDRIES."""

from __future__ import annotations

import pytest

from sundries.utils import random_source


@pytest.fixture
def seeded_random():
    """Reseed the shared random source so sampling tests are reproducible."""
    random_source.seed(1234)
    yield
    random_source.seed()
