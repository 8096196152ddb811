"""Shared pytest fixtures for the enum-traits test suite.

Provides:
- anyio_backend: run async tests on asyncio only
- label_lookup: process-wide label lookup pinned to a null lookup per test
"""

import pytest

from enum_traits.traits.labels import NullLabelLookup, set_label_lookup


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def label_lookup():
    """Every test starts from a lookup that never finds a label."""
    lookup = NullLabelLookup()
    set_label_lookup(lookup)
    yield lookup
    set_label_lookup(None)
