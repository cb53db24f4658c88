"""Shared fixtures."""

import pytest

from fauna_values import Ref
from fauna_values.settings import get_settings


@pytest.fixture
def spell_ref() -> Ref:
    return Ref.from_parts("classes", "spells", "42")


@pytest.fixture
def index_ref() -> Ref:
    return Ref(value="indexes/spells_by_element")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
