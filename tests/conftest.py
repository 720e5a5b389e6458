# tests/conftest.py
import pytest

from measurable.units.registry import UnitRegistry
from tests.utils import Magic, _register_magic


@pytest.fixture()
def reg():
    """Fresh, unsealed registry holding the Magic units."""
    return _register_magic(UnitRegistry())


@pytest.fixture()
def magic():
    return Magic(10, "magic_missile")
