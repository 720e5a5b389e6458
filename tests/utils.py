# tests/utils.py
from measurable.core.measurable import Measurable
from measurable.units.unit import base_unit, unit


MAGIC_DEFINITIONS = (
    base_unit("magic_missile", aliases=["magic_missiles"]),
    unit("fireball", aliases=["fire", "fireballs"], value="3/2 magic_missile"),
    unit("ice", value="2 magic_missile"),
    unit("arcane", value="10 magic_missile"),
    unit("ultima", value="10 arcane"),
)


class Magic(Measurable):
    unit_definitions = MAGIC_DEFINITIONS


class Mana(Measurable):
    """Same unit table as Magic, but a different quantity type."""

    unit_definitions = MAGIC_DEFINITIONS


class GreaterMagic(Magic):
    pass


def _register_magic(reg):
    """Populate ``reg`` with the Magic units, factors relative to magic_missile."""
    reg.register("magic_missile", ["magic_missiles"], base=True)
    reg.register("fireball", ["fire", "fireballs"], factor="2/3")
    reg.register("ice", factor="1/2")
    reg.register("arcane", factor="1/10")
    reg.register("ultima", factor="1/100")
    return reg
