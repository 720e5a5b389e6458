import pytest

from measurable.core.utils import humanize_name, is_blank


@pytest.mark.parametrize("name, label", [
    ("Magic", "magic"),
    ("Measurable", "measurable"),
    ("VeryComplexThing", "very complex thing"),
    ("HTTPRequestSize", "http request size"),
    ("snake_case_thing", "snake case thing"),
    ("Utf8Text", "utf8 text"),
])
def test_humanize_name(name, label):
    assert humanize_name(name) == label


@pytest.mark.parametrize("value, blank", [
    (None, True), ("", True), ("   ", True), ("\t\n", True),
    ("x", False), (0, False), ("  y ", False),
])
def test_is_blank(value, blank):
    assert is_blank(value) is blank
