import pytest

from updock.core.errors import PatternSyntaxError
from updock.core.pattern import Literal, Placeholder, compile_pattern


def test_compiles_segments_in_order():
    pattern = compile_pattern("v<!>.<>-alpine")
    assert pattern.segments == (
        Literal("v"),
        Placeholder(breaking=True),
        Literal("."),
        Placeholder(breaking=False),
        Literal("-alpine"),
    )
    assert pattern.placeholder_count == 2
    assert str(pattern) == "v<!>.<>-alpine"


@pytest.mark.parametrize("source,degree", [
    ("<!>.<>", 0),
    ("<>.<!>.<>", 1),
    ("<!>.<!>.<>", 1),
    ("<>.<>", None),
    ("<>", None),
])
def test_breaking_degree_is_last_breaking_placeholder(source, degree):
    assert compile_pattern(source).breaking_degree == degree


@pytest.mark.parametrize("source", ["", "latest", "1.2.3"])
def test_pattern_without_placeholder_is_rejected(source):
    with pytest.raises(PatternSyntaxError, match="placeholder is required"):
        compile_pattern(source)


@pytest.mark.parametrize("source,position", [
    ("<!.<>", 0),
    ("<>.<x>", 3),
    ("<>.<", 3),
    ("<>>", 2),
    ("1>2.<>", 1),
])
def test_malformed_markers_are_rejected(source, position):
    with pytest.raises(PatternSyntaxError) as excinfo:
        compile_pattern(source)
    assert excinfo.value.position == position


def test_match_captures_digit_runs():
    pattern = compile_pattern("<!>.<>")
    assert pattern.match("14.04") == ["14", "04"]


@pytest.mark.parametrize("tag", [
    "14.04.1",      # trailing text
    "v14.04",       # leading text
    "14.",          # empty placeholder
    ".04",
    "14-04",        # wrong literal
    "latest",
    "",
])
def test_match_requires_whole_tag(tag):
    assert compile_pattern("<!>.<>").match(tag) is None


def test_placeholders_are_greedy():
    # The first placeholder swallows every digit, leaving none for the second
    assert compile_pattern("<><>").match("1234") is None
    assert compile_pattern("<>-<>").match("12-345") == ["12", "345"]


def test_non_ascii_digits_do_not_match():
    assert compile_pattern("<>").match("١٢") is None
