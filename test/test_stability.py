import pytest

from advisory_conflicts._stability import (
    Stability,
    compare_flags,
    compare_stability,
    strip_trailing_zeroes,
)


@pytest.mark.parametrize(
    "numbers, expected",
    [
        ([1, 0, 0], (1,)),
        ([1, 0, 2, 0], (1, 0, 2)),
        ([0, 0], ()),
        ([], ()),
    ],
)
def test_strip_trailing_zeroes(numbers, expected):
    assert strip_trailing_zeroes(numbers) == expected


@pytest.mark.parametrize(
    "greater, lesser",
    [
        ("patch", "stable"),
        ("p", ""),
        ("", "stable"),
        ("stable", "rc"),
        ("rc", "beta"),
        ("beta", "alpha"),
        ("b", "a"),
    ],
)
def test_compare_flags(greater, lesser):
    assert compare_flags(greater, lesser) == 1
    assert compare_flags(lesser, greater) == -1


@pytest.mark.parametrize("short, long", [("a", "alpha"), ("b", "beta"), ("p", "patch")])
def test_flag_aliases_are_equal(short, long):
    assert compare_flags(short, long) == 0
    assert Stability(short, (1,)) == Stability(long, (1,))
    assert hash(Stability(short, (1,))) == hash(Stability(long, (1,)))


def test_unknown_flag():
    with pytest.raises(ValueError):
        Stability("dev")

    with pytest.raises(ValueError):
        Stability("")


def test_compare_stability_missing():
    assert compare_stability(None, None) == 0
    assert compare_stability(None, Stability("stable")) == 1
    assert compare_stability(None, Stability("patch")) == -1
    assert compare_stability(Stability("rc"), None) == -1


def test_compare_stability_qualifiers():
    assert compare_stability(Stability("alpha", (1, 1)), Stability("alpha", (1, 0))) == 1
    assert compare_stability(Stability("alpha"), Stability("alpha", (1, 2))) == -1
    assert compare_stability(Stability("stable", (1, 2)), Stability("stable", (1,))) == 1
    assert compare_stability(Stability("beta", (9,)), Stability("rc")) == -1


def test_qualifier_trailing_zeroes_are_insignificant():
    stability = Stability("beta", (0, 5, 0, 0))
    assert stability.qualifier == (0, 5)
    assert stability == Stability("beta", (0, 5))
    assert Stability("beta", (0,)) == Stability("beta")


@pytest.mark.parametrize(
    "stability, rendered",
    [
        (Stability("stable"), "stable"),
        (Stability("b", (1,)), "b.1"),
        (Stability("alpha", (1, 2, 3, 0)), "alpha.1.2.3"),
    ],
)
def test_str(stability, rendered):
    assert str(stability) == rendered
