import pytest

from advisory_conflicts import InvalidVersion, ParseError, Stability, Version


@pytest.mark.parametrize(
    "text, numbers, stability",
    [
        ("1", (1,), None),
        ("1.0.0", (1,), None),
        ("0.0", (0,), None),
        ("2.0.1.0.0.0", (2, 0, 1), None),
        ("1-STABLE", (1,), Stability("stable")),
        ("1.0.0-alpha1", (1,), Stability("alpha", (1,))),
        ("2.1.0-beta.6.6", (2, 1), Stability("beta", (6, 6))),
        ("1.2.3-p_2", (1, 2, 3), Stability("p", (2,))),
        ("1.2rc", (1, 2), Stability("rc")),
    ],
)
def test_parse(text, numbers, stability):
    version = Version.parse(text)
    assert version.numbers == numbers
    assert version.stability == stability


@pytest.mark.parametrize(
    "text, rendered",
    [
        ("3.1.33-dev-4", "3.1.33"),
        ("1.2.a", "1.2-a"),
        ("5.0 ", "5"),
    ],
)
def test_parse_ignores_trailing_text(text, rendered):
    assert str(Version.parse(text)) == rendered


@pytest.mark.parametrize("text", ["", "alpha", "beta", ".1", "alpha.beta", " 1.2", "v1.2"])
def test_parse_invalid(text):
    with pytest.raises(InvalidVersion):
        Version.parse(text)


def test_invalid_version_is_a_parse_error():
    assert issubclass(InvalidVersion, ParseError)
    assert issubclass(ParseError, ValueError)


@pytest.mark.parametrize(
    "text, rendered",
    [
        ("0.0", "0"),
        ("12345.00", "12345"),
        ("1.0.0", "1"),
        ("1-STABLE", "1-stable"),
        ("1.0.0-alpha1", "1-alpha.1"),
        ("1.0.0-alpha.1.2.3.0.0.0", "1-alpha.1.2.3"),
        ("1.0.3.0.5.0-beta.0.5.0.0", "1.0.3.0.5-beta.0.5"),
        ("1-b.1", "1-b.1"),
    ],
)
def test_str(text, rendered):
    assert str(Version.parse(text)) == rendered


@pytest.mark.parametrize(
    "greater, lesser",
    [
        ("1.10", "1.1"),
        ("1.100", "1.2"),
        ("1.1.0.0.1", "1.1"),
        ("1.0.0.0.0.2", "1.0.0.0.0.0.2"),
        ("1", "1-stable"),
        ("1-stable", "1-rc"),
        ("1-patch", "1"),
        ("1-stable.1.2", "1-stable.1"),
        ("2.3.2-p2", "2.3.2"),
        ("2.3.3", "2.3.2-p2"),
        ("2.3.2-p2", "2.3.2-p1"),
        ("2.1", "2.1.0-beta1"),
        ("1-alpha.1.1", "1-alpha.1.0"),
        ("1-alpha.1.2", "1-alpha"),
    ],
)
def test_ordering(greater, lesser):
    greater, lesser = Version.parse(greater), Version.parse(lesser)

    assert greater > lesser
    assert greater >= lesser
    assert lesser < greater
    assert lesser <= greater
    assert greater != lesser
    assert greater.compare(lesser) == 1
    assert lesser.compare(greater) == -1


def test_patch_is_not_lesser():
    assert not Version.parse("1") > Version.parse("1-p")


@pytest.mark.parametrize(
    "left, right",
    [
        ("1.1", "1.1.0"),
        ("2.0.1.0.0.0", "2.0.1"),
        ("0.0.0-p", "0-p"),
        ("1-stable.1.1.1.1", "1-stable.1.1.1.1.0"),
        ("1-beta.2", "1-b.2"),
        ("1-beta.0", "1-beta"),
        ("1-rc0", "1-rc"),
    ],
)
def test_equality(left, right):
    left, right = Version.parse(left), Version.parse(right)

    assert left == right
    assert hash(left) == hash(right)
    assert left.compare(right) == 0
    assert left >= right and left <= right


@pytest.mark.parametrize(
    "left, right",
    [
        ("1-beta", "1-b.1"),
        ("1-alpha.1", "1-alpha.1.2"),
        ("1-patch", "1-p.1"),
        ("1", "1-stable"),
    ],
)
def test_inequality(left, right):
    assert Version.parse(left) != Version.parse(right)


def test_not_comparable_with_strings():
    assert Version.parse("1.0") != "1.0"
