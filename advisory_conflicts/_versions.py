"""
Loosely-formatted advisory versions, e.g. `1.2.3`, `2.1.0-beta1` or
`1.0-patch.4`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from advisory_conflicts._stability import (
    Stability,
    compare_stability,
    strip_trailing_zeroes,
)

FLAG_PATTERN = r"stable|beta|b|rc|alpha|a|patch|p"

_VERSION_RE = re.compile(
    r"(?P<numbers>(?:\d+\.)*\d+)"
    rf"(?:[._-]?(?P<flag>{FLAG_PATTERN})"
    r"(?:[._-]?(?P<qualifier>(?:\d+\.)*\d+))?)?"
)


class ParseError(ValueError):
    """
    Raised when a version, boundary or other textual input can't be parsed.
    """

    pass


class InvalidVersion(ParseError):
    """
    Raised when a string does not start with a dotted numeric version.
    """

    pass


def _split_numbers(dotted: str | None) -> tuple[int, ...]:
    if not dotted:
        return ()
    return tuple(int(part) for part in dotted.split("."))


@dataclass(frozen=True, eq=False)
class Version:
    """
    A dotted numeric version with an optional `Stability`.

    Trailing zero components are not significant: `1.0.0` is stored, compared
    and rendered as `1`.
    """

    numbers: tuple[int, ...]
    """
    The numeric components, trailing zeroes removed. Never empty.
    """

    stability: Stability | None = None
    """
    The stability flag and qualifier, if the version has one.
    """

    def __post_init__(self) -> None:
        object.__setattr__(self, "numbers", strip_trailing_zeroes(self.numbers) or (0,))

    @classmethod
    def parse(cls, text: str) -> Version:
        """
        Parse `text` into a `Version`.

        The text is lower-cased and must begin with a numeric version; any
        text following the recognized version is ignored.
        """
        match = _VERSION_RE.match(text.lower())
        if match is None:
            raise InvalidVersion(f'Version "{text}" is not valid')

        stability = None
        if match["flag"] is not None:
            stability = Stability(match["flag"], _split_numbers(match["qualifier"]))

        return cls(_split_numbers(match["numbers"]), stability)

    def compare(self, other: Version) -> int:
        """
        Compare this version to `other`, returning -1, 0 or 1.

        The numeric components are compared over their common prefix, then
        the stabilities, and finally the version with more numeric components
        is considered the greater one.
        """
        for lhs, rhs in zip(self.numbers, other.numbers):
            if lhs != rhs:
                return -1 if lhs < rhs else 1

        by_stability = compare_stability(self.stability, other.stability)
        if by_stability != 0:
            return by_stability

        lhs, rhs = len(self.numbers), len(other.numbers)
        return (lhs > rhs) - (lhs < rhs)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.numbers == other.numbers and compare_stability(
            self.stability, other.stability
        ) == 0

    def __hash__(self) -> int:
        return hash((self.numbers, self.stability))

    def __lt__(self, other: Version) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: Version) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: Version) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: Version) -> bool:
        return self.compare(other) >= 0

    def __str__(self) -> str:
        rendered = ".".join(map(str, self.numbers))
        if self.stability is not None:
            rendered = f"{rendered}-{self.stability}"
        return rendered
