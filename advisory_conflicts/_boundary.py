"""
A single side of a version range, e.g. `>=1.2` or `<3-beta.1`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

import icontract

from advisory_conflicts._versions import ParseError, Version


class Operator(str, Enum):
    """
    The comparison operators a `Boundary` may use.
    """

    LT = "<"
    LE = "<="
    EQ = "="
    GE = ">="
    GT = ">"

    def __str__(self) -> str:
        return self.value


_ADJACENT_OPERATORS = frozenset(
    {
        frozenset({Operator.LT, Operator.EQ}),
        frozenset({Operator.LT, Operator.GE}),
        frozenset({Operator.LE, Operator.GT}),
        frozenset({Operator.EQ, Operator.GT}),
    }
)

# Longer operators come first, so that `<=` is never read as `<` followed by `=`.
_BOUNDARY_RE = re.compile(r"^\s*(?P<operator><=|>=|<|>|=)\s*(?P<version>.*?)\s*$", re.DOTALL)


class InvalidBoundary(ParseError):
    """
    Raised when a boundary does not start with a comparison operator.
    """

    pass


@dataclass(frozen=True)
class Boundary:
    """
    A comparison operator applied to a `Version`.
    """

    operator: Operator
    version: Version

    @classmethod
    def parse(cls, text: str) -> Boundary:
        """
        Parse `text` into a `Boundary`.

        Raises `InvalidBoundary` if `text` has no leading operator; a malformed
        version raises `InvalidVersion`.
        """
        match = _BOUNDARY_RE.match(text)
        if match is None:
            raise InvalidBoundary(f'Boundary "{text}" is not valid')

        return cls(Operator(match["operator"]), Version.parse(match["version"]))

    def limit_included(self) -> bool:
        """
        Whether the boundary's own version satisfies it.
        """
        return "=" in self.operator.value

    def adjacent_to(self, other: Boundary) -> bool:
        """
        Whether this boundary and `other` meet at the same version with no gap
        and no overlap between them, e.g. `<1` and `>=1`.
        """
        return (
            self.version == other.version
            and frozenset({self.operator, other.operator}) in _ADJACENT_OPERATORS
        )

    @icontract.require(
        lambda self, other: self.adjacent_to(other)
        and Operator.EQ in {self.operator, other.operator}
    )
    def merge_adjacent(self, other: Boundary) -> Boundary:
        """
        Merge an exact boundary (`=V`) with the open boundary next to it,
        e.g. `<1` and `=1` into `<=1`.
        """
        open_side = other if self.operator is Operator.EQ else self
        widened = Operator.LE if open_side.operator is Operator.LT else Operator.GE
        return Boundary(widened, self.version)

    def __str__(self) -> str:
        return f"{self.operator}{self.version}"
