"""
Version constraints and the containment/overlap/adjacency algebra used
to merge them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

import icontract

from advisory_conflicts._boundary import Boundary, Operator
from advisory_conflicts._versions import FLAG_PATTERN, Version

_TAGGED_VERSION = rf"(?:\d+\.)*\d+(?:[._-]?(?:{FLAG_PATTERN})[._-]?(?:(?:\d+\.)*\d+)?)?"

_CLOSED_RANGE_RE = re.compile(
    rf">(?P<lower_eq>=?)\s*(?P<lower>{_TAGGED_VERSION})\s*,"
    rf"\s*<(?P<upper_eq>=?)\s*(?P<upper>{_TAGGED_VERSION})"
)
_LEFT_OPEN_RANGE_RE = re.compile(rf"<(?P<upper_eq>=?)\s*(?P<upper>{_TAGGED_VERSION})")
_RIGHT_OPEN_RANGE_RE = re.compile(rf">(?P<lower_eq>=?)\s*(?P<lower>{_TAGGED_VERSION})")


def _lower_boundary(match: re.Match) -> Boundary:
    operator = Operator.GE if match["lower_eq"] else Operator.GT
    return Boundary(operator, Version.parse(match["lower"]))


def _upper_boundary(match: re.Match) -> Boundary:
    operator = Operator.LE if match["upper_eq"] else Operator.LT
    return Boundary(operator, Version.parse(match["upper"]))


def _adjacent(left: Boundary | None, right: Boundary | None) -> bool:
    if left is None or right is None:
        return False
    return left.adjacent_to(right)


@dataclass(frozen=True)
class VersionConstraint:
    """
    Represents an abstract constraint on package versions.

    A constraint is either a `SimpleRange` that takes part in the merge
    algebra, or an `OpaqueConstraint` that is carried through untouched.

    This class cannot be constructed directly; use `VersionConstraint.parse`.
    """

    def __init__(self, *_args: Any, **_kwargs: Any) -> None:
        """
        A stub constructor that always fails.
        """
        raise NotImplementedError

    @staticmethod
    def parse(text: str) -> VersionConstraint:
        """
        Parse `text` into a constraint. This never fails: anything that isn't
        a closed, left-open or right-open range becomes an `OpaqueConstraint`.
        """
        normalized = text.strip().lower()

        match = _CLOSED_RANGE_RE.fullmatch(normalized)
        if match is not None:
            return SimpleRange(_lower_boundary(match), _upper_boundary(match))

        match = _LEFT_OPEN_RANGE_RE.fullmatch(normalized)
        if match is not None:
            return SimpleRange(upper=_upper_boundary(match))

        match = _RIGHT_OPEN_RANGE_RE.fullmatch(normalized)
        if match is not None:
            return SimpleRange(lower=_lower_boundary(match))

        return OpaqueConstraint(text)

    def is_simple(self) -> bool:
        """
        Check whether this constraint takes part in the merge algebra.
        """
        return self.__class__ is SimpleRange

    def render(self) -> str:
        """
        Render the constraint in its canonical textual form.
        """
        return str(self)

    def contains(self, other: VersionConstraint) -> bool:
        """
        Whether every version matched by `other` is also matched by this
        constraint.
        """
        return False

    def overlaps(self, other: VersionConstraint) -> bool:
        """
        Whether this constraint and `other` partially overlap, i.e. share
        some versions without either one containing the other.
        """
        return False

    def adjacent(self, other: VersionConstraint) -> bool:
        """
        Whether this constraint and `other` touch with neither a gap nor an
        overlap between them.
        """
        return False

    def can_merge(self, other: VersionConstraint) -> bool:
        """
        Whether this constraint and `other` can be expressed as a single
        constraint.
        """
        return (
            self.contains(other)
            or other.contains(self)
            or self.overlaps(other)
            or other.overlaps(self)
            or self.adjacent(other)
            or other.adjacent(self)
        )

    @icontract.require(lambda self, other: self.can_merge(other))
    def merge(self, other: VersionConstraint) -> VersionConstraint:
        """
        Merge this constraint with `other`, returning the constraint matching
        the union of both.

        Callers must check `can_merge` first.
        """
        if self.contains(other):
            return self
        if other.contains(self):
            return other

        # Only simple ranges can get past `can_merge` without containing
        # one another.
        if not (isinstance(self, SimpleRange) and isinstance(other, SimpleRange)):
            raise TypeError(f"can't merge {self!r} with {other!r}")

        if self.overlaps(other):
            return self._merge_overlapping(other)
        if other.overlaps(self):
            return other._merge_overlapping(self)
        return self._merge_adjacent(other)


@dataclass(frozen=True)
class SimpleRange(VersionConstraint):
    """
    A range with an optional lower boundary (`>` or `>=`) and an optional
    upper boundary (`<` or `<=`).

    A range with neither boundary matches every version, and renders as the
    empty string.
    """

    lower: Boundary | None = None
    """
    The lower boundary, if any.
    """

    upper: Boundary | None = None
    """
    The upper boundary, if any.
    """

    def __post_init__(self) -> None:
        if self.lower is not None and self.lower.operator not in (Operator.GT, Operator.GE):
            raise ValueError(f"invalid lower boundary: {self.lower}")
        if self.upper is not None and self.upper.operator not in (Operator.LT, Operator.LE):
            raise ValueError(f"invalid upper boundary: {self.upper}")

    def contains(self, other: VersionConstraint) -> bool:
        if not isinstance(other, SimpleRange):
            return False
        return self._contains_lower(other.lower) and self._contains_upper(other.upper)

    def overlaps(self, other: VersionConstraint) -> bool:
        if not isinstance(other, SimpleRange):
            return False
        if self.contains(other) or other.contains(self):
            return False
        return self._strictly_contains(other.lower) != self._strictly_contains(other.upper)

    def adjacent(self, other: VersionConstraint) -> bool:
        if not isinstance(other, SimpleRange):
            return False
        return _adjacent(self.lower, other.upper) or _adjacent(self.upper, other.lower)

    def _contains_lower(self, bound: Boundary | None) -> bool:
        if self.lower is None:
            return True
        if bound is None:
            return False
        if self.lower.limit_included() or not bound.limit_included():
            return bound.version >= self.lower.version
        return bound.version > self.lower.version

    def _contains_upper(self, bound: Boundary | None) -> bool:
        if self.upper is None:
            return True
        if bound is None:
            return False
        if self.upper.limit_included() or not bound.limit_included():
            return bound.version <= self.upper.version
        return bound.version < self.upper.version

    def _strictly_contains(self, bound: Boundary | None) -> bool:
        # Whether `bound`'s version lies strictly between our boundaries,
        # regardless of either side's inclusivity.
        if bound is None:
            return False
        above = self.lower is None or bound.version > self.lower.version
        below = self.upper is None or bound.version < self.upper.version
        return above and below

    def _merge_overlapping(self, other: SimpleRange) -> SimpleRange:
        if self._strictly_contains(other.lower):
            return SimpleRange(self.lower, other.upper)
        return SimpleRange(other.lower, self.upper)

    def _merge_adjacent(self, other: SimpleRange) -> SimpleRange:
        if _adjacent(self.upper, other.lower):
            return SimpleRange(self.lower, other.upper)
        return SimpleRange(other.lower, self.upper)

    def __str__(self) -> str:
        return ",".join(str(bound) for bound in (self.lower, self.upper) if bound is not None)


@dataclass(frozen=True)
class OpaqueConstraint(VersionConstraint):
    """
    A constraint outside of the supported range grammar, e.g. `~2` or
    `1.2.3|4.5.6`. It never merges and is rendered exactly as given.
    """

    text: str

    def __str__(self) -> str:
        return self.text
