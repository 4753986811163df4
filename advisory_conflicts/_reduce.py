"""
Reduction of many overlapping constraints into a minimal, sorted set.
"""

from __future__ import annotations

import itertools
import logging
from functools import cmp_to_key
from typing import Iterable

import icontract

from advisory_conflicts._constraint import SimpleRange, VersionConstraint
from advisory_conflicts._versions import Version

logger = logging.getLogger(__name__)


def _pivot(constraint: VersionConstraint) -> Version | None:
    if not isinstance(constraint, SimpleRange):
        return None
    if constraint.lower is not None:
        return constraint.lower.version
    if constraint.upper is not None:
        return constraint.upper.version
    return None


def compare_constraints(left: VersionConstraint, right: VersionConstraint) -> int:
    """
    Order two constraints by their lower version (or their upper version, for
    ranges without a lower boundary).

    Equal pivots compare as "after", and constraints without any pivot compare
    as equal to everything; used with `functools.cmp_to_key` and the stable
    `sorted`, both keep their input order.
    """
    lhs, rhs = _pivot(left), _pivot(right)
    if lhs is None or rhs is None:
        return 0
    return 1 if lhs >= rhs else -1


def sort_constraints(constraints: Iterable[VersionConstraint]) -> list[VersionConstraint]:
    """
    Sort `constraints` with `compare_constraints`.
    """
    return sorted(constraints, key=cmp_to_key(compare_constraints))


def _no_mergeable_pairs(result: list[VersionConstraint]) -> bool:
    return not any(a.can_merge(b) for a, b in itertools.combinations(result, 2))


@icontract.ensure(lambda result: _no_mergeable_pairs(result))
def reduce(constraints: Iterable[VersionConstraint]) -> list[VersionConstraint]:
    """
    Reduce `constraints` to a minimal set matching the same versions.

    Constraints rendering identically are collapsed first. Then, until no
    two remaining constraints can be merged, the first mergeable pair is
    replaced by its merge. The result is sorted with `compare_constraints`.
    """
    pending: list[VersionConstraint] = []
    seen: set[tuple[type, str]] = set()
    for constraint in constraints:
        key = (type(constraint), str(constraint))
        if key in seen:
            continue
        seen.add(key)
        pending.append(constraint)

    merged = True
    while merged:
        merged = False
        for i, j in itertools.combinations(range(len(pending)), 2):
            left, right = pending[i], pending[j]
            if not left.can_merge(right):
                continue

            result = left.merge(right)
            logger.debug(f"merged {left} and {right} into {result}")

            # `j` is always past `i`, so deleting it leaves `i` in place.
            del pending[j]
            pending[i] = result
            merged = True
            break

    return sort_constraints(pending)


def render_joined(constraints: Iterable[VersionConstraint]) -> str:
    """
    Render `constraints` joined by `|`, skipping the ones that render empty.
    """
    return "|".join(rendered for rendered in map(str, constraints) if rendered)
