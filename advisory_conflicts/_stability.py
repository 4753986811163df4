"""
Pre-release stability flags and their ordering.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Sequence

FLAG_PRIORITIES = MappingProxyType(
    {
        "patch": 5,
        "p": 5,
        "": 4,
        "stable": 3,
        "rc": 2,
        "beta": 1,
        "b": 1,
        "alpha": 0,
        "a": 0,
    }
)
"""
The priority of every recognized flag literal. The empty literal stands for
"no flag at all", which ranks above every pre-release flag but below a patch.
"""


def strip_trailing_zeroes(numbers: Sequence[int]) -> tuple[int, ...]:
    """
    Drop the trailing zero components of `numbers`, e.g. `[1, 0, 2, 0, 0]`
    becomes `(1, 0, 2)`. The result may be empty.
    """
    end = len(numbers)
    while end and numbers[end - 1] == 0:
        end -= 1
    return tuple(numbers[:end])


def compare_numbers(left: Sequence[int], right: Sequence[int]) -> int:
    """
    Compare two numeric sequences positionally over their common prefix,
    falling back on their lengths. Returns -1, 0 or 1.
    """
    for lhs, rhs in zip(left, right):
        if lhs != rhs:
            return -1 if lhs < rhs else 1
    return (len(left) > len(right)) - (len(left) < len(right))


def compare_flags(left: str, right: str) -> int:
    """
    Compare two flag literals by priority. Aliases (`b` and `beta`) are equal.
    """
    lhs, rhs = FLAG_PRIORITIES[left], FLAG_PRIORITIES[right]
    return (lhs > rhs) - (lhs < rhs)


@dataclass(frozen=True, eq=False)
class Stability:
    """
    A stability flag (`stable`, `rc`, `beta`, `alpha`, `patch` or one of their
    short aliases), with its own numeric qualifier.
    """

    flag: str
    """
    The flag literal, exactly as it was written (lower-cased).
    """

    qualifier: tuple[int, ...] = ()
    """
    The numeric qualifier following the flag, trailing zeroes removed.
    """

    def __post_init__(self) -> None:
        if self.flag not in FLAG_PRIORITIES or not self.flag:
            raise ValueError(f"unknown stability flag: {self.flag!r}")
        object.__setattr__(self, "qualifier", strip_trailing_zeroes(self.qualifier))

    @property
    def priority(self) -> int:
        """
        The priority of this stability's flag.
        """
        return FLAG_PRIORITIES[self.flag]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stability):
            return NotImplemented
        return compare_stability(self, other) == 0

    def __hash__(self) -> int:
        return hash((self.priority, self.qualifier))

    def __str__(self) -> str:
        if not self.qualifier:
            return self.flag
        return ".".join([self.flag, *map(str, self.qualifier)])


def compare_stability(left: Stability | None, right: Stability | None) -> int:
    """
    Compare two optional stabilities.

    A missing stability ranks like the empty flag: above every pre-release
    flag and below `patch`. Equal flag priorities are broken by the
    qualifiers.

    Qualifiers are compared after their trailing zeroes are dropped, so
    `beta.0` and `beta` are equal rather than `beta.0` winning on length.
    """
    lhs_flag = left.flag if left is not None else ""
    rhs_flag = right.flag if right is not None else ""

    by_flag = compare_flags(lhs_flag, rhs_flag)
    if by_flag != 0:
        return by_flag

    lhs_qualifier = left.qualifier if left is not None else ()
    rhs_qualifier = right.qualifier if right is not None else ()
    return compare_numbers(lhs_qualifier, rhs_qualifier)
