"""
Corrections for advisories that are known to publish wrong ranges.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from advisory_conflicts._advisory import Advisory
from advisory_conflicts._constraint import VersionConstraint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplacementRule:
    """
    Replaces a specific package's advisory branches matching a known-wrong
    constraint with a corrected one.
    """

    package: str
    """
    The `vendor/package` name the rule applies to.
    """

    original_constraint: str
    """
    The branch constraint to replace. It is compared in its rendered form,
    so `>=1.0` also matches a branch written as `>=1`.
    """

    replacement_constraint: str
    """
    The constraint to use instead.
    """

    reason: str = ""
    """
    A human-readable explanation of the correction.
    """

    def __call__(self, advisory: Advisory) -> Advisory:
        """
        Apply the rule, returning either a corrected advisory or `advisory`
        unchanged.
        """
        if advisory.package_name.name != self.package.lower():
            return advisory

        original = str(VersionConstraint.parse(self.original_constraint))
        replacement = VersionConstraint.parse(self.replacement_constraint)
        branches = tuple(
            replacement if str(branch) == original else branch
            for branch in advisory.branch_constraints
        )
        if branches == advisory.branch_constraints:
            return advisory

        logger.info(
            f"{self.package}: replacing {original} with {replacement} "
            f"({self.reason or 'no reason given'})"
        )
        return replace(advisory, branch_constraints=branches)


DEFAULT_RULES: tuple[ReplacementRule, ...] = (
    ReplacementRule(
        "zencart/zencart",
        "< 1.5.5e",
        "<1.5.8",
        "Zen Cart's letter suffixes are patch levels, not pre-release flags",
    ),
    ReplacementRule(
        "zencart/zencart",
        "<= 1.5.7b",
        "<1.5.8",
        "Zen Cart's letter suffixes are patch levels, not pre-release flags",
    ),
    ReplacementRule(
        "zencart/zencart",
        "< 1.5.7a",
        "<1.5.8",
        "Zen Cart's letter suffixes are patch levels, not pre-release flags",
    ),
    ReplacementRule(
        "laminas/laminas-form",
        "<2.17.2",
        "<2.17.1",
        "2.17.1 is not affected; the advisory over-reports it",
    ),
)
"""
The corrections applied by default.
"""
