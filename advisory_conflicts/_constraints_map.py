"""
Comparison of freshly ingested advisories against an existing conflict map.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from advisory_conflicts._advisory import Advisory
from advisory_conflicts._constraint import VersionConstraint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConstraintsMap:
    """
    An existing `{package: conflict constraint}` map, with each package's
    constraint split back into its `|`-separated parts.
    """

    constraints: Mapping[str, tuple[VersionConstraint, ...]]

    @classmethod
    def from_conflicts(cls, conflicts: Mapping[str, str]) -> ConstraintsMap:
        return cls(
            {
                name.lower(): tuple(VersionConstraint.parse(part) for part in value.split("|"))
                for name, value in conflicts.items()
            }
        )

    def _is_covered(self, advisory: Advisory) -> bool:
        existing = self.constraints.get(advisory.package_name.name)
        if existing is None:
            return False
        return all(
            any(known == constraint or known.contains(constraint) for known in existing)
            for constraint in advisory.branch_constraints
        )

    def advisories_diff(self, advisories: Iterable[Advisory]) -> list[Advisory]:
        """
        Return the advisories that the map does not account for yet: the ones
        for unknown packages, and the ones with a branch constraint neither
        equal to nor contained in any of the package's existing constraints.
        """
        diff = []
        for advisory in advisories:
            if self._is_covered(advisory):
                continue
            logger.debug(f"{advisory.package_name}: new or updated advisory {advisory.constraint}")
            diff.append(advisory)
        return diff
