"""
Per-package aggregation of advisories, and the conflict map built from them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from advisory_conflicts._advisory import Advisory, PackageName
from advisory_conflicts._constraint import VersionConstraint
from advisory_conflicts._reduce import reduce, render_joined
from advisory_conflicts._rules import DEFAULT_RULES, ReplacementRule
from advisory_conflicts._source import AdvisorySource, RuleDecoratedSource

logger = logging.getLogger(__name__)


@dataclass
class Component:
    """
    A package together with every advisory affecting it.
    """

    name: PackageName
    advisories: list[Advisory] = field(default_factory=list)

    def constraints(self) -> list[VersionConstraint]:
        """
        The minimal, sorted set of constraints covering every branch of every
        advisory.
        """
        return reduce(
            constraint
            for advisory in self.advisories
            for constraint in advisory.branch_constraints
        )

    def conflict_constraint(self) -> str:
        """
        The `|`-joined rendering of `constraints()`.
        """
        return render_joined(self.constraints())


def build_components(advisories: Iterable[Advisory]) -> list[Component]:
    """
    Group `advisories` by package, in order of each package's first
    appearance.
    """
    components: dict[PackageName, Component] = {}
    for advisory in advisories:
        component = components.setdefault(advisory.package_name, Component(advisory.package_name))
        component.advisories.append(advisory)
    return list(components.values())


def build_conflicts(components: Iterable[Component], *, keep_empty: bool = False) -> dict[str, str]:
    """
    Build the `{package: conflict constraint}` map, sorted by package name.

    Packages whose constraint renders empty are left out unless `keep_empty`
    is set.
    """
    conflicts: dict[str, str] = {}
    for component in sorted(components, key=lambda c: c.name.name):
        constraint = component.conflict_constraint()
        logger.debug(f"{component.name}: {constraint or '<empty>'}")
        if constraint or keep_empty:
            conflicts[component.name.name] = constraint
    return conflicts


@dataclass(frozen=True)
class ConflictOptions:
    """
    Settings that control the behavior of a `ConflictBuilder` instance.
    """

    apply_rules: bool = True
    """
    Whether to correct advisories with `rules` before reducing them.
    """

    rules: tuple[ReplacementRule, ...] = DEFAULT_RULES
    """
    The replacement rules to apply, in order.
    """

    keep_empty: bool = False
    """
    Whether to keep packages whose conflict constraint renders empty.
    """


class ConflictBuilder:
    """
    Builds the conflict map for everything an `AdvisorySource` yields.
    """

    def __init__(self, options: ConflictOptions = ConflictOptions()) -> None:
        self._options = options

    def build(self, source: AdvisorySource) -> dict[str, str]:
        """
        Collect the advisories from `source` and reduce them to one conflict
        constraint per package.
        """
        if self._options.apply_rules:
            source = RuleDecoratedSource(source, self._options.rules)

        components = build_components(source.collect())
        logger.info(f"building conflicts for {len(components)} packages")
        return build_conflicts(components, keep_empty=self._options.keep_empty)
