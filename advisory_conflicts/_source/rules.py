"""
Apply replacement rules to the advisories of another source.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from advisory_conflicts._advisory import Advisory
from advisory_conflicts._rules import ReplacementRule
from advisory_conflicts._source.interface import AdvisorySource


class RuleDecoratedSource(AdvisorySource):
    """
    Wraps an `AdvisorySource`, passing every advisory it yields through each
    rule, in order.
    """

    def __init__(self, source: AdvisorySource, rules: Iterable[ReplacementRule]) -> None:
        self._source = source
        self._rules = tuple(rules)

    def collect(self) -> Iterator[Advisory]:
        for advisory in self._source.collect():
            for rule in self._rules:
                advisory = rule(advisory)
            yield advisory
