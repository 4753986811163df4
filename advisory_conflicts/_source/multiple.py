"""
Combine several advisory sources into one.
"""

from __future__ import annotations

from typing import Iterator

from advisory_conflicts._advisory import Advisory
from advisory_conflicts._source.interface import AdvisorySource


class MultipleSources(AdvisorySource):
    """
    Yields the advisories of each wrapped source in turn.
    """

    def __init__(self, *sources: AdvisorySource) -> None:
        self._sources = sources

    def collect(self) -> Iterator[Advisory]:
        for source in self._sources:
            yield from source.collect()
