"""
Interfaces for interacting with "advisory sources", i.e. sources of
security advisories for packages.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from advisory_conflicts._advisory import Advisory


class AdvisorySource(ABC):
    """
    Represents an abstract source of security advisories.

    Individual concrete advisory sources (e.g. a local advisory database, or
    a remote advisory API) are expected to subclass `AdvisorySource` and
    implement it in their terms.
    """

    @abstractmethod
    def collect(self) -> Iterator[Advisory]:  # pragma: no cover
        """
        Yield the advisories in this source.
        """
        raise NotImplementedError


class AdvisorySourceError(Exception):
    """
    Raised when an `AdvisorySource` fails to provide its advisories.

    Concrete implementations are expected to subclass this exception to
    provide more context.
    """

    pass
