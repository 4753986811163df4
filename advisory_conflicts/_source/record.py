"""
Collect advisories from already-loaded advisory records.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping

from advisory_conflicts._advisory import Advisory, InvalidAdvisory, InvalidPackageName
from advisory_conflicts._source.interface import AdvisorySource, AdvisorySourceError

logger = logging.getLogger(__name__)


class RecordSource(AdvisorySource):
    """
    An advisory source backed by raw advisory records, e.g. ones loaded from
    an advisory database by the caller.

    See `Advisory.from_array_data` for the record format.
    """

    def __init__(self, records: Iterable[Mapping[str, Any]], *, strict: bool = False) -> None:
        """
        Create a new `RecordSource`.

        Malformed records are logged and skipped, unless `strict` is set, in
        which case they raise `RecordSourceError`.
        """
        self._records = records
        self._strict = strict

    def collect(self) -> Iterator[Advisory]:
        """
        Yield an `Advisory` for every well-formed record.

        Raises a `RecordSourceError` on a malformed record in strict mode.
        """
        for record in self._records:
            try:
                yield Advisory.from_array_data(record)
            except (InvalidAdvisory, InvalidPackageName) as exc:
                if self._strict:
                    raise RecordSourceError(f"malformed advisory record: {exc}") from exc
                logger.warning(f"skipping malformed advisory record: {exc}")


class RecordSourceError(AdvisorySourceError):
    """A `RecordSource` specific `AdvisorySourceError`."""

    pass
