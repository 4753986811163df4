import pytest

from advisory_conflicts import Advisory
from advisory_conflicts._source import AdvisorySource


@pytest.fixture
def advisory():
    def _advisory(name, *ranges):
        return Advisory.from_ranges(name, ranges)

    return _advisory


@pytest.fixture
def record():
    def _record(reference, *branches):
        return {
            "reference": reference,
            "branches": {f"{i}.x": {"versions": list(b)} for i, b in enumerate(branches)},
            "source": {"summary": "summary", "link": "link"},
        }

    return _record


@pytest.fixture
def advisory_source(advisory):
    # A dummy source with two advisories for "foo/bar", mirroring two
    # upstream databases reporting overlapping ranges.
    class Source(AdvisorySource):
        def collect(self):
            yield advisory("foo/bar", ">=1.0,<1.1", ">=3.0,<3.1")
            yield advisory("foo/bar", ">=1.0.1,<1.0.99")

    return Source
