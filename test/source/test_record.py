import logging

import pytest

from advisory_conflicts import Advisory
from advisory_conflicts._source import AdvisorySourceError, RecordSource, RecordSourceError


def test_record_source(record):
    source = RecordSource(
        [
            record("composer://foo/bar", [">=1.0", "<1.1"]),
            record("composer://baz/qux", ["<2"], [">3"]),
        ]
    )

    advisories = list(source.collect())

    assert advisories == [
        Advisory.from_ranges("foo/bar", [">=1,<1.1"]),
        Advisory.from_ranges("baz/qux", ["<2", ">3"]),
    ]


def test_record_source_skips_malformed(caplog, record):
    source = RecordSource(
        [
            {"reference": "composer://foo/bar"},
            record("composer://adminer", ["<1"]),
            record("composer://baz/qux", ["<2"]),
        ]
    )

    with caplog.at_level(logging.WARNING, logger="advisory_conflicts"):
        advisories = list(source.collect())

    assert [a.package_name.name for a in advisories] == ["baz/qux"]
    assert len(caplog.records) == 2
    assert all(r.message.startswith("skipping malformed advisory record") for r in caplog.records)


def test_record_source_strict(record):
    source = RecordSource([record("composer://adminer", ["<1"])], strict=True)

    with pytest.raises(RecordSourceError, match="malformed advisory record"):
        list(source.collect())

    assert issubclass(RecordSourceError, AdvisorySourceError)


def test_record_source_is_lazy():
    def records():
        yield {"reference": "composer://foo/bar", "branches": []}
        raise AssertionError("read too far")

    advisories = RecordSource(records()).collect()

    assert next(advisories).package_name.name == "foo/bar"
