"""
Advisories: a package name and the version ranges it affects.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from advisory_conflicts._constraint import VersionConstraint
from advisory_conflicts._reduce import render_joined, sort_constraints

_PACKAGE_NAME_RE = re.compile(
    r"[a-z0-9](?:[_.-]?[a-z0-9]+)*/[a-z0-9](?:(?:[_.]?|-{0,2})[a-z0-9]+)*",
    re.IGNORECASE,
)

_REFERENCE_PREFIX = "composer://"


class InvalidPackageName(ValueError):
    """
    Raised when a package name isn't of the `vendor/package` form.
    """

    pass


class InvalidAdvisory(ValueError):
    """
    Raised when an advisory record is missing fields or has fields of the
    wrong shape.
    """

    pass


@dataclass(frozen=True)
class PackageName:
    """
    A validated, lower-cased `vendor/package` name.
    """

    name: str

    @classmethod
    def from_name(cls, name: str) -> PackageName:
        if not _PACKAGE_NAME_RE.fullmatch(name):
            raise InvalidPackageName(f'Package "{name}" has invalid name')
        return cls(name.lower())

    @classmethod
    def from_reference_name(cls, reference: str) -> PackageName:
        """
        Build a name from an advisory reference such as `composer://foo/bar`.
        """
        if reference.startswith(_REFERENCE_PREFIX):
            reference = reference[len(_REFERENCE_PREFIX) :]
        return cls.from_name(reference.replace("\\", "/"))

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Advisory:
    """
    A single advisory affecting a package.

    Each "branch" of the advisory carries one affected range; the branches
    are kept in `compare_constraints` order.
    """

    package_name: PackageName
    """
    The affected package.
    """

    branch_constraints: tuple[VersionConstraint, ...]
    """
    One constraint per affected branch.
    """

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "branch_constraints", tuple(sort_constraints(self.branch_constraints))
        )

    @classmethod
    def from_ranges(cls, package_name: str, ranges: Iterable[str]) -> Advisory:
        """
        Build an advisory from a package name and its affected range strings,
        one branch per range.
        """
        return cls(
            PackageName.from_name(package_name),
            tuple(VersionConstraint.parse(r) for r in ranges),
        )

    @classmethod
    def from_array_data(cls, record: Mapping[str, Any]) -> Advisory:
        """
        Build an advisory from a raw advisory record, i.e.:

        ```
        {
            "reference": "composer://foo/bar",
            "branches": {
                "1.x": {"versions": [">=1.0", "<1.1"]},
                "2.x": {"versions": ">=2.0,<2.1"},
            },
        }
        ```

        `branches` may also be a list. Unknown keys are ignored.
        """
        reference = record.get("reference")
        if not isinstance(reference, str):
            raise InvalidAdvisory(f"advisory has no usable reference: {reference!r}")

        branches = record.get("branches")
        if isinstance(branches, Mapping):
            branches = list(branches.values())
        if not isinstance(branches, list):
            raise InvalidAdvisory(f"advisory for {reference} has no usable branches")

        constraints = []
        for branch in branches:
            versions = branch.get("versions") if isinstance(branch, Mapping) else None
            if isinstance(versions, str):
                versions = [versions]
            if not isinstance(versions, list) or not all(isinstance(v, str) for v in versions):
                raise InvalidAdvisory(f"advisory for {reference} has a malformed branch: {branch!r}")
            constraints.append(VersionConstraint.parse(",".join(versions)))

        return cls(PackageName.from_reference_name(reference), tuple(constraints))

    @property
    def constraint(self) -> str | None:
        """
        The advisory's branches, in order, rendered as one `|`-joined
        constraint. The branches are not merged with one another.

        `None` for an advisory without branches.
        """
        if not self.branch_constraints:
            return None
        return render_joined(self.branch_constraints)
