"""
The `advisory_conflicts` APIs.

Everything re-exported here is considered stable; the underscore-prefixed
modules are implementation details.
"""

import logging
import os

from advisory_conflicts._advisory import (
    Advisory,
    InvalidAdvisory,
    InvalidPackageName,
    PackageName,
)
from advisory_conflicts._boundary import Boundary, InvalidBoundary, Operator
from advisory_conflicts._component import (
    Component,
    ConflictBuilder,
    ConflictOptions,
    build_components,
    build_conflicts,
)
from advisory_conflicts._constraint import (
    OpaqueConstraint,
    SimpleRange,
    VersionConstraint,
)
from advisory_conflicts._constraints_map import ConstraintsMap
from advisory_conflicts._reduce import compare_constraints, reduce, render_joined
from advisory_conflicts._rules import DEFAULT_RULES, ReplacementRule
from advisory_conflicts._stability import Stability
from advisory_conflicts._version import __version__
from advisory_conflicts._versions import InvalidVersion, ParseError, Version

# NOTE: `ADVISORY_CONFLICTS_LOGLEVEL` only affects this package's loggers;
# handlers and formatting are left to the embedding application.
_package_logger = logging.getLogger(__name__)
_package_logger.setLevel(os.environ.get("ADVISORY_CONFLICTS_LOGLEVEL", "INFO").upper())

__all__ = [
    "__version__",
    "Advisory",
    "Boundary",
    "Component",
    "ConflictBuilder",
    "ConflictOptions",
    "ConstraintsMap",
    "DEFAULT_RULES",
    "InvalidAdvisory",
    "InvalidBoundary",
    "InvalidPackageName",
    "InvalidVersion",
    "OpaqueConstraint",
    "Operator",
    "PackageName",
    "ParseError",
    "ReplacementRule",
    "SimpleRange",
    "Stability",
    "Version",
    "VersionConstraint",
    "build_components",
    "build_conflicts",
    "compare_constraints",
    "reduce",
    "render_joined",
]
