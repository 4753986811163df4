"""
Advisory source interfaces and implementations for `advisory_conflicts`.
"""

from .interface import AdvisorySource, AdvisorySourceError
from .multiple import MultipleSources
from .record import RecordSource, RecordSourceError
from .rules import RuleDecoratedSource

__all__ = [
    "AdvisorySource",
    "AdvisorySourceError",
    "MultipleSources",
    "RecordSource",
    "RecordSourceError",
    "RuleDecoratedSource",
]
