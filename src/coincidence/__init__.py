"""
coincidence — периоды времени и поиск их совпадений.

Public API:
    Period.of(a, b) / Period.of(base, duration)
    CoincidenceDetector().with_period(p).with_span(a, b).detect()
"""

from coincidence.core.domain import (
    CoincidenceReport,
    InvalidArgumentError,
    OverlapGroup,
    Period,
    compare_periods,
)
from coincidence.detector import CoincidenceDetector, DetectorConfig

__version__ = "1.0.0"

__all__ = [
    "Period",
    "compare_periods",
    "InvalidArgumentError",
    "OverlapGroup",
    "CoincidenceReport",
    "CoincidenceDetector",
    "DetectorConfig",
]
