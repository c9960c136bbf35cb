"""
Domain models and value objects.

Contains the Period value type and the immutable results of coincidence detection.
"""

from coincidence.core.domain.coincidence import (
    CoincidenceReport,
    OverlapGroup,
)
from coincidence.core.domain.errors import InvalidArgumentError
from coincidence.core.domain.period import (
    Period,
    compare_periods,
    require_comparable,
    require_period,
    require_timestamp,
)

__all__ = [
    # Errors
    "InvalidArgumentError",
    # Period model
    "Period",
    "compare_periods",
    "require_comparable",
    "require_period",
    "require_timestamp",
    # Detection results
    "OverlapGroup",
    "CoincidenceReport",
]
