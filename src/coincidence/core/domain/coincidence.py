"""
OverlapGroup, CoincidenceReport — результаты поиска совпадений периодов

Immutable Pydantic модели:
- OverlapGroup: максимальная группа периодов, связанных цепочкой пересечений
- CoincidenceReport: упорядоченный набор групп
"""

from datetime import datetime
from typing import Any, Tuple

from pydantic import BaseModel, Field, field_validator

from coincidence.core.domain.period import Period, require_comparable


# =============================================================================
# OVERLAP GROUP
# =============================================================================


class OverlapGroup(BaseModel):
    """
    Максимальная группа пересекающихся периодов.

    Периоды хранятся в естественном порядке Period. Группа из одного
    периода — период, не пересекающийся ни с одним другим.
    """

    periods: Tuple[Period, ...] = Field(..., min_length=1, description="Периоды группы")

    model_config = {"frozen": True}  # Immutable

    @field_validator("periods")
    @classmethod
    def sort_periods(cls, v: Tuple[Period, ...]) -> Tuple[Period, ...]:
        """Все периоды либо naive, либо aware; порядок — естественный порядок Period."""
        for period in v[1:]:
            require_comparable(v[0].start, period.start)
        return tuple(sorted(v))

    @property
    def start(self) -> datetime:
        """Самое раннее начало в группе."""
        return self.periods[0].start

    @property
    def end(self) -> datetime:
        """Самый поздний конец в группе."""
        return max(period.end for period in self.periods)

    @property
    def span(self) -> Period:
        """Период, покрывающий всю группу."""
        return Period.between(self.start, self.end)

    @property
    def size(self) -> int:
        return len(self.periods)

    @property
    def is_coincidence(self) -> bool:
        """True, если в группе есть хотя бы два периода."""
        return self.size >= 2

    def __len__(self) -> int:
        return self.size

    def __contains__(self, period: Any) -> bool:
        return period in self.periods

    def __str__(self) -> str:
        return "[" + ", ".join(str(period) for period in self.periods) + "]"


# =============================================================================
# COINCIDENCE REPORT
# =============================================================================


class CoincidenceReport(BaseModel):
    """
    Результат detect() с агрегатами по группам.

    Группы упорядочены по минимальному start.
    """

    groups: Tuple[OverlapGroup, ...] = Field(default=(), description="Группы пересечений")

    model_config = {"frozen": True}  # Immutable

    @field_validator("groups")
    @classmethod
    def sort_groups(cls, v: Tuple[OverlapGroup, ...]) -> Tuple[OverlapGroup, ...]:
        return tuple(sorted(v, key=lambda group: (group.periods[0], group.end)))

    @property
    def group_count(self) -> int:
        return len(self.groups)

    @property
    def period_count(self) -> int:
        return sum(group.size for group in self.groups)

    @property
    def coincidences(self) -> Tuple[OverlapGroup, ...]:
        """Только группы из двух и более периодов."""
        return tuple(group for group in self.groups if group.is_coincidence)
