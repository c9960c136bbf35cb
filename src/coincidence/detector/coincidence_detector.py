"""CoincidenceDetector — поиск пересечений (совпадений) во множестве периодов.

Detector работает как builder: периоды накапливаются через with_period()/with_span(),
затем detect() возвращает immutable кортеж максимальных групп пересечений.

Алгоритм (sweep):
1. Сортировка периодов в естественном порядке Period (start, затем end)
2. Проход слева направо с running_end — максимальным end текущей группы
3. start <= running_end → период входит в группу, running_end = max(running_end, end)
4. Иначе группа закрывается, новый период открывает следующую

Сложность O(n log n). Касание концов считается пересечением (замкнутые интервалы).
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Tuple, Union

from coincidence.core.domain.coincidence import CoincidenceReport, OverlapGroup
from coincidence.core.domain.errors import InvalidArgumentError
from coincidence.core.domain.period import Period, require_comparable, require_period


@dataclass(frozen=True)
class DetectorConfig:
    """Конфигурация detector.

    - min_group_size: минимальный размер группы в результате detect()
      (1 — включая одиночные периоды, 2 — только совпадения)
    - gap_tolerance: периоды, разделённые промежутком <= gap_tolerance,
      объединяются в одну группу (0 — строгая семантика замкнутых интервалов)
    """
    min_group_size: int = 1
    gap_tolerance: timedelta = timedelta(0)

    def __post_init__(self):
        if self.min_group_size < 1:
            raise ValueError(f"min_group_size must be >= 1, got {self.min_group_size}")
        if self.gap_tolerance < timedelta(0):
            raise ValueError(f"gap_tolerance must be non-negative, got {self.gap_tolerance}")


class CoincidenceDetector:
    """Накопитель периодов и поиск максимальных групп пересечений.

    Не потокобезопасен для конкурентной записи: используйте отдельный
    detector на поток или внешнюю блокировку.
    """

    def __init__(self, config: Optional[DetectorConfig] = None):
        """
        Args:
            config: конфигурация detector (по умолчанию DetectorConfig())
        """
        self.config = config or DetectorConfig()

        # Накопленные периоды в порядке добавления
        self._periods: List[Period] = []

    @property
    def periods(self) -> Tuple[Period, ...]:
        """Накопленные периоды в порядке добавления (read-only)."""
        return tuple(self._periods)

    def __len__(self) -> int:
        return len(self._periods)

    # -------------------------------------------------------------------------
    # Накопление
    # -------------------------------------------------------------------------

    def with_period(self, period: Period) -> "CoincidenceDetector":
        """Добавление периода.

        Returns:
            self (для цепочки вызовов)

        Raises:
            InvalidArgumentError: period is None, не Period, или смешивает
                naive/aware время с уже накопленными периодами
        """
        self._periods.append(self._check(period, "period"))
        return self

    def with_span(
        self,
        start: datetime,
        end: Union[datetime, timedelta],
    ) -> "CoincidenceDetector":
        """Добавление периода, построенного через Period.of(start, end)."""
        return self.with_period(Period.of(start, end))

    def with_periods(self, periods: Iterable[Period]) -> "CoincidenceDetector":
        """Добавление нескольких периодов.

        Все периоды проверяются до добавления: при ошибке накопление не меняется.
        """
        if periods is None:
            raise InvalidArgumentError("periods must not be None")
        checked: List[Period] = []
        for index, period in enumerate(periods):
            checked.append(self._check(period, f"periods[{index}]", checked))
        self._periods.extend(checked)
        return self

    def _check(
        self,
        period: Period,
        name: str,
        pending: Optional[List[Period]] = None,
    ) -> Period:
        period = require_period(period, name)
        reference = self._periods or pending
        if reference:
            require_comparable(reference[0].start, period.start)
        return period

    # -------------------------------------------------------------------------
    # Поиск пересечений
    # -------------------------------------------------------------------------

    def detect(self) -> Tuple[OverlapGroup, ...]:
        """Максимальные группы пересечений.

        Группы упорядочены по минимальному start, периоды внутри группы —
        в естественном порядке Period. Группы меньше config.min_group_size
        отбрасываются. Повторный вызов без новых периодов даёт тот же результат.

        Returns:
            Кортеж OverlapGroup (пустой для пустого detector)
        """
        return tuple(
            OverlapGroup(periods=chunk)
            for chunk in self._sweep()
            if len(chunk) >= self.config.min_group_size
        )

    def detect_coincidences(self) -> Tuple[OverlapGroup, ...]:
        """Все группы из двух и более периодов.

        config.min_group_size не применяется.
        """
        return tuple(
            OverlapGroup(periods=chunk) for chunk in self._sweep() if len(chunk) >= 2
        )

    def merged_spans(self) -> Tuple[Period, ...]:
        """Покрывающий период каждой группы, включая одиночные.

        config.min_group_size не применяется: spans покрывают все периоды.
        """
        return tuple(OverlapGroup(periods=chunk).span for chunk in self._sweep())

    def overlapping_pairs(self) -> Tuple[Tuple[Period, Period], ...]:
        """Все пары пересекающихся периодов (a, b), a <= b.

        Sweep с множеством активных периодов: сравниваются только периоды,
        чей end ещё не остался левее текущего start. gap_tolerance здесь
        не применяется, пара означает реальное пересечение.
        """
        pairs: List[Tuple[Period, Period]] = []
        active: List[Period] = []
        for period in sorted(self._periods):
            active = [other for other in active if other.end >= period.start]
            pairs.extend((other, period) for other in active)
            active.append(period)
        return tuple(pairs)

    def report(self) -> CoincidenceReport:
        """Результат detect() в виде CoincidenceReport."""
        return CoincidenceReport(groups=self.detect())

    def _sweep(self) -> List[List[Period]]:
        chunks: List[List[Period]] = []
        current: List[Period] = []
        running_end: Optional[datetime] = None
        tolerance = self.config.gap_tolerance

        for period in sorted(self._periods):
            # start - running_end <= tolerance, без переполнения на границах datetime
            if current and period.start - running_end <= tolerance:
                current.append(period)
                running_end = max(running_end, period.end)
            else:
                if current:
                    chunks.append(current)
                current = [period]
                running_end = period.end

        if current:
            chunks.append(current)
        return chunks
