"""
Period — Модель временного периода

Immutable Pydantic модель замкнутого интервала [start, end].

Инварианты:
1. start <= end после любого способа создания (фабрики, прямой конструктор, model_validate)
2. Равенство и hash — структурные, строго по (start, end)
3. Порядок: start по возрастанию, при равенстве — end по возрастанию
4. start и end либо оба naive, либо оба timezone-aware
"""

from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, model_validator

from coincidence.core.domain.errors import InvalidArgumentError


# =============================================================================
# ПРОВЕРКА АРГУМЕНТОВ
# =============================================================================


def _is_aware(value: datetime) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None


def require_timestamp(value: Any, name: str) -> datetime:
    """
    Проверка, что аргумент является datetime.

    Args:
        value: Проверяемое значение
        name: Имя аргумента для сообщения об ошибке

    Returns:
        value без изменений

    Raises:
        InvalidArgumentError: Если value is None или не datetime
    """
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    if not isinstance(value, datetime):
        raise InvalidArgumentError(
            f"{name} must be datetime, got {type(value).__name__}"
        )
    return value


def require_comparable(first: datetime, second: datetime) -> None:
    """
    Проверка, что два datetime можно сравнивать (оба naive или оба aware).

    Raises:
        InvalidArgumentError: При смешении naive и aware
    """
    if _is_aware(first) != _is_aware(second):
        raise InvalidArgumentError(
            f"cannot mix naive and timezone-aware timestamps: {first!r}, {second!r}"
        )


# =============================================================================
# PERIOD MODEL
# =============================================================================


class Period(BaseModel):
    """
    Замкнутый временной интервал [start, end].

    Immutable модель (frozen=True). Оба конца включены, поэтому период нулевой
    длины (start == end) — валидный мгновенный период.

    Создание:
    - Period.of(a, b): два момента в любом порядке
    - Period.of(base, duration): момент и знаковая длительность
    - Period(start=..., end=...): концы также канонизируются
    """

    start: datetime = Field(..., description="Начало периода (включительно)")
    end: datetime = Field(..., description="Конец периода (включительно)")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="wrap")
    @classmethod
    def canonicalize(cls, data: Any, handler) -> "Period":
        """Ранний момент становится start, поздний — end."""
        period = handler(data)
        if _is_aware(period.start) != _is_aware(period.end):
            raise ValueError("start and end must be both naive or both timezone-aware")
        if period.start > period.end:
            return handler({"start": period.end, "end": period.start})
        return period

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, first: datetime, second: Union[datetime, timedelta]) -> "Period":
        """
        Создание периода из двух моментов или из момента и длительности.

        Args:
            first: Момент времени
            second: Второй момент (любой порядок) или знаковая длительность от first

        Returns:
            Канонизированный Period

        Raises:
            InvalidArgumentError: Если аргумент None или неверного типа
        """
        if isinstance(second, timedelta):
            return cls.from_duration(first, second)
        return cls.between(first, second)

    @classmethod
    def between(cls, first: datetime, second: datetime) -> "Period":
        """Период между двумя моментами: start = min, end = max."""
        require_timestamp(first, "first")
        require_timestamp(second, "second")
        require_comparable(first, second)
        if first > second:
            return cls(start=second, end=first)
        return cls(start=first, end=second)

    @classmethod
    def from_duration(cls, base: datetime, duration: timedelta) -> "Period":
        """
        Период от base длиной duration.

        Отрицательная duration означает период, уходящий назад от base;
        результат канонизируется так же, как в between().

        Raises:
            InvalidArgumentError: Если аргумент None, неверного типа,
                или base + duration выходит за диапазон datetime
        """
        require_timestamp(base, "base")
        if duration is None:
            raise InvalidArgumentError("duration must not be None")
        if not isinstance(duration, timedelta):
            raise InvalidArgumentError(
                f"duration must be timedelta, got {type(duration).__name__}"
            )
        try:
            derived = base + duration
        except OverflowError as e:
            raise InvalidArgumentError(
                f"{base.isoformat()} + {duration} is out of datetime range"
            ) from e
        return cls.between(base, derived)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def get_start(self) -> datetime:
        return self.start

    def get_end(self) -> datetime:
        return self.end

    @property
    def duration(self) -> timedelta:
        """Длина периода (end - start), всегда >= 0."""
        return self.end - self.start

    @property
    def is_instant(self) -> bool:
        """True для периода нулевой длины."""
        return self.start == self.end

    # -------------------------------------------------------------------------
    # Порядок
    # -------------------------------------------------------------------------

    def compare(self, other: "Period") -> int:
        """
        Comparator: отрицательное, ноль или положительное значение.

        Ноль возвращается только для равных периодов.
        """
        if not isinstance(other, Period):
            raise InvalidArgumentError(
                f"cannot compare Period with {type(other).__name__}"
            )
        if self.start != other.start:
            return -1 if self.start < other.start else 1
        if self.end != other.end:
            return -1 if self.end < other.end else 1
        return 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.compare(other) >= 0

    # -------------------------------------------------------------------------
    # Отношения между периодами
    # -------------------------------------------------------------------------

    def contains(self, instant: datetime) -> bool:
        """Попадание момента в [start, end] (оба конца включены)."""
        require_timestamp(instant, "instant")
        require_comparable(self.start, instant)
        return self.start <= instant <= self.end

    def overlaps(self, other: "Period") -> bool:
        """
        Пересечение замкнутых интервалов.

        self.start <= other.end and other.start <= self.end,
        касание концов тоже считается пересечением.
        """
        other = require_period(other, "other")
        require_comparable(self.start, other.start)
        return self.start <= other.end and other.start <= self.end

    def intersection(self, other: "Period") -> Optional["Period"]:
        """Общая часть двух периодов или None, если они не пересекаются."""
        if not self.overlaps(other):
            return None
        return Period.between(max(self.start, other.start), min(self.end, other.end))

    def gap_to(self, other: "Period") -> timedelta:
        """Расстояние между периодами; timedelta(0), если они пересекаются."""
        if self.overlaps(other):
            return timedelta(0)
        if self.end < other.start:
            return other.start - self.end
        return self.start - other.end

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def model_copy(
        self,
        *,
        update: Optional[Dict[str, Any]] = None,
        deep: bool = False,
    ) -> "Period":
        """
        Копия периода; при update концы проходят ту же канонизацию,
        что и в конструкторе.
        """
        copied = super().model_copy(update=update, deep=deep)
        if not update:
            return copied
        return type(self).model_validate({"start": copied.start, "end": copied.end})

    def __str__(self) -> str:
        return f"from:{self.start.isoformat()} to:{self.end.isoformat()}"


# =============================================================================
# ФУНКЦИИ
# =============================================================================


def require_period(value: Any, name: str) -> Period:
    """
    Проверка, что аргумент является Period.

    Raises:
        InvalidArgumentError: Если value is None или не Period
    """
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    if not isinstance(value, Period):
        raise InvalidArgumentError(
            f"{name} must be Period, got {type(value).__name__}"
        )
    return value


def compare_periods(first: Period, second: Period) -> int:
    """Comparator для functools.cmp_to_key и явных сравнений."""
    return require_period(first, "first").compare(require_period(second, "second"))
