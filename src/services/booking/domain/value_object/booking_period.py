from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from services.shared.domain import IsoDateTime

_SECONDS_PER_HOUR = Decimal(3600)


@dataclass(frozen=True)
class BookingPeriod:
    """予約期間（半開区間 [start, end)）"""

    start: IsoDateTime
    end: IsoDateTime

    def __post_init__(self) -> None:
        if not self.start.is_before(self.end):
            raise ValueError("Start date must be before end date")

    @classmethod
    def from_strings(cls, start: str, end: str) -> BookingPeriod:
        return cls(
            start=IsoDateTime.from_string(start),
            end=IsoDateTime.from_string(end),
        )

    def overlaps(self, other: BookingPeriod) -> bool:
        """他の期間と重なるかどうか

        境界が接しているだけ（self.end == other.start）の場合は重ならない。
        """
        return self.start.is_before(other.end) and self.end.is_after(other.start)

    def hours(self) -> Decimal:
        """期間の長さ（時間）"""
        delta = self.end.value - self.start.value
        return Decimal(str(delta.total_seconds())) / _SECONDS_PER_HOUR
