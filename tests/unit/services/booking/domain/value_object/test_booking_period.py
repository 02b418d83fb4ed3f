from decimal import Decimal

import pytest

from services.booking.domain.value_object import BookingPeriod


def _period(start: str, end: str) -> BookingPeriod:
    return BookingPeriod.from_strings(start, end)


class TestBookingPeriod:
    def test_start_must_be_before_end(self):
        with pytest.raises(ValueError):
            _period("2024-01-12T00:00:00Z", "2024-01-10T00:00:00Z")

    def test_empty_period_raises(self):
        with pytest.raises(ValueError):
            _period("2024-01-10T00:00:00Z", "2024-01-10T00:00:00Z")

    def test_hours(self):
        assert _period("2024-01-10T00:00:00Z", "2024-01-12T00:00:00Z").hours() == 48

    def test_hours_with_fraction(self):
        period = _period("2024-01-10T00:00:00Z", "2024-01-10T00:45:00Z")
        assert period.hours() == Decimal("0.75")

    @pytest.mark.parametrize(
        ("start", "end", "expected"),
        [
            # 一部が重なる
            ("2024-01-11T00:00:00Z", "2024-01-13T00:00:00Z", True),
            # 内包する
            ("2024-01-09T00:00:00Z", "2024-01-13T00:00:00Z", True),
            # 内包される
            ("2024-01-10T12:00:00Z", "2024-01-11T00:00:00Z", True),
            # 終了と開始が接するだけ（半開区間）
            ("2024-01-12T00:00:00Z", "2024-01-13T00:00:00Z", False),
            ("2024-01-08T00:00:00Z", "2024-01-10T00:00:00Z", False),
            # 完全に離れている
            ("2024-01-20T00:00:00Z", "2024-01-21T00:00:00Z", False),
        ],
    )
    def test_overlaps(self, start, end, expected):
        booked = _period("2024-01-10T00:00:00Z", "2024-01-12T00:00:00Z")
        other = _period(start, end)
        assert booked.overlaps(other) is expected
        assert other.overlaps(booked) is expected
