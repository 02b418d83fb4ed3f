from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス

    RESERVED -> CONFIRMED -> FINISHED
    RESERVED -> CANCELLED
    """

    RESERVED = "RESERVED"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    FINISHED = "FINISHED"

    @classmethod
    def active(cls) -> frozenset["BookingStatus"]:
        """車両を占有しているステータス"""
        return frozenset({cls.RESERVED, cls.CONFIRMED})
