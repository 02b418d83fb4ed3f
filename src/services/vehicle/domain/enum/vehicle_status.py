from enum import Enum


class VehicleStatus(str, Enum):
    """車両ステータス

    予約可否の判定には使用しない（予約状況から都度算出する）
    """

    AVAILABLE = "AVAILABLE"
    IN_MAINTENANCE = "IN_MAINTENANCE"
    OUT_OF_SERVICE = "OUT_OF_SERVICE"
