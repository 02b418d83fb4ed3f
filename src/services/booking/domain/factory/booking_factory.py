from datetime import datetime
from typing import TypedDict

from services.booking.domain.entity import Booking, BookingMessage
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingId, BookingPeriod, MessageId
from services.shared.domain import IsoDateTime
from services.user.domain import UserId
from services.vehicle.domain import Vehicle


class BookingDetails(TypedDict):
    """予約の入力データ構造"""

    start_date: datetime
    end_date: datetime
    pick_up_location: str
    drop_off_location: str


class BookingFactory:
    """予約エンティティのファクトリ

    - ID の採番
    - プリミティブ型から Value Object への変換
    - 初期状態（RESERVED）と料金の設定
    """

    def create(
        self, user_id: UserId, vehicle: Vehicle, details: BookingDetails
    ) -> Booking:
        """新規予約エンティティを生成する

        Args:
            user_id: 予約者のユーザーID
            vehicle: 予約対象の車両
            details: 予約期間・受け渡し場所

        Returns:
            Booking: 生成された予約エンティティ（RESERVED状態）
        """
        period = BookingPeriod(
            start=IsoDateTime(details["start_date"]),
            end=IsoDateTime(details["end_date"]),
        )

        # 料金は予約時点の車両の時間単価で固定する
        return Booking(
            id=BookingId.generate(),
            user_id=user_id,
            vehicle_id=vehicle.id,
            period=period,
            pick_up_location=details["pick_up_location"],
            drop_off_location=details["drop_off_location"],
            hourly_fare=vehicle.hourly_fare,
            created_at=IsoDateTime.now(),
            status=BookingStatus.RESERVED,
            vehicle=vehicle,
        )

    def create_message(self, booking: Booking, message: str) -> BookingMessage:
        """予約に追加するメッセージを生成する"""
        return BookingMessage(
            id=MessageId.generate(),
            booking_id=booking.id,
            message=message,
            created_at=IsoDateTime.now(),
        )
