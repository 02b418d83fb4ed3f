from services.booking.domain.value_object import BookingId, MessageId
from services.shared.domain import Entity, IsoDateTime


class BookingMessage(Entity[MessageId]):
    """予約に紐づくメッセージ（追記のみ）"""

    def __init__(
        self,
        id: MessageId,
        booking_id: BookingId,
        message: str,
        created_at: IsoDateTime,
    ) -> None:
        super().__init__(id)
        if not message:
            raise ValueError("Message cannot be empty")
        self._booking_id = booking_id
        self._message = message
        self._created_at = created_at

    @property
    def booking_id(self) -> BookingId:
        return self._booking_id

    @property
    def message(self) -> str:
        return self._message

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at
