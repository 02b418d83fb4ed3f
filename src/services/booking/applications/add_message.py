from services.booking.applications.booking_access import BookingAccess
from services.booking.domain.entity import Booking
from services.booking.domain.factory import BookingFactory
from services.booking.domain.policy import can_review
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.user.domain import UserId, UserRepository


class AddMessageService:
    """予約へのメッセージ追加ユースケース"""

    def __init__(
        self,
        booking_repository: BookingRepository,
        user_repository: UserRepository,
        factory: BookingFactory,
    ) -> None:
        self._booking_repository = booking_repository
        self._access = BookingAccess(booking_repository, user_repository)
        self._factory = factory

    def add_message(
        self, booking_id: BookingId, user_id: UserId, message: str
    ) -> Booking:
        booking, _ = self._access.resolve(booking_id, user_id, can_review)
        booking.add_message(self._factory.create_message(booking, message))
        self._booking_repository.update(booking)
        return booking
