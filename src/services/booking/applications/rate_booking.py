from services.booking.applications.booking_access import BookingAccess
from services.booking.domain.entity import Booking
from services.booking.domain.policy import can_review
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.user.domain import UserId, UserRepository


class RateBookingService:
    """評価登録ユースケース（フィードバックと異なり何度でも上書きできる）"""

    def __init__(
        self,
        booking_repository: BookingRepository,
        user_repository: UserRepository,
    ) -> None:
        self._booking_repository = booking_repository
        self._access = BookingAccess(booking_repository, user_repository)

    def rate(self, booking_id: BookingId, user_id: UserId, rating: int) -> Booking:
        booking, _ = self._access.resolve(booking_id, user_id, can_review)
        booking.rate(rating)
        self._booking_repository.update(booking)
        return booking
