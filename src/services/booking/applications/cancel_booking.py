from services.booking.applications.booking_access import BookingAccess
from services.booking.domain.entity import Booking
from services.booking.domain.policy import can_manage
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.user.domain import UserId, UserRepository


class CancelBookingService:
    """予約キャンセルユースケース（RESERVED のみ）"""

    def __init__(
        self,
        booking_repository: BookingRepository,
        user_repository: UserRepository,
    ) -> None:
        self._booking_repository = booking_repository
        self._access = BookingAccess(booking_repository, user_repository)

    def cancel(self, booking_id: BookingId, user_id: UserId) -> Booking:
        booking, user = self._access.resolve(booking_id, user_id, can_manage)
        booking.cancel(by=user.role)
        self._booking_repository.update(booking)
        return booking
