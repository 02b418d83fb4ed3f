from services.booking.applications.booking_access import BookingAccess
from services.booking.domain.entity import Booking
from services.booking.domain.policy import can_review
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.user.domain import UserId, UserRepository


class AddFeedbackService:
    """フィードバック登録ユースケース

    所有者本人（一般ユーザー）のみ、完了済みの予約に1回だけ登録できる。
    管理者は所有者であっても登録できない。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        user_repository: UserRepository,
    ) -> None:
        self._booking_repository = booking_repository
        self._access = BookingAccess(booking_repository, user_repository)

    def add_feedback(
        self, booking_id: BookingId, user_id: UserId, feedback: str
    ) -> Booking:
        booking, _ = self._access.resolve(booking_id, user_id, can_review)
        booking.add_feedback(feedback)
        self._booking_repository.update(booking)
        return booking
