from services.booking.domain.entity import Booking
from services.booking.domain.exception import BookingNotFoundException
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.user.domain import UserId


class GetBookingsService:
    """予約参照ユースケース"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def get_by_id(self, booking_id: BookingId) -> Booking:
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            raise BookingNotFoundException()
        return booking

    def list_by_user(self, user_id: UserId) -> list[Booking]:
        """ユーザーの予約一覧（開始日時の昇順）"""
        return self._repository.find_by_user_id(user_id)

    def list_all(self) -> list[Booking]:
        """管理者向けの全予約一覧（開始日時の昇順）"""
        return self._repository.find_all()
