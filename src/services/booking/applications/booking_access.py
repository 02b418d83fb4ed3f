from typing import Callable

from services.booking.domain.entity import Booking
from services.booking.domain.exception import BookingNotFoundException
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.shared.domain.exception import InvalidCredentialsException
from services.user.domain import User, UserId, UserRepository

Permission = Callable[[Booking, User], bool]


class BookingAccess:
    """予約の更新系ユースケースで共通の、操作ユーザーと予約の解決

    1. ユーザーが存在しない -> InvalidCredentialsException（NotFound ではない）
    2. 予約が存在しない -> BookingNotFoundException
    3. 権限判定に失敗 -> InvalidCredentialsException
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        user_repository: UserRepository,
    ) -> None:
        self._booking_repository = booking_repository
        self._user_repository = user_repository

    def resolve(
        self, booking_id: BookingId, user_id: UserId, permission: Permission
    ) -> tuple[Booking, User]:
        user = self._user_repository.find_by_id(user_id)
        if user is None:
            raise InvalidCredentialsException()

        booking = self._booking_repository.find_by_id(booking_id)
        if booking is None:
            raise BookingNotFoundException()

        if not permission(booking, user):
            raise InvalidCredentialsException()

        return booking, user
