import pytest

from services.booking.applications.add_feedback import AddFeedbackService
from services.booking.applications.add_message import AddMessageService
from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.applications.confirm_booking import ConfirmBookingService
from services.booking.applications.finish_booking import FinishBookingService
from services.booking.applications.rate_booking import RateBookingService
from services.booking.domain.enum import BookingStatus
from services.booking.domain.exception import (
    BookingAlreadyStartedException,
    BookingNotFoundException,
)
from services.booking.domain.factory import BookingFactory
from services.booking.domain.value_object import BookingId
from services.shared.domain import InvalidCredentialsException
from services.user.domain import UserId, UserRole

BOOKING_ID = BookingId(value="booking-1")


def _call(service_name, booking_repository, user_repository, user_id):
    """各ユースケースを共通の引数で呼び出す"""
    uid = UserId(value=user_id)
    if service_name == "cancel":
        service = CancelBookingService(booking_repository, user_repository)
        return service.cancel(BOOKING_ID, uid)
    if service_name == "confirm":
        service = ConfirmBookingService(booking_repository, user_repository)
        return service.confirm(BOOKING_ID, uid)
    if service_name == "finish":
        service = FinishBookingService(booking_repository, user_repository)
        return service.finish(BOOKING_ID, uid)
    if service_name == "feedback":
        service = AddFeedbackService(booking_repository, user_repository)
        return service.add_feedback(BOOKING_ID, uid, "nice")
    if service_name == "rate":
        service = RateBookingService(booking_repository, user_repository)
        return service.rate(BOOKING_ID, uid, 4)
    service = AddMessageService(booking_repository, user_repository, BookingFactory())
    return service.add_message(BOOKING_ID, uid, "hello")


ALL_ACTIONS = ["cancel", "confirm", "finish", "feedback", "rate", "message"]


class TestBookingAccess:
    @pytest.mark.parametrize("action", ALL_ACTIONS)
    def test_unknown_user_is_invalid_credentials(
        self, action, booking_repository, user_repository
    ):
        """存在しないユーザーは NotFound ではなく InvalidCredentials になる"""
        user_repository.find_by_id.return_value = None

        with pytest.raises(InvalidCredentialsException):
            _call(action, booking_repository, user_repository, "ghost")

        booking_repository.find_by_id.assert_not_called()
        booking_repository.update.assert_not_called()

    @pytest.mark.parametrize("action", ALL_ACTIONS)
    def test_unknown_booking_raises_not_found(
        self, action, booking_repository, user_repository, create_user
    ):
        user_repository.find_by_id.return_value = create_user()
        booking_repository.find_by_id.return_value = None

        with pytest.raises(BookingNotFoundException):
            _call(action, booking_repository, user_repository, "user-1")

    @pytest.mark.parametrize("action", ALL_ACTIONS)
    def test_other_client_is_rejected(
        self, action, booking_repository, user_repository, create_user, create_booking
    ):
        """所有者でない一般ユーザーはどの操作もできない"""
        user_repository.find_by_id.return_value = create_user(user_id="user-2")
        booking_repository.find_by_id.return_value = create_booking(
            user_id="user-1", status=BookingStatus.FINISHED
        )

        with pytest.raises(InvalidCredentialsException):
            _call(action, booking_repository, user_repository, "user-2")

        booking_repository.update.assert_not_called()

    @pytest.mark.parametrize("action", ["feedback", "rate", "message"])
    def test_admin_cannot_review(
        self, action, booking_repository, user_repository, create_user, create_booking
    ):
        """管理者は自分の予約であってもレビュー・メッセージを登録できない"""
        user_repository.find_by_id.return_value = create_user(
            user_id="user-1", role=UserRole.ADMIN
        )
        booking_repository.find_by_id.return_value = create_booking(
            user_id="user-1", status=BookingStatus.FINISHED
        )

        with pytest.raises(InvalidCredentialsException):
            _call(action, booking_repository, user_repository, "user-1")


class TestBookingActions:
    def test_admin_confirms_other_users_booking(
        self, booking_repository, user_repository, create_user, create_booking
    ):
        # Arrange
        user_repository.find_by_id.return_value = create_user(
            user_id="admin-1", role=UserRole.ADMIN
        )
        booking = create_booking(user_id="user-1")
        booking_repository.find_by_id.return_value = booking

        # Act
        result = _call("confirm", booking_repository, user_repository, "admin-1")

        # Assert
        assert result.status == BookingStatus.CONFIRMED
        assert result.observations == "Booking confirmed by admin"
        booking_repository.update.assert_called_once_with(booking)

    def test_owner_cannot_cancel_confirmed_booking(
        self, booking_repository, user_repository, create_user, create_booking
    ):
        user_repository.find_by_id.return_value = create_user(user_id="user-1")
        booking_repository.find_by_id.return_value = create_booking(
            user_id="user-1", status=BookingStatus.CONFIRMED
        )

        with pytest.raises(BookingAlreadyStartedException):
            _call("cancel", booking_repository, user_repository, "user-1")

        booking_repository.update.assert_not_called()

    def test_owner_rates_finished_booking(
        self, booking_repository, user_repository, create_user, create_booking
    ):
        user_repository.find_by_id.return_value = create_user(user_id="user-1")
        booking_repository.find_by_id.return_value = create_booking(
            user_id="user-1", status=BookingStatus.FINISHED
        )

        result = _call("rate", booking_repository, user_repository, "user-1")

        assert result.rating == 4
        booking_repository.update.assert_called_once()

    def test_owner_adds_message(
        self, booking_repository, user_repository, create_user, create_booking
    ):
        user_repository.find_by_id.return_value = create_user(user_id="user-1")
        booking_repository.find_by_id.return_value = create_booking(user_id="user-1")

        result = _call("message", booking_repository, user_repository, "user-1")

        assert [m.message for m in result.messages] == ["hello"]
        assert result.messages[0].booking_id == BOOKING_ID
