from services.booking.domain.entity.booking_message import BookingMessage
from services.booking.domain.enum import BookingStatus
from services.booking.domain.exception import (
    BookingAlreadyCancelledException,
    BookingAlreadyFinishedException,
    BookingAlreadyHaveFeedbackException,
    BookingAlreadyStartedException,
    BookingNotFinishedException,
    BookingNotStartedException,
)
from services.booking.domain.value_object import BookingId, BookingPeriod
from services.shared.domain import AggregateRoot, IsoDateTime, Money
from services.user.domain import UserId, UserRole
from services.vehicle.domain import Vehicle, VehicleId


class Booking(AggregateRoot[BookingId]):
    """車両予約

    ステータスの遷移規則はこの集約が持つ。
    誰が操作してよいかの判定は booking_policy 側で行う。
    """

    def __init__(
        self,
        id: BookingId,
        user_id: UserId,
        vehicle_id: VehicleId,
        period: BookingPeriod,
        pick_up_location: str,
        drop_off_location: str,
        hourly_fare: Money,
        created_at: IsoDateTime,
        updated_at: IsoDateTime | None = None,
        status: BookingStatus = BookingStatus.RESERVED,
        observations: str | None = None,
        feedback: str | None = None,
        rating: int | None = None,
        messages: list[BookingMessage] | None = None,
        vehicle: Vehicle | None = None,
    ) -> None:
        super().__init__(id)

        self._user_id = user_id
        self._vehicle_id = vehicle_id
        self._period = period
        self._pick_up_location = pick_up_location
        self._drop_off_location = drop_off_location
        self._hourly_fare = hourly_fare
        self._created_at = created_at
        self._updated_at = updated_at or created_at
        self._status = status
        self._observations = observations
        self._feedback = feedback
        self._rating = rating
        self._messages = list(messages or [])
        self._vehicle = vehicle

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def vehicle_id(self) -> VehicleId:
        return self._vehicle_id

    @property
    def vehicle(self) -> Vehicle | None:
        return self._vehicle

    @property
    def period(self) -> BookingPeriod:
        return self._period

    @property
    def pick_up_location(self) -> str:
        return self._pick_up_location

    @property
    def drop_off_location(self) -> str:
        return self._drop_off_location

    @property
    def hourly_fare(self) -> Money:
        return self._hourly_fare

    @property
    def total_amount(self) -> Money:
        """合計金額 = 予約時間 × 時間単価（参照時に算出）"""
        return self._hourly_fare.multiply(self._period.hours())

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def updated_at(self) -> IsoDateTime:
        return self._updated_at

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def observations(self) -> str | None:
        return self._observations

    @property
    def feedback(self) -> str | None:
        return self._feedback

    @property
    def rating(self) -> int | None:
        return self._rating

    @property
    def messages(self) -> tuple[BookingMessage, ...]:
        return tuple(self._messages)

    def attach_vehicle(self, vehicle: Vehicle) -> None:
        """参照用に車両情報を紐づける"""
        if vehicle.id != self._vehicle_id:
            raise ValueError(
                f"Vehicle mismatch: expected {self._vehicle_id}, got {vehicle.id}"
            )
        self._vehicle = vehicle

    def cancel(self, by: UserRole) -> None:
        """予約をキャンセルする

        キャンセルできるのは RESERVED の予約のみ（CONFIRMED は不可）。
        """
        self._ensure_not_closed()
        if self._status == BookingStatus.CONFIRMED:
            raise BookingAlreadyStartedException()

        self._transition(BookingStatus.CANCELLED, "cancelled", by)

    def confirm(self, by: UserRole) -> None:
        """予約を確定する（利用開始）"""
        self._ensure_not_closed()
        if self._status == BookingStatus.CONFIRMED:
            raise BookingAlreadyStartedException()

        self._transition(BookingStatus.CONFIRMED, "confirmed", by)

    def finish(self, by: UserRole) -> None:
        """予約を完了する（CONFIRMED からのみ）"""
        self._ensure_not_closed()
        if self._status == BookingStatus.RESERVED:
            raise BookingNotStartedException()

        self._transition(BookingStatus.FINISHED, "finished", by)

    def add_feedback(self, feedback: str) -> None:
        """フィードバックを登録する（1回のみ）"""
        self._ensure_finished()
        if self._feedback:
            raise BookingAlreadyHaveFeedbackException()

        self._feedback = feedback
        self._touch()

    def rate(self, rating: int) -> None:
        """評価を登録する（上書き可）"""
        self._ensure_finished()

        self._rating = rating
        self._touch()

    def add_message(self, message: BookingMessage) -> None:
        """メッセージを追加する（ステータスに関係なく可能）"""
        if message.booking_id != self.id:
            raise ValueError(f"Message does not belong to booking {self.id}")

        self._messages.append(message)
        self._touch()

    def _ensure_not_closed(self) -> None:
        if self._status == BookingStatus.CANCELLED:
            raise BookingAlreadyCancelledException()
        if self._status == BookingStatus.FINISHED:
            raise BookingAlreadyFinishedException()

    def _ensure_finished(self) -> None:
        if self._status == BookingStatus.RESERVED:
            raise BookingNotStartedException()
        if self._status == BookingStatus.CONFIRMED:
            raise BookingNotFinishedException()
        if self._status == BookingStatus.CANCELLED:
            raise BookingAlreadyCancelledException()
        if self._status != BookingStatus.FINISHED:
            raise BookingNotFinishedException()

    def _transition(self, status: BookingStatus, action: str, by: UserRole) -> None:
        actor = "admin" if by == UserRole.ADMIN else "user"
        self._status = status
        self._observations = f"Booking {action} by {actor}"
        self._touch()

    def _touch(self) -> None:
        self._updated_at = IsoDateTime.now()
