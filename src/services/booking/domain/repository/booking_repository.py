from abc import abstractmethod
from typing import Optional

from services.booking.domain.entity import Booking
from services.booking.domain.value_object import BookingId, BookingPeriod
from services.shared.domain import Repository
from services.user.domain import UserId


class BookingRepository(Repository[Booking, BookingId]):
    """予約レポジトリ

    参照系のメソッドは車両情報とメッセージを紐づけた状態で返す。
    """

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """新規に永続化する"""
        raise NotImplementedError

    @abstractmethod
    def update(self, booking: Booking) -> None:
        """既存の予約を上書き保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Optional[Booking]:
        """予約IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_user_id(self, user_id: UserId) -> list[Booking]:
        """ユーザーの予約を開始日時の昇順で取得"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Booking]:
        """全予約を開始日時の昇順で取得"""
        raise NotImplementedError

    @abstractmethod
    def find_active_overlapping(self, period: BookingPeriod) -> list[Booking]:
        """期間が重なる RESERVED / CONFIRMED の予約を取得"""
        raise NotImplementedError
