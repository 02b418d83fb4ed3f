"""予約操作の権限判定

状態遷移の規則（Booking 集約）とは切り離し、所有者かどうかと
ユーザー種別だけで判定する。
"""

from services.booking.domain.entity import Booking
from services.user.domain import User, UserRole


def is_owner(booking: Booking, user: User) -> bool:
    """予約の所有者かどうか"""
    return booking.user_id == user.id


def can_manage(booking: Booking, user: User) -> bool:
    """キャンセル・確定・完了を実行できるか（所有者 または 管理者）"""
    return is_owner(booking, user) or user.is_admin


def can_review(booking: Booking, user: User) -> bool:
    """フィードバック・評価・メッセージを登録できるか（所有者 かつ 一般ユーザー）"""
    return is_owner(booking, user) and user.role == UserRole.CLIENT
