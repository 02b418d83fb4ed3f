from typing import TypedDict

from services.user.domain.entity import User
from services.user.domain.enum import UserRole
from services.user.domain.value_object import Email, UserId


class UserDetails(TypedDict):
    """ユーザー登録の入力データ構造"""

    email: str
    name: str
    password: str
    national_id: str


class UserFactory:
    """ユーザーエンティティのファクトリ

    - ID の採番
    - プリミティブ型から Value Object への変換
    - 登録時の種別は常に CLIENT
    """

    def create(self, details: UserDetails) -> User:
        """新規ユーザーエンティティを生成する"""
        return User(
            id=UserId.generate(),
            email=Email(details["email"]),
            name=details["name"],
            password=details["password"],
            national_id=details["national_id"],
            role=UserRole.CLIENT,
        )
