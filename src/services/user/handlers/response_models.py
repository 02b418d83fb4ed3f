from __future__ import annotations

from pydantic import BaseModel

from services.user.domain.entity import User


class UserData(BaseModel):
    """ユーザーのレスポンスモデル（パスワードは含めない）"""

    id: str
    email: str
    name: str
    national_id: str
    role: str


def to_response(user: User) -> dict:
    """User エンティティをレスポンス辞書に変換する"""
    return UserData(
        id=str(user.id),
        email=str(user.email),
        name=user.name,
        national_id=user.national_id,
        role=user.role.value,
    ).model_dump()
