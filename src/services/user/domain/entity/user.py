from services.shared.domain import AggregateRoot
from services.user.domain.enum import UserRole
from services.user.domain.value_object import Email, UserId


class User(AggregateRoot[UserId]):
    """ユーザー

    NOTE: パスワードは平文のまま保持・比較している（ハッシュ化は未対応）
    """

    def __init__(
        self,
        id: UserId,
        email: Email,
        name: str,
        password: str,
        national_id: str,
        role: UserRole = UserRole.CLIENT,
    ) -> None:
        super().__init__(id)
        self._email = email
        self._name = name
        self._password = password
        self._national_id = national_id
        self._role = role

    @property
    def email(self) -> Email:
        return self._email

    @property
    def name(self) -> str:
        return self._name

    @property
    def password(self) -> str:
        return self._password

    @property
    def national_id(self) -> str:
        return self._national_id

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    def password_matches(self, password: str) -> bool:
        """パスワードが一致するかどうか（平文比較）"""
        return self._password == password
