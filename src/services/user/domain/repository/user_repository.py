from abc import abstractmethod
from typing import Optional

from services.shared.domain import Repository
from services.user.domain.entity import User
from services.user.domain.value_object import Email, UserId


class UserRepository(Repository[User, UserId]):
    """ユーザーレポジトリ"""

    @abstractmethod
    def save(self, user: User) -> None:
        """永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, user_id: UserId) -> Optional[User]:
        """ユーザーIDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_email(self, email: Email) -> Optional[User]:
        """メールアドレスで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_national_id(self, national_id: str) -> Optional[User]:
        """身分証番号で検索"""
        raise NotImplementedError
