from services.user.domain.entity import User
from services.user.domain.exception import UserAlreadyExistsException
from services.user.domain.factory import UserDetails, UserFactory
from services.user.domain.repository import UserRepository
from services.user.domain.value_object import Email


class RegisterUserService:
    """ユーザー登録ユースケース"""

    def __init__(self, repository: UserRepository, factory: UserFactory) -> None:
        self._repository = repository
        self._factory = factory

    def register(self, details: UserDetails) -> User:
        """ユーザーを登録する

        メールアドレスまたは身分証番号が登録済みの場合は
        UserAlreadyExistsException を送出する。
        """
        if self._repository.find_by_email(Email(details["email"])) is not None:
            raise UserAlreadyExistsException()

        if self._repository.find_by_national_id(details["national_id"]) is not None:
            raise UserAlreadyExistsException()

        user = self._factory.create(details)
        self._repository.save(user)
        return user
