from services.shared.domain.exception import InvalidCredentialsException
from services.user.domain.entity import User
from services.user.domain.exception import UserNotFoundException
from services.user.domain.repository import UserRepository
from services.user.domain.value_object import Email


class LoginUserService:
    """ログインユースケース"""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def login(self, email: str, password: str) -> User:
        user = self._repository.find_by_email(Email(email))
        if user is None:
            raise UserNotFoundException()

        if not user.password_matches(password):
            raise InvalidCredentialsException()

        return user
