class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    default_message = "domain error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    default_message = "resource not found"


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    default_message = "business rule violation"


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（登録済み、または条件付き書き込みの失敗時）"""

    default_message = "resource already exists"


class InvalidCredentialsException(DomainException):
    """認証情報が不正、または操作権限がない場合"""

    default_message = "invalid credentials"
