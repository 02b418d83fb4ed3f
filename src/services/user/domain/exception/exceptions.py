from services.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)


class UserNotFoundException(ResourceNotFoundException):
    default_message = "user not found"


class UserAlreadyExistsException(DuplicateResourceException):
    default_message = "user already exists"
