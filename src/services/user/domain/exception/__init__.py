from .exceptions import UserAlreadyExistsException, UserNotFoundException

__all__ = [
    "UserAlreadyExistsException",
    "UserNotFoundException",
]
