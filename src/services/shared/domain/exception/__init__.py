from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    InvalidCredentialsException,
    ResourceNotFoundException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "InvalidCredentialsException",
]
