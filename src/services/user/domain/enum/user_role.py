from enum import Enum


class UserRole(str, Enum):
    """ユーザー種別"""

    CLIENT = "CLIENT"
    ADMIN = "ADMIN"
