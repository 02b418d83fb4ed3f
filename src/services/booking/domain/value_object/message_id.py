from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class MessageId:
    """予約メッセージID"""

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> MessageId:
        return cls(value=str(uuid.uuid4()))
