from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class VehicleId:
    """車両ID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("VehicleId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> VehicleId:
        return cls(value=str(uuid.uuid4()))
