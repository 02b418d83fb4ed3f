from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import ClassVar


@dataclass(frozen=True)
class Money:
    """金額

    料金（時間単価）や合計金額を表す。通貨は扱わない。
    """

    CENT: ClassVar[Decimal] = Decimal("0.01")

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return str(self.amount)

    def multiply(self, factor: Decimal) -> Money:
        """係数を掛けた金額を返す（小数第2位で四捨五入）"""
        return Money(
            amount=(self.amount * factor).quantize(self.CENT, rounding=ROUND_HALF_UP)
        )
