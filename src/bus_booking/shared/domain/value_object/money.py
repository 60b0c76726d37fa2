from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報を含む）

    Value Object として不変性を保証。
    金額の演算メソッドを提供。
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def multiply(self, quantity: int) -> "Money":
        """数量を掛けた金額を返す（座席単価 × 座席数）"""
        if quantity < 0:
            raise ValueError("Quantity cannot be negative")
        return Money(amount=self.amount * quantity, currency=self.currency)

    @classmethod
    def zero(cls, currency: Currency) -> "Money":
        return cls(amount=Decimal("0"), currency=currency)

    @classmethod
    def inr(cls, amount: Decimal | int | str) -> "Money":
        """インドルピーで Money を生成"""
        return cls(amount=Decimal(str(amount)), currency=Currency.inr())
