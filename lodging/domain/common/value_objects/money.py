"""Money value object for stored prices."""

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Self

from ..exceptions import InvalidInputError
from ..value_object import ValueObject

_CURRENCY_PATTERN = re.compile(r"[A-Z]{3}")
_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Non-negative monetary amount in an ISO-4217 currency.

    Amounts are rounded half-up to two decimal places on construction.
    No arithmetic or conversion is offered; prices are stored, not computed.
    """

    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        try:
            amount = Decimal(str(self.amount))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidInputError(
                "Money amount must be a number", field="amount", value=self.amount
            ) from exc
        if not amount.is_finite() or amount < 0:
            raise InvalidInputError(
                "Money amount must be zero or positive", field="amount", value=self.amount
            )
        if not isinstance(self.currency, str) or not _CURRENCY_PATTERN.fullmatch(self.currency):
            raise InvalidInputError(
                "Currency must follow ISO-4217 format", field="currency", value=self.currency
            )
        object.__setattr__(self, "amount", amount.quantize(_CENTS, rounding=ROUND_HALF_UP))

    @classmethod
    def of(cls, amount: Decimal | int | float | str, currency: str) -> Self:
        """Build a Money value from any numeric representation."""
        return cls(amount=amount, currency=currency)  # type: ignore[arg-type]

    def to_primitive(self) -> dict[str, str]:
        return {"amount": str(self.amount), "currency": self.currency}
