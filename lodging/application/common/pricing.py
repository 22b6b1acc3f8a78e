"""Price arguments accepted by use cases."""

from decimal import Decimal

from lodging.domain.common.value_objects import Money

# Settings.DEFAULT_CURRENCY supplies the value in the container
DEFAULT_CURRENCY = "VND"

PriceInput = Money | Decimal | int | str


def to_money(price: PriceInput, default_currency: str = DEFAULT_CURRENCY) -> Money:
    """
    Return `price` unchanged if it is Money, else read it as an amount in `default_currency`.

    Raises:
        InvalidInputError: If the amount is malformed or negative
    """
    if isinstance(price, Money):
        return price
    return Money.of(price, default_currency)
