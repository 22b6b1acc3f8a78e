"""Cancellation policy value object."""

from dataclasses import dataclass

from lodging.domain.common.exceptions import InvalidInputError
from lodging.domain.common.value_object import ValueObject

from .enums import CancellationPolicyType


@dataclass(frozen=True)
class CancellationPolicy(ValueObject):
    """
    Refund terms offered to guests.

    Business Rules:
    - free_cancellation_days is a non-negative integer
    - refund_percentage lies in [0, 100]
    """

    type: CancellationPolicyType
    free_cancellation_days: int
    refund_percentage: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", CancellationPolicyType.parse(self.type, field="type"))
        if (
            not isinstance(self.free_cancellation_days, int)
            or isinstance(self.free_cancellation_days, bool)
            or self.free_cancellation_days < 0
        ):
            raise InvalidInputError(
                "Free cancellation days must be non-negative",
                field="free_cancellation_days",
                value=self.free_cancellation_days,
            )
        if (
            not isinstance(self.refund_percentage, int)
            or isinstance(self.refund_percentage, bool)
            or not 0 <= self.refund_percentage <= 100
        ):
            raise InvalidInputError(
                "Refund percentage must be between 0 and 100",
                field="refund_percentage",
                value=self.refund_percentage,
            )

    def is_flexible(self) -> bool:
        return self.type is CancellationPolicyType.FLEXIBLE

    def is_non_refundable(self) -> bool:
        return self.type is CancellationPolicyType.NON_REFUNDABLE
