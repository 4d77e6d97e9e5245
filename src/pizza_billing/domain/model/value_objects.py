"""Value Objects passed into and out of a charge attempt.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from pizza_billing.domain.exceptions import ValidationError


@dataclass(frozen=True)
class PizzaOrder:
    """An order to be billed.

    ``amount`` is in the smallest currency unit (cents), so no
    rounding ever happens inside the billing flow.
    """

    amount: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True is not a price
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise ValidationError(
                f"Order amount must be an integer, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(
                f"Order amount cannot be negative, got {self.amount}"
            )


@dataclass(frozen=True, repr=False)
class CreditCard:
    """An opaque card identifier supplied by the caller.

    Never persisted. ``str()`` masks everything but the last four
    characters so the number can be safely logged.
    """

    number: str

    def __post_init__(self) -> None:
        if not isinstance(self.number, str) or not self.number.strip():
            raise ValidationError("Credit card number must be a non-empty string")

    @property
    def last_four(self) -> str:
        return self.number[-4:]

    def __str__(self) -> str:
        return "*" * max(len(self.number) - 4, 0) + self.last_four

    def __repr__(self) -> str:
        return f"CreditCard({str(self)!r})"


@dataclass(frozen=True)
class ChargeResult:
    """Outcome of a charge the processor actually attempted.

    A successful charge never carries a decline message; a declined
    one always does.
    """

    success: bool
    decline_message: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.decline_message:
            raise ValidationError("A successful charge cannot carry a decline message")
        if not self.success and not (self.decline_message or "").strip():
            raise ValidationError("A declined charge must carry a decline message")

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def approved() -> ChargeResult:
        return ChargeResult(success=True)

    @staticmethod
    def declined(message: str) -> ChargeResult:
        return ChargeResult(success=False, decline_message=message)
