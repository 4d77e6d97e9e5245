"""Receipt — the terminal, caller-facing result of a charge attempt."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pizza_billing.domain.exceptions import ValidationError

SUCCESS_MESSAGE = "Charge successful"
SYSTEM_FAILURE_MESSAGE = "System Failure"


class ReceiptStatus(Enum):
    SUCCESS = "SUCCESS"
    DECLINED = "DECLINED"
    SYSTEM_FAILURE = "SYSTEM_FAILURE"


@dataclass(frozen=True)
class Receipt:
    """One of three variants, selected by ``status``.

    Use the ``for_*`` factories rather than the constructor. Only a
    successful charge carries an ``amount``. ``receipt_id`` is reserved
    and currently never populated.
    """

    status: ReceiptStatus
    message: str
    amount: int | None = None
    receipt_id: str | None = None

    def __post_init__(self) -> None:
        if self.status is ReceiptStatus.SUCCESS and self.amount is None:
            raise ValidationError("A successful receipt must carry the charged amount")
        if self.status is not ReceiptStatus.SUCCESS and self.amount is not None:
            raise ValidationError(
                f"A {self.status.value} receipt cannot carry an amount"
            )
        if self.receipt_id is not None:
            raise ValidationError("Receipt ids are not issued")

    @property
    def successful(self) -> bool:
        return self.status is ReceiptStatus.SUCCESS

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def for_successful_charge(amount: int) -> Receipt:
        return Receipt(ReceiptStatus.SUCCESS, SUCCESS_MESSAGE, amount=amount)

    @staticmethod
    def for_declined_charge(message: str) -> Receipt:
        return Receipt(ReceiptStatus.DECLINED, message)

    @staticmethod
    def for_system_failure() -> Receipt:
        """The error detail is deliberately left out; it goes to the transaction log."""
        return Receipt(ReceiptStatus.SYSTEM_FAILURE, SYSTEM_FAILURE_MESSAGE)
