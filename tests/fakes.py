"""In-memory fake collaborators for testing.

These implement the same abstract ports as the production classes
but never touch the network or the disk.
"""

from __future__ import annotations

from pizza_billing.domain.exceptions import UnreachableError
from pizza_billing.domain.model.value_objects import ChargeResult, CreditCard
from pizza_billing.domain.port.credit_card_processor import CreditCardProcessor
from pizza_billing.domain.port.transaction_log import TransactionLog


class StubCreditCardProcessor(CreditCardProcessor):
    """Returns the same result (or raises the same error) on every charge."""

    def __init__(
        self,
        result: ChargeResult | None = None,
        error: UnreachableError | None = None,
    ) -> None:
        self._result = result or ChargeResult.approved()
        self._error = error
        self.charges: list[tuple[CreditCard, int]] = []

    def charge(self, card: CreditCard, amount: int) -> ChargeResult:
        self.charges.append((card, amount))
        if self._error is not None:
            raise self._error
        return self._result


def approving_processor() -> StubCreditCardProcessor:
    return StubCreditCardProcessor(ChargeResult.approved())


def declining_processor(message: str = "Insufficient funds") -> StubCreditCardProcessor:
    return StubCreditCardProcessor(ChargeResult.declined(message))


def unreachable_processor(detail: str = "timeout") -> StubCreditCardProcessor:
    return StubCreditCardProcessor(error=UnreachableError(detail))


class RecordingTransactionLog(TransactionLog):

    def __init__(self) -> None:
        self.charges: list[ChargeResult] = []
        self.connection_failures: list[UnreachableError] = []

    def record_charge(self, result: ChargeResult) -> None:
        self.charges.append(result)

    def record_connection_failure(self, error: UnreachableError) -> None:
        self.connection_failures.append(error)

    @property
    def total_records(self) -> int:
        return len(self.charges) + len(self.connection_failures)
