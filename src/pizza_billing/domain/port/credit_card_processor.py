"""Abstract port for the external payment network."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pizza_billing.domain.model.value_objects import ChargeResult, CreditCard


class CreditCardProcessor(ABC):

    @abstractmethod
    def charge(self, card: CreditCard, amount: int) -> ChargeResult:
        """Attempt to debit *amount* from *card*.

        Returns a ChargeResult for both approvals and declines.
        Raises UnreachableError when the network cannot be contacted.
        Timeouts are the implementation's own policy.
        """
