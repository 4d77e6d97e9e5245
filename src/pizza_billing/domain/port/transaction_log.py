"""Abstract port for the audit trail of charge attempts."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pizza_billing.domain.exceptions import UnreachableError
from pizza_billing.domain.model.value_objects import ChargeResult


class TransactionLog(ABC):

    @abstractmethod
    def record_charge(self, result: ChargeResult) -> None:
        """Record a completed charge attempt (approved or declined)."""

    @abstractmethod
    def record_connection_failure(self, error: UnreachableError) -> None:
        """Record that the processor could not be reached."""
