"""Application service: Charge Order use case.

Orchestrates a single charge attempt between the credit card processor
and the transaction log, and maps the outcome onto a Receipt. Every
outcome becomes a Receipt, so callers never need an error branch.
"""

from __future__ import annotations

import logging

from pizza_billing.domain.exceptions import UnreachableError
from pizza_billing.domain.model.receipt import Receipt
from pizza_billing.domain.model.value_objects import CreditCard, PizzaOrder
from pizza_billing.domain.port.credit_card_processor import CreditCardProcessor
from pizza_billing.domain.port.transaction_log import TransactionLog

logger = logging.getLogger(__name__)


class BillingService:

    def __init__(
        self,
        processor: CreditCardProcessor,
        transaction_log: TransactionLog,
    ) -> None:
        self._processor = processor
        self._transaction_log = transaction_log

    def charge_order(self, order: PizzaOrder, card: CreditCard) -> Receipt:
        """Charge *order* to *card* and record the attempt.

        Steps:
        1. Ask the processor to charge the order amount (single attempt).
        2. Record exactly one log entry: a connection failure if the
           processor was unreachable, otherwise the charge result.
        3. Return a success, decline, or system-failure Receipt.
        """
        try:
            result = self._processor.charge(card, order.amount)
        except UnreachableError as exc:
            self._transaction_log.record_connection_failure(exc)
            logger.warning("Processor unreachable while charging card %s: %s", card, exc)
            return Receipt.for_system_failure()

        self._transaction_log.record_charge(result)

        if result.success:
            logger.info("Charged %d to card %s", order.amount, card)
            return Receipt.for_successful_charge(order.amount)

        logger.warning("Charge to card %s declined: %s", card, result.decline_message)
        return Receipt.for_declined_charge(result.decline_message)  # type: ignore[arg-type]
