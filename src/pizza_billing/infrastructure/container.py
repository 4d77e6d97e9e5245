"""DI container wiring - the same object graph as bootstrap, built by injector.

Override a collaborator by passing an extra module that rebinds its port:

    class FakeLogModule(Module):
        def configure(self, binder):
            binder.bind(TransactionLog, to=InstanceProvider(my_fake))

    build_injector(FakeLogModule())
"""

from __future__ import annotations

import logging

from injector import Injector, Module, provider, singleton

from pizza_billing.application.billing_service import BillingService
from pizza_billing.domain.port.credit_card_processor import CreditCardProcessor
from pizza_billing.domain.port.transaction_log import TransactionLog
from pizza_billing.infrastructure import bootstrap

logger = logging.getLogger(__name__)


class BillingModule(Module):
    """DI module for the charge-order use case."""

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed

    @provider
    @singleton
    def provide_credit_card_processor(self) -> CreditCardProcessor:
        """Provide the demo processor, seeded when a seed was given."""
        return bootstrap.credit_card_processor(self._seed)

    @provider
    @singleton
    def provide_transaction_log(self) -> TransactionLog:
        """Provide the JSON-file audit log."""
        return bootstrap.transaction_log()

    @provider
    @singleton
    def provide_billing_service(
        self,
        processor: CreditCardProcessor,
        transaction_log: TransactionLog,
    ) -> BillingService:
        return BillingService(processor=processor, transaction_log=transaction_log)


def build_injector(*overrides: Module, seed: int | None = None) -> Injector:
    """Create an injector with BillingModule first and *overrides* after it."""
    injector = Injector([BillingModule(seed), *overrides])
    logger.info("Billing injector built with %d override module(s)", len(overrides))
    return injector
