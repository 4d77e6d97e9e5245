"""Composition root — wires concrete implementations to domain ports.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. Each call builds a
fresh object graph; there is no module-level instance to swap out.
"""

from __future__ import annotations

import os
from pathlib import Path

from pizza_billing.application.billing_service import BillingService
from pizza_billing.infrastructure.persistence.json_transaction_log import (
    JsonTransactionLog,
)
from pizza_billing.infrastructure.processor.coin_flip_processor import (
    CoinFlipCreditCardProcessor,
)

DATA_DIR_ENV = "PIZZA_BILLING_DATA_DIR"
TRANSACTIONS_FILE = "transactions.json"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def credit_card_processor(seed: int | None = None) -> CoinFlipCreditCardProcessor:
    if seed is None:
        return CoinFlipCreditCardProcessor()
    return CoinFlipCreditCardProcessor.seeded(seed)


def transaction_log() -> JsonTransactionLog:
    return JsonTransactionLog(data_dir() / TRANSACTIONS_FILE)


def billing_service(seed: int | None = None) -> BillingService:
    return BillingService(
        processor=credit_card_processor(seed),
        transaction_log=transaction_log(),
    )
