"""Demo implementation of CreditCardProcessor.

Stands in for a real gateway (Square, Stripe, ...). The outcome of each
charge is drawn at random so every Receipt variant shows up when the
CLI is run a few times. Randomness is confined to this class and can be
pinned with a seed.
"""

from __future__ import annotations

import logging
import random

from pizza_billing.domain.exceptions import UnreachableError, ValidationError
from pizza_billing.domain.model.value_objects import ChargeResult, CreditCard
from pizza_billing.domain.port.credit_card_processor import CreditCardProcessor

logger = logging.getLogger(__name__)

DECLINE_REASONS = (
    "Insufficient funds",
    "Card expired",
    "Suspected fraud",
)


class CoinFlipCreditCardProcessor(CreditCardProcessor):
    """Approves, declines, or fails to connect, at random.

    ``decline_rate`` and ``unreachable_rate`` are probabilities; whatever
    is left over is the approval rate.
    """

    def __init__(
        self,
        decline_rate: float = 0.25,
        unreachable_rate: float = 0.25,
        rng: random.Random | None = None,
    ) -> None:
        for name, rate in (("decline_rate", decline_rate), ("unreachable_rate", unreachable_rate)):
            if not 0.0 <= rate <= 1.0:
                raise ValidationError(f"{name} must be between 0 and 1, got {rate}")
        if decline_rate + unreachable_rate > 1.0:
            raise ValidationError("decline_rate + unreachable_rate cannot exceed 1")

        self._decline_rate = decline_rate
        self._unreachable_rate = unreachable_rate
        self._rng = rng or random.Random()

    @classmethod
    def seeded(cls, seed: int, **kwargs: float) -> CoinFlipCreditCardProcessor:
        return cls(rng=random.Random(seed), **kwargs)

    # --- CreditCardProcessor interface ----------------------------------------

    def charge(self, card: CreditCard, amount: int) -> ChargeResult:
        logger.info("Charging %d cents to card %s", amount, card)
        roll = self._rng.random()

        if roll < self._unreachable_rate:
            raise UnreachableError("Payment network unreachable")

        if roll < self._unreachable_rate + self._decline_rate:
            return ChargeResult.declined(self._rng.choice(DECLINE_REASONS))

        return ChargeResult.approved()
