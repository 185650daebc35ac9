"""Thin wrapper around the Stripe charges API."""

from __future__ import annotations

import dataclasses
import logging

import stripe
from django.conf import settings

from storefront.base.exceptions import PaymentFailed

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Charge:
    id: str
    amount: int


def charge(amount: int, currency: str, source: str) -> Charge:
    """Capture ``amount`` minor units from the card behind ``source``.

    Any Stripe failure, a declined card or a network error alike, is raised
    as ``PaymentFailed`` carrying Stripe's user facing message when available.
    """
    try:
        result = stripe.Charge.create(
            amount=amount,
            currency=currency,
            source=source,
            api_key=settings.STRIPE_SECRET_KEY or None,
        )
    except stripe.StripeError as e:
        logger.warning("Charge of %s %s failed: %s", amount, currency, e)
        raise PaymentFailed(e.user_message or None) from e

    return Charge(id=result.id, amount=result.amount)
