"""Turning a cart into a paid order.

``checkout`` runs three steps in order:

1. read the cart and its total (``load_cart_total``);
2. charge the total through Stripe;
3. settle: create the order with item snapshots and delete the cart rows
   that were read in step 1.

Step 3 is a single database transaction and is keyed by the charge id, so
running it twice for the same charge yields one order. Steps 2 and 3 are not
atomic together: if the process dies after a successful charge and before
step 3 commits, the money is captured while no order exists and the cart is
left as it was. Such charges have to be reconciled against Stripe.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from django.conf import settings
from django.db import transaction

from storefront.base.exceptions import EmptyCart

from . import payments
from .cart import CartSnapshot, load_cart_total
from .models import CartItem, Order, OrderItem

if TYPE_CHECKING:
    from .payments import Charge

logger = logging.getLogger(__name__)

SNAPSHOT_FIELDS = ("title", "description", "price", "image", "large_image")


def snapshot_order_items(snapshot: CartSnapshot) -> list[OrderItem]:
    """Copy each cart row's item into an unsaved ``OrderItem``."""
    return [
        OrderItem(
            user=snapshot.user,
            quantity=cart_item.quantity,
            **{name: getattr(cart_item.item, name) for name in SNAPSHOT_FIELDS},
        )
        for cart_item in snapshot.items
    ]


@transaction.atomic
def settle_order(snapshot: CartSnapshot, charge: Charge) -> Order:
    """Persist the order for a successful ``charge`` and clear the cart.

    If an order already exists for ``charge`` it is returned unchanged and
    nothing else is written.
    """
    order, created = Order.objects.get_or_create(
        charge=charge.id,
        defaults={"user": snapshot.user, "total": charge.amount},
    )
    if not created:
        logger.info("Order %s already settled for charge %s", order.pk, charge.id)
        return order

    order_items = snapshot_order_items(snapshot)
    for order_item in order_items:
        order_item.order = order
    OrderItem.objects.bulk_create(order_items)

    CartItem.objects.filter(pk__in=snapshot.item_ids).delete()

    logger.info(
        "Created order %s for user %s with %d items",
        order.pk,
        snapshot.user.pk,
        len(order_items),
    )
    return order


def checkout(
    user_id: Any,
    payment_token: str,
    *,
    currency: Optional[str] = None,
) -> Order:
    """Charge the cart of ``user_id`` and turn it into an order.

    Raises:
        NotFound: the user does not exist
        EmptyCart: there is nothing to pay for
        PaymentFailed: the charge was declined or could not be made; no order
            is created and the cart is left untouched

    """
    snapshot, total = load_cart_total(user_id)
    if not snapshot:
        raise EmptyCart

    charge = payments.charge(
        total,
        currency or settings.STOREFRONT_CURRENCY,
        payment_token,
    )
    logger.info("Charged %s for user %s (charge %s)", charge.amount, user_id, charge.id)

    return settle_order(snapshot, charge)
