from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

from django.db import transaction
from django.db.models import F

from storefront.base.exceptions import NotFound
from storefront.user.models import User

from .models import CartItem

if TYPE_CHECKING:
    from collections.abc import Iterable

    from storefront.item.models import Item


@dataclasses.dataclass(frozen=True)
class CartSnapshot:
    """The rows of a user's cart as read at one point in time."""

    user: User
    items: tuple[CartItem, ...]

    @property
    def item_ids(self) -> list[int]:
        return [cart_item.pk for cart_item in self.items]

    def __bool__(self) -> bool:
        return bool(self.items)


def cart_total(items: Iterable[CartItem]) -> int:
    return sum(cart_item.item.price * cart_item.quantity for cart_item in items)


def load_cart_total(user_id: Any) -> tuple[CartSnapshot, int]:
    """Load the cart of ``user_id`` together with its items and total.

    The total is the sum of ``price * quantity`` over every row, in minor
    currency units. Raises ``NotFound`` if the user does not exist.
    """
    user = User.objects.filter(pk=user_id).first()
    if user is None:
        raise NotFound(f"No user found for id {user_id}")

    items = tuple(
        CartItem.objects.filter(user=user).select_related("item").order_by("pk")
    )
    return CartSnapshot(user=user, items=items), cart_total(items)


@transaction.atomic
def add_to_cart(user: User, item: Item) -> CartItem:
    """Put ``item`` in the cart of ``user`` or bump its quantity by one.

    The unique ``(user, item)`` constraint together with ``get_or_create``
    keeps concurrent calls from creating duplicate rows, and the increment is
    done in the database so none is lost.
    """
    cart_item, created = CartItem.objects.get_or_create(user=user, item=item)
    if not created:
        CartItem.objects.filter(pk=cart_item.pk).update(quantity=F("quantity") + 1)
        cart_item.refresh_from_db(fields=["quantity"])

    return cart_item
