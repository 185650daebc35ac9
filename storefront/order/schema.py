from __future__ import annotations

from typing import cast

import strawberry
from strawberry import relay

import strawberry_django
from storefront.base.exceptions import NotFound
from storefront.base.permissions import CART_ITEM_CHANGE, ORDER_VIEW, check_policy
from storefront.base.types import Info
from storefront.base.utils import get_instance
from storefront.item.models import Item

from . import cart, checkout
from .models import CartItem, Order
from .types import CartItemType, OrderType


@strawberry.type
class Query:
    """Order queries."""

    @strawberry_django.field
    def order(
        self,
        info: Info,
        id: relay.GlobalID,  # noqa: A002
    ) -> OrderType:
        """Fetch an order. Only its owner or an ADMIN may see it."""
        user = info.context.get_user(required=True)
        order = get_instance(Order, id)
        check_policy(
            user,
            ORDER_VIEW,
            owner_id=order.user_id,
            message="You do not have permissions to see this order",
        )
        return cast("OrderType", order)

    @strawberry_django.field
    def orders(self, info: Info) -> list[OrderType]:
        """List the current user's orders, newest first."""
        user = info.context.get_user(required=True)
        return cast("list[OrderType]", Order.objects.filter(user=user))


@strawberry.type
class Mutation:
    """Cart and checkout mutations."""

    @strawberry_django.mutation
    def add_to_cart(
        self,
        info: Info,
        id: relay.GlobalID,  # noqa: A002
    ) -> CartItemType:
        """Add an item to the cart, or increment its quantity by one."""
        user = info.context.get_user(required=True)
        item = get_instance(Item, id)
        return cast("CartItemType", cart.add_to_cart(user, item))

    @strawberry_django.mutation
    def remove_from_cart(
        self,
        info: Info,
        id: relay.GlobalID,  # noqa: A002
    ) -> CartItemType:
        user = info.context.get_user(required=True)
        try:
            cart_item = get_instance(CartItem, id)
        except NotFound as e:
            raise NotFound("No CartItem Found!") from e

        check_policy(
            user,
            CART_ITEM_CHANGE,
            owner_id=cart_item.user_id,
            message="You do not own this cart item",
        )

        # Save pk to return the removed object after as django will set it to None
        pk = cart_item.pk
        cart_item.delete()
        cart_item.pk = pk

        return cast("CartItemType", cart_item)

    @strawberry_django.mutation
    def create_order(self, info: Info, token: str) -> OrderType:
        """Charge the current cart with the payment ``token`` and place the order."""
        user = info.context.get_user(required=True)
        order = checkout.checkout(user.pk, token)
        return cast("OrderType", order)
