from __future__ import annotations

from strawberry import auto, relay

import strawberry_django
from storefront.item.types import ItemType
from storefront.user.types import UserType

from .models import CartItem, Order, OrderItem


@strawberry_django.type(CartItem, name="CartItem")
class CartItemType(relay.Node):
    item: ItemType
    quantity: auto
    total: auto


@strawberry_django.type(OrderItem, name="OrderItem")
class OrderItemType(relay.Node):
    """Snapshot of an item at the time of purchase."""

    title: auto
    description: auto
    price: auto
    image: auto
    large_image: auto
    quantity: auto
    total: auto


@strawberry_django.type(Order, name="Order")
class OrderType(relay.Node):
    user: UserType
    total: auto
    charge: auto
    created_at: auto
    items: list[OrderItemType]
