from __future__ import annotations

from strawberry import auto, relay

import strawberry_django
from storefront.user.types import OwnerType

from .models import Item


@strawberry_django.filter_type(Item, lookups=True)
class ItemFilter:
    """Filter items, e.g. ``filters: { title: { iContains: "belt" } }``."""

    title: auto
    description: auto
    price: auto


@strawberry_django.order_type(Item)
class ItemOrder:
    title: auto
    price: auto


@strawberry_django.type(
    Item,
    name="Item",
    filters=ItemFilter,
    order=ItemOrder,
)
class ItemType(relay.Node):
    title: auto
    description: auto
    price: auto
    image: auto
    large_image: auto
    user: OwnerType


@strawberry_django.input(Item)
class ItemInput:
    """Input type for creating items."""

    title: auto
    description: auto
    price: auto
    image: auto
    large_image: auto


@strawberry_django.partial(Item)
class ItemPartialInput:
    """Input type for updating items. Omitted fields are left untouched."""

    title: auto
    description: auto
    price: auto
    image: auto
    large_image: auto
