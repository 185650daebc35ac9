from __future__ import annotations

from typing import Any, cast

import strawberry
from django.db import transaction
from strawberry import relay

import strawberry_django
from storefront.base.permissions import (
    ITEM_CREATE,
    ITEM_DELETE,
    ITEM_UPDATE,
    check_policy,
)
from storefront.base.types import Info
from storefront.base.utils import clean_instance, get_instance

from .models import Item
from .types import ItemInput, ItemPartialInput, ItemType


def input_values(data: object) -> dict[str, Any]:
    """Return the fields of an input object that were actually provided."""
    return {
        name: value
        for name, value in vars(data).items()
        if value is not strawberry.UNSET
    }


@strawberry.type
class Query:
    """Catalogue queries. These are public."""

    item: ItemType = strawberry_django.node()

    items: list[ItemType] = strawberry_django.field(
        pagination=True,
        description="List items with offset-based pagination, filtering and ordering.",
    )

    items_connection: strawberry_django.relay.DjangoListConnection[ItemType] = (
        strawberry_django.connection(
            description="List items as a relay connection, including `totalCount`."
        )
    )


@strawberry.type
class Mutation:
    """Item mutations."""

    @strawberry_django.mutation
    @transaction.atomic
    def create_item(self, info: Info, data: ItemInput) -> ItemType:
        user = info.context.get_user(required=True)
        check_policy(user, ITEM_CREATE)

        item = Item(user=user, **input_values(data))
        clean_instance(item)
        item.save()
        return cast("ItemType", item)

    @strawberry_django.mutation
    @transaction.atomic
    def update_item(
        self,
        info: Info,
        id: relay.GlobalID,  # noqa: A002
        data: ItemPartialInput,
    ) -> ItemType:
        """Update the given fields of an item. Requires ownership, ADMIN or ITEMUPDATE."""
        user = info.context.get_user(required=True)
        item = get_instance(Item, id, queryset=Item.objects.select_for_update())
        check_policy(user, ITEM_UPDATE, owner_id=item.user_id)

        for name, value in input_values(data).items():
            setattr(item, name, value)

        clean_instance(item)
        item.save()
        return cast("ItemType", item)

    @strawberry_django.mutation
    @transaction.atomic
    def delete_item(
        self,
        info: Info,
        id: relay.GlobalID,  # noqa: A002
    ) -> ItemType:
        """Delete an item. Requires ownership, ADMIN or ITEMDELETE."""
        user = info.context.get_user(required=True)
        item = get_instance(Item, id)
        check_policy(user, ITEM_DELETE, owner_id=item.user_id)

        # Save pk to return the removed object after as django will set it to None
        pk = item.pk
        item.delete()
        item.pk = pk

        return cast("ItemType", item)
