from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

import strawberry
from strawberry import relay

import strawberry_django
from storefront.base.permissions import CART_VIEW, ORDER_VIEW, check_policy
from storefront.base.types import Info

from .models import Permission, User

if TYPE_CHECKING:
    from storefront.order.types import CartItemType, OrderType


@strawberry_django.filter_type(User, lookups=True)
class UserFilter:
    email: strawberry.auto
    name: strawberry.auto


@strawberry_django.order_type(User)
class UserOrder:
    email: strawberry.auto
    name: strawberry.auto


@strawberry_django.type(User, name="Owner")
class OwnerType(relay.Node):
    """Public view of an account, as shown next to the items it listed."""

    name: strawberry.auto


@strawberry_django.type(User, name="User")
class UserType(relay.Node):
    """GraphQL type for storefront accounts.

    ``cart`` is visible to its owner only, ``orders`` to the owner or an ADMIN.
    """

    email: strawberry.auto
    name: strawberry.auto

    @strawberry_django.field(only=["permissions"])
    def permissions(self, root: User) -> list[Permission]:
        return [Permission(p) for p in root.permissions or ()]

    @strawberry_django.field
    def cart(
        self,
        root: User,
        info: Info,
    ) -> list[
        Annotated["CartItemType", strawberry.lazy("storefront.order.types")]
    ]:
        user = info.context.get_user(required=True)
        check_policy(
            user,
            CART_VIEW,
            owner_id=root.pk,
            message="You do not own this cart",
        )
        return root.cart.all()  # type: ignore[return-value]

    @strawberry_django.field
    def orders(
        self,
        root: User,
        info: Info,
    ) -> list[
        Annotated["OrderType", strawberry.lazy("storefront.order.types")]
    ]:
        user = info.context.get_user(required=True)
        check_policy(
            user,
            ORDER_VIEW,
            owner_id=root.pk,
            message="You do not have permissions to see these orders",
        )
        return root.orders.all()  # type: ignore[return-value]


@strawberry.type
class SuccessMessage:
    message: str
