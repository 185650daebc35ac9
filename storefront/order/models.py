from __future__ import annotations

from typing import TYPE_CHECKING

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from strawberry_django.descriptors import model_property

if TYPE_CHECKING:
    from django.db.models.manager import RelatedManager


class CartItem(models.Model):
    """An item in a user's cart with its quantity.

    A user has at most one row per item; adding the same item again bumps
    ``quantity`` instead.
    """

    class Meta:
        verbose_name = _("Cart Item")
        verbose_name_plural = _("Cart Items")
        ordering = ["pk"]  # noqa: RUF012
        constraints = [  # noqa: RUF012
            models.UniqueConstraint(
                fields=["user", "item"],
                name="unique_cart_item_per_user",
            ),
        ]

    user_id: int
    user = models.ForeignKey(
        "user.User",
        verbose_name=_("User"),
        on_delete=models.CASCADE,
        related_name="cart",
        db_index=True,
    )
    item_id: int
    item = models.ForeignKey(
        "item.Item",
        verbose_name=_("Item"),
        on_delete=models.CASCADE,
        related_name="+",
        db_index=True,
    )
    quantity = models.PositiveIntegerField(
        verbose_name=_("Quantity"),
        default=1,
        validators=[MinValueValidator(1)],
    )

    @model_property(only=["quantity", "item__price"], select_related=["item"])
    def total(self) -> int:
        return self.item.price * self.quantity


class Order(models.Model):
    """A paid order.

    Orders are never modified after creation. ``charge`` is the id of the
    payment charge and identifies the settlement, so one charge maps to one
    order.
    """

    class Meta:
        verbose_name = _("Order")
        verbose_name_plural = _("Orders")
        ordering = ["-created_at", "-pk"]  # noqa: RUF012

    items: RelatedManager[OrderItem]

    user_id: int
    user = models.ForeignKey(
        "user.User",
        verbose_name=_("Customer"),
        on_delete=models.CASCADE,
        related_name="orders",
        db_index=True,
    )
    total = models.PositiveIntegerField(
        verbose_name=_("Total"),
    )
    charge = models.CharField(
        verbose_name=_("Charge"),
        max_length=255,
        unique=True,
    )
    created_at = models.DateTimeField(
        verbose_name=_("Created At"),
        auto_now_add=True,
    )


class OrderItem(models.Model):
    """A copy of an item as it was when the order was placed.

    Holds no foreign key to ``Item``, so editing or deleting the live item
    leaves the order untouched.
    """

    class Meta:
        verbose_name = _("Order Item")
        verbose_name_plural = _("Order Items")
        ordering = ["pk"]  # noqa: RUF012

    order_id: int
    order = models.ForeignKey(
        Order,
        verbose_name=_("Order"),
        on_delete=models.CASCADE,
        related_name="items",
        db_index=True,
    )
    user_id: int
    user = models.ForeignKey(
        "user.User",
        verbose_name=_("User"),
        on_delete=models.CASCADE,
        related_name="+",
        db_index=True,
    )
    title = models.CharField(
        verbose_name=_("Title"),
        max_length=255,
    )
    description = models.TextField(
        verbose_name=_("Description"),
        default="",
        blank=True,
    )
    price = models.PositiveIntegerField(
        verbose_name=_("Price"),
    )
    image = models.CharField(
        verbose_name=_("Image"),
        max_length=2000,
        default="",
        blank=True,
    )
    large_image = models.CharField(
        verbose_name=_("Large Image"),
        max_length=2000,
        default="",
        blank=True,
    )
    quantity = models.PositiveIntegerField(
        verbose_name=_("Quantity"),
        default=1,
        validators=[MinValueValidator(1)],
    )

    @model_property(only=["quantity", "price"])
    def total(self) -> int:
        return self.price * self.quantity
