from __future__ import annotations

from django.db import models
from django.utils.translation import gettext_lazy as _


class Item(models.Model):
    """An item listed in the shop.

    ``price`` is stored in minor currency units (cents).
    """

    class Meta:
        verbose_name = _("Item")
        verbose_name_plural = _("Items")
        ordering = ["-pk"]  # noqa: RUF012

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
    user_id: int
    user = models.ForeignKey(
        "user.User",
        verbose_name=_("Owner"),
        on_delete=models.CASCADE,
        related_name="items",
        db_index=True,
    )

    def __str__(self) -> str:
        return self.title
