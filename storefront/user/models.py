from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.db import models
from django.utils.translation import gettext_lazy as _

if TYPE_CHECKING:
    from django.db.models.manager import RelatedManager

    from storefront.order.models import CartItem, Order


@strawberry.enum(name="Permission")
class Permission(models.TextChoices):
    """Role tokens a user can hold."""

    ADMIN = "ADMIN", _("Admin")
    USER = "USER", _("User")
    ITEMCREATE = "ITEMCREATE", _("Create items")
    ITEMUPDATE = "ITEMUPDATE", _("Update items")
    ITEMDELETE = "ITEMDELETE", _("Delete items")
    PERMISSIONUPDATE = "PERMISSIONUPDATE", _("Update permissions")


def default_permissions() -> list[str]:
    return [Permission.USER.value]


class UserManager(BaseUserManager):
    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("The email must be set")

        user = self.model(email=self.normalize_email(email).lower(), **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("permissions", list(Permission.values))
        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser):
    """A storefront account.

    ``permissions`` is a list of ``Permission`` values. Every account starts
    with ``USER``; only the permission update mutation changes it afterwards.
    """

    class Meta:
        verbose_name = _("User")
        verbose_name_plural = _("Users")

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["name"]  # noqa: RUF012

    cart: RelatedManager[CartItem]
    orders: RelatedManager[Order]

    email = models.EmailField(
        verbose_name=_("Email"),
        unique=True,
    )
    name = models.CharField(
        verbose_name=_("Name"),
        max_length=255,
    )
    permissions = models.JSONField(
        verbose_name=_("Permissions"),
        default=default_permissions,
        blank=True,
    )
    reset_token = models.CharField(
        verbose_name=_("Reset Token"),
        max_length=64,
        null=True,
        blank=True,
        default=None,
        db_index=True,
    )
    reset_token_expiry = models.DateTimeField(
        verbose_name=_("Reset Token Expiry"),
        null=True,
        blank=True,
        default=None,
    )

    objects = UserManager()

    def __str__(self) -> str:
        return self.email
