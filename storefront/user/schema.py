from __future__ import annotations

import datetime
import secrets
from typing import TYPE_CHECKING, cast

import strawberry
from django.conf import settings
from django.contrib import auth
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone
from strawberry import relay

import strawberry_django
from storefront.base.exceptions import (
    InvalidCredentials,
    InvalidInput,
    InvalidOrExpiredToken,
    NotFound,
    PasswordMismatch,
)
from storefront.base.permissions import PERMISSIONS_UPDATE, USERS_LIST, check_policy
from storefront.base.types import Info
from storefront.base.utils import clean_instance, get_instance, validation_message

from .mail import send_reset_email
from .models import Permission, User
from .types import SuccessMessage, UserFilter, UserOrder, UserType

if TYPE_CHECKING:
    from collections.abc import Iterable


def reset_token_ttl() -> datetime.timedelta:
    return datetime.timedelta(seconds=settings.PASSWORD_RESET_TOKEN_TTL)


def check_password_strength(password: str, user: User | None = None) -> None:
    try:
        validate_password(password, user)
    except ValidationError as e:
        raise InvalidInput(validation_message(e)) from e


@strawberry.type
class Query:
    """User-related queries."""

    @strawberry_django.field
    async def me(self, info: Info) -> UserType | None:
        """Get the current logged-in user, or `null` if it is not authenticated."""
        return cast("UserType | None", await info.context.aget_user())

    @strawberry_django.field(
        filters=UserFilter,
        order=UserOrder,
        pagination=True,
    )
    def users(self, info: Info) -> list[UserType]:
        """List every account. Requires ADMIN or PERMISSIONUPDATE."""
        user = info.context.get_user(required=True)
        check_policy(user, USERS_LIST)
        return cast("list[UserType]", User.objects.all())


@strawberry.type
class Mutation:
    """Account and session mutations."""

    @strawberry_django.mutation
    @transaction.atomic
    def signup(
        self,
        info: Info,
        email: str,
        name: str,
        password: str,
    ) -> UserType:
        """Create an account with the USER permission and log it in."""
        user = User(
            email=email.strip().lower(),
            name=name,
            permissions=[Permission.USER.value],
        )
        check_password_strength(password, user)
        user.set_password(password)
        clean_instance(user)
        user.save()

        auth.login(info.context.request, user)
        return cast("UserType", user)

    @strawberry_django.mutation
    def signin(
        self,
        info: Info,
        email: str,
        password: str,
    ) -> UserType:
        user = User.objects.filter(email=email.strip().lower()).first()
        if user is None:
            raise NotFound(f"No such user found for email {email}")

        if not user.check_password(password):
            raise InvalidCredentials

        auth.login(info.context.request, user)
        return cast("UserType", user)

    @strawberry_django.mutation
    def signout(self, info: Info) -> SuccessMessage:
        auth.logout(info.context.request)
        return SuccessMessage(message="Goodbye!")

    @strawberry_django.mutation
    def request_reset(self, info: Info, email: str) -> SuccessMessage:
        """Issue a reset token valid for one hour and mail it to the user."""
        user = User.objects.filter(email=email.strip().lower()).first()
        if user is None:
            raise NotFound(f"No such user found for email {email}")

        user.reset_token = secrets.token_hex(20)
        user.reset_token_expiry = timezone.now() + reset_token_ttl()
        user.save(update_fields=["reset_token", "reset_token_expiry"])

        send_reset_email(user, user.reset_token)
        return SuccessMessage(message="Thanks!")

    @strawberry_django.mutation
    @transaction.atomic
    def reset_password(
        self,
        info: Info,
        reset_token: str,
        password: str,
        confirm_password: str,
    ) -> UserType:
        """Replace the password of the user holding ``reset_token``.

        The token is accepted while its expiry is no older than one hour ago,
        the boundary included. Both reset fields are cleared on success.
        """
        if password != confirm_password:
            raise PasswordMismatch

        user = User.objects.filter(
            reset_token=reset_token,
            reset_token_expiry__gte=timezone.now() - reset_token_ttl(),
        ).first()
        if user is None:
            raise InvalidOrExpiredToken

        check_password_strength(password, user)
        user.set_password(password)
        user.reset_token = None
        user.reset_token_expiry = None
        user.save(update_fields=["password", "reset_token", "reset_token_expiry"])

        auth.login(info.context.request, user)
        return cast("UserType", user)

    @strawberry_django.mutation
    def update_permissions(
        self,
        info: Info,
        permissions: list[Permission],
        user_id: relay.GlobalID,
    ) -> UserType:
        """Replace the permissions of a user. Requires ADMIN or PERMISSIONUPDATE."""
        current_user = info.context.get_user(required=True)
        check_policy(current_user, PERMISSIONS_UPDATE)

        user = get_instance(User, user_id)
        user.permissions = _unique_values(permissions)
        user.save(update_fields=["permissions"])
        return cast("UserType", user)


def _unique_values(permissions: Iterable[Permission]) -> list[str]:
    return list(dict.fromkeys(Permission(p).value for p in permissions))
