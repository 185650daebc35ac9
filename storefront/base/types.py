"""Custom GraphQL context and type definitions.

The context is created once per request and passed explicitly to every
resolver, so the identity of the caller is never read from process-wide state.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Literal, TypeAlias, cast, overload

from asgiref.sync import sync_to_async
from strawberry.django.context import StrawberryDjangoContext
from strawberry.types import info

from .exceptions import Unauthenticated

if TYPE_CHECKING:
    from storefront.user.models import User



@dataclasses.dataclass
class Context(StrawberryDjangoContext):
    """Request scoped GraphQL context.

    ``get_user(required=True)`` is the session guard: gated resolvers call it
    before touching the database and it raises ``Unauthenticated`` when the
    request does not carry a logged in, active user.
    """

    @overload
    def get_user(self, *, required: Literal[True]) -> User: ...

    @overload
    def get_user(self, *, required: None = ...) -> User | None: ...

    def get_user(self, *, required: Literal[True] | None = None) -> User | None:
        """Get the authenticated user from the request.

        Args:
            required: If True, raises Unauthenticated when user is not authenticated.
                     If None/False, returns None for unauthenticated requests.

        """
        user = getattr(self.request, "user", None)

        if not user or not user.is_authenticated or not user.is_active:
            if required:
                raise Unauthenticated

            return None

        return cast("User", user)

    @overload
    async def aget_user(self, *, required: Literal[True]) -> User: ...

    @overload
    async def aget_user(self, *, required: None = ...) -> User | None: ...

    async def aget_user(self, *, required: Literal[True] | None = None) -> User | None:
        """Async version of get_user()."""
        if required:
            return await sync_to_async(lambda: self.get_user(required=True))()
        return await sync_to_async(self.get_user)()


# Type alias for GraphQL info with our custom Context.
Info: TypeAlias = info.Info[Context, None]
