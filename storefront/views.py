from __future__ import annotations

from typing import TYPE_CHECKING

from strawberry.django.views import AsyncGraphQLView

from storefront.base.types import Context

if TYPE_CHECKING:
    from strawberry.types import ExecutionContext


class GraphQLView(AsyncGraphQLView[Context]):
    """Async GraphQL view handing every request a fresh ``Context``."""

    async def get_context(self, request, response) -> Context | ExecutionContext:
        return Context(
            request=request,
            response=response,
        )
