"""URL configuration for the storefront."""

from django.conf import settings
from django.urls import path
from django.views.generic.base import RedirectView

from .schema import schema
from .views import GraphQLView

urlpatterns = [
    path("", RedirectView.as_view(url="graphql/")),
    path(
        "graphql/",
        GraphQLView.as_view(
            graphql_ide="graphiql" if settings.DEBUG else None,
            schema=schema,
        ),
    ),
]
