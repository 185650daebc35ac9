from __future__ import annotations

from typing import TYPE_CHECKING, Optional, TypeVar, Union

from django.core.exceptions import ValidationError
from django.db.models import Model, QuerySet
from strawberry import relay

from .exceptions import InvalidInput, NotFound

if TYPE_CHECKING:
    import strawberry

_M = TypeVar("_M", bound=Model)


def get_instance(
    model: type[_M],
    node_id: Union[relay.GlobalID, strawberry.ID, str, int],
    *,
    queryset: Optional[QuerySet[_M]] = None,
) -> _M:
    """Fetch a single instance by its (global) id or raise ``NotFound``.

    A global id must name the GraphQL type of ``model``, which is the model's
    class name.
    """
    instance = None
    if isinstance(node_id, relay.GlobalID):
        pk = node_id.node_id
        type_matches = node_id.type_name == model._meta.object_name
    else:
        pk = node_id
        type_matches = True

    qs = queryset if queryset is not None else model._default_manager.all()

    if type_matches:
        try:
            instance = qs.filter(pk=pk).first()
        except (ValueError, ValidationError):
            instance = None

    if instance is None:
        raise NotFound(f"No {model._meta.verbose_name} found for id {pk}")

    return instance


def validation_message(error: ValidationError) -> str:
    return " ".join(str(m) for m in error.messages)


def clean_instance(instance: Model, **kwargs) -> None:
    """Run ``full_clean`` and re-raise failures with a readable message."""
    try:
        instance.full_clean(**kwargs)
    except ValidationError as e:
        raise InvalidInput(validation_message(e)) from e
