"""Permission policies and their evaluator.

A resolver picks exactly one policy per operation:

- ``RequireRole(roles)`` passes when the user holds any of ``roles``.
- ``RequireOwnerOr(roles)`` passes when the user owns the target resource
  or holds any of ``roles``.

Both are checked by ``check_policy`` so there is a single place deciding how
roles and ownership combine.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, AbstractSet, Any, Optional, Union

from typing_extensions import TypeAlias, assert_never

from storefront.user.models import Permission

from .exceptions import Forbidden

if TYPE_CHECKING:
    from storefront.user.models import User


@dataclasses.dataclass(frozen=True)
class RequireRole:
    roles: AbstractSet[str]

    def __post_init__(self):
        object.__setattr__(self, "roles", frozenset(str(r) for r in self.roles))


@dataclasses.dataclass(frozen=True)
class RequireOwnerOr:
    roles: AbstractSet[str] = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "roles", frozenset(str(r) for r in self.roles))


Policy: TypeAlias = Union[RequireRole, RequireOwnerOr]


def has_any_role(user: User, roles: AbstractSet[str]) -> bool:
    return not roles.isdisjoint(str(p) for p in user.permissions or ())


def is_allowed(user: User, policy: Policy, *, owner_id: Optional[Any] = None) -> bool:
    if isinstance(policy, RequireRole):
        return has_any_role(user, policy.roles)

    if isinstance(policy, RequireOwnerOr):
        owns = owner_id is not None and owner_id == user.pk
        return owns or has_any_role(user, policy.roles)

    assert_never(policy)


def check_policy(
    user: User,
    policy: Policy,
    *,
    owner_id: Optional[Any] = None,
    message: Optional[str] = None,
) -> None:
    """Raise ``Forbidden`` unless ``policy`` allows ``user``.

    ``owner_id`` is the primary key of the user owning the target resource and
    is only consulted by ``RequireOwnerOr``.
    """
    if is_allowed(user, policy, owner_id=owner_id):
        return

    if message is None and policy.roles:
        message = "You do not have sufficient permissions: {}".format(
            ", ".join(sorted(policy.roles))
        )

    raise Forbidden(message)


USERS_LIST = RequireRole({Permission.ADMIN, Permission.PERMISSIONUPDATE})
PERMISSIONS_UPDATE = RequireRole({Permission.ADMIN, Permission.PERMISSIONUPDATE})
ITEM_CREATE = RequireRole({Permission.ADMIN, Permission.ITEMCREATE, Permission.USER})
ITEM_UPDATE = RequireOwnerOr({Permission.ADMIN, Permission.ITEMUPDATE})
ITEM_DELETE = RequireOwnerOr({Permission.ADMIN, Permission.ITEMDELETE})
ORDER_VIEW = RequireOwnerOr({Permission.ADMIN})
CART_VIEW = RequireOwnerOr()
CART_ITEM_CHANGE = RequireOwnerOr()
