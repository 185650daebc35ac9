import pytest

from storefront.base.exceptions import Forbidden
from storefront.base.permissions import (
    CART_ITEM_CHANGE,
    ITEM_DELETE,
    USERS_LIST,
    RequireOwnerOr,
    RequireRole,
    check_policy,
    is_allowed,
)
from storefront.user.models import Permission, User


def make_user(pk: int, *permissions: str) -> User:
    return User(pk=pk, email=f"{pk}@example.com", permissions=list(permissions))


def test_roles_are_normalized_to_strings():
    policy = RequireRole({Permission.ADMIN, "ITEMDELETE"})
    assert policy.roles == frozenset({"ADMIN", "ITEMDELETE"})
    assert all(type(r) is str for r in policy.roles)


def test_require_role_needs_any_of_the_roles():
    policy = RequireRole({Permission.ADMIN, Permission.PERMISSIONUPDATE})

    assert is_allowed(make_user(1, "USER", "PERMISSIONUPDATE"), policy)
    assert is_allowed(make_user(1, "ADMIN"), policy)
    assert not is_allowed(make_user(1, "USER"), policy)
    assert not is_allowed(make_user(1), policy)


def test_require_role_ignores_ownership():
    user = make_user(1, "USER")
    assert not is_allowed(user, USERS_LIST, owner_id=user.pk)


@pytest.mark.parametrize(
    ("permissions", "owner_id", "allowed"),
    [
        (["USER"], 1, True),
        (["USER"], 2, False),
        (["ADMIN"], 2, True),
        (["ITEMDELETE"], 2, True),
        (["ADMIN", "ITEMDELETE"], 1, True),
        (["USER", "ITEMUPDATE"], 2, False),
        (["USER"], None, False),
    ],
)
def test_item_delete_is_owner_or_role(permissions, owner_id, allowed):
    user = make_user(1, *permissions)
    assert is_allowed(user, ITEM_DELETE, owner_id=owner_id) is allowed


def test_owner_only_policy():
    user = make_user(1, "ADMIN")

    assert is_allowed(user, CART_ITEM_CHANGE, owner_id=1)
    assert not is_allowed(user, CART_ITEM_CHANGE, owner_id=2)


def test_check_policy_lists_required_roles():
    with pytest.raises(Forbidden) as exc_info:
        check_policy(make_user(1, "USER"), USERS_LIST)

    assert str(exc_info.value) == (
        "You do not have sufficient permissions: ADMIN, PERMISSIONUPDATE"
    )


def test_check_policy_custom_message():
    with pytest.raises(Forbidden, match="^Nope$"):
        check_policy(
            make_user(1, "USER"),
            RequireOwnerOr({Permission.ADMIN}),
            owner_id=2,
            message="Nope",
        )


def test_check_policy_default_message_without_roles():
    with pytest.raises(Forbidden) as exc_info:
        check_policy(make_user(1), RequireOwnerOr(), owner_id=2)

    assert str(exc_info.value) == Forbidden.MSG


def test_check_policy_passes_silently():
    assert check_policy(make_user(1, "USER"), ITEM_DELETE, owner_id=1) is None
