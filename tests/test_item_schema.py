import pytest

from storefront.item.models import Item

from .factories import ItemFactory
from .utils import error_messages, gid

pytestmark = pytest.mark.django_db(transaction=True)

CREATE_ITEM = """
mutation CreateItem ($data: ItemInput!) {
    createItem (data: $data) {
      title
      price
      user { name }
    }
  }
"""

UPDATE_ITEM = """
mutation UpdateItem ($id: ID!, $data: ItemPartialInput!) {
    updateItem (id: $id, data: $data) {
      title
      description
      price
    }
  }
"""

DELETE_ITEM = """
mutation DeleteItem ($id: ID!) {
    deleteItem (id: $id) {
      title
    }
  }
"""


def test_items_are_public(gql_client, user):
    ItemFactory.create(title="Belt", price=500, user=user)
    ItemFactory.create(title="Boots", price=1200, user=user)

    res = gql_client.query(
        """
        query {
            items {
              title
              price
              user { name }
            }
          }
        """
    )
    assert res.data == {
        "items": [
            {"title": "Boots", "price": 1200, "user": {"name": user.name}},
            {"title": "Belt", "price": 500, "user": {"name": user.name}},
        ],
    }


def test_items_filters_and_pagination(gql_client, user):
    for title in ["Red belt", "Blue belt", "Boots"]:
        ItemFactory.create(title=title, user=user)

    res = gql_client.query(
        """
        query {
            items (
              filters: { title: { iContains: "BELT" } }
              order: { title: ASC }
              pagination: { offset: 1, limit: 1 }
            ) {
              title
            }
          }
        """
    )
    assert res.data == {"items": [{"title": "Red belt"}]}


def test_items_connection(gql_client, user):
    ItemFactory.create_batch(3, user=user)

    res = gql_client.query(
        """
        query {
            itemsConnection (first: 2) {
              totalCount
              edges { node { title } }
              pageInfo { hasNextPage }
            }
          }
        """
    )
    assert res.data["itemsConnection"]["totalCount"] == 3
    assert len(res.data["itemsConnection"]["edges"]) == 2
    assert res.data["itemsConnection"]["pageInfo"] == {"hasNextPage": True}


def test_item_by_id(gql_client, user):
    item = ItemFactory.create(title="Belt", user=user)

    res = gql_client.query(
        """
        query Item ($id: ID!) {
            item (id: $id) {
              id
              title
            }
          }
        """,
        {"id": gid("Item", item.pk)},
    )
    assert res.data == {"item": {"id": gid("Item", item.pk), "title": "Belt"}}


def test_create_item_anonymous(gql_client, db):
    res = gql_client.query(
        CREATE_ITEM,
        {"data": {"title": "Belt", "price": 500}},
        assert_no_errors=False,
    )
    assert res.data is None
    assert error_messages(res) == ["You must be logged in to do that!"]
    assert not Item.objects.exists()


def test_create_item(gql_client, user):
    with gql_client.login(user):
        res = gql_client.query(
            CREATE_ITEM,
            {"data": {"title": "Belt", "price": 500, "description": "Leather"}},
        )

    assert res.data == {
        "createItem": {"title": "Belt", "price": 500, "user": {"name": user.name}},
    }
    item = Item.objects.get()
    assert item.user == user
    assert item.description == "Leather"
    assert item.image == ""


def test_create_item_without_role(gql_client, user):
    user.permissions = []
    user.save()

    with gql_client.login(user):
        res = gql_client.query(
            CREATE_ITEM,
            {"data": {"title": "Belt", "price": 500}},
            assert_no_errors=False,
        )

    assert error_messages(res) == [
        "You do not have sufficient permissions: ADMIN, ITEMCREATE, USER",
    ]
    assert not Item.objects.exists()


def test_update_item_owner(gql_client, user):
    item = ItemFactory.create(title="Belt", description="Old", price=500, user=user)

    with gql_client.login(user):
        res = gql_client.query(
            UPDATE_ITEM,
            {"id": gid("Item", item.pk), "data": {"title": "Brown belt"}},
        )

    assert res.data == {
        "updateItem": {"title": "Brown belt", "description": "Old", "price": 500},
    }
    item.refresh_from_db()
    assert item.title == "Brown belt"


def test_update_item_with_itemupdate(gql_client, user, other_user):
    item = ItemFactory.create(price=500, user=other_user)
    user.permissions = ["USER", "ITEMUPDATE"]
    user.save()

    with gql_client.login(user):
        res = gql_client.query(
            UPDATE_ITEM,
            {"id": gid("Item", item.pk), "data": {"price": 700}},
        )

    assert res.data["updateItem"]["price"] == 700


def test_update_item_forbidden(gql_client, user, other_user):
    item = ItemFactory.create(title="Belt", user=other_user)

    with gql_client.login(user):
        res = gql_client.query(
            UPDATE_ITEM,
            {"id": gid("Item", item.pk), "data": {"title": "Mine now"}},
            assert_no_errors=False,
        )

    assert error_messages(res) == [
        "You do not have sufficient permissions: ADMIN, ITEMUPDATE",
    ]
    item.refresh_from_db()
    assert item.title == "Belt"


def test_update_item_invalid(gql_client, user):
    item = ItemFactory.create(title="Belt", user=user)

    with gql_client.login(user):
        res = gql_client.query(
            UPDATE_ITEM,
            {"id": gid("Item", item.pk), "data": {"title": ""}},
            assert_no_errors=False,
        )

    assert error_messages(res) == ["This field cannot be blank."]
    item.refresh_from_db()
    assert item.title == "Belt"


def test_delete_item_owner(gql_client, user):
    item = ItemFactory.create(title="Belt", user=user)

    with gql_client.login(user):
        res = gql_client.query(DELETE_ITEM, {"id": gid("Item", item.pk)})

    assert res.data == {"deleteItem": {"title": "Belt"}}
    assert not Item.objects.exists()


@pytest.mark.parametrize("permission", ["ADMIN", "ITEMDELETE"])
def test_delete_item_with_role(gql_client, user, other_user, permission):
    item = ItemFactory.create(title="Belt", user=other_user)
    user.permissions = ["USER", permission]
    user.save()

    with gql_client.login(user):
        res = gql_client.query(DELETE_ITEM, {"id": gid("Item", item.pk)})

    assert res.data == {"deleteItem": {"title": "Belt"}}
    assert not Item.objects.exists()


def test_delete_item_forbidden(gql_client, user, other_user):
    item = ItemFactory.create(user=other_user)

    with gql_client.login(user):
        res = gql_client.query(
            DELETE_ITEM,
            {"id": gid("Item", item.pk)},
            assert_no_errors=False,
        )

    assert error_messages(res) == [
        "You do not have sufficient permissions: ADMIN, ITEMDELETE",
    ]
    assert Item.objects.filter(pk=item.pk).exists()


def test_delete_item_not_found(gql_client, user):
    with gql_client.login(user):
        res = gql_client.query(
            DELETE_ITEM,
            {"id": gid("Item", 999)},
            assert_no_errors=False,
        )

    assert error_messages(res) == ["No Item found for id 999"]
