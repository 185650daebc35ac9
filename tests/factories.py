from typing import Any, ClassVar, Generic, TypeVar

import factory
from django.contrib.auth.hashers import make_password
from factory.declarations import LazyFunction, Sequence, SubFactory
from factory.faker import Faker

from storefront.item.models import Item
from storefront.order.models import CartItem
from storefront.user.models import Permission, User

_T = TypeVar("_T")

PASSWORD = "foobar-123"  # gitleaks:allow


class _BaseFactory(factory.django.DjangoModelFactory, Generic[_T]):
    Meta: ClassVar[Any]

    @classmethod
    def create(cls, **kwargs) -> _T:
        return super().create(**kwargs)

    @classmethod
    def create_batch(cls, size: int, **kwargs) -> list[_T]:
        return super().create_batch(size, **kwargs)


class UserFactory(_BaseFactory[User]):
    class Meta:
        model = User

    email = Sequence(lambda n: f"user-{n}@example.com")
    name = Faker("name")
    password = LazyFunction(lambda: make_password(PASSWORD))
    permissions = LazyFunction(lambda: [Permission.USER.value])


class AdminUserFactory(UserFactory):
    permissions = LazyFunction(lambda: [Permission.ADMIN.value, Permission.USER.value])


class ItemFactory(_BaseFactory[Item]):
    class Meta:
        model = Item

    title = Sequence(lambda n: f"Item {n}")
    description = Faker("sentence")
    price = 1000
    image = "https://example.com/item.jpg"
    large_image = "https://example.com/item-large.jpg"
    user = SubFactory(UserFactory)


class CartItemFactory(_BaseFactory[CartItem]):
    class Meta:
        model = CartItem

    user = SubFactory(UserFactory)
    item = SubFactory(ItemFactory)
    quantity = 1
