import pytest
from django.core.management import call_command

from storefront.item.models import Item
from storefront.user.models import Permission, User


@pytest.mark.django_db
def test_populate_db_is_repeatable():
    call_command("populate_db")
    call_command("populate_db")

    admin = User.objects.get(email="admin@example.com")
    assert set(admin.permissions) == set(Permission.values)
    assert admin.check_password("admin123")

    user = User.objects.get(email="test@example.com")
    assert user.permissions == ["USER"]

    assert Item.objects.count() == 4
    assert set(Item.objects.values_list("user", flat=True)) == {admin.pk}
