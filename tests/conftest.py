import types

import pytest
import stripe

from strawberry_django.test.client import TestClient

from .factories import AdminUserFactory, UserFactory


@pytest.fixture
def gql_client():
    return TestClient("/graphql/")


@pytest.fixture
def user(db):
    return UserFactory.create(email="user@example.com", name="User")


@pytest.fixture
def other_user(db):
    return UserFactory.create(email="other@example.com", name="Other")


@pytest.fixture
def admin_user(db):
    return AdminUserFactory.create(email="admin@example.com", name="Admin")


@pytest.fixture
def stripe_charge(mocker):
    """Accept every charge, answering with id ``ch_1`` and the requested amount."""

    def create(**kwargs):
        return types.SimpleNamespace(id="ch_1", amount=kwargs["amount"])

    return mocker.patch("stripe.Charge.create", side_effect=create)


@pytest.fixture
def declined_charge(mocker):
    return mocker.patch(
        "stripe.Charge.create",
        side_effect=stripe.CardError(
            "Your card was declined.",
            param=None,
            code="card_declined",
        ),
    )
