"""Pytest configuration and shared fixtures."""

from datetime import date, timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from pickup.models import Session, Sport
from pickup.stores.django_store import DjangoEntityStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def today() -> date:
    return timezone.localdate()


@pytest.fixture
def tomorrow(today: date) -> date:
    return today + timedelta(days=1)


@pytest.fixture
def yesterday(today: date) -> date:
    return today - timedelta(days=1)


@pytest.fixture
def admin_user(django_user_model):
    return django_user_model.objects.create_user(
        username="alice", password="pw", is_staff=True
    )


@pytest.fixture
def player(django_user_model):
    return django_user_model.objects.create_user(username="bob", password="pw")


@pytest.fixture
def other_player(django_user_model):
    return django_user_model.objects.create_user(username="carol", password="pw")


@pytest.fixture
def store() -> DjangoEntityStore:
    return DjangoEntityStore()


@pytest.fixture
def tennis(db) -> Sport:
    return Sport.objects.create(name="Tennis")


@pytest.fixture
def tennis_session(tennis: Sport, admin_user, tomorrow: date) -> Session:
    return Session.objects.create(
        sport=tennis, creator=admin_user, date=tomorrow, venue="Court 1"
    )
