"""
Global pytest configuration for the purchase limits project.
"""
import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    """Unauthenticated DRF test client."""
    return APIClient()


@pytest.fixture
def staff_client(api_client, db):
    """DRF test client logged in as a staff user."""
    from apps.orders.tests.factories import UserFactory

    api_client.force_authenticate(user=UserFactory(is_staff=True))
    return api_client
