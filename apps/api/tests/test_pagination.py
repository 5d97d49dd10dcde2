import pytest
from django.urls import reverse
from rest_framework import status

from apps.catalog.tests.factories import CategoryFactory


@pytest.mark.django_db
class TestContentRange:

    def test_empty_list(self, staff_client):
        response = staff_client.get(reverse('api:category-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Range'] == 'category */0'
        assert response['Access-Control-Expose-Headers'] == 'Content-Range'

    def test_second_page_uses_zero_based_offsets(self, staff_client):
        CategoryFactory.create_batch(5)

        response = staff_client.get(reverse('api:category-list'), {'page': 2, 'page_size': 2})

        assert response.data['count'] == 5
        assert len(response.data['results']) == 2
        assert response['Content-Range'] == 'category 2-3/5'

    def test_page_size_is_capped(self, staff_client):
        CategoryFactory.create_batch(3)

        response = staff_client.get(reverse('api:category-list'), {'page_size': 1000})

        assert response['Content-Range'] == 'category 0-2/3'
