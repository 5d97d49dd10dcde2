"""
Catalog API tests using DRF's APITestCase.
"""
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.catalog.models import Spu
from apps.catalog.tests.factories import CategoryFactory, SkuFactory, SpuFactory
from apps.orders.tests.factories import UserFactory


class CatalogAPITests(APITestCase):

    @classmethod
    def setUpTestData(cls):
        cls.staff = UserFactory(is_staff=True)
        cls.snacks = CategoryFactory(name="Snacks")

    def setUp(self):
        self.client.force_authenticate(user=self.staff)

    def test_create_spu_with_categories(self):
        response = self.client.post(
            reverse('api:spu-list'),
            {'name': 'Chips', 'gtin': '690001', 'category_ids': [self.snacks.pk]},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        spu = Spu.objects.get(name='Chips')
        self.assertEqual(spu.get_categories(), [self.snacks])

    def test_spu_detail_lists_skus(self):
        spu = SpuFactory(categories=[self.snacks])
        sku = SkuFactory(spu=spu)

        response = self.client.get(reverse('api:spu-detail', args=[spu.pk]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row['id'] for row in response.data['skus']], [sku.pk])
        self.assertEqual(response.data['category_ids'], [self.snacks.pk])

    def test_filter_skus_by_spu(self):
        spu = SpuFactory()
        SkuFactory(spu=spu)
        SkuFactory()

        response = self.client.get(reverse('api:sku-list'), {'spu': spu.pk})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['count'], 1)

    def test_category_counts_valid_spus(self):
        SpuFactory(categories=[self.snacks])
        SpuFactory(categories=[self.snacks], valid=False)

        response = self.client.get(reverse('api:category-detail', args=[self.snacks.pk]))

        self.assertEqual(response.data['spu_count'], 1)
