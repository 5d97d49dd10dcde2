"""
Token-authenticated order flows using DRF's APITestCase.
"""
from types import SimpleNamespace

from django.contrib.auth.models import User
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.api.permissions import IsOwnerOrAdmin
from apps.catalog.tests.factories import SkuFactory
from apps.limits.tests.factories import SkuLimitRuleFactory
from apps.orders.models import Order
from apps.orders.tests.factories import OrderFactory, OrderItemFactory


class TokenClientMixin:
    """Sign in through the token endpoint and send the access token."""

    def sign_in(self, username, password='shop-pass-1'):
        response = self.client.post(
            reverse('api:token_obtain_pair'),
            {'username': username, 'password': password},
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['access']}")
        return response.data


class ShopperTokenTests(TokenClientMixin, APITestCase):
    """Purchase history is read for whoever the token belongs to."""

    @classmethod
    def setUpTestData(cls):
        cls.shopper = User.objects.create_user(username='shopper', password='shop-pass-1')
        cls.neighbour = User.objects.create_user(username='neighbour', password='shop-pass-1')
        cls.sku = SkuFactory()
        cls.rule = SkuLimitRuleFactory(sku=cls.sku, type='BUY_TOTAL', value='10')
        OrderItemFactory(order=OrderFactory(user=cls.shopper), sku=cls.sku, quantity=8)

    def check(self, quantity):
        return self.client.post(
            reverse('api:order-check'),
            {'items': [{'sku': self.sku.pk, 'quantity': quantity}]},
            format='json'
        )

    def test_check_reports_remaining_allowance(self):
        self.sign_in('shopper')

        response = self.check(3)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['code'], 'SKU_REST_LIMIT')
        self.assertEqual(response.data['violation']['rule_id'], self.rule.pk)
        self.assertEqual(response.data['violation']['actual_count'], 8)
        self.assertEqual(response.data['violation']['rest'], 2)

    def test_other_shoppers_history_does_not_count(self):
        self.sign_in('neighbour')

        response = self.check(3)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {'valid': True})

    def test_refreshed_token_places_order_for_its_user(self):
        tokens = self.sign_in('neighbour')
        refreshed = self.client.post(
            reverse('api:token_refresh'), {'refresh': tokens['refresh']}, format='json'
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {refreshed.data['access']}")

        response = self.client.post(
            reverse('api:order-list'),
            {'items': [{'sku': self.sku.pk, 'quantity': 2}]},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Order.objects.get(pk=response.data['id']).user, self.neighbour)

    def test_check_requires_a_valid_token(self):
        self.assertEqual(self.check(1).status_code, status.HTTP_401_UNAUTHORIZED)

        self.client.credentials(HTTP_AUTHORIZATION='Bearer not-a-token')

        self.assertEqual(self.check(1).status_code, status.HTTP_401_UNAUTHORIZED)


class OrderOwnershipTests(TokenClientMixin, APITestCase):
    """Orders can only be read or cancelled by their owner or by staff."""

    @classmethod
    def setUpTestData(cls):
        cls.owner = User.objects.create_user(username='owner', password='shop-pass-1')
        cls.stranger = User.objects.create_user(username='stranger', password='shop-pass-1')
        cls.staff = User.objects.create_user(
            username='clerk', password='shop-pass-1', is_staff=True
        )
        cls.order = OrderFactory(user=cls.owner)

    def test_owner_can_read_order(self):
        self.sign_in('owner')

        response = self.client.get(reverse('api:order-detail', args=[self.order.pk]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['order_number'], self.order.order_number)

    def test_stranger_cannot_read_or_cancel(self):
        self.sign_in('stranger')

        read = self.client.get(reverse('api:order-detail', args=[self.order.pk]))
        cancel = self.client.post(reverse('api:order-cancel', args=[self.order.pk]))

        self.assertEqual(read.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(cancel.status_code, status.HTTP_404_NOT_FOUND)
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, Order.CONFIRMED)

    def test_staff_can_cancel_any_order(self):
        self.sign_in('clerk')

        response = self.client.post(reverse('api:order-cancel', args=[self.order.pk]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, Order.CANCELLED)

    def test_order_without_user_is_staff_only(self):
        orphan = OrderFactory(user=None)
        permission = IsOwnerOrAdmin()

        self.assertFalse(
            permission.has_object_permission(SimpleNamespace(user=self.owner), None, orphan)
        )
        self.assertTrue(
            permission.has_object_permission(SimpleNamespace(user=self.staff), None, orphan)
        )
        self.assertTrue(
            permission.has_object_permission(SimpleNamespace(user=self.owner), None, self.order)
        )
