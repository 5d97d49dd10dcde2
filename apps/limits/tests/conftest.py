import pytest

from apps.limits.limit import MessageTemplates, MutexChecker
from apps.limits.services import LimitService
from .fakes import (
    FakeCatalog,
    FakeCategory,
    FakeHistory,
    FakeOrder,
    FakeRuleStore,
    FakeSku,
    FakeSpu,
    FakeUser,
)


class World:
    """Two categories, three SPUs and their SKUs."""

    def __init__(self):
        self.snacks = FakeCategory(1)
        self.drinks = FakeCategory(2)
        self.chips = FakeSpu(10, categories=[self.snacks], gtin="6900000000010")
        self.nuts = FakeSpu(11, categories=[self.snacks], gtin="6900000000011")
        self.cola = FakeSpu(12, categories=[self.drinks], gtin="6900000000012")
        self.chips_small = FakeSku(100, spu=self.chips, gtin="7000000000100")
        self.chips_large = FakeSku(101, spu=self.chips, gtin="7000000000101")
        self.nuts_bag = FakeSku(110, spu=self.nuts, gtin="7000000000110")
        self.cola_can = FakeSku(120, spu=self.cola, gtin="7000000000120")
        self.loose = FakeSku(130, spu=None)

        self.catalog = FakeCatalog(
            skus=[self.chips_small, self.chips_large, self.nuts_bag, self.cola_can, self.loose],
            spus=[self.chips, self.nuts, self.cola],
        )
        self.history = FakeHistory()
        self.rules = FakeRuleStore()
        self.messages = MessageTemplates()
        self.user = FakeUser(1)

    def order(self, *lines):
        order = FakeOrder(user=self.user)
        for sku, quantity in lines:
            order.add(sku, quantity)
        return order

    def mutex(self):
        return MutexChecker(self.catalog, self.history, self.messages)

    def service(self, rule_store="default"):
        store = self.rules if rule_store == "default" else rule_store
        return LimitService(self.catalog, self.history, store, self.messages)


@pytest.fixture
def world():
    return World()
