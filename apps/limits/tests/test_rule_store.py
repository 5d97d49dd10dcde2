import pytest

from apps.catalog.tests.factories import CategoryFactory, SkuFactory, SpuFactory
from apps.limits.tests.factories import (
    CategoryLimitRuleFactory,
    SkuLimitRuleFactory,
    SpuLimitRuleFactory,
)
from apps.limits.utils.rule_store import DjangoRuleStore


@pytest.mark.django_db
class TestDjangoRuleStore:

    def test_rules_come_back_in_sort_order(self):
        sku = SkuFactory()
        third = SkuLimitRuleFactory(sku=sku, sort_order=5)
        first = SkuLimitRuleFactory(sku=sku, sort_order=1, type="MIN_QUANTITY", value="2")
        second = SkuLimitRuleFactory(sku=sku, sort_order=5)
        SkuLimitRuleFactory()

        assert DjangoRuleStore().find_sku_rules(sku.pk) == [first, third, second]

    def test_spu_and_category_rules(self):
        spu, category = SpuFactory(), CategoryFactory()
        spu_rule = SpuLimitRuleFactory(spu=spu, type="SPU_MUTEX", value="1")
        category_rule = CategoryLimitRuleFactory(category=category, type="BUY_MONTH")

        store = DjangoRuleStore()

        assert store.find_spu_rules(spu.pk) == [spu_rule]
        assert store.find_category_rules(category.pk) == [category_rule]
        assert store.find_category_rules(category.pk + 1) == []

    def test_rule_str(self):
        rule = SkuLimitRuleFactory(type="BUY_DAILY", value="3")

        assert str(rule) == "SKU Daily purchase cap = 3"
