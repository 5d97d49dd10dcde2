# limits/utils/rule_store.py
"""Fetch configured limit rules from the database."""
from typing import List
# Local imports
from apps.limits.models import CategoryLimitRule, SkuLimitRule, SpuLimitRule


class DjangoRuleStore:
    """Rules for a catalog item, in the order they should be checked."""

    def find_sku_rules(self, sku_id) -> List[SkuLimitRule]:
        return list(SkuLimitRule.objects.filter(sku_id=sku_id).order_by("sort_order", "id"))

    def find_spu_rules(self, spu_id) -> List[SpuLimitRule]:
        return list(SpuLimitRule.objects.filter(spu_id=spu_id).order_by("sort_order", "id"))

    def find_category_rules(self, category_id) -> List[CategoryLimitRule]:
        return list(
            CategoryLimitRule.objects.filter(category_id=category_id).order_by("sort_order", "id")
        )
