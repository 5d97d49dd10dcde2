from apps.catalog.tests.factories import CategoryFactory, SkuFactory, SpuFactory
from apps.limits.models import CategoryLimitRule, SkuLimitRule, SpuLimitRule
import factory


class SkuLimitRuleFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = SkuLimitRule

    sku = factory.SubFactory(SkuFactory)
    type = "BUY_TOTAL"
    value = "5"


class SpuLimitRuleFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = SpuLimitRule

    spu = factory.SubFactory(SpuFactory)
    type = "BUY_TOTAL"
    value = "5"


class CategoryLimitRuleFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = CategoryLimitRule

    category = factory.SubFactory(CategoryFactory)
    type = "BUY_TOTAL"
    value = "5"
