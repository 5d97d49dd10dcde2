"""
URL configuration for the Limits API.
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from apps.limits.api.views import (
    CategoryLimitRuleViewSet,
    SkuLimitRuleViewSet,
    SpuLimitRuleViewSet,
)

router = DefaultRouter()
router.register(r'sku-limit-rules', SkuLimitRuleViewSet, basename='sku-limit-rule')
router.register(r'spu-limit-rules', SpuLimitRuleViewSet, basename='spu-limit-rule')
router.register(
    r'category-limit-rules',
    CategoryLimitRuleViewSet,
    basename='category-limit-rule'
)

urlpatterns = [
    path('', include(router.urls)),
]
