"""
URL configuration for the Catalog API.
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from apps.catalog.api.views import CategoryViewSet, SpuViewSet, SkuViewSet

router = DefaultRouter()
router.register(r'categories', CategoryViewSet, basename='category')
router.register(r'spus', SpuViewSet, basename='spu')
router.register(r'skus', SkuViewSet, basename='sku')

urlpatterns = [
    path('', include(router.urls)),
]
