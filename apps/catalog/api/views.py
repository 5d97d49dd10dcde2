"""
ViewSets for the Catalog app.
"""
from rest_framework import viewsets, filters
from rest_framework.permissions import IsAuthenticated
from django_filters.rest_framework import DjangoFilterBackend

from apps.api.pagination import StandardResultsSetPagination
from apps.api.permissions import IsAdminOrReadOnly
from apps.catalog.models import Category, Spu, Sku
from apps.catalog.api.serializers import (
    CategorySerializer,
    SpuSerializer,
    SkuSerializer,
    SkuListSerializer,
)


class CategoryViewSet(viewsets.ModelViewSet):
    """ViewSet for Category model."""
    queryset = Category.objects.all()
    serializer_class = CategorySerializer
    permission_classes = [IsAuthenticated, IsAdminOrReadOnly]
    pagination_class = StandardResultsSetPagination
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name']
    ordering_fields = ['name', 'id']
    ordering = ['name']


class SpuViewSet(viewsets.ModelViewSet):
    """ViewSet for Spu model."""
    queryset = Spu.objects.all().prefetch_related('categories', 'skus')
    serializer_class = SpuSerializer
    permission_classes = [IsAuthenticated, IsAdminOrReadOnly]
    pagination_class = StandardResultsSetPagination
    filter_backends = [
        DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter
    ]
    filterset_fields = ['valid', 'categories']
    search_fields = ['name', 'gtin']
    ordering_fields = ['name', 'id']
    ordering = ['name']


class SkuViewSet(viewsets.ModelViewSet):
    """ViewSet for Sku model."""
    queryset = Sku.objects.all().select_related('spu')
    permission_classes = [IsAuthenticated, IsAdminOrReadOnly]
    pagination_class = StandardResultsSetPagination
    filter_backends = [
        DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter
    ]
    filterset_fields = ['spu', 'valid']
    search_fields = ['name', 'gtin', 'spu__name']
    ordering_fields = ['name', 'price', 'id']
    ordering = ['name']

    def get_serializer_class(self):
        if self.action == 'list':
            return SkuListSerializer
        return SkuSerializer
