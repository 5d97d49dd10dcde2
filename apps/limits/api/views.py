"""
ViewSets for the Limits app.
"""
from rest_framework import viewsets, filters
from rest_framework.permissions import IsAuthenticated
from django_filters.rest_framework import DjangoFilterBackend

from apps.api.pagination import StandardResultsSetPagination
from apps.api.permissions import IsStaffUser
from apps.limits.models import CategoryLimitRule, SkuLimitRule, SpuLimitRule
from apps.limits.api.serializers import (
    CategoryLimitRuleSerializer,
    SkuLimitRuleSerializer,
    SpuLimitRuleSerializer,
)


class LimitRuleViewSet(viewsets.ModelViewSet):
    """Staff-only CRUD for limit rules."""
    permission_classes = [IsAuthenticated, IsStaffUser]
    pagination_class = StandardResultsSetPagination
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    ordering_fields = ['sort_order', 'id', 'created_at']
    ordering = ['sort_order', 'id']


class SkuLimitRuleViewSet(LimitRuleViewSet):
    """ViewSet for SkuLimitRule model."""
    queryset = SkuLimitRule.objects.all().select_related('sku')
    serializer_class = SkuLimitRuleSerializer
    filterset_fields = ['sku', 'type']


class SpuLimitRuleViewSet(LimitRuleViewSet):
    """ViewSet for SpuLimitRule model."""
    queryset = SpuLimitRule.objects.all().select_related('spu')
    serializer_class = SpuLimitRuleSerializer
    filterset_fields = ['spu', 'type']


class CategoryLimitRuleViewSet(LimitRuleViewSet):
    """ViewSet for CategoryLimitRule model."""
    queryset = CategoryLimitRule.objects.all().select_related('category')
    serializer_class = CategoryLimitRuleSerializer
    filterset_fields = ['category', 'type']
