"""
ViewSets for the Log app.
"""
from rest_framework import viewsets, filters
from rest_framework.permissions import IsAuthenticated
from django_filters.rest_framework import DjangoFilterBackend

from apps.api.pagination import StandardResultsSetPagination
from apps.api.permissions import IsStaffUser
from apps.log.models import LimitViolationLog
from apps.log.api.serializers import LimitViolationLogSerializer


class LimitViolationLogViewSet(viewsets.ReadOnlyModelViewSet):
    """ViewSet for LimitViolationLog model (read-only)."""
    queryset = LimitViolationLog.objects.all().select_related('user', 'order', 'sku')
    serializer_class = LimitViolationLogSerializer
    permission_classes = [IsAuthenticated, IsStaffUser]
    pagination_class = StandardResultsSetPagination
    filter_backends = [
        DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter
    ]
    filterset_fields = ['user', 'sku', 'scope', 'kind', 'code']
    search_fields = ['message', 'user__username']
    ordering_fields = ['created_at']
    ordering = ['-created_at']
