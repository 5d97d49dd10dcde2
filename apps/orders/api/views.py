"""
ViewSets for the Orders app.
"""
import logging
from rest_framework import mixins, viewsets, filters, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend
from django.conf import settings
from django.core.exceptions import ValidationError

from apps.api.pagination import StandardResultsSetPagination
from apps.api.permissions import IsOwnerOrAdmin
from apps.limits.limit import LimitRuleTriggered
from apps.limits.services import LimitService
from apps.orders.models import Order
from apps.orders.api.serializers import (
    OrderSerializer,
    OrderListSerializer,
    OrderCreateSerializer,
)
from apps.orders.utils.order_utils import OrderOrchestration

logger = logging.getLogger(__name__)


def validation_error_response(error: ValidationError) -> Response:
    """400 response body for a rejected order."""
    if isinstance(error, LimitRuleTriggered):
        body = {
            'detail': error.violation.message,
            'code': error.violation.code,
            'violation': error.violation.as_dict(),
        }
    else:
        body = {
            'detail': ' '.join(error.messages),
            'code': getattr(error, 'code', None) or 'invalid',
            'violation': None,
        }
    return Response(body, status=status.HTTP_400_BAD_REQUEST)


class OrderViewSet(mixins.CreateModelMixin,
                   mixins.ListModelMixin,
                   mixins.RetrieveModelMixin,
                   viewsets.GenericViewSet):
    """ViewSet for Order model."""
    queryset = Order.objects.all().select_related('user').prefetch_related(
        'items__sku', 'items__spu'
    )
    permission_classes = [IsAuthenticated, IsOwnerOrAdmin]
    pagination_class = StandardResultsSetPagination
    filter_backends = [
        DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter
    ]
    filterset_fields = ['status', 'user']
    search_fields = ['order_number']
    ordering_fields = ['status', 'created_at']
    ordering = ['-created_at']

    def get_serializer_class(self):
        if self.action == 'list':
            return OrderListSerializer
        if self.action in ('create', 'check'):
            return OrderCreateSerializer
        return OrderSerializer

    def get_queryset(self):
        """Filter orders based on user permissions."""
        qs = super().get_queryset()
        user = self.request.user
        if not user.is_staff:
            # Non-staff users can only see their own orders
            qs = qs.filter(user=user)
        return qs

    def create(self, request, *args, **kwargs):
        """Create an order; purchase limits are enforced before it is written."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            order = OrderOrchestration().create_order(
                request.user, serializer.get_items_data()
            )
        except ValidationError as e:
            logger.info("Order rejected for user %s: %s", request.user.pk, e)
            return validation_error_response(e)

        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['post'])
    def check(self, request):
        """
        Check items against purchase limits without creating an order.

        Request body:
        {
            "items": [
                {"sku": 1, "quantity": 2},
                {"sku": 2, "quantity": 1}
            ]
        }
        """
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            draft = OrderOrchestration.build_order_data(
                request.user, serializer.get_items_data()
            )
            if getattr(settings, 'ORDER_LIMITS', {}).get('ENABLED', True):
                LimitService.from_settings().check_order(draft)
        except ValidationError as e:
            return validation_error_response(e)

        return Response({'valid': True})

    @action(detail=True, methods=['post'])
    def cancel(self, request, pk=None):
        """Cancel an order; its items stop counting toward purchase limits."""
        order = self.get_object()
        if order.status in [Order.COMPLETED, Order.CANCELLED]:
            return Response(
                {'detail': f'Cannot cancel order with status: {order.status}'},
                status=status.HTTP_400_BAD_REQUEST
            )
        OrderOrchestration(order).cancel()
        return Response(OrderSerializer(order).data)
