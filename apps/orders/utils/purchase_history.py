# orders/utils/purchase_history.py
"""Aggregate how many units of a SKU, SPU or category a user already bought."""
import logging
from django.db.models import Sum
# First-party imports
from apps.catalog.models import Category, Sku, Spu
from apps.orders.models import Order, OrderItem

logger = logging.getLogger(__name__)


class DjangoHistoryAggregator:
    """Sum line-item quantities over a user's non-cancelled orders."""

    def count(self, user, target, window=None) -> int:
        if user is None or target is None or getattr(user, "pk", None) is None:
            return 0

        items = OrderItem.objects.filter(order__user=user).exclude(
            order__status=Order.CANCELLED
        )

        if isinstance(target, Sku):
            items = items.filter(sku=target)
        elif isinstance(target, Spu):
            items = items.filter(spu=target)
        elif isinstance(target, Category):
            items = items.filter(spu__categories=target)
        else:
            logger.warning("Cannot aggregate purchase history for %r", target)
            return 0

        if window is not None:
            items = items.filter(order__created_at__range=(window.start, window.end))

        total = items.aggregate(total=Sum("quantity"))["total"]
        return int(total or 0)
