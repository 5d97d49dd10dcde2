# orders/utils/order_utils.py
"""Utility functions for creating and managing orders."""
import logging
from typing import List
from django.core.exceptions import ValidationError
from django.db import transaction
# First-party imports
from apps.orders.models import Order, OrderData, OrderItem, OrderItemData
from apps.orders.signals import before_order_created

logger = logging.getLogger(__name__)


class OrderOrchestration:
    """Class to handle order operations like create, confirm and cancel."""
    def __init__(self, order=None):
        self.order = order

    @staticmethod
    def build_order_data(user, order_items_data: List[OrderItemData]) -> OrderData:
        """Assemble an unsaved order from the submitted items."""
        if not order_items_data:
            raise ValidationError("Cannot create an order with no items.")

        draft = OrderData(user=user)
        for item in order_items_data:
            if item.sku is None:
                raise ValidationError("Every order item needs a SKU.")
            if item.quantity < 1:
                raise ValidationError(f"Invalid quantity {item.quantity} for {item.sku}.")
            draft.add_item(item.sku, item.quantity)
        return draft

    # ----------------------------
    # Create, confirm, cancel
    # ----------------------------
    def create_order(self, user, order_items_data: List[OrderItemData]) -> Order:
        """
        Create a new order for ``user``.

        ``before_order_created`` receivers run first, outside the write
        transaction; any ValidationError they raise aborts the order before a
        row is written.
        """
        draft = self.build_order_data(user, order_items_data)
        before_order_created.send(sender=Order, order=draft)

        with transaction.atomic():
            order = Order.objects.create(user=user, status=Order.PENDING)
            OrderItem.objects.bulk_create([
                OrderItem(
                    order=order,
                    sku=item.sku,
                    spu_id=item.sku.spu_id,
                    quantity=item.quantity,
                )
                for item in draft.items
            ])
        logger.info("Order %s created with %d item(s).", order.order_number, len(draft.items))
        self.order = order
        return order

    @transaction.atomic
    def confirm(self):
        """Confirm the order, setting its status to 'confirmed'."""
        if not self.order:
            raise ValidationError("Order must be set before calling confirm()")
        if self.order.status == Order.CONFIRMED:
            return
        if self.order.status == Order.CANCELLED:
            raise ValidationError(f"Order {self.order.order_number} is cancelled.")
        self.order.status = Order.CONFIRMED
        self.order.save(update_fields=["status", "updated_at"])
        logger.info("Order %s confirmed.", self.order.id)

    @transaction.atomic
    def cancel(self):
        """Cancel the order; cancelled orders no longer count toward purchase limits."""
        if not self.order:
            raise ValueError("Order must be set before calling cancel()")
        self.order.status = Order.CANCELLED
        self.order.save(update_fields=["status", "updated_at"])
        logger.info("Order %s cancelled.", self.order.id)
