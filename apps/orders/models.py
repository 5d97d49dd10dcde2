# orders/models.py
"""Models for orders and their line items."""
# Standard library imports
from dataclasses import dataclass, field
from typing import Any, List, Optional
import logging
import uuid
# Django imports
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models, transaction
from django.utils import timezone

logger = logging.getLogger(__name__)


@dataclass
class OrderItemData:
    """A line item of an order that has not been written yet."""
    sku: Any
    quantity: int
    order: Optional["OrderData"] = field(default=None, repr=False)


@dataclass
class OrderData:
    """
    An order that is being assembled and has not been persisted.

    Limit checks run against this shape before anything is written, so the
    current order never shows up in its own purchase history.
    """
    user: Any
    items: List[OrderItemData] = field(default_factory=list)
    status: str = "pending"

    def add_item(self, sku, quantity: int) -> OrderItemData:
        item = OrderItemData(sku=sku, quantity=quantity, order=self)
        self.items.append(item)
        return item

    def get_line_items(self) -> List[OrderItemData]:
        return list(self.items)


class Order(models.Model):
    """A customer order."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    STATUS_CHOICES = [
        (PENDING, "Pending"),
        (CONFIRMED, "Confirmed"),
        (COMPLETED, "Completed"),
        (CANCELLED, "Cancelled"),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="orders",
    )
    order_number = models.CharField(max_length=20, unique=True, editable=False)
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=PENDING,
        db_index=True,
    )
    # Purchase windows are evaluated against this value; imported orders
    # keep the time they were placed.
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"Order {self.order_number} ({self.status})"

    def save(self, *args, **kwargs):
        if self.order_number:
            super().save(*args, **kwargs)
            return
        # The number is derived from the pk, so a unique placeholder holds
        # the column until the row exists.
        with transaction.atomic():
            self.order_number = uuid.uuid4().hex[:20]
            super().save(*args, **kwargs)
            self.order_number = self.format_order_number(self.created_at, self.pk)
            super().save(update_fields=["order_number"])

    @staticmethod
    def format_order_number(placed_at, pk) -> str:
        """Date the order was placed followed by its zero-padded pk."""
        if timezone.is_aware(placed_at):
            placed_at = timezone.localtime(placed_at)
        return f"{placed_at:%y%m%d}{pk:08d}"

    def get_line_items(self):
        if self.pk is None:
            return []
        return list(self.items.select_related("sku", "sku__spu"))

    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items.all())

    @property
    def is_cancelled(self) -> bool:
        return self.status == self.CANCELLED


class OrderItem(models.Model):
    """An item within an order."""
    order = models.ForeignKey("Order", on_delete=models.CASCADE, related_name="items")
    sku = models.ForeignKey("catalog.Sku", on_delete=models.PROTECT, related_name="order_items")
    # Copied from the SKU when the item is saved so purchase history can be
    # aggregated per SPU even if the SKU is later moved.
    spu = models.ForeignKey(
        "catalog.Spu",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="order_items",
    )
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.quantity} x {self.sku}"

    def save(self, *args, **kwargs):
        if self.spu_id is None and self.sku_id is not None:
            self.spu_id = self.sku.spu_id
        super().save(*args, **kwargs)
