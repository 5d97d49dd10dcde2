# log/models.py
"""Models for logging rejected orders."""
from django.conf import settings
from django.db import models
# First-party imports
from apps.limits.limit.types import LimitScope
from apps.limits.limit.violations import ViolationKind


class BaseLog(models.Model):
    """Abstract base log model for tracking events related to orders."""
    INFO = 'INFO'
    WARNING = 'WARNING'
    ERROR = 'ERROR'

    LOG_TYPE_CHOICES = [
        (INFO, 'Info'),
        (WARNING, 'Warning'),
        (ERROR, 'Error'),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL
    )
    order = models.ForeignKey(
        "orders.Order",
        null=True,
        blank=True,
        on_delete=models.CASCADE
    )
    message = models.TextField()
    log_type = models.CharField(
        max_length=10, choices=LOG_TYPE_CHOICES, default=INFO
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Meta options for the log model."""
        abstract = True
        ordering = ["-created_at"]

    def __str__(self):
        target = f"Order {self.order_id}" if self.order_id else "General"
        return f"{target} [{self.log_type}]: {self.message[:50]}"


class LimitViolationLog(BaseLog):
    """
    A purchase limit rule that rejected an order.

    Rejected orders are never written, so ``order`` is usually empty; the
    user and the offending SKU identify the attempt.
    """
    sku = models.ForeignKey(
        "catalog.Sku",
        null=True,
        blank=True,
        on_delete=models.SET_NULL
    )
    scope = models.CharField(max_length=10, choices=LimitScope.choices)
    kind = models.CharField(max_length=32, choices=ViolationKind.choices)
    code = models.CharField(max_length=40, db_index=True)
    rule_id = models.PositiveIntegerField(null=True, blank=True)
    limit = models.IntegerField(default=0)
    actual_count = models.IntegerField(default=0)
    rest = models.IntegerField(null=True, blank=True)

    def __str__(self):
        who = self.user or 'Unknown'
        return f"{self.created_at} - {who}: {self.code} {self.message}"
