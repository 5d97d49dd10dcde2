"""Purchase limit rule models for SKUs, SPUs and categories."""
import logging
from django.db import models
# Local imports
from .limit.types import CategoryLimitType, LimitScope, SkuLimitType, SpuLimitType

logger = logging.getLogger(__name__)


class LimitRule(models.Model):
    """
    Abstract purchase limit rule.

    ``value`` is interpreted by ``type``: a quantity for MIN_QUANTITY and the
    BUY_* caps, a comma separated coupon list for SPECIFY_COUPON, and the id
    or GTIN of the conflicting item for the mutex types. A rule without a
    value is ignored.
    """
    scope = None

    value = models.CharField(max_length=255, blank=True, null=True)
    sort_order = models.PositiveIntegerField(
        default=0,
        help_text="Rules are checked in ascending order; the first failure is reported.",
    )
    remark = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["sort_order", "id"]

    def __str__(self):
        return f"{self.scope} {self.get_type_display()} = {self.value or '-'}"


class SkuLimitRule(LimitRule):
    scope = LimitScope.SKU

    sku = models.ForeignKey(
        "catalog.Sku", on_delete=models.CASCADE, related_name="limit_rules"
    )
    type = models.CharField(max_length=32, choices=SkuLimitType.choices)

    class Meta(LimitRule.Meta):
        verbose_name = "SKU limit rule"


class SpuLimitRule(LimitRule):
    scope = LimitScope.SPU

    spu = models.ForeignKey(
        "catalog.Spu", on_delete=models.CASCADE, related_name="limit_rules"
    )
    type = models.CharField(max_length=32, choices=SpuLimitType.choices)

    class Meta(LimitRule.Meta):
        verbose_name = "SPU limit rule"


class CategoryLimitRule(LimitRule):
    scope = LimitScope.CATEGORY

    category = models.ForeignKey(
        "catalog.Category", on_delete=models.CASCADE, related_name="limit_rules"
    )
    type = models.CharField(max_length=32, choices=CategoryLimitType.choices)

    class Meta(LimitRule.Meta):
        verbose_name = "Category limit rule"
