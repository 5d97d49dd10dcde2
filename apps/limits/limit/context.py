"""Per line item evaluation data."""
import logging
from dataclasses import dataclass, replace
from typing import Any, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationContext:
    """Everything a rule needs to know about the line item being checked."""
    order: Any
    user: Any
    sku: Any
    quantity: int
    spu: Any = None
    spu_quantity: Optional[int] = None
    category: Any = None
    category_quantity: Optional[int] = None

    def line_items(self):
        return self.order.get_line_items()


def same_item(left, right) -> bool:
    if left is None or right is None:
        return False
    return left.get_id() == right.get_id()


class DataExtractor:
    """Build EvaluationContexts from line items using the catalog."""

    def __init__(self, catalog):
        self.catalog = catalog

    def extract(self, item) -> Optional[EvaluationContext]:
        """
        Read order, user and SKU off a line item.

        Returns None when any of them is missing; such items have nothing
        to check.
        """
        order = getattr(item, "order", None)
        if order is None:
            return None
        user = getattr(order, "user", None)
        if user is None:
            return None
        sku = getattr(item, "sku", None)
        if sku is None:
            return None
        return EvaluationContext(order=order, user=user, sku=sku, quantity=item.quantity)

    def with_spu(self, context: EvaluationContext) -> Optional[EvaluationContext]:
        spu = self.catalog.resolve_spu(context.sku)
        if spu is None:
            return None
        return replace(
            context,
            spu=spu,
            spu_quantity=self.spu_quantity_in_order(context.order, spu),
        )

    def with_category(self, context: EvaluationContext, category) -> EvaluationContext:
        return replace(
            context,
            category=category,
            category_quantity=self.category_quantity_in_order(context.order, category),
        )

    def spu_quantity_in_order(self, order, spu) -> int:
        """Units of ``spu`` across every line item of ``order``."""
        total = 0
        for item in order.get_line_items():
            if same_item(self.catalog.resolve_spu(item.sku), spu):
                total += item.quantity
        return total

    def category_quantity_in_order(self, order, category) -> int:
        """Units in ``order`` whose SPU is listed under ``category``."""
        total = 0
        for item in order.get_line_items():
            spu = self.catalog.resolve_spu(item.sku)
            if spu is None:
                continue
            categories = self.catalog.resolve_categories(spu)
            if any(same_item(candidate, category) for candidate in categories):
                total += item.quantity
        return total
