# limits/services.py
"""Evaluate an order's line items against the configured limit rules."""
import logging
from typing import Iterable, Optional
# Local imports
from .limit import (
    CategoryLimitChecker,
    DataExtractor,
    EvaluationContext,
    LimitRuleTriggered,
    MessageTemplates,
    MutexChecker,
    SkuLimitChecker,
    SpuLimitChecker,
    TimeRangeCalculator,
    Violation,
)
from .limit.interfaces import CatalogLookup, HistoryAggregator, RuleStore

logger = logging.getLogger(__name__)


class LimitService:
    """
    Run the SPU, SKU and category checks for each line item of an order.

    Checks stop at the first failing rule; the order is rejected with a
    LimitRuleTriggered carrying the Violation. Without a rule store there
    is nothing to enforce and every check passes.
    """

    def __init__(
        self,
        catalog: CatalogLookup,
        history: HistoryAggregator,
        rule_store: Optional[RuleStore] = None,
        messages: Optional[MessageTemplates] = None,
        time_ranges: Optional[TimeRangeCalculator] = None,
    ):
        self.catalog = catalog
        self.history = history
        self.rule_store = rule_store
        self.messages = messages or MessageTemplates()
        self.extractor = DataExtractor(catalog)

        mutex = MutexChecker(catalog, history, self.messages)
        self.sku_checker = SkuLimitChecker(history, mutex, self.messages, time_ranges)
        self.spu_checker = SpuLimitChecker(history, mutex, self.messages, time_ranges)
        self.category_checker = CategoryLimitChecker(history, mutex, self.messages, time_ranges)

    @classmethod
    def from_settings(cls) -> "LimitService":
        """Service wired to the catalog, order history and rule tables."""
        from apps.catalog.utils.catalog_lookup import DjangoCatalogLookup
        from apps.limits.utils.rule_store import DjangoRuleStore
        from apps.orders.utils.purchase_history import DjangoHistoryAggregator

        return cls(
            catalog=DjangoCatalogLookup(),
            history=DjangoHistoryAggregator(),
            rule_store=DjangoRuleStore(),
            messages=MessageTemplates.from_settings(),
        )

    # ----------------------------
    # Order level
    # ----------------------------
    def check_order(self, order) -> None:
        """Check every line item; raises on the first violation."""
        for item in order.get_line_items():
            violation = self.check_line_item(item)
            if violation is not None:
                raise LimitRuleTriggered(violation, sku=item.sku)

    def first_violation(self, order) -> Optional[Violation]:
        """The first violation in ``order``, or None when it may be placed."""
        try:
            self.check_order(order)
        except LimitRuleTriggered as exc:
            return exc.violation
        return None

    def check_line_item(self, item) -> Optional[Violation]:
        return (
            self.check_spu(item)
            or self.check_sku(item)
            or self.check_category(item)
        )

    # ----------------------------
    # Per granularity
    # ----------------------------
    def check_sku(self, item) -> Optional[Violation]:
        if self.rule_store is None:
            return None
        context = self.extractor.extract(item)
        if context is None:
            return None
        rules = self.rule_store.find_sku_rules(context.sku.get_id())
        return self._first(self.sku_checker, rules, context)

    def check_spu(self, item) -> Optional[Violation]:
        if self.rule_store is None:
            return None
        context = self.extractor.extract(item)
        if context is None:
            return None
        context = self.extractor.with_spu(context)
        if context is None:
            logger.debug("SKU %s has no SPU; skipping SPU rules", item.sku)
            return None
        rules = self.rule_store.find_spu_rules(context.spu.get_id())
        return self._first(self.spu_checker, rules, context)

    def check_category(self, item) -> Optional[Violation]:
        if self.rule_store is None:
            return None
        context = self.extractor.extract(item)
        if context is None:
            return None
        spu = self.catalog.resolve_spu(context.sku)
        if spu is None:
            logger.debug("SKU %s has no SPU; skipping category rules", context.sku)
            return None

        categories = self.catalog.resolve_categories(spu)
        if not categories:
            logger.warning("SPU %s has no categories; skipping category rules", spu.get_id())
            return None

        for category in categories:
            category_context = self.extractor.with_category(context, category)
            rules = self.rule_store.find_category_rules(category.get_id())
            violation = self._first(self.category_checker, rules, category_context)
            if violation is not None:
                return violation
        return None

    @staticmethod
    def _first(checker, rules: Iterable, context: EvaluationContext) -> Optional[Violation]:
        for rule in rules:
            violation = checker.evaluate(rule, context)
            if violation is not None:
                return violation
        return None
