"""
Rule checkers, one per catalog granularity.

Each checker owns a dispatch table from its rule type enum to a handler
method. Handlers return a Violation or None; ``check`` raises
LimitRuleTriggered for the first.
"""
import logging
from types import MappingProxyType
from typing import Mapping, Optional

from .context import EvaluationContext
from .decision import build_limit_violation, decide, parse_limit
from .exceptions import LimitRuleTriggered
from .messages import MessageTemplates
from .mutex import MutexChecker
from .time_range import TimeRangeCalculator
from .types import CategoryLimitType, LimitScope, SkuLimitType, SpuLimitType
from .violations import Violation, ViolationKind

logger = logging.getLogger(__name__)


class RuleChecker:
    """Shared rule handling for the SKU, SPU and category checkers."""
    scope: LimitScope
    rule_types = None
    handlers: Mapping = MappingProxyType({})

    def __init__(
        self,
        history,
        mutex: MutexChecker,
        messages: MessageTemplates,
        time_ranges: Optional[TimeRangeCalculator] = None,
    ):
        self.history = history
        self.mutex = mutex
        self.messages = messages
        self.time_ranges = time_ranges or TimeRangeCalculator()

    # ----------------------------
    # Per-granularity hooks
    # ----------------------------
    def target(self, context: EvaluationContext):
        raise NotImplementedError

    def incoming_quantity(self, context: EvaluationContext) -> int:
        raise NotImplementedError

    # ----------------------------
    # Entry points
    # ----------------------------
    def check(self, rule, context: EvaluationContext) -> None:
        violation = self.evaluate(rule, context)
        if violation is not None:
            raise LimitRuleTriggered(violation)

    def evaluate(self, rule, context: EvaluationContext) -> Optional[Violation]:
        if not self.is_rule_valid(rule, context):
            return None

        try:
            rule_type = self.rule_types(rule.type)
        except ValueError:
            logger.debug("Ignoring %s rule %s with unknown type %r", self.scope, rule.id, rule.type)
            return None

        logger.debug(
            "Checking %s rule %s (%s) for SKU %s, quantity=%s",
            self.scope, rule.id, rule_type, context.sku, context.quantity,
        )
        handler = getattr(self, self.handlers[rule_type])
        violation = handler(rule, context)
        if violation is None:
            logger.debug("%s rule %s passed for SKU %s", self.scope, rule.id, context.sku)
        return violation

    def is_rule_valid(self, rule, context: EvaluationContext) -> bool:
        if rule.value is None or str(rule.value) == "":
            logger.warning(
                "%s rule %s has no value configured, skipping (sku=%s)",
                self.scope, rule.id, context.sku,
            )
            return False
        return True

    # ----------------------------
    # Handlers
    # ----------------------------
    def check_coupon(self, rule, context: EvaluationContext) -> None:
        # Coupon restrictions are retired; the rule type is accepted but never enforced.
        coupon_ids = [part.strip() for part in str(rule.value).split(",") if part.strip()]
        logger.debug("Coupon rule %s (%s) is not enforced", rule.id, coupon_ids)
        return None

    def check_mutex(self, rule, context: EvaluationContext) -> Optional[Violation]:
        return self.mutex.check_mutex(rule, context, self.scope)

    def check_total(self, rule, context: EvaluationContext) -> Optional[Violation]:
        count = self.history.count(context.user, self.target(context))
        return self._check_limit(rule, count, context)

    def check_period(self, rule, context: EvaluationContext) -> Optional[Violation]:
        window = self.time_ranges.get_time_range(rule.type)
        logger.debug(
            "%s rule %s window: %s -> %s", self.scope, rule.id, window.start, window.end
        )
        count = self.history.count(context.user, self.target(context), window)
        return self._check_limit(rule, count, context)

    def _check_limit(self, rule, count: int, context: EvaluationContext) -> Optional[Violation]:
        limit = parse_limit(rule.value)
        decision = decide(count, self.incoming_quantity(context), limit)
        return build_limit_violation(decision, self.scope, rule.id, self.messages)


class SkuLimitChecker(RuleChecker):
    """Rules attached to a single SKU; the line item's own quantity counts."""
    scope = LimitScope.SKU
    rule_types = SkuLimitType
    handlers = MappingProxyType({
        SkuLimitType.MIN_QUANTITY: "check_min_quantity",
        SkuLimitType.SPECIFY_COUPON: "check_coupon",
        SkuLimitType.SKU_MUTEX: "check_mutex",
        SkuLimitType.BUY_TOTAL: "check_total",
        SkuLimitType.BUY_YEAR: "check_period",
        SkuLimitType.BUY_QUARTER: "check_period",
        SkuLimitType.BUY_MONTH: "check_period",
        SkuLimitType.BUY_DAILY: "check_period",
    })

    def target(self, context):
        return context.sku

    def incoming_quantity(self, context):
        return context.quantity

    def check_min_quantity(self, rule, context: EvaluationContext) -> Optional[Violation]:
        minimum = parse_limit(rule.value)
        if context.quantity < minimum:
            logger.warning(
                "SKU %s needs at least %s units, got %s (rule %s)",
                context.sku, minimum, context.quantity, rule.id,
            )
            return Violation(
                kind=ViolationKind.MIN_QUANTITY,
                scope=self.scope,
                rule_id=rule.id,
                limit=minimum,
                actual_count=context.quantity,
                message=self.messages.min_quantity_message(minimum),
            )
        return None


class SpuLimitChecker(RuleChecker):
    """
    Rules attached to an SPU. The incoming quantity is every unit of the
    SPU in the order, not just the line item being checked.
    """
    scope = LimitScope.SPU
    rule_types = SpuLimitType
    handlers = MappingProxyType({
        SpuLimitType.SPECIFY_COUPON: "check_coupon",
        SpuLimitType.SPU_MUTEX: "check_mutex",
        SpuLimitType.BUY_TOTAL: "check_total",
        SpuLimitType.BUY_YEAR: "check_period",
        SpuLimitType.BUY_QUARTER: "check_period",
        SpuLimitType.BUY_MONTH: "check_period",
        SpuLimitType.BUY_DAILY: "check_period",
    })

    def target(self, context):
        return context.spu

    def incoming_quantity(self, context):
        return context.spu_quantity or 0


class CategoryLimitChecker(RuleChecker):
    """
    Rules attached to a category. The incoming quantity is every unit in
    the order whose SPU is listed under the category.
    """
    scope = LimitScope.CATEGORY
    rule_types = CategoryLimitType
    handlers = MappingProxyType({
        CategoryLimitType.SPECIFY_COUPON: "check_coupon",
        CategoryLimitType.BUY_TOTAL: "check_total",
        CategoryLimitType.BUY_YEAR: "check_period",
        CategoryLimitType.BUY_QUARTER: "check_period",
        CategoryLimitType.BUY_MONTH: "check_period",
        CategoryLimitType.BUY_DAILY: "check_period",
    })

    def target(self, context):
        return context.category

    def incoming_quantity(self, context):
        return context.category_quantity or 0

    def evaluate(self, rule, context: EvaluationContext) -> Optional[Violation]:
        if context.category is None:
            return None
        return super().evaluate(rule, context)
