"""Mutually exclusive item rules."""
import logging
from typing import Optional

from .context import EvaluationContext, same_item
from .messages import MessageTemplates
from .types import LimitScope
from .violations import Violation, ViolationKind

logger = logging.getLogger(__name__)


class MutexChecker:
    """
    A mutex rule on item A names item B (by id or GTIN) in its ``value``;
    A cannot be bought while B is in the same order or was bought before.
    """

    def __init__(self, catalog, history, messages: MessageTemplates):
        self.catalog = catalog
        self.history = history
        self.messages = messages

    def check_mutex(self, rule, context: EvaluationContext, scope: LimitScope) -> Optional[Violation]:
        if scope == LimitScope.SKU:
            return self.check_sku_mutex(rule, context)
        if scope == LimitScope.SPU:
            return self.check_spu_mutex(rule, context)
        logger.warning("Mutex rules are not supported for %s rules: %s", scope, rule.id)
        return None

    def check_sku_mutex(self, rule, context: EvaluationContext) -> Optional[Violation]:
        mutex_sku = self.catalog.find_sku(rule.value or "")
        if mutex_sku is None:
            logger.warning(
                "Mutex rule %s points at unknown SKU %r, skipping", rule.id, rule.value
            )
            return None

        return (
            self._check_current_order(rule, context, mutex_sku)
            or self._check_history(rule, context, mutex_sku, LimitScope.SKU)
        )

    def check_spu_mutex(self, rule, context: EvaluationContext) -> Optional[Violation]:
        mutex_spu = self.catalog.find_spu(rule.value or "")
        if mutex_spu is None:
            logger.warning(
                "Mutex rule %s points at unknown SPU %r, skipping", rule.id, rule.value
            )
            return None

        return self._check_history(rule, context, mutex_spu, LimitScope.SPU)

    def _check_current_order(self, rule, context, mutex_sku) -> Optional[Violation]:
        own_sku_id = getattr(rule, "sku_id", None)
        if own_sku_id is None:
            own_sku_id = context.sku.get_id()

        for item in context.line_items():
            sku = item.sku
            if sku is None or sku.get_id() == own_sku_id:
                continue
            if same_item(sku, mutex_sku):
                logger.warning(
                    "SKU %s conflicts with SKU %s in the same order (rule %s)",
                    own_sku_id, sku.get_id(), rule.id,
                )
                return Violation(
                    kind=ViolationKind.MUTEX_CURRENT_ORDER,
                    scope=LimitScope.SKU,
                    rule_id=rule.id,
                    limit=0,
                    actual_count=item.quantity,
                    message=self.messages.not_eligible_message(),
                )
        return None

    def _check_history(self, rule, context, mutex_target, scope) -> Optional[Violation]:
        count = self.history.count(context.user, mutex_target)
        if count > 0:
            logger.warning(
                "User already bought %s %s which excludes this purchase (rule %s, count=%s)",
                scope, mutex_target.get_id(), rule.id, count,
            )
            return Violation(
                kind=ViolationKind.MUTEX_HISTORY,
                scope=scope,
                rule_id=rule.id,
                limit=0,
                actual_count=count,
                message=self.messages.not_eligible_message(),
            )
        return None
