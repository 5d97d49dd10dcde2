# limits/signals.py
"""Enforce purchase limits before an order is written."""
import logging
from django.conf import settings
from django.dispatch import receiver
# First-party imports
from apps.log.utils import log_limit_violation
from apps.orders.signals import before_order_created
# Local imports
from .limit import LimitRuleTriggered
from .services import LimitService

logger = logging.getLogger(__name__)


def _limits_setting(name, default):
    return getattr(settings, "ORDER_LIMITS", {}).get(name, default)


@receiver(before_order_created, dispatch_uid="limits_check_order")
def check_purchase_limits(sender, order, **kwargs):
    """Reject the order when a limit rule fails."""
    if not _limits_setting("ENABLED", True):
        return

    try:
        LimitService.from_settings().check_order(order)
    except LimitRuleTriggered as exc:
        logger.warning(
            "Order for user %s rejected: %s (%s)",
            getattr(order.user, "pk", None), exc.violation.message, exc.violation.code,
        )
        if _limits_setting("LOG_VIOLATIONS", True):
            log_limit_violation(order, exc.violation, sku=exc.sku)
        raise
