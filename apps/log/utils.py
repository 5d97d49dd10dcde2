# log/utils.py
"""Helpers for writing log rows."""
import logging
from django.db import DatabaseError, transaction
# Local imports
from .models import BaseLog, LimitViolationLog

logger = logging.getLogger(__name__)


def _rule_pk(rule_id):
    try:
        return int(rule_id)
    except (TypeError, ValueError):
        return None


def log_limit_violation(order, violation, sku=None):
    """
    Record a rejected order.

    ``order`` may be an unsaved draft; only persisted orders are linked.
    """
    user = getattr(order, "user", None)
    saved_order = order if getattr(order, "_meta", None) and order.pk else None
    try:
        with transaction.atomic():
            return LimitViolationLog.objects.create(
                user=user if getattr(user, "pk", None) else None,
                order=saved_order,
                sku=sku if getattr(sku, "pk", None) else None,
                scope=str(violation.scope),
                kind=str(violation.kind),
                code=violation.code,
                rule_id=_rule_pk(violation.rule_id),
                limit=violation.limit,
                actual_count=violation.actual_count,
                rest=violation.rest,
                message=violation.message,
                log_type=BaseLog.WARNING,
            )
    except DatabaseError:
        logger.exception("Failed to record limit violation %s", violation.code)
        return None
