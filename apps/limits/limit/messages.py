"""User-facing messages for limit violations and their overrides."""
import re
from dataclasses import dataclass
from typing import Optional
from django.conf import settings

from .types import LimitScope

DEFAULT_BUY_LIMIT_MSG = "最多只能购买{limit}件"
DEFAULT_REST_LIMIT_MSG = "只能继续购买{rest}件"
DEFAULT_MAX_BUY_LIMIT_MSG = "已达到购买上限"
DEFAULT_MIN_QUANTITY_MSG = "最少需要购买{limit}件"
DEFAULT_NOT_ELIGIBLE_MSG = "您不符合购买资格"

_PLACEHOLDER = re.compile(r"\{(limit|rest)\}")


def render(template: str, **values) -> str:
    """
    Fill ``{limit}`` and ``{rest}`` in ``template``. Any other text,
    braces included, is kept as written.
    """
    return _PLACEHOLDER.sub(lambda match: str(values[match.group(1)]), template)


@dataclass(frozen=True)
class MessageTemplates:
    """
    Message templates used when a rule fails.

    The ``*_buy_limit_alert`` and ``max_buy_limit`` overrides correspond to
    the ``SKU_BUY_LIMIT_ALERT_MSG``, ``SPU_BUY_LIMIT_ALERT_MSG``,
    ``CATEGORY_BUY_LIMIT_ALERT_MSG`` and ``MAX_BUY_LIMIT_MSG`` settings;
    ``None`` selects the built-in text. Templates may reference ``{limit}``
    and ``{rest}``.
    """
    sku_buy_limit_alert: Optional[str] = None
    spu_buy_limit_alert: Optional[str] = None
    category_buy_limit_alert: Optional[str] = None
    max_buy_limit: Optional[str] = None
    buy_limit: str = DEFAULT_BUY_LIMIT_MSG
    rest_limit: str = DEFAULT_REST_LIMIT_MSG
    min_quantity: str = DEFAULT_MIN_QUANTITY_MSG
    not_eligible: str = DEFAULT_NOT_ELIGIBLE_MSG

    @classmethod
    def from_settings(cls) -> "MessageTemplates":
        overrides = getattr(settings, "ORDER_LIMITS", {}).get("MESSAGES", {}) or {}
        return cls(
            sku_buy_limit_alert=overrides.get("SKU_BUY_LIMIT_ALERT_MSG"),
            spu_buy_limit_alert=overrides.get("SPU_BUY_LIMIT_ALERT_MSG"),
            category_buy_limit_alert=overrides.get("CATEGORY_BUY_LIMIT_ALERT_MSG"),
            max_buy_limit=overrides.get("MAX_BUY_LIMIT_MSG"),
        )

    def hard_limit_message(self, scope: LimitScope, limit: int) -> str:
        override = {
            LimitScope.SKU: self.sku_buy_limit_alert,
            LimitScope.SPU: self.spu_buy_limit_alert,
            LimitScope.CATEGORY: self.category_buy_limit_alert,
        }.get(scope)
        return render(override or self.buy_limit, limit=limit, rest=0)

    def rest_limit_message(self, rest: int, limit: int) -> str:
        if rest > 0:
            return render(self.rest_limit, limit=limit, rest=rest)
        return render(self.max_buy_limit or DEFAULT_MAX_BUY_LIMIT_MSG, limit=limit, rest=0)

    def min_quantity_message(self, limit: int) -> str:
        return render(self.min_quantity, limit=limit, rest=0)

    def not_eligible_message(self) -> str:
        return self.not_eligible
