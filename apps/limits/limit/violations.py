"""The structured result of a failed limit check."""
from dataclasses import dataclass
from typing import Any, Optional
from django.db import models

from .types import LimitScope


class ViolationKind(models.TextChoices):
    HARD_EXCEEDED = "HARD_EXCEEDED", "Already bought more than the limit"
    REST_EXCEEDED = "REST_EXCEEDED", "Order would exceed the remaining allowance"
    MIN_QUANTITY = "MIN_QUANTITY", "Below the minimum quantity"
    MUTEX_CURRENT_ORDER = "MUTEX_CURRENT_ORDER", "Conflicting item in this order"
    MUTEX_HISTORY = "MUTEX_HISTORY", "Conflicting item bought before"


_CODE_SUFFIX = {
    ViolationKind.HARD_EXCEEDED: "LIMIT",
    ViolationKind.REST_EXCEEDED: "REST_LIMIT",
    ViolationKind.MUTEX_CURRENT_ORDER: "MUTEX_CURRENT_ORDER",
    ViolationKind.MUTEX_HISTORY: "MUTEX_HISTORY",
}


@dataclass(frozen=True)
class Violation:
    kind: ViolationKind
    scope: LimitScope
    rule_id: Any
    limit: int
    actual_count: int
    message: str
    rest: Optional[int] = None

    @property
    def code(self) -> str:
        """Error code in the ``SKU_LIMIT`` / ``SPU_REST_LIMIT`` family."""
        if self.kind == ViolationKind.MIN_QUANTITY:
            return "MIN_QUANTITY_LIMIT"
        return "_".join([str(self.scope), _CODE_SUFFIX[ViolationKind(self.kind)]])

    def as_dict(self) -> dict:
        return {
            "kind": str(self.kind),
            "scope": str(self.scope),
            "code": self.code,
            "rule_id": self.rule_id,
            "limit": self.limit,
            "actual_count": self.actual_count,
            "rest": self.rest,
            "message": self.message,
        }
