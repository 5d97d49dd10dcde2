"""The two-stage quantity limit decision."""
import enum
import logging
import re
from dataclasses import dataclass
from typing import Any, Optional

from .messages import MessageTemplates
from .types import LimitScope
from .violations import Violation, ViolationKind

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Outcome(enum.Enum):
    PASS = "PASS"
    HARD_EXCEEDED = "HARD_EXCEEDED"
    REST_EXCEEDED = "REST_EXCEEDED"


@dataclass(frozen=True)
class Decision:
    outcome: Outcome
    prior_count: int
    incoming_quantity: int
    limit: int
    rest: Optional[int] = None

    @property
    def passed(self) -> bool:
        return self.outcome is Outcome.PASS


def parse_limit(value) -> int:
    """Read the numeric limit stored in a rule's ``value``; 0 when unusable."""
    if value is None:
        return 0
    # "5", " 5 " and "5件" all mean 5.
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0


def decide(prior_count: int, incoming_quantity: int, limit: int) -> Decision:
    """
    Compare what the user already bought plus what they are buying now
    against ``limit``.

    The history breach is checked before the would-be breach, so a user
    who is already over the cap gets HARD_EXCEEDED even when
    ``incoming_quantity`` is zero.
    """
    if prior_count > limit:
        return Decision(Outcome.HARD_EXCEEDED, prior_count, incoming_quantity, limit)
    if prior_count + incoming_quantity > limit:
        return Decision(
            Outcome.REST_EXCEEDED,
            prior_count,
            incoming_quantity,
            limit,
            rest=limit - prior_count,
        )
    return Decision(Outcome.PASS, prior_count, incoming_quantity, limit)


def build_limit_violation(
    decision: Decision,
    scope: LimitScope,
    rule_id: Any,
    messages: MessageTemplates,
) -> Optional[Violation]:
    """Turn a failed decision into a Violation; ``None`` when it passed."""
    if decision.outcome is Outcome.HARD_EXCEEDED:
        logger.warning(
            "%s limit %s exceeded by history: count=%s quantity=%s rule=%s",
            scope, decision.limit, decision.prior_count, decision.incoming_quantity, rule_id,
        )
        return Violation(
            kind=ViolationKind.HARD_EXCEEDED,
            scope=scope,
            rule_id=rule_id,
            limit=decision.limit,
            actual_count=decision.prior_count,
            message=messages.hard_limit_message(scope, decision.limit),
        )

    if decision.outcome is Outcome.REST_EXCEEDED:
        rest = decision.rest
        logger.warning(
            "%s limit %s: only %s more allowed, count=%s quantity=%s rule=%s",
            scope, decision.limit, rest, decision.prior_count, decision.incoming_quantity, rule_id,
        )
        return Violation(
            kind=ViolationKind.REST_EXCEEDED,
            scope=scope,
            rule_id=rule_id,
            limit=decision.limit,
            actual_count=decision.prior_count,
            message=messages.rest_limit_message(rest, decision.limit),
            rest=max(rest, 0),
        )

    return None
