"""Purchase limit rule evaluation."""
from .checkers import CategoryLimitChecker, RuleChecker, SkuLimitChecker, SpuLimitChecker
from .context import DataExtractor, EvaluationContext
from .decision import Decision, Outcome, build_limit_violation, decide, parse_limit
from .exceptions import LimitRuleTriggered
from .messages import MessageTemplates
from .mutex import MutexChecker
from .time_range import TimeRange, TimeRangeCalculator
from .types import CategoryLimitType, LimitScope, SkuLimitType, SpuLimitType
from .violations import Violation, ViolationKind

__all__ = [
    "CategoryLimitChecker",
    "CategoryLimitType",
    "DataExtractor",
    "Decision",
    "EvaluationContext",
    "LimitRuleTriggered",
    "LimitScope",
    "MessageTemplates",
    "MutexChecker",
    "Outcome",
    "RuleChecker",
    "SkuLimitChecker",
    "SkuLimitType",
    "SpuLimitChecker",
    "SpuLimitType",
    "TimeRange",
    "TimeRangeCalculator",
    "Violation",
    "ViolationKind",
    "build_limit_violation",
    "decide",
    "parse_limit",
]
