import random

import pytest

from apps.limits.limit import (
    LimitScope,
    MessageTemplates,
    Outcome,
    ViolationKind,
    build_limit_violation,
    decide,
    parse_limit,
)


@pytest.mark.parametrize("value, expected", [
    ("10", 10),
    (" 7 ", 7),
    ("5件", 5),
    ("0", 0),
    ("", 0),
    (None, 0),
    ("abc", 0),
    (12, 12),
])
def test_parse_limit(value, expected):
    assert parse_limit(value) == expected


def test_history_over_limit_is_hard_exceeded_even_without_new_units():
    decision = decide(prior_count=12, incoming_quantity=0, limit=10)

    assert decision.outcome is Outcome.HARD_EXCEEDED
    assert decision.rest is None


def test_would_be_breach_is_rest_exceeded():
    decision = decide(prior_count=8, incoming_quantity=3, limit=10)

    assert decision.outcome is Outcome.REST_EXCEEDED
    assert decision.rest == 2


def test_reaching_limit_exactly_passes():
    assert decide(prior_count=7, incoming_quantity=3, limit=10).passed


@pytest.mark.parametrize("seed", range(5))
def test_decision_matches_two_stage_rule(seed):
    rng = random.Random(seed)
    for _ in range(200):
        prior = rng.randint(0, 30)
        incoming = rng.randint(0, 30)
        limit = rng.randint(0, 30)

        decision = decide(prior, incoming, limit)

        if prior > limit:
            assert decision.outcome is Outcome.HARD_EXCEEDED
        elif prior + incoming > limit:
            assert decision.outcome is Outcome.REST_EXCEEDED
            assert decision.rest == limit - prior
        else:
            assert decision.outcome is Outcome.PASS


class TestBuildLimitViolation:
    messages = MessageTemplates()

    def test_pass_builds_nothing(self):
        decision = decide(1, 1, 10)

        assert build_limit_violation(decision, LimitScope.SKU, 1, self.messages) is None

    def test_hard_exceeded(self):
        violation = build_limit_violation(decide(12, 3, 10), LimitScope.SKU, 4, self.messages)

        assert violation.kind == ViolationKind.HARD_EXCEEDED
        assert violation.limit == 10
        assert violation.actual_count == 12
        assert violation.rule_id == 4
        assert violation.message == "最多只能购买10件"
        assert violation.code == "SKU_LIMIT"

    def test_rest_exceeded_with_room_left(self):
        violation = build_limit_violation(decide(8, 3, 10), LimitScope.SPU, 4, self.messages)

        assert violation.kind == ViolationKind.REST_EXCEEDED
        assert violation.rest == 2
        assert violation.message == "只能继续购买2件"
        assert violation.code == "SPU_REST_LIMIT"

    @pytest.mark.parametrize("seed", range(3))
    def test_no_room_left_always_says_limit_reached(self, seed):
        rng = random.Random(seed)
        for _ in range(50):
            limit = rng.randint(0, 20)
            decision = decide(limit, rng.randint(1, 20), limit)

            violation = build_limit_violation(decision, LimitScope.CATEGORY, 1, self.messages)

            assert decision.rest == 0
            assert violation.message == "已达到购买上限"
            assert "继续" not in violation.message
            assert violation.code == "CATEGORY_REST_LIMIT"
