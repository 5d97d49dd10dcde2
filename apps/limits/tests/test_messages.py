from django.test import override_settings

from apps.limits.limit import (
    LimitScope,
    MessageTemplates,
    ViolationKind,
    build_limit_violation,
    decide,
)


def test_defaults():
    messages = MessageTemplates()

    assert messages.hard_limit_message(LimitScope.SKU, 3) == "最多只能购买3件"
    assert messages.rest_limit_message(2, 5) == "只能继续购买2件"
    assert messages.rest_limit_message(0, 5) == "已达到购买上限"
    assert messages.rest_limit_message(-1, 5) == "已达到购买上限"
    assert messages.min_quantity_message(5) == "最少需要购买5件"
    assert messages.not_eligible_message() == "您不符合购买资格"


def test_overrides_apply_to_their_own_scope_only():
    messages = MessageTemplates(spu_buy_limit_alert="Limit {limit} per product")

    assert messages.hard_limit_message(LimitScope.SPU, 4) == "Limit 4 per product"
    assert messages.hard_limit_message(LimitScope.SKU, 4) == "最多只能购买4件"
    assert messages.hard_limit_message(LimitScope.CATEGORY, 4) == "最多只能购买4件"


def test_max_buy_override_only_replaces_limit_reached_text():
    messages = MessageTemplates(max_buy_limit="Sold out for you")

    assert messages.rest_limit_message(0, 5) == "Sold out for you"
    assert messages.rest_limit_message(1, 5) == "只能继续购买1件"


@override_settings(ORDER_LIMITS={
    "MESSAGES": {
        "CATEGORY_BUY_LIMIT_ALERT_MSG": "Category cap is {limit}",
        "MAX_BUY_LIMIT_MSG": None,
    },
})
def test_from_settings():
    messages = MessageTemplates.from_settings()

    assert messages.hard_limit_message(LimitScope.CATEGORY, 9) == "Category cap is 9"
    assert messages.rest_limit_message(0, 9) == "已达到购买上限"


@override_settings(ORDER_LIMITS={})
def test_from_settings_without_messages():
    assert MessageTemplates.from_settings() == MessageTemplates()


def test_override_braces_are_kept_as_written():
    messages = MessageTemplates(
        sku_buy_limit_alert="限购说明{活动}",
        max_buy_limit="{}已达上限",
    )

    assert messages.hard_limit_message(LimitScope.SKU, 10) == "限购说明{活动}"
    assert messages.rest_limit_message(0, 10) == "{}已达上限"


def test_override_with_stray_braces_still_builds_violation():
    messages = MessageTemplates(
        sku_buy_limit_alert="限购{limit}件 {活动}",
        max_buy_limit="{}已达上限",
    )

    hard = build_limit_violation(decide(12, 1, 10), LimitScope.SKU, 1, messages)
    rest = build_limit_violation(decide(10, 1, 10), LimitScope.SKU, 1, messages)

    assert hard.kind == ViolationKind.HARD_EXCEEDED
    assert hard.message == "限购10件 {活动}"
    assert rest.kind == ViolationKind.REST_EXCEEDED
    assert rest.message == "{}已达上限"
