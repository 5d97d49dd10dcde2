"""Rule type enums, one closed set per catalog granularity."""
from django.db import models


class LimitScope(models.TextChoices):
    SKU = "SKU", "SKU"
    SPU = "SPU", "SPU"
    CATEGORY = "CATEGORY", "Category"


class SkuLimitType(models.TextChoices):
    MIN_QUANTITY = "MIN_QUANTITY", "Minimum quantity per order"
    SPECIFY_COUPON = "SPECIFY_COUPON", "Requires coupon (retired)"
    SKU_MUTEX = "SKU_MUTEX", "Mutually exclusive with SKU"
    BUY_TOTAL = "BUY_TOTAL", "Lifetime purchase cap"
    BUY_YEAR = "BUY_YEAR", "Yearly purchase cap"
    BUY_QUARTER = "BUY_QUARTER", "Quarterly purchase cap"
    BUY_MONTH = "BUY_MONTH", "Monthly purchase cap"
    BUY_DAILY = "BUY_DAILY", "Daily purchase cap"


class SpuLimitType(models.TextChoices):
    SPECIFY_COUPON = "SPECIFY_COUPON", "Requires coupon (retired)"
    SPU_MUTEX = "SPU_MUTEX", "Mutually exclusive with SPU"
    BUY_TOTAL = "BUY_TOTAL", "Lifetime purchase cap"
    BUY_YEAR = "BUY_YEAR", "Yearly purchase cap"
    BUY_QUARTER = "BUY_QUARTER", "Quarterly purchase cap"
    BUY_MONTH = "BUY_MONTH", "Monthly purchase cap"
    BUY_DAILY = "BUY_DAILY", "Daily purchase cap"


class CategoryLimitType(models.TextChoices):
    SPECIFY_COUPON = "SPECIFY_COUPON", "Requires coupon (retired)"
    BUY_TOTAL = "BUY_TOTAL", "Lifetime purchase cap"
    BUY_YEAR = "BUY_YEAR", "Yearly purchase cap"
    BUY_QUARTER = "BUY_QUARTER", "Quarterly purchase cap"
    BUY_MONTH = "BUY_MONTH", "Monthly purchase cap"
    BUY_DAILY = "BUY_DAILY", "Daily purchase cap"


# Calendar-window caps share their values across the three enums.
PERIOD_TYPES = frozenset({"BUY_YEAR", "BUY_QUARTER", "BUY_MONTH", "BUY_DAILY"})
