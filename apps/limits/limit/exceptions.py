from django.core.exceptions import ValidationError

from .violations import Violation


class LimitRuleTriggered(ValidationError):
    """A purchase limit rule rejected the order."""

    def __init__(self, violation: Violation, sku=None):
        self.violation = violation
        self.sku = sku
        super().__init__(violation.message, code=violation.code)

    def __str__(self):
        return self.violation.message
