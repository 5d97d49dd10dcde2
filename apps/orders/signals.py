# orders/signals.py
"""Signals emitted by the order pipeline."""
from django.dispatch import Signal

# Sent with ``order`` (an OrderData) before any row is written.
# Receivers abort the order by raising ValidationError.
before_order_created = Signal()
