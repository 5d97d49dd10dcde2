from django.contrib import admin
from .models import OrderItem


class OrderItemInline(admin.TabularInline):
    """Inline admin for OrderItems."""
    model = OrderItem
    extra = 0
    fields = ('sku', 'spu', 'quantity', 'created_at')
    readonly_fields = ('spu', 'created_at')
    autocomplete_fields = ('sku',)
