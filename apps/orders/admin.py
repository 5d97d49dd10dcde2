# apps/orders/admin.py
"""Admin configuration for Order model."""
from django.contrib import admin
from django.contrib import messages
# Local imports
from .models import Order
from .inline import OrderItemInline
from .utils.order_utils import OrderOrchestration


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Admin for Order model."""
    list_display = ('order_number', 'user', 'status', 'display_total_quantity', 'created_at')
    list_filter = ('status',)
    search_fields = ('order_number', 'user__username')
    readonly_fields = ('order_number', 'updated_at')
    inlines = [OrderItemInline]
    actions = ['cancel_orders']

    def display_total_quantity(self, obj):
        """Display the number of units in the order."""
        return obj.total_quantity()
    display_total_quantity.short_description = "Units"

    @admin.action(description="Cancel selected orders")
    def cancel_orders(self, request, queryset):
        cancelled = 0
        for order in queryset.exclude(status=Order.CANCELLED):
            OrderOrchestration(order).cancel()
            cancelled += 1
        messages.success(request, f"Cancelled {cancelled} order(s).")
