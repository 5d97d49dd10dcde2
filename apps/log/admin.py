from django.contrib import admin
from .models import LimitViolationLog


@admin.register(LimitViolationLog)
class LimitViolationLogAdmin(admin.ModelAdmin):
    """Admin for viewing orders rejected by purchase limits."""
    list_display = ('id', 'user', 'sku', 'code', 'limit', 'actual_count', 'rest', 'created_at')
    list_filter = ('scope', 'kind', 'code', 'created_at')
    search_fields = ('user__username', 'user__email', 'message', 'sku__name')
    readonly_fields = (
        'user', 'order', 'sku', 'scope', 'kind', 'code', 'rule_id',
        'limit', 'actual_count', 'rest', 'message', 'log_type', 'created_at'
    )
    ordering = ('-created_at',)

    def has_add_permission(self, request):
        """Prevent manual creation of violation logs."""
        return False

    def has_change_permission(self, request, obj=None):
        """Prevent editing of violation logs."""
        return False
