"""
Serializers for the Log app.
"""
from rest_framework import serializers

from apps.log.models import LimitViolationLog


class LimitViolationLogSerializer(serializers.ModelSerializer):
    """Serializer for LimitViolationLog model."""
    username = serializers.CharField(source='user.username', read_only=True)
    sku_name = serializers.CharField(source='sku.name', read_only=True)

    class Meta:
        model = LimitViolationLog
        fields = [
            'id', 'user', 'username', 'order', 'sku', 'sku_name',
            'scope', 'kind', 'code', 'rule_id',
            'limit', 'actual_count', 'rest',
            'message', 'log_type', 'created_at'
        ]
        read_only_fields = fields
