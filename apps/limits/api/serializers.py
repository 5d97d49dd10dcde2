"""
Serializers for the Limits app.
"""
from rest_framework import serializers

from apps.limits.limit.types import PERIOD_TYPES
from apps.limits.models import CategoryLimitRule, SkuLimitRule, SpuLimitRule

QUANTITY_TYPES = PERIOD_TYPES | {'BUY_TOTAL', 'MIN_QUANTITY'}

RULE_FIELDS = [
    'id', 'type', 'type_display', 'value', 'sort_order', 'remark',
    'created_at', 'updated_at'
]


class LimitRuleSerializer(serializers.ModelSerializer):
    """Shared fields for the three rule serializers."""
    type_display = serializers.CharField(source='get_type_display', read_only=True)

    def validate(self, attrs):
        rule_type = attrs.get('type', getattr(self.instance, 'type', None))
        value = attrs.get('value', getattr(self.instance, 'value', None))
        # Empty values are allowed; such rules are skipped at checkout.
        if rule_type in QUANTITY_TYPES and value and not value.strip().isdigit():
            raise serializers.ValidationError(
                {'value': 'Quantity rules need a whole number.'}
            )
        return attrs


class SkuLimitRuleSerializer(LimitRuleSerializer):
    sku_name = serializers.CharField(source='sku.name', read_only=True)

    class Meta:
        model = SkuLimitRule
        fields = RULE_FIELDS[:1] + ['sku', 'sku_name'] + RULE_FIELDS[1:]
        read_only_fields = ['id', 'created_at', 'updated_at']


class SpuLimitRuleSerializer(LimitRuleSerializer):
    spu_name = serializers.CharField(source='spu.name', read_only=True)

    class Meta:
        model = SpuLimitRule
        fields = RULE_FIELDS[:1] + ['spu', 'spu_name'] + RULE_FIELDS[1:]
        read_only_fields = ['id', 'created_at', 'updated_at']


class CategoryLimitRuleSerializer(LimitRuleSerializer):
    category_name = serializers.CharField(source='category.name', read_only=True)

    class Meta:
        model = CategoryLimitRule
        fields = RULE_FIELDS[:1] + ['category', 'category_name'] + RULE_FIELDS[1:]
        read_only_fields = ['id', 'created_at', 'updated_at']
