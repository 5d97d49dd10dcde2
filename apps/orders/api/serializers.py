"""
Serializers for the Orders app.
"""
from rest_framework import serializers

from apps.catalog.models import Sku
from apps.orders.models import Order, OrderItem, OrderItemData


class OrderItemSerializer(serializers.ModelSerializer):
    """Serializer for OrderItem model."""
    sku_name = serializers.CharField(source='sku.name', read_only=True)
    spu_name = serializers.CharField(source='spu.name', read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            'id', 'order', 'sku', 'sku_name', 'spu', 'spu_name',
            'quantity', 'created_at'
        ]
        read_only_fields = fields


class OrderItemCreateSerializer(serializers.Serializer):
    """A single requested line item."""
    sku = serializers.PrimaryKeyRelatedField(
        queryset=Sku.objects.filter(valid=True).select_related('spu')
    )
    quantity = serializers.IntegerField(min_value=1)


class OrderCreateSerializer(serializers.Serializer):
    """Input for creating or dry-run checking an order."""
    items = OrderItemCreateSerializer(many=True, allow_empty=False)

    def get_items_data(self):
        return [
            OrderItemData(sku=item['sku'], quantity=item['quantity'])
            for item in self.validated_data['items']
        ]


class OrderListSerializer(serializers.ModelSerializer):
    """Simplified serializer for Order list views."""
    total_quantity = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            'id', 'order_number', 'user', 'status', 'total_quantity', 'created_at'
        ]
        read_only_fields = fields

    def get_total_quantity(self, obj) -> int:
        return obj.total_quantity()


class OrderSerializer(serializers.ModelSerializer):
    """Serializer for Order model."""
    items = OrderItemSerializer(many=True, read_only=True)
    total_quantity = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            'id', 'order_number', 'user', 'status', 'items',
            'total_quantity', 'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_total_quantity(self, obj) -> int:
        return obj.total_quantity()
