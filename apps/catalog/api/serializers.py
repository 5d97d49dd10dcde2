"""
Serializers for the Catalog app.
"""
from rest_framework import serializers

from apps.catalog.models import Category, Spu, Sku


class CategorySerializer(serializers.ModelSerializer):
    """Serializer for Category model."""
    spu_count = serializers.SerializerMethodField()

    class Meta:
        model = Category
        fields = ['id', 'name', 'spu_count', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']

    def get_spu_count(self, obj) -> int:
        return obj.spus.filter(valid=True).count()


class SkuSerializer(serializers.ModelSerializer):
    """Serializer for Sku model."""
    spu_name = serializers.CharField(source='spu.name', read_only=True)

    class Meta:
        model = Sku
        fields = [
            'id', 'spu', 'spu_name', 'name', 'gtin', 'price', 'valid',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class SkuListSerializer(serializers.ModelSerializer):
    """Simplified serializer for Sku list views."""

    class Meta:
        model = Sku
        fields = ['id', 'spu', 'name', 'price', 'valid']
        read_only_fields = ['id']


class SpuSerializer(serializers.ModelSerializer):
    """Serializer for Spu model."""
    skus = SkuListSerializer(many=True, read_only=True)
    category_ids = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(),
        many=True,
        source='categories',
        required=False
    )

    class Meta:
        model = Spu
        fields = [
            'id', 'name', 'gtin', 'valid', 'category_ids', 'skus',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
