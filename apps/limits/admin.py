"""Admin configuration for purchase limit rules."""
from django.contrib import admin
from .models import CategoryLimitRule, SkuLimitRule, SpuLimitRule


class LimitRuleAdmin(admin.ModelAdmin):
    list_display = ('id', 'type', 'value', 'sort_order', 'remark', 'updated_at')
    list_editable = ('sort_order',)
    list_filter = ('type',)
    readonly_fields = ('created_at', 'updated_at')
    ordering = ('sort_order', 'id')


@admin.register(SkuLimitRule)
class SkuLimitRuleAdmin(LimitRuleAdmin):
    list_display = ('id', 'sku') + LimitRuleAdmin.list_display[1:]
    search_fields = ['sku__name', 'sku__gtin']
    autocomplete_fields = ['sku']


@admin.register(SpuLimitRule)
class SpuLimitRuleAdmin(LimitRuleAdmin):
    list_display = ('id', 'spu') + LimitRuleAdmin.list_display[1:]
    search_fields = ['spu__name', 'spu__gtin']
    autocomplete_fields = ['spu']


@admin.register(CategoryLimitRule)
class CategoryLimitRuleAdmin(LimitRuleAdmin):
    list_display = ('id', 'category') + LimitRuleAdmin.list_display[1:]
    search_fields = ['category__name']
    autocomplete_fields = ['category']
