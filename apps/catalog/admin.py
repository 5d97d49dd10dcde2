"""Admin configuration for the catalog app."""
from django.contrib import admin
from .models import Category, Spu, Sku


class SkuInline(admin.TabularInline):
    """Inline admin for SKUs within an SPU."""
    model = Sku
    extra = 1
    fields = ('name', 'gtin', 'price', 'valid')


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ('name',)
    search_fields = ['name']


@admin.register(Spu)
class SpuAdmin(admin.ModelAdmin):
    """Admin for SPUs with their SKUs inline."""
    list_display = ('name', 'gtin', 'valid')
    list_filter = ('valid', 'categories')
    search_fields = ['name', 'gtin']
    filter_horizontal = ('categories',)
    inlines = [SkuInline]


@admin.register(Sku)
class SkuAdmin(admin.ModelAdmin):
    list_display = ('name', 'spu', 'gtin', 'price', 'valid')
    list_filter = ('valid',)
    search_fields = ['name', 'gtin', 'spu__name']
