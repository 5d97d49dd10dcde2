"""Models for the product catalog: categories, SPUs and SKUs."""
import logging
# Django imports
from django.db import models

logger = logging.getLogger(__name__)


class Category(models.Model):
    """Model representing a product category."""
    name = models.CharField(max_length=100)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def get_id(self):
        return self.pk

    def __str__(self) -> str:
        return str(self.name)

    class Meta:
        """Meta options for Category."""
        verbose_name_plural = "Categories"
        ordering = ["id"]


class Spu(models.Model):
    """
    Standard product unit: the product a shopper recognises,
    independent of its stocked variants.
    """
    name = models.CharField(max_length=200)
    gtin = models.CharField(
        max_length=64,
        blank=True,
        db_index=True,
        help_text="Barcode / external code used to reference the product.",
    )
    valid = models.BooleanField(default=True)
    categories = models.ManyToManyField(
        'catalog.Category', related_name='spus', blank=True
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def get_id(self):
        return self.pk

    def get_spu(self):
        return self

    def get_categories(self):
        """Categories this product is listed under."""
        if self.pk is None:
            return []
        return list(self.categories.all())

    def __str__(self) -> str:
        return str(self.name)

    class Meta:
        verbose_name = "SPU"
        verbose_name_plural = "SPUs"
        ordering = ["id"]


class Sku(models.Model):
    """Stock keeping unit: a specific, purchasable variant of an SPU."""
    spu = models.ForeignKey(
        'catalog.Spu',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='skus',
    )
    name = models.CharField(max_length=200)
    gtin = models.CharField(max_length=64, blank=True, db_index=True)
    price = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    valid = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def get_id(self):
        return self.pk

    def get_spu(self):
        return self.spu

    def get_categories(self):
        spu = self.get_spu()
        return spu.get_categories() if spu else []

    def __str__(self) -> str:
        return str(self.name)

    class Meta:
        verbose_name = "SKU"
        verbose_name_plural = "SKUs"
        ordering = ["id"]
