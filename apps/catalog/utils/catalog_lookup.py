# catalog/utils/catalog_lookup.py
"""ORM-backed catalog lookups used by the purchase limit checks."""
import logging
from typing import Optional
from django.db.models import Q
# Local imports
from apps.catalog.models import Sku, Spu

logger = logging.getLogger(__name__)


def _id_or_gtin(value: str) -> Q:
    value = value.strip()
    query = Q(gtin=value)
    if value.isdigit():
        query |= Q(pk=int(value))
    return query


class DjangoCatalogLookup:
    """Resolve SKUs, SPUs and categories from the catalog tables."""

    def resolve_spu(self, sku) -> Optional[Spu]:
        if sku is None:
            return None
        return sku.get_spu()

    def resolve_categories(self, spu) -> list:
        if spu is None:
            return []
        return spu.get_categories()

    def find_sku(self, value: str) -> Optional[Sku]:
        """Find a valid SKU by primary key or GTIN."""
        if not value or not value.strip():
            return None
        sku = (
            Sku.objects.filter(valid=True)
            .filter(_id_or_gtin(value))
            .select_related("spu")
            .order_by("id")
            .first()
        )
        if sku is None:
            logger.debug("No valid SKU matches %r", value)
        return sku

    def find_spu(self, value: str) -> Optional[Spu]:
        """Find a valid SPU by primary key or GTIN."""
        if not value or not value.strip():
            return None
        spu = (
            Spu.objects.filter(valid=True)
            .filter(_id_or_gtin(value))
            .order_by("id")
            .first()
        )
        if spu is None:
            logger.debug("No valid SPU matches %r", value)
        return spu
