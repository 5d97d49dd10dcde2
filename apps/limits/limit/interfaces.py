"""
Interfaces the limit checks use to reach the rest of the system.

The Django implementations live next to the data they read:
``apps.catalog.utils.catalog_lookup``, ``apps.orders.utils.purchase_history``
and ``apps.limits.utils.rule_store``.
"""
from typing import Any, Iterable, List, Optional, Protocol, runtime_checkable

from .time_range import TimeRange


@runtime_checkable
class CatalogItem(Protocol):
    """A SKU, SPU or category."""

    def get_id(self) -> Any: ...


class LimitRule(Protocol):
    id: Any
    type: str
    value: Optional[str]


class LineItem(Protocol):
    sku: Any
    quantity: int
    order: Any


class CatalogLookup(Protocol):
    def resolve_spu(self, sku) -> Optional[CatalogItem]: ...

    def resolve_categories(self, spu) -> List[CatalogItem]: ...

    def find_sku(self, value: str) -> Optional[CatalogItem]: ...

    def find_spu(self, value: str) -> Optional[CatalogItem]: ...


class HistoryAggregator(Protocol):
    def count(self, user, target, window: Optional[TimeRange] = None) -> int: ...


class RuleStore(Protocol):
    def find_sku_rules(self, sku_id) -> Iterable[LimitRule]: ...

    def find_spu_rules(self, spu_id) -> Iterable[LimitRule]: ...

    def find_category_rules(self, category_id) -> Iterable[LimitRule]: ...
