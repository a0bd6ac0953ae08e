"""ProductRepository: the catalog store behind every product operation.

Only the provider-agnostic DAO query API is used here, so the memory,
SQLite and PostgreSQL providers all satisfy it.
"""

import math
from dataclasses import dataclass, field

from protean.exceptions import ObjectNotFoundError, ValidationError

from catalog.domain import catalog
from catalog.product.product import Product

# Accepted sort keys; camelCase aliases map to the snake_case attribute.
SORTABLE_FIELDS = {
    "id": "id",
    "name": "name",
    "description": "description",
    "price": "price",
    "quantity": "quantity",
    "category": "category",
    "created_at": "created_at",
    "createdAt": "created_at",
    "updated_at": "updated_at",
    "updatedAt": "updated_at",
}


@dataclass(frozen=True)
class ProductPage:
    """One window of a sorted product listing. ``page`` is zero-based."""

    items: list = field(default_factory=list)
    page: int = 0
    size: int = 10
    total: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size else 0

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 0


def ordering_for(sort_field: str, sort_direction: str | None) -> str:
    """Protean ordering expression for a sort key and direction.

    Direction is case-insensitive; anything other than ``desc`` sorts
    ascending.
    """
    attribute = SORTABLE_FIELDS.get(sort_field)
    if attribute is None:
        allowed = ", ".join(sorted(set(SORTABLE_FIELDS.values())))
        raise ValidationError({"sort_by": [f"Cannot sort by '{sort_field}'; expected one of: {allowed}"]})

    descending = (sort_direction or "").strip().lower() == "desc"
    return f"-{attribute}" if descending else attribute


@catalog.repository(part_of=Product)
class ProductRepository:
    """Lookup, search, paging and counting over the catalog."""

    # --- Lookups ---

    def find_by_exact_name(self, name: str) -> Product | None:
        """Case-sensitive exact match on name."""
        return self._dao.query.filter(name=name).all().first

    def find_by_id(self, product_id: str) -> Product | None:
        try:
            return self.get(product_id)
        except ObjectNotFoundError:
            return None

    def exists_by_id(self, product_id: str) -> bool:
        return self.find_by_id(product_id) is not None

    def delete_by_id(self, product_id: str) -> bool:
        """Remove a product. Returns False when there was nothing to remove."""
        product = self.find_by_id(product_id)
        if product is None:
            return False
        self._dao.delete(product)
        return True

    # --- Listings ---

    def find_all(self) -> list[Product]:
        return self._everything(self._dao.query.order_by("name"))

    def find_page(self, page: int, size: int, sort_field: str = "id", sort_direction: str = "asc") -> ProductPage:
        return self._page(self._dao.query, page, size, sort_field, sort_direction)

    def search_by_name(self, fragment: str) -> list[Product]:
        """Case-insensitive substring match on name."""
        return self._everything(self._dao.query.filter(name__icontains=fragment).order_by("name"))

    def search_page(
        self,
        fragment: str,
        page: int,
        size: int,
        sort_field: str = "id",
        sort_direction: str = "asc",
    ) -> ProductPage:
        query = self._dao.query.filter(name__icontains=fragment)
        return self._page(query, page, size, sort_field, sort_direction)

    # --- Counts ---

    def count_all(self) -> int:
        return self._dao.query.all().total

    def count_quantity_less_than(self, threshold: int) -> int:
        return self._dao.query.filter(quantity__lt=threshold).all().total

    def count_out_of_stock(self) -> int:
        return self._dao.query.filter(quantity=0).all().total

    # --- Helpers ---

    @staticmethod
    def _everything(query) -> list[Product]:
        # Queries are limited by default; size the limit to the match count.
        total = query.all().total
        if not total:
            return []
        return query.limit(total).all().items

    @staticmethod
    def _page(query, page, size, sort_field, sort_direction) -> ProductPage:
        if page < 0:
            raise ValidationError({"page": ["Page index must not be negative"]})
        if size < 1:
            raise ValidationError({"size": ["Page size must be at least 1"]})

        results = query.order_by(ordering_for(sort_field, sort_direction)).offset(page * size).limit(size).all()
        return ProductPage(items=list(results.items), page=page, size=size, total=results.total)
