import re
import uuid
from typing import Any, Dict, List, Optional

from .core import ProductIn, _make_product, _update_fields
from .database import ProductStore
from .errors import ProductNotFound
from .models import Product

# Core logic behind the product endpoints. Handlers in main.py stay thin.

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 5
UNCATEGORIZED = "uncategorized"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_positive_int(raw: Optional[str], default: int) -> int:
    """Parse the leading integer of a query value.

    ``"2abc"`` gives 2 and ``"1.5"`` gives 1. Missing, non-numeric and
    values below 1 all fall back to ``default``.
    """
    if raw is None:
        return default
    m = _LEADING_INT.match(raw)
    if not m:
        return default
    value = int(m.group(1))
    return value if value >= 1 else default


def filter_products(products: List[Product], category: Optional[str] = None,
                    search: Optional[str] = None) -> List[Product]:
    out = products
    if category:
        out = [p for p in out if p.category == category]
    if search:
        term = search.lower()
        out = [p for p in out if term in p.name.lower()]
    return out


def paginate(products: List[Product], page: int, limit: int) -> List[Product]:
    start = (page - 1) * limit
    return products[start:start + limit]


# Product endpoints
def list_products_logic(store: ProductStore, category: Optional[str] = None,
                        search: Optional[str] = None, page: Optional[str] = None,
                        limit: Optional[str] = None) -> Dict[str, Any]:
    filtered = filter_products(store.list(), category, search)
    page_no = parse_positive_int(page, DEFAULT_PAGE)
    page_size = parse_positive_int(limit, DEFAULT_LIMIT)
    return {
        "total": len(filtered),
        "page": page_no,
        "limit": page_size,
        "products": [p.to_dict() for p in paginate(filtered, page_no, page_size)],
    }


def category_stats_logic(store: ProductStore) -> Dict[str, int]:
    stats: Dict[str, int] = {}
    for p in store.list():
        key = UNCATEGORIZED if p.category is None else str(p.category)
        stats[key] = stats.get(key, 0) + 1
    return stats


def get_product_logic(store: ProductStore, product_id: str) -> Dict[str, Any]:
    p = store.find_by_id(product_id)
    if p is None:
        raise ProductNotFound()
    return p.to_dict()


def create_product_logic(store: ProductStore, payload: ProductIn) -> Dict[str, Any]:
    pid = uuid.uuid4().hex
    return store.insert(_make_product(pid, payload)).to_dict()


def update_product_logic(store: ProductStore, product_id: str, payload: ProductIn) -> Dict[str, Any]:
    p = store.update(product_id, _update_fields(payload))
    if p is None:
        raise ProductNotFound()
    return p.to_dict()


def delete_product_logic(store: ProductStore, product_id: str) -> None:
    if not store.delete(product_id):
        raise ProductNotFound()
