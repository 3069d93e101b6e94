import logging
import threading
from typing import Any, Dict, Iterable, List, Optional

from .models import Product

# In-memory product store. Nothing here survives a restart.

log = logging.getLogger(__name__)

SEED_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]


def seed_products() -> List[Product]:
    return [Product.model_validate(p) for p in SEED_PRODUCTS]


class ProductStore:
    """Owns the product list. Every read and write holds ``_lock``."""

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: List[Product] = list(products or [])
        self._lock = threading.Lock()

    def list(self) -> List[Product]:
        with self._lock:
            return list(self._products)

    def count(self) -> int:
        with self._lock:
            return len(self._products)

    def find_by_id(self, product_id: str) -> Optional[Product]:
        with self._lock:
            return self._find(product_id)

    def insert(self, product: Product) -> Product:
        with self._lock:
            self._products.append(product)
        log.info("Inserted product %s", product.id)
        return product

    def update(self, product_id: str, changes: Dict[str, Any]) -> Optional[Product]:
        with self._lock:
            for i, p in enumerate(self._products):
                if p.id == product_id:
                    updated = p.model_copy(update=changes)
                    self._products[i] = updated
                    break
            else:
                return None
        log.info("Updated product %s fields=%s", product_id, sorted(changes))
        return updated

    def delete(self, product_id: str) -> bool:
        with self._lock:
            before = len(self._products)
            self._products = [p for p in self._products if p.id != product_id]
            removed = len(self._products) < before
        if removed:
            log.info("Deleted product %s", product_id)
        return removed

    def reset(self, products: Optional[Iterable[Product]] = None) -> None:
        with self._lock:
            self._products = list(products or [])

    def _find(self, product_id: str) -> Optional[Product]:
        for p in self._products:
            if p.id == product_id:
                return p
        return None
