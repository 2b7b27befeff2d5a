import asyncio
import logging
import uuid
from typing import Any, Dict, Iterable, List, Optional

from .core import _make_product, to_product_in, validate_product
from .errors import NotFound
from .models import Product

logger = logging.getLogger("product_api.store")

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


class ProductStore:
    """Ordered in-memory product collection.

    Every read and write happens under one ``asyncio.Lock``.  Records are
    never mutated in place (replace swaps in a new ``Product``), so the
    objects handed out stay consistent after the lock is released.
    """

    def __init__(self, seed: Optional[Iterable[Dict[str, Any]]] = None) -> None:
        self._lock = asyncio.Lock()
        records = SEED_PRODUCTS if seed is None else seed
        self._products: List[Product] = [Product(**r) for r in records]

    def _index_of(self, product_id: str) -> int:
        for idx, p in enumerate(self._products):
            if p.id == product_id:
                return idx
        raise NotFound()

    async def list(self) -> List[Product]:
        async with self._lock:
            return list(self._products)

    async def get(self, product_id: str) -> Product:
        async with self._lock:
            return self._products[self._index_of(product_id)]

    async def create(self, body: Any) -> Product:
        payload = to_product_in(body)
        validate_product(payload)
        async with self._lock:
            product = _make_product(str(uuid.uuid4()), payload)
            self._products.append(product)
        logger.debug("created product %s", product.id)
        return product

    async def replace(self, product_id: str, body: Any) -> Product:
        async with self._lock:
            # a missing id wins over a bad payload
            idx = self._index_of(product_id)
            payload = to_product_in(body)
            validate_product(payload)
            product = _make_product(self._products[idx].id, payload)
            self._products[idx] = product
        logger.debug("replaced product %s", product_id)
        return product

    async def delete(self, product_id: str) -> None:
        async with self._lock:
            del self._products[self._index_of(product_id)]
        logger.debug("deleted product %s", product_id)

    async def count(self) -> int:
        async with self._lock:
            return len(self._products)
