# sdk/productstore.py
import os
from typing import Any, Dict, Optional

import httpx
import requests
from rich import print


class ProductClient:
    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        api_key: Optional[str] = None,
        timeout: int = 10,
        session: Optional[Any] = None,
    ):
        self.base_url = base_url.rstrip("/")
        # anything with a requests-style get/post/put/delete works here
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.api_key = api_key
        if api_key:
            self.session.headers.update({"x-api-key": api_key})

    @staticmethod
    def _payload(
        name: str,
        price: float,
        description: Optional[str] = None,
        category: Optional[str] = None,
        in_stock: bool = False,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"name": name, "price": price, "inStock": in_stock}
        if description is not None:
            payload["description"] = description
        if category is not None:
            payload["category"] = category
        return payload

    def hello(self) -> str:
        r = self.session.get(f"{self.base_url}/", timeout=self.timeout)
        r.raise_for_status()
        return r.text

    def list_products(self):
        r = self.session.get(f"{self.base_url}/api/products", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: str):
        r = self.session.get(f"{self.base_url}/api/products/{product_id}", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def create_product(self, name: str, price: float, description: Optional[str] = None,
                       category: Optional[str] = None, in_stock: bool = False):
        payload = self._payload(name, price, description, category, in_stock)
        r = self.session.post(f"{self.base_url}/api/products", json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Full replace: fields left out come back empty
    def replace_product(self, product_id: str, name: str, price: float, description: Optional[str] = None,
                        category: Optional[str] = None, in_stock: bool = False):
        payload = self._payload(name, price, description, category, in_stock)
        r = self.session.put(f"{self.base_url}/api/products/{product_id}", json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def delete_product(self, product_id: str) -> bool:
        r = self.session.delete(f"{self.base_url}/api/products/{product_id}", timeout=self.timeout)
        r.raise_for_status()
        return r.status_code == 204

    # Async create (used by the concurrency demo)
    async def create_product_async(self, name: str, price: float, description: Optional[str] = None,
                                   category: Optional[str] = None, in_stock: bool = False):
        headers = {"x-api-key": self.api_key} if self.api_key else {}
        payload = self._payload(name, price, description, category, in_stock)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            r = await client.post(f"{self.base_url}/api/products", json=payload, headers=headers)
            # do not raise_for_status: callers inspect 400/401 themselves
            return r


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Product API CLI")
    parser.add_argument("--base-url", default=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"))
    parser.add_argument("--api-key", default=os.getenv("API_KEY"))
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List all products")

    gp = subparsers.add_parser("get", help="Get a product by its ID")
    gp.add_argument("--id", required=True, help="ID of the product")

    for cmd, help_text in (("create", "Create a new product"), ("replace", "Replace an existing product")):
        sp = subparsers.add_parser(cmd, help=help_text)
        if cmd == "replace":
            sp.add_argument("--id", required=True, help="ID of the product")
        sp.add_argument("--name", required=True, help="Product name")
        sp.add_argument("--price", type=float, required=True, help="Price")
        sp.add_argument("--description", help="Description")
        sp.add_argument("--category", help="Category")
        sp.add_argument("--in-stock", action="store_true", help="Mark as in stock")

    dp = subparsers.add_parser("delete", help="Delete a product")
    dp.add_argument("--id", required=True, help="ID of the product")

    args = parser.parse_args()
    c = ProductClient(base_url=args.base_url, api_key=args.api_key)

    if args.command == "list":
        print(c.list_products())
    elif args.command == "get":
        print(c.get_product(args.id))
    elif args.command == "create":
        print(c.create_product(args.name, args.price, args.description, args.category, args.in_stock))
    elif args.command == "replace":
        print(c.replace_product(args.id, args.name, args.price, args.description, args.category, args.in_stock))
    elif args.command == "delete":
        print(c.delete_product(args.id))
