# product_sdk/client.py
import requests
import httpx
from typing import Any, Dict, Iterator, Optional
from rich import print

DEFAULT_BASE_URL = "http://127.0.0.1:3000"
API_KEY_HEADER = "x-api-key"


class ProductClientError(Exception):
    """Non-2xx answer from the product API."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


def _error_message(resp) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text or "unknown error"
    if isinstance(body, dict) and "error" in body:
        return str(body["error"])
    return str(body)


def _check(resp):
    if resp.status_code >= 400:
        raise ProductClientError(resp.status_code, _error_message(resp))
    return resp


def _product_payload(name: Optional[str] = None, price: Optional[float] = None,
                     description: Optional[str] = None, category: Optional[str] = None,
                     in_stock: Optional[bool] = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"name": name, "price": price}
    if description is not None:
        payload["description"] = description
    if category is not None:
        payload["category"] = category
    if in_stock is not None:
        payload["inStock"] = in_stock
    return payload


class ProductClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, api_key: str = "my-secret-key", timeout: int = 10):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = requests.Session()
        self.timeout = timeout
        self.session.headers.update({API_KEY_HEADER: api_key})

    def welcome(self) -> str:
        r = self.session.get(f"{self.base_url}/", timeout=self.timeout)
        return _check(r).text

    # Products
    def list_products(self, category: Optional[str] = None, search: Optional[str] = None,
                      page: Optional[int] = None, limit: Optional[int] = None) -> Dict[str, Any]:
        params = {}
        if category:
            params["category"] = category
        if search:
            params["search"] = search
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        r = self.session.get(f"{self.base_url}/products", params=params, timeout=self.timeout)
        return _check(r).json()

    def iter_products(self, category: Optional[str] = None, search: Optional[str] = None,
                      limit: int = 5) -> Iterator[Dict[str, Any]]:
        """Yield every matching product, fetching one page at a time."""
        page = 1
        seen = 0
        while True:
            body = self.list_products(category=category, search=search, page=page, limit=limit)
            products = body["products"]
            yield from products
            seen += len(products)
            if not products or seen >= body["total"]:
                return
            page += 1

    def get_product(self, product_id: str) -> Dict[str, Any]:
        r = self.session.get(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        return _check(r).json()

    def stats(self) -> Dict[str, int]:
        r = self.session.get(f"{self.base_url}/products/stats", timeout=self.timeout)
        return _check(r).json()

    def create_product(self, name: str, price: float, description: Optional[str] = None,
                       category: Optional[str] = None, in_stock: Optional[bool] = None) -> Dict[str, Any]:
        payload = _product_payload(name, price, description, category, in_stock)
        r = self.session.post(f"{self.base_url}/products", json=payload, timeout=self.timeout)
        return _check(r).json()

    def update_product(self, product_id: str, name: str, price: float, description: Optional[str] = None,
                       category: Optional[str] = None, in_stock: Optional[bool] = None) -> Dict[str, Any]:
        # name and price are always required by the server; falsy values leave the stored ones unchanged
        payload = _product_payload(name, price, description, category, in_stock)
        r = self.session.put(f"{self.base_url}/products/{product_id}", json=payload, timeout=self.timeout)
        return _check(r).json()

    def delete_product(self, product_id: str) -> None:
        r = self.session.delete(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        _check(r)

    # Async create (for concurrent callers)
    async def create_product_async(self, name: str, price: float, description: Optional[str] = None,
                                   category: Optional[str] = None, in_stock: Optional[bool] = None,
                                   transport: Optional[httpx.AsyncBaseTransport] = None) -> Dict[str, Any]:
        payload = _product_payload(name, price, description, category, in_stock)
        async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout,
                                     headers={API_KEY_HEADER: self.api_key}, transport=transport) as client:
            r = await client.post("/products", json=payload)
            return _check(r).json()


def _bool_arg(value: str) -> bool:
    return value.lower() in {"1", "true", "yes", "y"}


if __name__ == "__main__":
    import argparse
    import os

    parser = argparse.ArgumentParser(description="Product API client")
    parser.add_argument("--base-url", default=os.getenv("PRODUCT_API_URL", DEFAULT_BASE_URL))
    parser.add_argument("--api-key", default=os.getenv("API_KEY", "my-secret-key"))
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list-products", help="List products")
    lp.add_argument("--category", help="Exact category filter")
    lp.add_argument("--search", help="Case-insensitive name search")
    lp.add_argument("--page", type=int)
    lp.add_argument("--limit", type=int)

    subparsers.add_parser("stats", help="Product count per category")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True)

    for cmd in ("create-product", "update-product"):
        sp = subparsers.add_parser(cmd, help=cmd.replace("-", " ").capitalize())
        if cmd == "update-product":
            sp.add_argument("--product-id", required=True)
        sp.add_argument("--name", required=True)
        sp.add_argument("--price", type=float, required=True)
        sp.add_argument("--description")
        sp.add_argument("--category")
        sp.add_argument("--in-stock", type=_bool_arg)

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", required=True)

    args = parser.parse_args()
    c = ProductClient(base_url=args.base_url, api_key=args.api_key)

    try:
        if args.command == "list-products":
            print(c.list_products(args.category, args.search, args.page, args.limit))
        elif args.command == "stats":
            print(c.stats())
        elif args.command == "get-product":
            print(c.get_product(args.product_id))
        elif args.command == "create-product":
            print(c.create_product(args.name, args.price, args.description, args.category, args.in_stock))
        elif args.command == "update-product":
            print(c.update_product(args.product_id, args.name, args.price, args.description,
                                   args.category, args.in_stock))
        elif args.command == "delete-product":
            c.delete_product(args.product_id)
            print(f"[green]Deleted {args.product_id}[/green]")
    except ProductClientError as e:
        print(f"[red]{e}[/red]")
        raise SystemExit(1)
