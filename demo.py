#!/usr/bin/env python
# Scripted walkthrough against a running server (product-api on port 3000).
import os

from rich import print

from product_sdk.client import ProductClient, ProductClientError, DEFAULT_BASE_URL


def main():
    c = ProductClient(
        base_url=os.getenv("PRODUCT_API_URL", DEFAULT_BASE_URL),
        api_key=os.getenv("API_KEY", "my-secret-key"),
    )

    print(c.welcome())

    # -----------------------------
    # Seed data
    # -----------------------------
    print("\nListing seeded products...")
    print(c.list_products())

    print("\nCategory stats...")
    print(c.stats())

    # -----------------------------
    # Create
    # -----------------------------
    print("\nCreating products...")
    kettle = c.create_product("Electric Kettle", 35, description="1.7L, auto shut-off", category="kitchen", in_stock=True)
    headphones = c.create_product("Headphones", 199.99, category="electronics")
    print(kettle)
    print(headphones)

    # -----------------------------
    # Filter, search, paginate
    # -----------------------------
    print("\nKitchen products...")
    print(c.list_products(category="kitchen"))

    print("\nSearching for 'PHONE'...")
    print(c.list_products(search="PHONE"))

    print("\nPage 2 with 2 per page...")
    print(c.list_products(page=2, limit=2))

    # -----------------------------
    # Update
    # -----------------------------
    print("\nMarking the kettle out of stock (price 0 is ignored)...")
    print(c.update_product(kettle["id"], kettle["name"], 0, in_stock=False))

    # -----------------------------
    # Delete
    # -----------------------------
    print("\nDeleting the headphones...")
    c.delete_product(headphones["id"])
    try:
        c.get_product(headphones["id"])
    except ProductClientError as e:
        print(f"[yellow]{e}[/yellow]")

    print("\nFinal stats...")
    print(c.stats())


if __name__ == "__main__":
    main()
