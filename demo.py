#!/usr/bin/env python
import os

import requests

from sdk.productstore import ProductClient


def main():
    c = ProductClient(
        base_url=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"),
        api_key=os.getenv("API_KEY"),
    )

    print(c.hello())

    # -----------------------------
    # Seed catalogue
    # -----------------------------
    print("\nListing seeded products...")
    print(c.list_products())

    # -----------------------------
    # Create
    # -----------------------------
    print("\nCreating a desk...")
    desk = c.create_product("Desk", 150, category="furniture", in_stock=True)
    print(desk)

    print("\nFetching it back...")
    print(c.get_product(desk["id"]))

    # -----------------------------
    # Replace (omitted fields are cleared)
    # -----------------------------
    print("\nReplacing the desk without a category...")
    print(c.replace_product(desk["id"], "Standing Desk", 320))

    # -----------------------------
    # Delete twice: second time is a 404
    # -----------------------------
    print("\nDeleting the desk...")
    print(c.delete_product(desk["id"]))
    try:
        c.delete_product(desk["id"])
    except requests.HTTPError as e:
        print(f"Second delete: {e.response.status_code} {e.response.json()}")

    print("\nFinal catalogue...")
    print(c.list_products())


if __name__ == "__main__":
    main()
