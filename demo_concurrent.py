import asyncio
import os

from sdk.productstore import ProductClient


async def create_one(client, n):
    r = await client.create_product_async(f"Widget {n}", 10 + n, category="widgets", in_stock=n % 2 == 0)
    if r.status_code == 201:
        print(f"✅ created Widget {n} -> {r.json()['id']}")
        return r.json()["id"]
    print(f"❌ Widget {n} failed: {r.status_code} {r.text}")
    return None


async def main():
    c = ProductClient(
        base_url=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"),
        api_key=os.getenv("API_KEY"),
    )
    before = len(c.list_products())

    print("\n⚡ Creating 20 products concurrently...")
    ids = await asyncio.gather(*(create_one(c, n) for n in range(20)))
    created = [i for i in ids if i]

    after = c.list_products()
    print(f"\n📦 {before} -> {len(after)} products, {len(set(created))} unique new ids")
    assert len(set(created)) == len(created)
    assert len(after) == before + len(created)

    for pid in created:
        c.delete_product(pid)


if __name__ == "__main__":
    asyncio.run(main())
