"""Simulated search box: debounced queries, throttled scroll, cached lookups."""

from __future__ import annotations

import asyncio
import logging

from fnkit import Env, Trace, debounce, memoize, once, pick, pipe, throttle

logging.basicConfig(level=logging.INFO)

CATALOG = [
    {"id": 1, "title": "Paris travel guide", "price": 12, "stock": 3},
    {"id": 2, "title": "Parsing with Python", "price": 30, "stock": 0},
    {"id": 3, "title": "Pasta at home", "price": 18, "stock": 7},
]


@once
def connect() -> str:
    print("Connecting to catalog...")
    return "catalog-connection"


@memoize
def search(query: str) -> list[dict]:
    connect()
    print(f"Searching for {query!r}")
    return [item for item in CATALOG if item["title"].lower().startswith(query.lower())]


present = pipe(
    lambda items: [pick(item, ["title", "price"]) for item in items],
    lambda rows: "\n".join(f"  {row['title']} ({row['price']})" for row in rows) or "  (no results)",
)


async def main() -> None:
    trace = Trace()
    env = Env(trace=trace)

    show_results = debounce(lambda query: print(f"Results for {query!r}:\n{present(search(query))}"), 0.2, env=env)
    on_scroll = throttle(lambda offset: print(f"Loading more at offset {offset}"), 0.1, env=env)

    for partial_query in ["p", "pa", "par"]:
        show_results(partial_query)
        await asyncio.sleep(0.05)
    await asyncio.sleep(0.3)

    for offset in range(0, 100, 10):
        on_scroll(offset)
        await asyncio.sleep(0.03)

    show_results("par")
    await asyncio.sleep(0.3)

    print("\nTrace:")
    for event in trace.get_events():
        print(f"  {event.id:>3} {event.action} {event.info}")


if __name__ == "__main__":
    asyncio.run(main())
