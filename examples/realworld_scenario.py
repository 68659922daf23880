"""End-to-end scenario demonstrating the microfetch API against a JSON service."""

from __future__ import annotations

import asyncio
import os
from typing import Any

from microfetch import MicroFetchClient, ResponseOutcome

BASE_URL = os.getenv("MICROFETCH_DEMO_URL", "https://httpbin.org")
JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


def log_section(title: str) -> None:
    print("\n" + "=" * 80)
    print(title)
    print("=" * 80)


def report(label: str, outcome: ResponseOutcome[Any]) -> None:
    if outcome.ok:
        print(f"  {label}: status={outcome.status} data={outcome.data!r}"[:300])
    else:
        print(f"  {label}: {outcome.error_kind} error: {outcome.error}")


def require_mapping(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"expected an object, got {type(data).__name__}")
    return data


async def main() -> None:
    client = MicroFetchClient(log_level=os.getenv("MICROFETCH_LOG_LEVEL", "info"))  # type: ignore[arg-type]

    log_section("Verbs")
    report("GET", await client.get(f"{BASE_URL}/get"))
    report("POST", await client.post(f"{BASE_URL}/post", JSON_HEADERS, {"name": "widget"}))
    report("PUT", await client.put(f"{BASE_URL}/put", JSON_HEADERS, {"name": "gadget"}))
    report("DELETE", await client.delete(f"{BASE_URL}/delete"))

    log_section("Concurrent calls on one client")
    outcomes = await asyncio.gather(
        *(client.post(f"{BASE_URL}/anything/{idx}", {"X-Call": str(idx)}, {"n": idx}) for idx in range(3))
    )
    for idx, outcome in enumerate(outcomes):
        report(f"call {idx}", outcome)

    log_section("Failures arrive as outcomes")
    report("malformed", await client.get("http://bad host:port/"))
    report("not json", await client.get(f"{BASE_URL}/html"))
    report("validated", await client.get(f"{BASE_URL}/json", validate=require_mapping))
    unreachable = await client.get("http://127.0.0.1:9/")
    report("refused", unreachable)


if __name__ == "__main__":
    asyncio.run(main())
