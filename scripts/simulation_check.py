#!/usr/bin/env python3
"""
Life-direction simulation verification script.

1. Run the engine in-process on a sample habit profile.
2. Optionally POST the same profile to a running API (set API_BASE).
3. Print both results so they can be compared by eye.
"""

from __future__ import annotations

import asyncio
import json
import os
from typing import Any, Dict

import httpx

from lifepath.apps.engine.simulation.engine import simulate_future
from lifepath.libs.schemas import HabitInput

API_BASE = os.getenv("API_BASE", "").rstrip("/")
PROFILE: Dict[str, Any] = json.loads(
    os.getenv(
        "HABIT_PROFILE",
        json.dumps(
            {
                "age": 25,
                "phoneHours": 6,
                "sleepHours": 5,
                "productiveHours": 2,
                "activityMinutes": 10,
                "stressLevel": 9,
                "mood": "worried",
            }
        ),
    )
)


def banner(label: str) -> None:
    print("\n" + "=" * 80)
    print(label)
    print("=" * 80)


def run_local(profile: Dict[str, Any]) -> Dict[str, Any]:
    banner("STEP 1 → simulate_future (in-process)")
    result = simulate_future(HabitInput.model_validate(profile)).model_dump(by_alias=True)
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return result


async def run_remote(profile: Dict[str, Any]) -> Dict[str, Any]:
    banner(f"STEP 2 → POST {API_BASE}/api/analyze")
    async with httpx.AsyncClient(timeout=float(os.getenv("HTTP_TIMEOUT", "10"))) as client:
        response = await client.post(f"{API_BASE}/api/analyze", json=profile)
    print(f"/api/analyze status: {response.status_code}")
    payload = response.json()
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    if response.status_code != 200:
        raise SystemExit("Remote analysis failed.")
    return payload


async def main() -> None:
    local = run_local(PROFILE)
    if not API_BASE:
        print("\nAPI_BASE not set; skipping remote check.")
        return
    remote = await run_remote(PROFILE)
    banner("STEP 3 → compare")
    same = local["currentPath"]["scores"] == remote["currentPath"]["scores"]
    print("current path scores match" if same else "current path scores DIFFER")


if __name__ == "__main__":
    asyncio.run(main())
