"""Quick debug script to exercise a running tip service."""
import asyncio
import json
import sys
from pathlib import Path

import httpx

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import config


async def prepare_tip(amount: str):
    """Fetch the action descriptor, then request a transfer call for ``amount``."""
    base_url = f"http://localhost:{config.port}"
    print(f"🔍 Testing tip flow against {base_url}\n")

    async with httpx.AsyncClient(base_url=base_url) as http:
        response = await http.get("/api/tip", headers={"Accept": "application/json"})
        response.raise_for_status()
        descriptor = response.json()

        print(f"Title: {descriptor['title']}")
        for action in descriptor["links"]["actions"]:
            print(f"  - {action['label']}: {action['href']}")

        print(f"\n📡 Requesting transfer call for {amount} {config.token_symbol}...\n")
        response = await http.post("/api/tip", params={"amount": amount})

        if response.status_code == 200:
            call = json.loads(response.json()["transaction"])
            print("✅ Transfer call prepared:")
            print(json.dumps(call, indent=2))
        else:
            print(f"❌ Request failed: {response.status_code}")
            print(f"Response: {response.text}")


if __name__ == "__main__":
    asyncio.run(prepare_tip(sys.argv[1] if len(sys.argv) > 1 else "10"))
