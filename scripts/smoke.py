# scripts/smoke.py
"""
Smoke Test Script for optionkit.

Usage
-----
1. Query the built-in sample document:
    $ uv run python scripts/smoke.py

2. Query a local JSON file:
    $ uv run python scripts/smoke.py --file config.json --path services.0.port
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from optionkit import first, lift2, lookup_path, parse_int

# --------------------------------------------------------------------------- #
# Environment Setup
# --------------------------------------------------------------------------- #
env_path = Path(".env")
if env_path.exists():
    load_dotenv(env_path)
    print("✅ Loaded .env file")

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

# --------------------------------------------------------------------------- #
# Test Data
# --------------------------------------------------------------------------- #
DEFAULT_DOC = {
    "services": [
        {"name": "api", "port": 8080},
        {"name": "worker", "port": None},
    ],
    "limits": {"retries": "3"},
}


def main() -> None:
    """Execute the smoke test workflow."""
    parser = argparse.ArgumentParser(description="Run optionkit Smoke Test")
    parser.add_argument("--file", "-f", type=str, help="Path to a JSON document")
    parser.add_argument("--path", "-p", type=str, default="services.0.port")
    args = parser.parse_args()

    # 1. Prepare Input Data
    if args.file:
        input_path = Path(args.file)
        if not input_path.exists():
            print(f"❌ File not found: {input_path}")
            return
        print(f"\n📂 Using input file: {input_path}")
        data = json.loads(input_path.read_text(encoding="utf-8"))
    else:
        print("\n📝 Using default sample document (No --file provided)")
        data = DEFAULT_DOC

    # 2. Path lookup
    found = lookup_path(data, args.path)
    print(f"🔎 {args.path} -> {found!r} (str: {found})")

    # 3. Composition: ports of both services, summed if both are present
    ports = [lookup_path(data, f"services.{i}.port") for i in range(2)]
    total = lift2(ports[0], ports[1], lambda a, b: a + b)
    print(f"➕ sum of ports -> {total} (or_else: {total.or_else(-1)})")

    # 4. Parse a string setting
    retries = lookup_path(data, "limits.retries").flat_map(lambda s: parse_int(str(s)))
    print(f"🔁 retries -> {retries.or_else(0)}")

    # 5. Sequence search
    named = first(data.get("services", []), lambda s: s.get("name") == "worker")
    print(f"👷 worker -> {named.map(lambda s: s['name']).or_else('<none>')}")

    print("\n" + "=" * 60)
    print("✅ Smoke run finished")
    print("=" * 60)


if __name__ == "__main__":
    main()
