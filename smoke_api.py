#!/usr/bin/env python3
"""
Smoke script for a running API (python run_api.py in another shell).
"""

import os

import requests

BASE = os.environ.get("API_BASE", "http://localhost:8000/api/v1")

SAMPLES = [
    '=HYPERLINK("https://drive.google.com/open?id=1AbCdEfGhIjKlMnOpQrStUvWxYz012345"; "Foto")',
    "https://drive.google.com/file/d/1AbCdEfGhIjKlMnOpQrStUvWxYz012345/view?usp=sharing",
    "https://example.com/images/cover.png",
    "not a drive link",
]


def main() -> None:
    print(f"Testing {BASE}/drive/resolve ...")
    for ref in SAMPLES:
        try:
            response = requests.get(f"{BASE}/drive/resolve", params={"ref": ref, "size": "w500"}, timeout=5)
            if response.status_code == 200:
                data = response.json()
                status = "✅" if data["resolved"] else "➖"
                print(f"{status} {ref[:60]!r} -> {data['thumbnail_url']}")
            else:
                print(f"❌ Error: {response.status_code} - {response.text}")
        except requests.exceptions.RequestException as e:
            print(f"❌ Connection error: {e}")
            return

    print("\n" + "=" * 50 + "\n")

    print(f"Testing POST {BASE}/drive/resolve ...")
    try:
        response = requests.post(f"{BASE}/drive/resolve", json={"references": SAMPLES}, timeout=5)
        if response.status_code == 200:
            items = response.json()
            print(f"✅ Success: resolved {sum(1 for it in items if it['resolved'])}/{len(items)}")
        else:
            print(f"❌ Error: {response.status_code} - {response.text}")
    except requests.exceptions.RequestException as e:
        print(f"❌ Connection error: {e}")


if __name__ == "__main__":
    main()
