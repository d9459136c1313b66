#!/usr/bin/env python3
"""
Seed script: creates the demo user and two demo items through the API.
Idempotent for the user (409 -> login with the same credentials).
Run with the API up:
  python scripts/seed_data.py
  python scripts/seed_data.py --base-url http://localhost:8080
"""

import argparse
import sys

import httpx

API_BASE = "http://localhost:8080"

DEMO_USER = {"name": "Demo", "email": "demo@reuse.com", "password": "demo123A!"}

DEMO_ITEMS = [
    {"title": "Livro de Java", "description": "Novo", "type": "doacao"},
    {"title": "Teclado mecânico", "description": "Cherry MX", "type": "troca"},
]


def get_token(client: httpx.Client) -> str:
    """Register the demo user, or log in if it already exists."""
    r = client.post("/auth/register", json=DEMO_USER)
    if r.status_code == 409:
        r = client.post(
            "/auth/login",
            json={"email": DEMO_USER["email"], "password": DEMO_USER["password"]},
        )
    if r.status_code not in (200, 201):
        print(f"Auth failed: {r.status_code} {r.text[:200]}")
        sys.exit(1)
    body = r.json()
    print(f"Demo user: id={body['user']['id']} email={body['user']['email']}")
    return body["token"]


def main():
    ap = argparse.ArgumentParser(description="Seed demo user and items via API")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        token = get_token(client)
        headers = {"Authorization": f"Bearer {token}"}

        existing = {it["title"] for it in client.get("/items").json()}
        created = 0
        for item in DEMO_ITEMS:
            if item["title"] in existing:
                continue
            r = client.post("/items", headers=headers, json=item)
            if r.status_code != 201:
                print(f"Item {item['title']!r}: {r.status_code} {r.text[:80]}")
                continue
            created += 1

    print(f"Seed OK: {created} item(s) created")


if __name__ == "__main__":
    main()
