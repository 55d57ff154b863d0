#!/usr/bin/env python3
"""
Demo script for the café API.

Runs sample queries against the built-in dataset through the HTTP layer
and prints status codes and bodies.
"""

from fastapi.testclient import TestClient

from cafe_api.api.app import create_app
from cafe_api.repositories import InMemoryCafeRepository


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def show(client: TestClient, params: dict[str, str]) -> None:
    """Print one request and its response."""
    response = client.get("/cafe", params=params)
    print(f"  {params} -> {response.status_code} {response.text!r}")


def main() -> None:
    """Run all demos."""
    with TestClient(create_app(InMemoryCafeRepository.create())) as client:
        print_section("Listing and count")
        show(client, {"city": "moscow"})
        show(client, {"city": "moscow", "count": "2"})
        show(client, {"city": "moscow", "count": "0"})
        show(client, {"city": "tula", "count": "100"})

        print_section("Search")
        for search in ("кофе", "вилка", "фасоль"):
            show(client, {"city": "moscow", "search": search})

        print_section("Rejected queries")
        show(client, {})
        show(client, {"city": "omsk"})
        show(client, {"city": "tula", "count": "na"})


if __name__ == "__main__":
    main()
