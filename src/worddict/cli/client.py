"""
HTTP client for the worddict API.
"""

from urllib.parse import quote

import httpx

from worddict.config import API_URL

BASE_URL = API_URL


# === Entries ===

def list_entries() -> dict:
    r = httpx.get(f"{BASE_URL}/dictionary")
    r.raise_for_status()
    return r.json()


def get_entry(left: str) -> dict:
    r = httpx.get(f"{BASE_URL}/dictionary/entries/{quote(left, safe='')}")
    r.raise_for_status()
    return r.json()


def add_entry(left: str, right: str) -> dict:
    r = httpx.post(f"{BASE_URL}/dictionary/entries", json={"left": left, "right": right})
    r.raise_for_status()
    return r.json()


def delete_entry(left: str) -> dict:
    r = httpx.delete(f"{BASE_URL}/dictionary/entries/{quote(left, safe='')}")
    r.raise_for_status()
    return r.json()


def lookup(term: str, side: str = "left", exact: bool = False, start: int = 0) -> list[dict]:
    params = {"term": term, "side": side, "exact": exact, "start": start}
    r = httpx.get(f"{BASE_URL}/dictionary/lookup", params=params)
    r.raise_for_status()
    return r.json()["entries"]


def reload() -> dict:
    r = httpx.post(f"{BASE_URL}/dictionary/reload")
    r.raise_for_status()
    return r.json()


# === Suggestions ===

def suggestions(name: str) -> dict[str, list[str]]:
    r = httpx.get(f"{BASE_URL}/suggestions", params={"name": name})
    r.raise_for_status()
    return r.json()
