"""
HTTP client for the Morse Translator API.
"""

import httpx

from morse.config import API_URL

BASE_URL = API_URL


# === Translation ===

def encode(text: str) -> dict:
    r = httpx.post(f"{BASE_URL}/encode", json={"text": text})
    r.raise_for_status()
    return r.json()


def decode(text: str) -> dict:
    r = httpx.post(f"{BASE_URL}/decode", json={"text": text})
    r.raise_for_status()
    return r.json()


# === Mappings ===

def list_mappings(limit: int | None = None) -> dict:
    params = {}
    if limit is not None:
        params["limit"] = limit
    r = httpx.get(f"{BASE_URL}/mappings", params=params)
    r.raise_for_status()
    return r.json()


def put_mapping(char: str, sequence: str) -> dict:
    r = httpx.post(f"{BASE_URL}/mappings", json={"char": char, "sequence": sequence})
    r.raise_for_status()
    return r.json()


def remove_mapping(char: str) -> dict:
    r = httpx.delete(f"{BASE_URL}/mappings", params={"char": char})
    r.raise_for_status()
    return r.json()


# === History ===

def list_history() -> list[dict]:
    r = httpx.get(f"{BASE_URL}/history")
    r.raise_for_status()
    return r.json()["history"]


def clear_history() -> dict:
    r = httpx.delete(f"{BASE_URL}/history")
    r.raise_for_status()
    return r.json()
