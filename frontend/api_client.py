"""Thin requests wrapper around the places backend."""
import os

import requests

BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")
TIMEOUT = 10


def _request(method: str, path: str, **kwargs) -> dict:
    try:
        response = requests.request(method, f"{BACKEND_URL}{path}", timeout=TIMEOUT, **kwargs)
    except requests.exceptions.ConnectionError:
        return {"error": "Cannot connect to backend. Make sure the backend is running on port 8000."}
    except requests.exceptions.Timeout:
        return {"error": "Request timed out. Please try again."}
    except requests.exceptions.RequestException as e:
        return {"error": f"An error occurred: {str(e)}"}

    try:
        data = response.json()
    except ValueError:
        data = {}

    if not response.ok:
        return {"error": data.get("error") or f"Request failed with status {response.status_code}"}
    return data


def fetch_places(category: str | None = None, search: str | None = None) -> dict:
    params = {}
    if category:
        params["category"] = category
    if search:
        params["search"] = search
    return _request("GET", "/places", params=params)


def fetch_categories() -> dict:
    return _request("GET", "/categories")


def create_place(payload: dict) -> dict:
    return _request("POST", "/places", json=payload)


def delete_place(place_id: str) -> dict:
    return _request("DELETE", f"/places/{place_id}")


def check_backend_health() -> bool:
    try:
        response = requests.get(f"{BACKEND_URL}/health", timeout=2)
        return response.status_code == 200
    except requests.exceptions.RequestException:
        return False
