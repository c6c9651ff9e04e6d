"""JSON-over-HTTP access to the storefront API for the client contexts."""

from __future__ import annotations

import os
from typing import Any

import requests


class ClientError(Exception):
    """An API call failed. Carries the HTTP status and the server's message."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


def extract_error_detail(response) -> str:
    """Extract a human-readable error message from an API error response.

    Handles the shapes the API produces:

    - Storefront errors: {"message": "..."}
    - Protean domain errors: {"error": "msg"} or {"error": {"field": ["msg"]}}
    - FastAPI validation (422): {"detail": [{"loc": [...], "msg": "..."}]}
    """
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if isinstance(body, str):
        return body
    if not isinstance(body, dict):
        return str(body)[:300]

    if "message" in body:
        return str(body["message"])

    if "detail" in body:
        detail = body["detail"]
        if isinstance(detail, list):
            parts = []
            for err in detail:
                loc = ".".join(str(p) for p in err.get("loc", []))
                msg = err.get("msg", str(err))
                parts.append(f"{loc}: {msg}" if loc else msg)
            return " | ".join(parts)
        return str(detail)

    if "error" in body:
        error = body["error"]
        if isinstance(error, dict):
            return " | ".join(f"{k}: {v}" for k, v in error.items())
        return str(error)

    return str(body)[:300]


class ApiSession:
    """Sends JSON requests to the API and unwraps the responses.

    `http` is anything with a requests-style `request(method, url, json=...)`
    method: a `requests.Session` by default, or FastAPI's TestClient.
    """

    def __init__(self, http=None, base_url: str | None = None):
        self.http = http if http is not None else requests.Session()
        if base_url is None:
            base_url = "" if http is not None else os.getenv("STOREFRONT_API_URL", "http://localhost:8000")
        self.base_url = base_url.rstrip("/")

    def request(self, method: str, path: str, json: Any = None) -> Any:
        response = self.http.request(method, f"{self.base_url}{path}", json=json)
        if response.status_code >= 400:
            raise ClientError(response.status_code, extract_error_detail(response))
        if not response.content:
            return None
        return response.json()

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def put(self, path: str, json: Any = None) -> Any:
        return self.request("PUT", path, json=json)

    def patch(self, path: str, json: Any = None) -> Any:
        return self.request("PATCH", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)
