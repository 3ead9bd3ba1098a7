# client/api.py
import json
from typing import Any, Dict, List, Optional

import httpx


class ApiError(Exception):
    """The server answered with ``success: false``."""


class BookingApi:
    """Thin wrapper over the booking service's read and write endpoints"""

    def __init__(self, url: str, http: Optional[httpx.Client] = None, timeout: float = 15.0):
        self.url = url
        self.http = http or httpx.Client(timeout=timeout, follow_redirects=True)

    def close(self) -> None:
        self.http.close()

    # --- reads ---

    def read(self, action: str) -> Dict[str, Any]:
        response = self.http.get(self.url, params={"action": action})
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict) or not data.get("success"):
            message = data.get("message") if isinstance(data, dict) else None
            raise ApiError(message or f"{action} failed")
        return data

    def get_bookings(self) -> List[Dict[str, Any]]:
        return self.read("get_bookings").get("bookings") or []

    def get_reviews(self) -> List[Dict[str, Any]]:
        return self.read("get_reviews").get("reviews") or []

    # --- writes ---

    def post(self, action: str, payload: Dict[str, Any], headers: Optional[Dict[str, str]] = None) -> httpx.Response:
        """
        Send a write action and return the raw response.

        The body goes out as text/plain JSON, the way the browser form sends
        it. Reading the result is left to the caller, since an unreadable body
        does not mean the write failed.
        """
        body = dict(payload, action=action)
        send_headers = {"Content-Type": "text/plain;charset=utf-8"}
        send_headers.update(headers or {})
        return self.http.post(self.url, content=json.dumps(body), headers=send_headers)

    def write(self, action: str, payload: Dict[str, Any], headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        response = self.post(action, payload, headers)
        response.raise_for_status()
        return response.json()

    def admin_login(self, username: str, password: str) -> Dict[str, Any]:
        url = self.url.rstrip("/") + "/admin/login"
        response = self.http.post(url, json={"username": username, "password": password})
        response.raise_for_status()
        return response.json()
