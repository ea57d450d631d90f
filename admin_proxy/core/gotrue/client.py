"""Low-level HTTP client for the GoTrue admin API.

Handles service-key authentication, error extraction, and HTTP operations.
"""
from __future__ import annotations
from typing import Optional, Dict, Any, List
from urllib.parse import quote

import requests

from .exceptions import GoTrueAPIError

REQUEST_TIMEOUT = 10
ADMIN_USERS_PATH = "/auth/v1/admin/users"

# Body fields GoTrue uses for error text, in order of preference
_ERROR_FIELDS = ("msg", "message", "error_description", "error")


class GoTrueClient:
    """HTTP client for the GoTrue admin API authenticated with a service key.

    The service role key is sent both as a Bearer token and as the
    ``apikey`` header, which is what the Supabase gateway expects.

    Usage:
        client = GoTrueClient("https://project.supabase.co", service_role_key)
        users = client.list_users(page=1, per_page=100)
        user = client.update_user_by_id(users[0]["id"], {"password": "n3w!"})
    """

    def __init__(self, base_url: str, service_role_key: str, timeout: float = REQUEST_TIMEOUT):
        """Initialize GoTrue client.

        Args:
            base_url: Project base URL (e.g. https://project.supabase.co)
            service_role_key: Privileged service credential
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._service_role_key = service_role_key

    # ─────────────────────────────────────────────────────────────────────────
    # Admin user operations
    # ─────────────────────────────────────────────────────────────────────────
    def list_users(self, page: Optional[int] = None, per_page: Optional[int] = None) -> List[dict]:
        """Return one page of users from the admin API.

        Args:
            page: 1-based page number (provider default when omitted)
            per_page: Page size (provider default when omitted)

        Returns:
            List of user records, empty when the provider returns none

        Raises:
            GoTrueAPIError: On HTTP or transport error
        """
        params: Dict[str, Any] = {}
        if page is not None:
            params["page"] = page
        if per_page is not None:
            params["per_page"] = per_page

        resp = self.get(ADMIN_USERS_PATH, params=params)
        payload = _json_object(resp)
        return payload.get("users") or []

    def update_user_by_id(self, user_id: str, attributes: Dict[str, Any]) -> dict:
        """Update a user's attributes (e.g. ``{"password": ...}``).

        Args:
            user_id: Provider user identifier
            attributes: Attributes to change

        Returns:
            Updated user record

        Raises:
            GoTrueAPIError: On HTTP or transport error
        """
        # One path segment: '/', '?' and '..' in ids are escaped
        resp = self.put(f"{ADMIN_USERS_PATH}/{quote(str(user_id), safe='')}", json=attributes)
        payload = _json_object(resp)
        # Some gateway versions wrap the record as {"user": {...}}
        if isinstance(payload.get("user"), dict):
            return payload["user"]
        return payload

    # ─────────────────────────────────────────────────────────────────────────
    # HTTP helpers
    # ─────────────────────────────────────────────────────────────────────────
    def get(self, path: str, params: Optional[Dict] = None, **kwargs) -> requests.Response:
        """Execute GET request with service-key authentication.

        Args:
            path: API endpoint path (e.g., "/auth/v1/admin/users")
            params: Query parameters
            **kwargs: Additional arguments for requests.get

        Returns:
            Response object

        Raises:
            GoTrueAPIError: On HTTP or transport error
        """
        url = f"{self.base_url}{path}"
        headers = self._auth_headers(kwargs.pop("headers", {}))
        try:
            resp = requests.get(url, params=params, headers=headers, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise GoTrueAPIError(503, str(exc), url) from exc
        self._handle_error(resp)
        return resp

    def put(self, path: str, json: Optional[Dict] = None, **kwargs) -> requests.Response:
        """Execute PUT request with service-key authentication.

        Args:
            path: API endpoint path
            json: JSON payload
            **kwargs: Additional arguments for requests.put

        Returns:
            Response object

        Raises:
            GoTrueAPIError: On HTTP or transport error
        """
        url = f"{self.base_url}{path}"
        headers = self._auth_headers(kwargs.pop("headers", {}))
        try:
            resp = requests.put(url, json=json, headers=headers, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise GoTrueAPIError(503, str(exc), url) from exc
        self._handle_error(resp)
        return resp

    def _auth_headers(self, headers: Dict[str, str]) -> Dict[str, str]:
        headers["Authorization"] = f"Bearer {self._service_role_key}"
        headers["apikey"] = self._service_role_key
        return headers

    def _handle_error(self, resp: requests.Response) -> None:
        """Centralized error handling for HTTP responses.

        Args:
            resp: Response object to check

        Raises:
            GoTrueAPIError: If response status indicates error
        """
        if resp.status_code >= 400:
            raise GoTrueAPIError(resp.status_code, _error_message(resp), resp.url)


def _error_message(resp: requests.Response) -> str:
    """Pull the human-readable error text out of a GoTrue error response."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for field in _ERROR_FIELDS:
            value = body.get(field)
            if isinstance(value, str) and value:
                return value
    return resp.text or f"HTTP {resp.status_code}"


def _json_object(resp: requests.Response) -> dict:
    """Decode a successful response body, which must be a JSON object.

    Raises:
        GoTrueAPIError: If the body is not JSON or not an object
    """
    try:
        body = resp.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        raise GoTrueAPIError(resp.status_code, "Invalid response from identity provider", resp.url)
    return body
