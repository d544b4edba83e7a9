from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import requests

from ..core.constants import DEFAULT_API_TIMEOUT
from ..core.exceptions import ApiError

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Optional[str]]


class ApiClient:
    """Thin JSON client for the REST backend.

    The session token is looked up through ``token_provider`` on every call, so one
    client instance can be shared by all requests of the web layer.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: int = DEFAULT_API_TIMEOUT,
        token_provider: Optional[TokenProvider] = None,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = int(timeout)
        self._token_provider = token_provider
        self._session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self._base_url

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = self._token_provider() if self._token_provider else None
        if token:
            # The backend expects the raw token, without a "Bearer" prefix.
            headers["Authorization"] = token
        return headers

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> dict:
        url = f"{self._base_url}/{path.lstrip('/')}"
        if params:
            params = {k: v for k, v in params.items() if v is not None and v != "" and v != []}
        logger.debug("%s %s params=%s", method, url, params)

        try:
            resp = self._session.request(
                method,
                url,
                params=params or None,
                json=json if method != "GET" else None,
                headers=self._headers(),
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.warning("Request %s %s failed: %s", method, url, e)
            raise ApiError("Tidak dapat terhubung ke server") from e

        if not resp.ok:
            try:
                body = resp.json()
            except ValueError:
                body = {}
            message = (body or {}).get("message") or f"API Error: {resp.status_code}"
            logger.warning("Request %s %s returned %s: %s", method, url, resp.status_code, message)
            raise ApiError(message, status_code=resp.status_code)

        try:
            return resp.json() or {}
        except ValueError:
            return {}

    def get(self, path: str, *, params: Optional[dict[str, Any]] = None) -> dict:
        return self.request("GET", path, params=params)

    def post(self, path: str, *, json: Optional[dict[str, Any]] = None) -> dict:
        return self.request("POST", path, json=json)

    def put(self, path: str, *, json: Optional[dict[str, Any]] = None) -> dict:
        return self.request("PUT", path, json=json)

    def delete(self, path: str) -> dict:
        return self.request("DELETE", path)
