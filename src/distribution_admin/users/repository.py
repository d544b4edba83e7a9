from __future__ import annotations

from typing import Protocol

from ..api.client import ApiClient
from .model import User


class AuthRepository(Protocol):
    def login(self, *, username: str, password: str) -> tuple[User, str]:
        raise NotImplementedError

    def current(self) -> User:
        raise NotImplementedError


class HttpAuthRepository(AuthRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def login(self, *, username: str, password: str) -> tuple[User, str]:
        body = self._client.post("login", json={"username": username, "password": password})
        return User.from_api(body["data"]), str(body.get("token") or "")

    def current(self) -> User:
        return User.from_api(self._client.get("current")["data"])
