from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..api.paging import Page
from ..api.resource import ResourceRepository
from ..common.validators import require_choice, require_min_length, require_non_empty, require_numeric
from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.enums import UserRole
from ..core.exceptions import ApiError, AuthenticationError, AuthorizationError, ValidationError
from .model import SessionUser, User
from .repository import AuthRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate an operator against the backend (login)."""

    def __init__(self, auth: AuthRepository):
        self._auth = auth

    def authenticate(self, username: str, password: str) -> SessionUser:
        username = require_non_empty(username, "Username")
        require_min_length(password, "Password", 6)

        try:
            user, token = self._auth.login(username=username, password=password)
        except ApiError as e:
            if e.status_code in (400, 401, 404):
                logger.warning("Login rejected for %s", username)
                raise AuthenticationError("Username atau password salah")
            raise

        if not token:
            raise AuthenticationError("Username atau password salah")

        logger.info("User %s logged in", username)
        return SessionUser(token=token, user=user)

    def current(self) -> User:
        return self._auth.current()


class UserService:
    """Use case: manage dashboard accounts."""

    def __init__(self, users: ResourceRepository[User]):
        self._users = users

    def list_users(
        self,
        *,
        page: int = 1,
        per_page: int = DEFAULT_PAGE_SIZE,
        name: str = "",
        username: str = "",
        phone: str = "",
        roles: Sequence[str] = (),
    ) -> Page[User]:
        role_values = [require_choice(r, UserRole, "Role").value for r in roles]
        return self._users.find_all(
            params={
                "page": page,
                "perPage": per_page,
                "name": name.strip(),
                "username": username.strip(),
                "phone": phone.strip(),
                "roles": role_values,
            }
        )

    def register(self, *, name: str, username: str, password: str, phone: str, role: str) -> Optional[User]:
        payload = {
            "name": require_non_empty(name, "Nama", max_len=100),
            "username": require_non_empty(username, "Username"),
            "password": require_min_length(password, "Password", 6),
            "phone": require_numeric(phone, "Nomor telepon", max_len=15),
            "role": require_choice(role, UserRole, "Role").value,
        }
        return self._users.create(payload)

    def update(
        self,
        *,
        user_id: str,
        name: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        phone: Optional[str] = None,
        role: Optional[str] = None,
    ) -> Optional[User]:
        payload: dict = {"id": require_non_empty(user_id, "User")}
        if name is not None:
            payload["name"] = require_non_empty(name, "Nama", max_len=100)
        if username is not None:
            payload["username"] = require_non_empty(username, "Username")
        if password:
            payload["password"] = require_min_length(password, "Password", 6)
        if phone is not None:
            payload["phone"] = require_numeric(phone, "Nomor telepon", max_len=15)
        if role is not None:
            payload["role"] = require_choice(role, UserRole, "Role").value

        if len(payload) == 1:
            raise ValidationError("Tidak ada data yang diubah")
        return self._users.update(payload["id"], payload)

    def delete(self, *, current: User, user_id: str) -> None:
        user_id = require_non_empty(user_id, "User")
        if user_id == current.id:
            raise AuthorizationError("Tidak dapat menghapus akun yang sedang digunakan")

        self._users.delete(user_id)
        logger.info("User %s deleted by %s", user_id, current.username)
