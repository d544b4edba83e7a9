from __future__ import annotations

from typing import Any, Callable, Generic, Optional, Protocol, TypeVar, Union

from .client import ApiClient
from .paging import Page, parse_page

T = TypeVar("T")
ResourceId = Union[int, str]


class ResourceRepository(Protocol[T]):
    """CRUD gateway for one backend collection (``employees``, ``vehicles``, ...)."""

    def find_all(self, *, params: Optional[dict[str, Any]] = None) -> Page[T]:
        raise NotImplementedError

    def find_by_id(self, resource_id: ResourceId) -> T:
        raise NotImplementedError

    def create(self, payload: dict[str, Any]) -> Optional[T]:
        raise NotImplementedError

    def update(self, resource_id: ResourceId, payload: dict[str, Any]) -> Optional[T]:
        raise NotImplementedError

    def delete(self, resource_id: ResourceId) -> None:
        raise NotImplementedError


class HttpResourceRepository(Generic[T]):
    """ResourceRepository backed by the REST API.

    Responses are wrapped as ``{data: ...}``; write endpoints may answer ``{data: true}``
    instead of the entity, in which case None is returned.
    """

    def __init__(self, client: ApiClient, path: str, parse: Callable[[dict], T]):
        self._client = client
        self._path = path.strip("/")
        self._parse = parse

    def _parse_single(self, body: dict) -> Optional[T]:
        data = body.get("data")
        if isinstance(data, dict):
            return self._parse(data)
        return None

    def find_all(self, *, params: Optional[dict[str, Any]] = None) -> Page[T]:
        return parse_page(self._client.get(self._path, params=params), self._parse)

    def find_by_id(self, resource_id: ResourceId) -> Optional[T]:
        return self._parse_single(self._client.get(f"{self._path}/{resource_id}"))

    def create(self, payload: dict[str, Any]) -> Optional[T]:
        return self._parse_single(self._client.post(self._path, json=payload))

    def update(self, resource_id: ResourceId, payload: dict[str, Any]) -> Optional[T]:
        return self._parse_single(self._client.put(f"{self._path}/{resource_id}", json=payload))

    def delete(self, resource_id: ResourceId) -> None:
        self._client.delete(f"{self._path}/{resource_id}")
