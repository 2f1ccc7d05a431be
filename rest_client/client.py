"""
REST client bound to a logical resource name.

The client resolves its base URL through a ``ConfigProvider`` exactly once,
either eagerly via ``with_config_provider`` or when a ``ConfigRegistry`` reports
a provider as ready. Verb helpers build an ``httpx.Request``, let request
modifiers adjust it, and return the raw ``httpx.Response``.
"""

import dataclasses
import json
import logging
import threading
from typing import Any, Callable

import httpx
from pydantic import BaseModel

from rest_client.config import CONFIG, SERVICE_TYPE, ConfigProvider, ConfigRegistry
from rest_client.errors import (
    AlreadyInitializedError,
    RequestConstructionError,
    SerializationError,
    ServiceResolutionError,
    TransportError,
)
from rest_client.http_client import get_shared_client
from rest_client.query import struct_to_query_params

logger = logging.getLogger(__name__)

RequestModifier = Callable[[httpx.Request], None]

JSON_CONTENT_TYPE = "application/json"


def query_parameter_request_modifier(data: Any) -> RequestModifier:
    """
    Return a modifier that appends ``data`` encoded as query parameters.

    The encoded string is concatenated onto the request's raw query as-is, so a
    URL that already carries parameters gets no ``&`` separator.
    """

    def _modifier(request: httpx.Request) -> None:
        params = struct_to_query_params(data)
        if not params:
            return
        request.url = request.url.copy_with(query=request.url.query + params.encode("ascii"))

    return _modifier


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _encode_body(body: Any) -> bytes:
    try:
        return json.dumps(body, default=_json_default, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Request body could not be encoded as JSON: {exc}") from exc


class RestClient:
    """Issue HTTP requests against a resource resolved through service discovery."""

    def __init__(
        self,
        resource_name: str,
        auto_init: bool = True,
        *,
        config: ConfigRegistry | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._resource_name = resource_name
        self._base_url = ""
        self._ready = False
        self._lock = threading.Lock()
        self._http_client = http_client

        if auto_init:
            (config if config is not None else CONFIG).on_ready(self._init)

    @property
    def resource_name(self) -> str:
        return self._resource_name

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def ready(self) -> bool:
        return self._ready

    def with_config_provider(self, provider: ConfigProvider) -> "RestClient":
        """Initialize the client with a specific provider and return it."""
        self._init(provider)
        return self

    def _init(self, provider: ConfigProvider) -> None:
        with self._lock:
            if self._ready:
                raise AlreadyInitializedError(
                    f"REST client for {self._resource_name} is already initialized."
                )

            try:
                address = provider.get_service_address(self._resource_name, SERVICE_TYPE)
            except Exception as exc:
                raise ServiceResolutionError(
                    f"Error getting service address for {self._resource_name}: {exc}"
                ) from exc

            base_url = address.lower()
            if base_url.endswith("/"):
                base_url = base_url[:-1]
            self._base_url = base_url
            self._ready = True

        logger.info("REST client ready for %s --> %s", self._resource_name, self._base_url)

    def resolve_url(self, path: str, *args: Any) -> str:
        """
        Format ``path`` with ``args`` and prepend the base URL.

        Example::

            client.get(client.resolve_url("/api/v1/users/%s", user_id))
        """
        return self._base_url + (path % args if args else path)

    def get(self, url: str, *modifiers: RequestModifier) -> httpx.Response:
        """Perform a GET request; ``modifiers`` may adjust the request before it is sent."""
        return self._send("GET", url, None, modifiers)

    def delete(self, url: str, *modifiers: RequestModifier) -> httpx.Response:
        """Perform a DELETE request; ``modifiers`` may adjust the request before it is sent."""
        return self._send("DELETE", url, None, modifiers)

    def post(self, url: str, body: Any, *modifiers: RequestModifier) -> httpx.Response:
        """
        Perform a POST request with ``body`` encoded as JSON.

        Example::

            def authorize(request: httpx.Request) -> None:
                request.headers["Authorization"] = f"Bearer {token}"

            client.post(client.resolve_url("/api/v1/users"), user, authorize)
        """
        return self._send("POST", url, _encode_body(body), modifiers)

    def put(self, url: str, body: Any, *modifiers: RequestModifier) -> httpx.Response:
        """Perform a PUT request with ``body`` encoded as JSON."""
        return self._send("PUT", url, _encode_body(body), modifiers)

    def patch(self, url: str, body: Any, *modifiers: RequestModifier) -> httpx.Response:
        """Perform a PATCH request with ``body`` encoded as JSON."""
        return self._send("PATCH", url, _encode_body(body), modifiers)

    def _send(
        self,
        method: str,
        url: str,
        content: bytes | None,
        modifiers: tuple[RequestModifier, ...],
    ) -> httpx.Response:
        client = self._http_client if self._http_client is not None else get_shared_client()
        headers = {"Content-Type": JSON_CONTENT_TYPE} if content is not None else None

        try:
            request = client.build_request(method, url, content=content, headers=headers)
        except httpx.InvalidURL as exc:
            raise RequestConstructionError(f"Invalid request URL ({method} {url}): {exc}") from exc

        for modifier in modifiers:
            modifier(request)

        logger.debug("Sending request", extra={"method": method, "url": str(request.url)})
        try:
            return client.send(request)
        except httpx.RequestError as exc:
            logger.error(
                "REST request failed",
                extra={"method": method, "url": str(request.url)},
                exc_info=exc,
            )
            raise TransportError(f"REST request failed ({method} {url}): {exc!s}") from exc
