"""
Session and request models for the reqline console.

A Request is immutable: every change produces a new Request, or returns the
same object when the change would have no effect. The Session keeps the
history of requests built so far; the last one is the current request.
"""

import posixpath
from typing import List, Optional, Tuple
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field

from reqline.errors import InvalidRequestError

DEFAULT_PORTS = {"http": 80, "https": 443}

Pair = Tuple[str, str]
QueryPair = Tuple[str, Optional[str]]


class Request(BaseModel):
    """An HTTP request under construction."""

    model_config = ConfigDict(frozen=True)

    scheme: str = Field("http", description="URL scheme")
    host: str = Field("0.0.0.0", description="Host name or address")
    port: int = Field(80, ge=1, le=65535, description="Port number")
    path: str = Field("/", description="Absolute, URL-escaped path")
    query: Tuple[QueryPair, ...] = Field(default_factory=tuple, description="Query parameters in order")
    fragment: Optional[str] = Field(None, description="Page fragment")
    cookies: Tuple[Pair, ...] = Field(default_factory=tuple, description="Cookies in order")

    def __str__(self) -> str:
        return self.address

    @classmethod
    def parse(cls, address: str) -> "Request":
        """Build a request from an address, defaulting to http."""
        return cls().with_address(address)

    @property
    def address(self) -> str:
        port = "" if DEFAULT_PORTS.get(self.scheme) == self.port else f":{self.port}"
        query = "&".join(name if value is None else f"{name}={value}" for name, value in self.query)
        address = f"{self.scheme}://{self.host}{port}{self.path}"
        if query:
            address += f"?{query}"
        if self.fragment is not None:
            address += f"#{self.fragment}"
        return address

    def cookies_present(self) -> bool:
        return bool(self.cookies)

    def _change(self, **changes) -> "Request":
        if all(getattr(self, key) == value for key, value in changes.items()):
            return self
        return self.model_copy(update=changes)

    def with_address(self, address: str) -> "Request":
        """Replace the whole address. Cookies are dropped if the host changes."""
        address = address.strip()
        if "://" not in address:
            address = f"http://{address}"
        try:
            parts = urlsplit(address)
            port = parts.port
        except ValueError as e:
            raise InvalidRequestError(f"Invalid address: {address}") from e

        scheme = parts.scheme.lower()
        if not parts.hostname:
            raise InvalidRequestError(f"Invalid address: {address}")
        if port is None:
            port = DEFAULT_PORTS.get(scheme, 80)

        query: List[QueryPair] = []
        if parts.query:
            for item in parts.query.split("&"):
                name, separator, value = item.partition("=")
                query.append((name, value if separator else None))

        changes = dict(
            scheme=scheme,
            host=parts.hostname,
            port=port,
            path=parts.path or "/",
            query=tuple(query),
            fragment=parts.fragment or None,
        )
        if parts.hostname != self.host:
            changes["cookies"] = ()
        return self._change(**changes)

    def with_host(self, host: str) -> "Request":
        if not host or "/" in host:
            raise InvalidRequestError(f"Invalid host: {host}")
        if host == self.host:
            return self
        return self._change(host=host, cookies=())

    def with_port(self, port: int) -> "Request":
        if not 1 <= port <= 65535:
            raise InvalidRequestError(f"Invalid port: {port}")
        return self._change(port=port)

    def with_path(self, path: str) -> "Request":
        """Set the path; a relative path is resolved against the current one."""
        if not path.startswith("/"):
            path = posixpath.join(self.path, path)
        trailing_slash = path.endswith("/")
        path = posixpath.normpath(path)
        # normpath keeps a leading double slash
        if path.startswith("//"):
            path = "/" + path.lstrip("/")
        if trailing_slash and path != "/":
            path += "/"
        return self._change(path=path)

    def with_fragment(self, fragment: str) -> "Request":
        return self._change(fragment=fragment)

    def without_fragment(self) -> "Request":
        return self._change(fragment=None)

    def with_query_parameter(self, name: str, value: Optional[str] = None) -> "Request":
        """Add a query parameter, replacing the first one with the same name."""
        query = list(self.query)
        for index, (existing, _) in enumerate(query):
            if existing == name:
                query[index] = (name, value)
                break
        else:
            query.append((name, value))
        return self._change(query=tuple(query))

    def without_query(self) -> "Request":
        return self._change(query=())

    def with_cookie(self, name: str, value: Optional[str] = None) -> "Request":
        return self._change(cookies=self.cookies + ((name, value or ""),))

    def without_cookies(self) -> "Request":
        return self._change(cookies=())


class Session:
    """History of the requests built in one console session."""

    def __init__(self, address: Optional[str] = None):
        initial = Request.parse(address) if address else Request()
        self.requests: List[Request] = [initial]

    @property
    def last_request(self) -> Request:
        return self.requests[-1]

    def undo(self) -> Optional[Request]:
        """Drop the current request, keeping at least one. Returns the dropped request."""
        if len(self.requests) < 2:
            return None
        return self.requests.pop()
