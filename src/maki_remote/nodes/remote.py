"""
HTTP-backed remote node.

A ``Remote`` is the in-memory representative of one remote authority. It
discovers the resources the authority exposes (OPTIONS on ``/``) and reads
or writes JSON representations through the standard HTTP verbs.

Verb calls never raise for network, status or decoding problems: they
return a ``RemoteResult`` whose ``ok`` flag tells an empty success apart
from a failure, and report each step to the node's observer.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Mapping

import httpx

from maki_remote.config import RemoteConfig
from maki_remote.logger import get_logger
from maki_remote.nodes.causal import CausalState
from maki_remote.nodes.models import (
    DiscoveryResult,
    RemoteEvent,
    RemoteResult,
    ResourceDescriptor,
)
from maki_remote.nodes.observer import LoggingObserver, RemoteObserver

logger = get_logger(__name__)

CONTENT_TYPE = "application/json"
DISCOVERY_PATH = "/"

_NO_BODY = object()


class Remote:
    """
    A remote node reachable over HTTP.

    Protocol:
        OPTIONS /   -> {"resources": [{"name": ..., "components": {...}, ...}]}
        GET/OPTIONS <path>                  -> JSON
        PUT/POST/PATCH <path> + JSON body   -> JSON (POST follows 303 as GET)
    """

    def __init__(
        self,
        configuration: RemoteConfig | Mapping[str, Any] | None = None,
        *,
        observer: RemoteObserver | None = None,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.configuration = RemoteConfig.coerce(configuration)
        # Fixed for the node's lifetime; every URL uses this scheme.
        self.secure: bool = bool(self.configuration.secure)
        self.causal = CausalState.for_data(self.configuration.to_dict())
        self.known: dict[str, Any] = {}
        self.observer: RemoteObserver = observer or LoggingObserver()
        self._client = client
        self._transport = transport

    # ─── State ───────────────────────────────────────────────────────

    @property
    def id(self) -> str:
        return self.causal.identity

    @property
    def host(self) -> str | None:
        return self.configuration.host

    @property
    def clock(self) -> int:
        return self.causal.clock

    @property
    def stack(self) -> list[Any]:
        return self.causal.stack

    @property
    def scheme(self) -> str:
        return "https" if self.secure else "http"

    def url_for(self, path: str) -> str:
        """Absolute URL for ``path``; the path is used as given, unescaped."""
        return f"{self.scheme}://{self.host or ''}{path}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize node info for listings."""
        return {
            "id": self.id,
            "host": self.host,
            "secure": self.secure,
            "clock": self.clock,
            "stack_depth": len(self.stack),
            "known": len(self.known),
        }

    def __repr__(self) -> str:
        return f"Remote(host={self.host!r}, secure={self.secure})"

    # ─── Discovery ───────────────────────────────────────────────────

    async def discover(self) -> DiscoveryResult:
        """
        Ask the node which resources it exposes.

        Returns:
            A DiscoveryResult. ``status`` is ``"unavailable"`` when the
            request failed, ``"empty"`` when the node answered with nothing,
            ``"malformed"`` when the answer has no usable ``resources`` list,
            and ``"ok"`` otherwise. Only ``"ok"`` carries resources.
        """
        result = await self.options(DISCOVERY_PATH)
        if not result.ok:
            return DiscoveryResult(status="unavailable", error=result.error)

        body = result.value
        if not body:
            logger.info(f"Nothing discovered on {self.host}: {body!r}")
            return DiscoveryResult(status="empty")

        raw_resources = body.get("resources") if isinstance(body, dict) else None
        if not isinstance(raw_resources, list):
            return self._malformed(
                f"expected an object with a 'resources' list, got {body!r}"
            )

        try:
            resources = [ResourceDescriptor.from_remote(raw) for raw in raw_resources]
        except ValueError as e:
            return self._malformed(str(e))

        return DiscoveryResult(status="ok", resources=resources)

    async def enumerate(self) -> list[ResourceDescriptor]:
        """List the node's resources, in the order the node reported them.

        Any failure (unreachable node, malformed answer) yields an empty list.
        """
        discovery = await self.discover()
        return discovery.resources

    def _malformed(self, error: str) -> DiscoveryResult:
        self._emit(
            "malformed",
            "OPTIONS",
            DISCOVERY_PATH,
            error=error,
        )
        return DiscoveryResult(status="malformed", error=error)

    # ─── Verbs ───────────────────────────────────────────────────────

    async def get(self, path: str) -> RemoteResult:
        """HTTP GET against the configured authority."""
        return await self._request("GET", path)

    async def put(self, path: str, body: Any) -> RemoteResult:
        """HTTP PUT of a JSON body against the configured authority."""
        return await self._request("PUT", path, body)

    async def post(self, path: str, body: Any) -> RemoteResult:
        """
        HTTP POST of a JSON body against the configured authority.

        A 303 answer is followed with a GET, so the result holds the body of
        the resource the server redirected to.
        """
        return await self._request("POST", path, body, see_other=True)

    async def patch(self, path: str, body: Any) -> RemoteResult:
        return await self._request("PATCH", path, body)

    async def options(self, path: str) -> RemoteResult:
        """HTTP OPTIONS: full description of a remote resource."""
        return await self._request("OPTIONS", path)

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(transport=self._transport) as client:
            yield client

    async def _request(
        self,
        method: str,
        path: str,
        body: Any = _NO_BODY,
        see_other: bool = False,
    ) -> RemoteResult:
        url = self.url_for(path)
        headers = {"Accept": CONTENT_TYPE}
        kwargs: dict[str, Any] = {"headers": headers, "follow_redirects": False}
        payload = None
        if body is not _NO_BODY:
            kwargs["json"] = body
            payload = body

        self._emit("request", method, path, payload=payload)

        status_code = None
        try:
            async with self._session() as client:
                response = await client.request(method, url, **kwargs)
                # Only 303 See Other is followed, and always as a GET
                location = response.headers.get("Location")
                if (
                    see_other
                    and response.status_code == httpx.codes.SEE_OTHER
                    and location
                ):
                    response = await client.get(
                        response.url.join(location),
                        headers=headers,
                        follow_redirects=False,
                    )
            status_code = response.status_code
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            return self._failure(
                method, path, f"HTTP {e.response.status_code}", status_code
            )
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as e:
            return self._failure(method, path, f"{type(e).__name__}: {e}", status_code)

        try:
            value = response.json() if response.content else None
        except ValueError as e:
            return self._failure(
                method, path, f"invalid JSON response: {e}", status_code
            )

        self._emit("response", method, path, status_code=status_code, value=value)
        return RemoteResult.success(value, status_code=status_code)

    def _failure(
        self, method: str, path: str, error: str, status_code: int | None
    ) -> RemoteResult:
        self._emit("failure", method, path, status_code=status_code, error=error)
        return RemoteResult.failure(error, status_code=status_code)

    def _emit(self, kind: str, method: str, path: str, **fields: Any) -> None:
        self.observer.emit(
            RemoteEvent(
                kind=kind,
                method=method,
                url=self.url_for(path),
                path=path,
                node=self.id,
                **fields,
            )
        )
