"""
Pydantic models for remote nodes.

Covers:
- Resource descriptors returned by discovery
- Result wrappers for verb calls and discovery
- Diagnostic events emitted to observers
"""

from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_COMPONENTS: dict[str, str] = {
    "query": "maki-resource-query",
    "get": "maki-resource-get",
}


# ─── Discovery ───────────────────────────────────────────────────────


class ResourceDescriptor(BaseModel):
    """
    One capability exposed by a remote node.

    ``components`` always binds the ``query`` and ``get`` roles; the
    remaining fields are copied from the remote without inspection.
    """

    model_config = ConfigDict(frozen=True)

    name: Any = None
    description: Any = None
    components: dict[str, Any] = Field(
        default_factory=lambda: dict(DEFAULT_COMPONENTS)
    )
    routes: Any = None
    attributes: Any = None
    names: Any = None

    @classmethod
    def from_remote(cls, raw: Mapping[str, Any]) -> "ResourceDescriptor":
        """
        Normalize one entry of a discovery response.

        Raises:
            ValueError: If the entry or its ``components`` is not a mapping.
        """
        if not isinstance(raw, Mapping):
            raise ValueError(f"resource entry is not an object: {raw!r}")

        overrides = raw.get("components")
        if overrides is None:
            overrides = {}
        if not isinstance(overrides, Mapping):
            raise ValueError(f"components is not an object: {overrides!r}")

        return cls(
            name=raw.get("name"),
            description=raw.get("description"),
            components={**DEFAULT_COMPONENTS, **overrides},
            routes=raw.get("routes"),
            attributes=raw.get("attributes"),
            names=raw.get("names"),
        )


DiscoveryStatus = Literal["ok", "empty", "unavailable", "malformed"]


class DiscoveryResult(BaseModel):
    """Outcome of an OPTIONS / discovery round-trip."""

    status: DiscoveryStatus
    resources: list[ResourceDescriptor] = Field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status in ("ok", "empty")


# ─── Verb results ────────────────────────────────────────────────────


class RemoteResult(BaseModel):
    """
    Outcome of a single HTTP verb call.

    ``ok`` separates an empty success (``value is None``) from a failure.
    """

    ok: bool
    value: Any = None
    error: str | None = None
    status_code: int | None = None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap_or(self, default: Any = None) -> Any:
        """Return the decoded value on success, ``default`` otherwise."""
        return self.value if self.ok else default

    @classmethod
    def success(cls, value: Any, status_code: int | None = None) -> "RemoteResult":
        return cls(ok=True, value=value, status_code=status_code)

    @classmethod
    def failure(cls, error: str, status_code: int | None = None) -> "RemoteResult":
        return cls(ok=False, error=error, status_code=status_code)


# ─── Diagnostics ─────────────────────────────────────────────────────


EventKind = Literal["request", "response", "failure", "malformed"]


class RemoteEvent(BaseModel):
    """A structured trace entry for one step of a remote call."""

    kind: EventKind
    method: str
    url: str
    path: str
    node: str | None = None
    payload: Any = None
    status_code: int | None = None
    value: Any = None
    error: str | None = None
