"""
CLI commands that talk to a remote node.

Usage:
    maki-remote resources [--host HOST] [--secure]
    maki-remote get <path>
    maki-remote options <path>
    maki-remote put <path> <body>
    maki-remote post <path> <body>
    maki-remote patch <path> <body>
"""

import asyncio
import json
from typing import Any, Optional

import typer

from maki_remote.config import RemoteConfig
from maki_remote.nodes.models import RemoteResult
from maki_remote.nodes.remote import Remote

HostOption = typer.Option(
    None, "--host", "-H", help="Remote authority (host[:port]); defaults to MAKI_REMOTE_HOST"
)
SecureOption = typer.Option(
    None, "--secure/--insecure", help="Use https; defaults to MAKI_REMOTE_SECURE"
)


def _parse_body(value_str: str) -> Any:
    """Parse a CLI body as JSON, falling back to the raw string."""
    try:
        return json.loads(value_str)
    except json.JSONDecodeError:
        return value_str


def _build_remote(host: Optional[str], secure: Optional[bool]) -> Remote:
    config = RemoteConfig.from_env()
    overrides: dict[str, Any] = {}
    if host is not None:
        overrides["host"] = host
    if secure is not None:
        overrides["secure"] = secure
    if overrides:
        config = config.model_copy(update=overrides)
    if not config.host:
        typer.echo("No host configured. Pass --host or set MAKI_REMOTE_HOST.")
        raise typer.Exit(code=1)
    return Remote(config)


def _print_result(result: RemoteResult) -> None:
    if not result.ok:
        typer.echo(f"Request failed: {result.error}")
        raise typer.Exit(code=1)
    if isinstance(result.value, (dict, list)):
        typer.echo(json.dumps(result.value, indent=2))
    elif result.value is None:
        typer.echo("(empty response)")
    else:
        typer.echo(str(result.value))


def resources(
    host: Optional[str] = HostOption,
    secure: Optional[bool] = SecureOption,
):
    """List the resources a remote node exposes."""
    remote = _build_remote(host, secure)
    discovery = asyncio.run(remote.discover())

    if discovery.status in ("unavailable", "malformed"):
        typer.echo(f"Discovery {discovery.status}: {discovery.error}")
        raise typer.Exit(code=1)

    if not discovery.resources:
        typer.echo("No resources discovered.")
        return

    typer.echo(f"Resources on {remote.url_for('/')} ({len(discovery.resources)}):\n")
    for resource in discovery.resources:
        components = ", ".join(f"{k}={v}" for k, v in resource.components.items())
        typer.echo(f"  {resource.name}")
        if resource.description:
            typer.echo(f"     {resource.description}")
        typer.echo(f"     Components: {components}\n")


def get(
    path: str = typer.Argument(help="Resource path, e.g. /people"),
    host: Optional[str] = HostOption,
    secure: Optional[bool] = SecureOption,
):
    """GET a resource and print its JSON."""
    remote = _build_remote(host, secure)
    _print_result(asyncio.run(remote.get(path)))


def options(
    path: str = typer.Argument(help="Resource path, e.g. /"),
    host: Optional[str] = HostOption,
    secure: Optional[bool] = SecureOption,
):
    """OPTIONS on a resource and print its description."""
    remote = _build_remote(host, secure)
    _print_result(asyncio.run(remote.options(path)))


def put(
    path: str = typer.Argument(help="Resource path"),
    body: str = typer.Argument(help="JSON body (plain strings are sent as-is)"),
    host: Optional[str] = HostOption,
    secure: Optional[bool] = SecureOption,
):
    """PUT a JSON body to a resource."""
    remote = _build_remote(host, secure)
    _print_result(asyncio.run(remote.put(path, _parse_body(body))))


def post(
    path: str = typer.Argument(help="Resource path"),
    body: str = typer.Argument(help="JSON body (plain strings are sent as-is)"),
    host: Optional[str] = HostOption,
    secure: Optional[bool] = SecureOption,
):
    """POST a JSON body to a resource, following a 303 to the created entity."""
    remote = _build_remote(host, secure)
    _print_result(asyncio.run(remote.post(path, _parse_body(body))))


def patch(
    path: str = typer.Argument(help="Resource path"),
    body: str = typer.Argument(help="Partial JSON body"),
    host: Optional[str] = HostOption,
    secure: Optional[bool] = SecureOption,
):
    """PATCH a resource with a partial JSON body."""
    remote = _build_remote(host, secure)
    _print_result(asyncio.run(remote.patch(path, _parse_body(body))))


def register_commands(app: typer.Typer) -> None:
    """Attach the remote commands to the root app."""
    app.command("resources")(resources)
    app.command("get")(get)
    app.command("options")(options)
    app.command("put")(put)
    app.command("post")(post)
    app.command("patch")(patch)
