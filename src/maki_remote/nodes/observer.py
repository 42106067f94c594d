"""
Observers receive the diagnostic events a node emits for each request.
"""

from typing import Protocol

from maki_remote.logger import get_logger
from maki_remote.nodes.models import RemoteEvent

logger = get_logger(__name__)


class RemoteObserver(Protocol):
    """Anything with an ``emit`` method accepting a ``RemoteEvent``."""

    def emit(self, event: RemoteEvent) -> None: ...


class LoggingObserver:
    """Default observer: writes every event through loguru."""

    def emit(self, event: RemoteEvent) -> None:
        if event.kind == "request":
            logger.debug(f"{event.method} {event.url} payload={event.payload!r}")
        elif event.kind == "response":
            logger.debug(
                f"{event.method} {event.path} -> {event.status_code} "
                f"({type(event.value).__name__}) {event.value!r}"
            )
        elif event.kind == "malformed":
            logger.warning(
                f"Malformed discovery response from {event.url}: {event.error}"
            )
        else:
            logger.warning(f"{event.method} {event.url} failed: {event.error}")


class RecordingObserver:
    """Keeps events in memory; handy for inspection and tests."""

    def __init__(self):
        self.events: list[RemoteEvent] = []

    def emit(self, event: RemoteEvent) -> None:
        self.events.append(event)

    def kinds(self) -> list[str]:
        return [event.kind for event in self.events]
