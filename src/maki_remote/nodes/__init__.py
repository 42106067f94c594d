"""
Remote node system.

A node is the local representative of one remote authority reachable over
HTTP. It discovers the resources the authority exposes and exchanges JSON
representations with it through the standard verbs.
"""

from maki_remote.nodes.causal import CausalState
from maki_remote.nodes.models import (
    DEFAULT_COMPONENTS,
    DiscoveryResult,
    RemoteEvent,
    RemoteResult,
    ResourceDescriptor,
)
from maki_remote.nodes.observer import (
    LoggingObserver,
    RecordingObserver,
    RemoteObserver,
)
from maki_remote.nodes.remote import Remote

__all__ = [
    "CausalState",
    "DEFAULT_COMPONENTS",
    "DiscoveryResult",
    "LoggingObserver",
    "RecordingObserver",
    "Remote",
    "RemoteEvent",
    "RemoteObserver",
    "RemoteResult",
    "ResourceDescriptor",
]
