"""
maki-remote: discover and talk to remote nodes over HTTP.
"""

from maki_remote.config import RemoteConfig
from maki_remote.nodes import (
    CausalState,
    DiscoveryResult,
    RemoteResult,
    ResourceDescriptor,
)
from maki_remote.nodes.remote import Remote

__version__ = "0.1.0"

__all__ = [
    "CausalState",
    "DiscoveryResult",
    "Remote",
    "RemoteConfig",
    "RemoteResult",
    "ResourceDescriptor",
]
