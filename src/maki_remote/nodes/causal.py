"""
Causality-tracking state shared by every node: a stable identity,
a logical clock and an operation stack.
"""

import hashlib
import json
from dataclasses import dataclass, field
from typing import Any


def compute_identity(data: Any) -> str:
    """Hex SHA-256 of the canonical JSON form of ``data``."""
    encoded = json.dumps(data, sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.sha256(encoded.encode("utf-8")).hexdigest()


@dataclass
class CausalState:
    """
    Identity, logical clock and operation stack for one node.

    Owned by the node it is composed into; the HTTP verb layer never
    mutates it.
    """

    identity: str
    clock: int = 0
    stack: list[Any] = field(default_factory=list)

    @classmethod
    def for_data(cls, data: Any) -> "CausalState":
        return cls(identity=compute_identity(data))

    def tick(self) -> int:
        """Advance the logical clock by one and return the new value."""
        self.clock += 1
        return self.clock

    def push(self, operation: Any) -> None:
        self.stack.append(operation)

    def pop(self) -> Any | None:
        """Remove and return the most recent operation, or None if empty."""
        if not self.stack:
            return None
        return self.stack.pop()
