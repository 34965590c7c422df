"""Transport layer implementations."""

from .base import (
    Transport,
    TransportError,
    TransportTimeout,
    TransportConnectionError,
    TransportPortError,
    Identity,
    StaticIdentity,
    RandomIdentity,
)

from . import memory
from .memory import Endpoint, MemoryTransport
