"""Transport and identity interfaces.

This is the (small) contract that transport implementations should follow.
It lives outside :mod:`wttp.protocol` so the protocol remains transport-agnostic.
"""

from __future__ import annotations

import secrets
from abc import ABC, abstractmethod
from typing import Any, Sequence


# Transport agnostic exceptions

class TransportError(Exception):
    """Base class for all transport-layer errors."""


class TransportTimeout(TransportError):
    """A request did not receive a timely response."""


class TransportConnectionError(TransportError):
    """The transport could not establish or maintain a connection."""


class TransportPortError(TransportError):
    """No suitable port could be bound or connected."""


class Transport(ABC):
    """Minimal contract for executing WTTP methods against an endpoint.

    Arguments are positional and their order must be preserved end to end.
    """

    #: Identifier of the resource endpoint, used as the GET host.
    address: str = ""

    @abstractmethod
    def call(self, method: str, args: Sequence[Any]) -> Any:
        """Execute a read-only method and return its raw result."""

    @abstractmethod
    def send(self, method: str, args: Sequence[Any]) -> Any:
        """Execute a state-changing method and return its raw result."""

    def close(self) -> None:
        """Release any underlying connection."""


class Identity(ABC):
    """Supplies the caller address for authenticated operations."""

    @property
    @abstractmethod
    def address(self) -> str:
        """Stable caller address."""


class StaticIdentity(Identity):

    def __init__(self, address: str):
        if not address:
            raise ValueError("an identity needs a non-empty address")
        self._address = address

    @property
    def address(self) -> str:
        return self._address

    def __repr__(self):
        return f"{self.__class__.__name__}({self._address!r})"


class RandomIdentity(StaticIdentity):
    """A throwaway identity with a random 20-byte address."""

    def __init__(self):
        super().__init__("0x" + secrets.token_hex(20))
