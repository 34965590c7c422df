"""ZeroMQ request/response transport.

The client side is a synchronous :class:`Transport` over a DEALER socket:
each call or send blocks until the matching reply arrives or the timeout
expires. The server side is a ROUTER socket serviced by a background thread
that hands each request to an endpoint object, typically a
:class:`wttp.transport.memory.Endpoint`.

Public surface area:
    - Client / Server classes
    - client(address) cache helper
"""

from __future__ import annotations

import itertools
import logging
import threading
import time
from typing import Any, Dict, Optional, Sequence

import zmq

from ...protocol import fields
from ..base import (
    Transport,
    TransportConnectionError,
    TransportError,
    TransportPortError,
    TransportTimeout,
)
from .framing import (
    CALL,
    ERR,
    SEND,
    from_request_frames,
    from_response_frames,
    to_error_frames,
    to_request_frames,
    to_response_frames,
)

logger = logging.getLogger(__name__)

minimum_port = 10079
maximum_port = 13679
zmq_context = zmq.Context()


_id_min = 0
_id_max = 0xFFFFFFFF
_id_lock = threading.Lock()
_id_ticker = itertools.count(_id_min)


def _id_next() -> bytes:
    """Return the next locally unique request identification number."""

    global _id_ticker

    with _id_lock:
        msg_id = next(_id_ticker)
        if msg_id >= _id_max:
            _id_ticker = itertools.count(_id_min)

    return ("%08x" % msg_id).encode()


class Client(Transport):
    """Issue requests via a ZeroMQ DEALER socket and wait for the response.

    The *address* is a ZeroMQ endpoint such as ``tcp://host:10079``; it also
    serves as the resource endpoint identifier for GET requests.
    """

    timeout = 5.0

    def __init__(self, address: str, timeout: Optional[float] = None):
        self.address = address
        if timeout is not None:
            self.timeout = float(timeout)

        identity = f"request.Client.{id(self)}".encode()

        self.socket = zmq_context.socket(zmq.DEALER)
        self.socket.setsockopt(zmq.LINGER, 0)
        self.socket.identity = identity

        try:
            self.socket.connect(address)
        except zmq.ZMQError as exc:
            self.socket.close()
            raise TransportConnectionError(f"cannot connect to {address}: {exc}") from exc

        self._lock = threading.Lock()

    def _request(self, kind: bytes, method: str, args: Sequence[Any]) -> Any:
        msg_id = _id_next()
        frames = to_request_frames(msg_id, kind, method, args)

        with self._lock:
            logger.debug("%s %s -> %s", kind.decode(), method, self.address)

            try:
                self.socket.send_multipart(frames)
            except zmq.ZMQError as exc:
                raise TransportConnectionError(f"{method} @ {self.address}: {exc}") from exc

            deadline = time.monotonic() + self.timeout

            while True:
                remaining = deadline - time.monotonic()
                if remaining <= 0 or not self.socket.poll(max(1, int(remaining * 1000)), zmq.POLLIN):
                    logger.warning("%s @ %s: no response in %.2f sec", method, self.address, self.timeout)
                    raise TransportTimeout(
                        f"{method} @ {self.address}: no response in {self.timeout:.2f} sec"
                    )

                parts = self.socket.recv_multipart()

                try:
                    response = from_response_frames(parts)
                except ValueError as exc:
                    raise TransportError(f"{method} @ {self.address}: {exc}") from exc

                if response.msg_id == msg_id:
                    break

                # A reply to an earlier request that already timed out.
                logger.debug("discarding stale response %r", response.msg_id)

        if response.kind == ERR:
            error = response.body
            raise TransportError(f"{method} @ {self.address}: {error['type']}: {error['text']}")

        return response.body

    def call(self, method: str, args: Sequence[Any]) -> Any:
        return self._request(CALL, method, args)

    def send(self, method: str, args: Sequence[Any]) -> Any:
        return self._request(SEND, method, args)

    def close(self) -> None:
        """Close the socket. A closed client is dropped from the
        :func:`client` cache, so the next lookup opens a fresh one.
        """

        with _client_lock:
            if _client_cache.get(self.address) is self:
                del _client_cache[self.address]

        self.socket.close()

    @property
    def closed(self) -> bool:
        return self.socket.closed


class Server:
    """Receive requests via a ZeroMQ ROUTER socket and answer them from an
    *endpoint*, any object with a ``dispatch(method, args)`` method.
    """

    port = None  # auto
    poll_interval = 100

    def __init__(self, endpoint, address: str = "127.0.0.1", port: Optional[int] = None, avoid: Optional[set] = None):
        self.endpoint = endpoint
        self.address = address
        self.port = int(port) if port is not None else None
        self.avoid = set(avoid or set())

        self.socket = zmq_context.socket(zmq.ROUTER)
        self.socket.setsockopt(zmq.LINGER, 0)

        if self.port is None:
            self.port = self._bind_any()
        else:
            try:
                self.socket.bind(f"tcp://{self.address}:{self.port}")
            except zmq.ZMQError as exc:
                self.socket.close()
                raise TransportPortError(
                    f"port already in use: {self.port}"
                ) from exc

        self.shutdown = False
        self.thread = threading.Thread(target=self.run, daemon=True)
        self.thread.start()

    @property
    def url(self) -> str:
        return f"tcp://{self.address}:{self.port}"

    def _bind_any(self) -> int:
        for port in range(minimum_port, maximum_port + 1):
            if port in self.avoid:
                continue
            try:
                self.socket.bind(f"tcp://{self.address}:{port}")
                return port
            except zmq.ZMQError:
                continue
        self.socket.close()
        raise TransportPortError(
            f"no ports available in range {minimum_port}:{maximum_port}"
        )

    def _req_incoming(self, parts: Sequence[bytes]) -> None:
        try:
            request = from_request_frames(parts)
        except ValueError as exc:
            logger.warning("malformed request: %s", exc)
            # Without an identity and an id there is nobody to answer.
            if len(parts) >= 3:
                self.socket.send_multipart(to_error_frames((parts[0],), parts[2], exc))
            return

        if request.kind == CALL and request.method not in fields.READ_METHODS:
            error = ValueError(f"{request.method} is not a read-only method")
            self.socket.send_multipart(to_error_frames(request.prefix, request.msg_id, error))
            return

        if request.kind == SEND and request.method not in fields.WRITE_METHODS:
            error = ValueError(f"{request.method} is not a state-changing method")
            self.socket.send_multipart(to_error_frames(request.prefix, request.msg_id, error))
            return

        try:
            result = self.endpoint.dispatch(request.method, request.body)
        except Exception as exc:
            logger.exception("%s failed", request.method)
            frames = to_error_frames(request.prefix, request.msg_id, exc)
        else:
            frames = to_response_frames(request.prefix, request.msg_id, result)

        self.socket.send_multipart(frames)

    def run(self) -> None:
        logger.debug("serving on %s", self.url)

        while not self.shutdown:
            if self.socket.poll(self.poll_interval, zmq.POLLIN):
                parts = self.socket.recv_multipart()
                self._req_incoming(parts)

        self.socket.close()

    def stop(self) -> None:
        self.shutdown = True
        self.thread.join()


# --- convenience helpers ---

_client_cache: Dict[str, Client] = {}
_client_lock = threading.Lock()


def client(address: str, timeout: Optional[float] = None) -> Client:
    with _client_lock:
        c = _client_cache.get(address)
        if c is None or c.closed:
            c = Client(address, timeout)
            _client_cache[address] = c
        return c
