"""ZMQ multipart framing for WTTP requests.

Request (DEALER -> ROUTER)
    (optional routing prefix...), version, id, kind, method, args_json

Response (ROUTER -> DEALER)
    (optional routing prefix...), version, id, REP, result_json
    (optional routing prefix...), version, id, ERR, error_json

The kind is CALL for read-only methods and SEND for state-changing ones.
"""

from __future__ import annotations

from typing import Any, NamedTuple, Sequence, Tuple

import msgspec

from ... import json
from ...protocol import PROTOCOL_VERSION


_VERSION_BYTES = PROTOCOL_VERSION.encode()

CALL = b"CALL"
SEND = b"SEND"
REP = b"REP"
ERR = b"ERR"


class Frame(NamedTuple):
    prefix: Tuple[bytes, ...]
    msg_id: bytes
    kind: bytes
    method: str
    body: Any


def _split_prefix(parts: Sequence[bytes]) -> Tuple[Tuple[bytes, ...], int]:
    # ROUTER sockets prepend identity frames. We expect either:
    #   [version, id, ...]
    # or
    #   [ident, version, id, ...]
    if not parts:
        raise ValueError("empty message")

    if parts[0] == _VERSION_BYTES:
        return (), 0
    return (parts[0],), 1


def _loads(data: bytes) -> Any:
    try:
        return json.loads(data)
    except msgspec.DecodeError as exc:
        raise ValueError(f"undecodable frame body: {exc}") from exc


def to_request_frames(msg_id: bytes, kind: bytes, method: str, args: Sequence[Any]) -> Tuple[bytes, ...]:
    return (_VERSION_BYTES, msg_id, kind, method.encode(), json.dumps(list(args)))


def from_request_frames(parts: Sequence[bytes]) -> Frame:
    """Decode ROUTER parts into a request :class:`Frame`.

    A version mismatch is reported as a ValueError; the server answers it
    with an ERR frame rather than dispatching.
    """

    prefix, start = _split_prefix(parts)

    if len(parts) != start + 5:
        raise ValueError(f"expected 5 request frames, got {len(parts) - start}")

    their_version = parts[start]
    if their_version != _VERSION_BYTES:
        raise ValueError(
            f"request is protocol {their_version!r}, recipient expects {_VERSION_BYTES!r}"
        )

    msg_id = parts[start + 1]
    kind = parts[start + 2]
    if kind not in (CALL, SEND):
        raise ValueError(f"unknown request kind: {kind!r}")

    method = parts[start + 3].decode()
    args = _loads(parts[start + 4])
    if not isinstance(args, list):
        raise ValueError("request arguments must be an array")

    return Frame(prefix, msg_id, kind, method, args)


def to_response_frames(prefix: Tuple[bytes, ...], msg_id: bytes, result: Any) -> Tuple[bytes, ...]:
    return prefix + (_VERSION_BYTES, msg_id, REP, json.dumps(result))


def to_error_frames(prefix: Tuple[bytes, ...], msg_id: bytes, error: BaseException) -> Tuple[bytes, ...]:
    body = {
        "type": type(error).__name__,
        "text": str(error),
    }
    return prefix + (_VERSION_BYTES, msg_id, ERR, json.dumps(body))


def from_response_frames(parts: Sequence[bytes]) -> Frame:
    """Decode DEALER parts into a response :class:`Frame`.

    A response from a peer speaking another protocol version is represented
    as an ERR frame, so the caller sees a single failure path. DEALER
    sockets strip the routing prefix, so there is none to split off here.
    """

    if len(parts) != 4:
        raise ValueError(f"expected 4 response frames, got {len(parts)}")

    their_version, msg_id, kind, body = parts

    if their_version != _VERSION_BYTES:
        err = {
            "type": "RuntimeError",
            "text": f"response is protocol {their_version!r}, recipient expects {_VERSION_BYTES!r}",
        }
        return Frame((), msg_id, ERR, "", err)

    if kind not in (REP, ERR):
        raise ValueError(f"unknown response kind: {kind!r}")

    return Frame((), msg_id, kind, "", _loads(body))
