""" Request envelope construction and response envelope decoding.

    Every function here is pure: the encoders return the ordered argument
    list handed to the transport, and the decoders turn the positional
    arrays returned by the transport into :mod:`wttp.protocol.message`
    instances. Decoding is driven by a single schema describing the field
    count and kind at each nesting level, so that any structural problem
    surfaces as a :class:`MalformedResponse` from one place.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional, Sequence, Union

from . import fields
from .content import interpret_body, opaque_body, to_wire
from .errors import MalformedResponse
from .message import (
    DataStructure,
    GETRequest,
    GETResponse,
    HEADResponse,
    HeaderInfo,
    Metadata,
    RequestHeader,
    RequestLine,
    ResponseLine,
)


# Field kinds used in the decode schema. Unsigned kinds carry their width.

STR = 'str'
U16 = 16
U32 = 32
U64 = 64

HEAD_SCHEMA = (
    ('response line', (STR, U16)),
    ('header info', (STR, U16, STR, STR)),
    ('metadata', (U64, U64, U64)),
    ('data structure', (U64, STR, STR, STR)),
    ('etag', STR),
)

_digits = re.compile(r'[0-9]+')


def _check_uint(value, bits: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
    if value < 0 or value >= (1 << bits):
        raise ValueError(f"{name} out of range for an unsigned {bits}-bit field: {value}")
    return value


def encode_get(path: str, range_start: int = 0, range_end: int = 0,
               if_none_match: str = "", if_modified_since: int = 0, *,
               host: str, accept: Iterable[str] = (),
               accept_charset: Iterable[str] = (),
               accept_language: Iterable[str] = ()) -> list:
    """ Build the ordered GET arguments: request line, request header, and
        GET request. Zero/empty conditional fields mean 'unset'.
    """

    _check_uint(range_start, U32, 'range_start')
    _check_uint(range_end, U32, 'range_end')
    _check_uint(if_modified_since, U64, 'if_modified_since')

    line = RequestLine(path)
    header = RequestHeader(
        accept=tuple(accept),
        accept_charset=tuple(accept_charset),
        accept_language=tuple(accept_language),
        if_modified_since=if_modified_since,
        if_none_match=if_none_match or "",
    )
    request = GETRequest(host, range_start, range_end)

    return [line.to_wire(), header.to_wire(), request.to_wire()]


def encode_put(path: str, content: Union[str, bytes],
               mime_type: Optional[str] = None, charset: Optional[str] = None,
               *, caller: str) -> list:
    """ Build the ordered PUT arguments: request line, MIME token, charset
        token, location token, caller address, content.
    """

    mime_type = mime_type or fields.DEFAULT_MIME_TYPE
    charset = charset or fields.DEFAULT_CHARSET

    line = RequestLine(path)
    data = to_wire(content, charset)

    return [line.to_wire(), mime_type, charset, fields.DATAPOINT_CHUNK, caller, data]


def encode_patch(path: str, content: Union[str, bytes], chunk_index: int,
                 *, caller: str, charset: str = fields.DEFAULT_CHARSET) -> list:
    """ Build the ordered PATCH arguments: request line, content, chunk
        index, caller address. A PATCH never changes the resource type, so
        there is no MIME or charset token on the wire; *charset* only
        encodes text content, and should match the charset the resource
        was stored with.
    """

    _check_uint(chunk_index, U32, 'chunk_index')

    line = RequestLine(path)
    data = to_wire(content, charset or fields.DEFAULT_CHARSET)

    return [line.to_wire(), data, chunk_index, caller]


def encode_head(path: str) -> list:
    return [RequestLine(path).to_wire()]


def _parse_uint(value, bits: int, where: str) -> int:
    """ Numbers arrive as base-10 decimal strings. Plain non-negative ints
        are tolerated; signs, whitespace, and underscores are not.
    """

    if isinstance(value, bool):
        raise MalformedResponse(f"{where}: expected a number, got {value!r}")

    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and _digits.fullmatch(value):
        number = int(value, 10)
    else:
        raise MalformedResponse(f"{where}: expected a number, got {value!r}")

    if number < 0 or number >= (1 << bits):
        raise MalformedResponse(f"{where}: {number} does not fit in {bits} bits")

    return number


def _parse_field(value, kind, where: str):
    if kind == STR:
        if not isinstance(value, str):
            raise MalformedResponse(f"{where}: expected a string, got {type(value).__name__}")
        return value

    return _parse_uint(value, kind, where)


def _sequence(raw, count: int, where: str) -> Sequence:
    if isinstance(raw, (str, bytes, bytearray)) or not isinstance(raw, (list, tuple)):
        raise MalformedResponse(f"{where}: expected a {count}-element array, got {type(raw).__name__}")
    if len(raw) != count:
        raise MalformedResponse(f"{where}: expected {count} elements, got {len(raw)}")
    return raw


def _apply_schema(raw) -> list:
    raw = _sequence(raw, len(HEAD_SCHEMA), 'head')
    decoded = list()

    for index, (name, kinds) in enumerate(HEAD_SCHEMA):
        value = raw[index]
        where = f"head[{index}] ({name})"

        if isinstance(kinds, tuple):
            value = _sequence(value, len(kinds), where)
            parsed = tuple(_parse_field(item, kind, f"{where}[{position}]")
                           for position, (item, kind) in enumerate(zip(value, kinds)))
        else:
            parsed = _parse_field(value, kinds, where)

        decoded.append(parsed)

    return decoded


def decode_head_array(raw) -> HEADResponse:
    """ Decode the five-element HEAD array. Status codes are not inspected
        beyond their numeric form; a 404 is a perfectly good response.
    """

    line, info, meta, structure, etag = _apply_schema(raw)

    if line[0] != fields.PROTOCOL_VERSION:
        raise MalformedResponse(
            f"response is {line[0]!r}, this client speaks {fields.PROTOCOL_VERSION!r}")

    return HEADResponse(
        response_line=ResponseLine(*line),
        header_info=HeaderInfo(*info),
        metadata=Metadata(*meta),
        data_structure=DataStructure(*structure),
        etag=etag,
    )


def decode_get_array(raw) -> GETResponse:
    """ Decode a ``[head, body]`` GET result. The body is only interpreted
        as text for successful (200/206) responses; the body of any other
        status is handed back as opaque bytes.
    """

    head_raw, body = _sequence(raw, 2, 'response')
    head = decode_head_array(head_raw)

    if head.response_line.ok:
        structure = head.data_structure
        body = interpret_body(body, structure.mime_type, structure.charset)
    else:
        body = opaque_body(body)

    return GETResponse(head, body)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
