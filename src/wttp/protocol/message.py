""" Immutable representations of WTTP request and response envelopes.

    The request classes know how to lay themselves out as positional lists
    for the transport; the remote side decodes fields by position, not by
    name, so the field order here is the order on the wire. The response
    classes are only ever built by :mod:`wttp.protocol.codec`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple, Union

from .fields import PROTOCOL_VERSION, SUCCESS_CODES


@dataclass(frozen=True)
class RequestLine:
    path: str
    protocol: str = PROTOCOL_VERSION

    def to_wire(self) -> list:
        return [self.protocol, self.path]


@dataclass(frozen=True)
class RequestHeader:
    """ Conditional-fetch intent for a GET. A zero *if_modified_since* and
        an empty *if_none_match* both mean 'unset'.
    """

    accept: Tuple[str, ...] = ()
    accept_charset: Tuple[str, ...] = ()
    accept_language: Tuple[str, ...] = ()
    if_modified_since: int = 0
    if_none_match: str = ""

    def to_wire(self) -> list:
        return [
            list(self.accept),
            list(self.accept_charset),
            list(self.accept_language),
            self.if_modified_since,
            self.if_none_match,
        ]


@dataclass(frozen=True)
class GETRequest:
    """ The *range_start* and *range_end* offsets select a span of chunks;
        a *range_end* of zero means 'through the end of the resource'.
    """

    host: str
    range_start: int = 0
    range_end: int = 0

    def to_wire(self) -> list:
        return [self.host, self.range_start, self.range_end]


@dataclass(frozen=True)
class ResponseLine:
    protocol: str
    code: int

    @property
    def ok(self) -> bool:
        return self.code in SUCCESS_CODES


@dataclass(frozen=True)
class HeaderInfo:
    cache: str
    methods: int
    redirect: str
    resource_admin: str


@dataclass(frozen=True)
class Metadata:
    size: int
    version: int
    modified_date: int


@dataclass(frozen=True)
class DataStructure:
    size: int
    mime_type: str
    charset: str
    location: str


@dataclass(frozen=True)
class HEADResponse:
    response_line: ResponseLine
    header_info: HeaderInfo
    metadata: Metadata
    data_structure: DataStructure
    etag: str

    @property
    def code(self) -> int:
        return self.response_line.code


@dataclass(frozen=True)
class GETResponse:
    """ The *body* is a ``str`` when the content was recognized as text and
        decoded, otherwise the opaque ``bytes`` as delivered.
    """

    head: HEADResponse
    body: Union[str, bytes] = field(default=b"")

    @property
    def code(self) -> int:
        return self.head.response_line.code

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
