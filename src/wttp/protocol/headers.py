""" Translation between traditional HTTP header values and WTTP tokens.

    This is the glue for callers that think in HTTP terms: a Content-Type
    such as 'text/html; charset=utf-8' maps onto a MIME token and a charset
    token, a 'Range: chunks=1-3' header onto a chunk span, and a decoded
    :class:`HEADResponse` back onto a dictionary of response headers.
"""

from __future__ import annotations

import datetime
import email.utils
import http
import re
from typing import Dict, List, Optional, Tuple, Union

from . import fields
from .message import HEADResponse


_range = re.compile(r'chunks=(\d+)-(\d+)?')
_chunk = re.compile(r'^chunks=(\d+)')
_digits = re.compile(r'[0-9]+')

# An etag of all zeroes is what an endpoint reports for 'no content'.
_zero_etag = re.compile(r'^(0x)?0*$')


def parse_range(value: Optional[str]) -> Tuple[int, int]:
    """ Return the (start, end) chunk span from a Range header; (0, 0) if
        the header is absent or not a chunk range.
    """

    if not value:
        return 0, 0

    match = _range.search(value)
    if match is None:
        return 0, 0

    start = int(match.group(1))
    end = int(match.group(2)) if match.group(2) else 0
    return start, end


def parse_chunk_index(value: Optional[str]) -> Optional[int]:
    if not value:
        return None

    match = _chunk.match(value.strip())
    if match is None:
        return None

    return int(match.group(1))


def parse_if_modified_since(value: Optional[Union[int, str]]) -> int:
    """ Return the Unix timestamp named by an If-Modified-Since header; 0
        if the header is absent. Plain integers and digit strings are taken
        as timestamps, anything else must be an HTTP date. A value that is
        neither raises ValueError.
    """

    if value is None or value == '':
        return 0

    if isinstance(value, bool):
        raise ValueError('not a timestamp: ' + repr(value))

    if isinstance(value, int):
        if value < 0:
            raise ValueError('negative timestamp: ' + repr(value))
        return value

    value = str(value).strip()
    if _digits.fullmatch(value):
        return int(value)

    try:
        moment = email.utils.parsedate_to_datetime(value)
    except (TypeError, ValueError) as exc:
        raise ValueError('not an HTTP date: ' + repr(value)) from exc

    if moment is None:
        raise ValueError('not an HTTP date: ' + repr(value))

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=datetime.timezone.utc)

    return max(0, int(moment.timestamp()))


def parse_mime_type(value: Optional[str]) -> Optional[str]:
    if not value:
        return None

    mime = value.split(';', 1)[0].strip().lower()
    return fields.MIME_TYPE_STRINGS.get(mime)


def parse_charset(value: Optional[str]) -> Optional[str]:
    """ Return the charset token named by a Content-Type header, or None
        if there is no charset parameter or it is not recognized.
    """

    if not value:
        return None

    for parameter in value.split(';')[1:]:
        name, _, setting = parameter.partition('=')
        if name.strip().lower() == 'charset':
            return fields.CHARSET_STRINGS.get(setting.strip().strip('"').lower())

    return None


def parse_content_type(value: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    return parse_mime_type(value), parse_charset(value)


def _parse_list(value: Optional[str], table: Dict[str, str]) -> List[str]:
    if not value:
        return []

    tokens = list()

    for entry in value.split(','):
        # Quality values are accepted but not used for ordering.
        entry = entry.split(';', 1)[0].strip().lower()
        token = table.get(entry)
        if token is not None:
            tokens.append(token)

    return tokens


def parse_accept(value: Optional[str]) -> List[str]:
    return _parse_list(value, fields.MIME_TYPE_STRINGS)


def parse_accept_charset(value: Optional[str]) -> List[str]:
    return _parse_list(value, fields.CHARSET_STRINGS)


def parse_accept_language(value: Optional[str]) -> List[str]:
    return _parse_list(value, fields.LANGUAGE_STRINGS)


def allowed_methods(methods: int) -> List[str]:
    """ Expand a HeaderInfo.methods bitmask into method names, in bit order.
    """

    ordered = sorted(fields.METHOD_BITS.items(), key=lambda item: item[1])
    return [name for name, bit in ordered if methods & (1 << bit)]


def status_text(code: int) -> str:
    try:
        return http.HTTPStatus(code).phrase
    except ValueError:
        return 'Unknown Status'


def response_headers(head: HEADResponse) -> Dict[str, str]:
    """ Build the HTTP response headers a browser would expect for *head*.
        Headers with nothing meaningful to say are left out.
    """

    headers = dict()
    structure = head.data_structure
    metadata = head.metadata
    info = head.header_info

    if structure.mime_type and structure.charset:
        mime = fields.MIME_STRINGS.get(structure.mime_type, structure.mime_type)
        charset = fields.CHARSET_NAMES.get(structure.charset, structure.charset)
        headers['Content-Type'] = f"{mime}; charset={charset}"

    if metadata.size > 0:
        headers['Content-Length'] = str(metadata.size)

    if head.etag and not _zero_etag.match(head.etag):
        headers['ETag'] = head.etag

    if metadata.modified_date > 0:
        headers['Last-Modified'] = email.utils.formatdate(metadata.modified_date, usegmt=True)

    if info.cache:
        headers['Cache-Control'] = info.cache

    methods = allowed_methods(info.methods)
    if methods:
        headers['Allow'] = ', '.join(methods)

    if info.redirect:
        headers['Location'] = info.redirect

    return headers

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
