""" Body interpretation. Whether a response body is handed back as text or
    as opaque bytes depends only on the declared MIME token, checked against
    the closed set in :data:`wttp.protocol.fields.TEXT_MIME_TYPES`, and on
    whether there is anything to decode at all.
"""

from __future__ import annotations

import binascii
import codecs
from typing import Union

from . import fields
from .errors import MalformedResponse, UnsupportedCharset


def is_text(mime_type: str) -> bool:
    return mime_type in fields.TEXT_MIME_TYPES


def codec_for(charset: str) -> str:
    """ Return the Python codec name for a charset token. The token may be
        given by name ('UTF_8') or by its two-byte code ('0x7508'); an unset
        charset means UTF-8. Anything else raises :class:`UnsupportedCharset`.
    """

    if charset in fields.CHARSET_UNSET:
        return fields.CHARSET_CODECS[fields.DEFAULT_CHARSET]

    name = charset
    if name not in fields.CHARSET_CODECS:
        for token, code in fields.CHARSET_TYPES.items():
            if code.lower() == str(charset).lower():
                name = token
                break
        else:
            raise UnsupportedCharset(charset)

    codec = fields.CHARSET_CODECS[name]

    try:
        codecs.lookup(codec)
    except LookupError as exc:
        raise UnsupportedCharset(charset) from exc

    return codec


def from_wire(raw: Union[str, bytes, bytearray]) -> bytes:
    """ Undo the transport's byte encoding: ``0x``-prefixed hex strings
        become bytes, bytes pass through untouched.
    """

    if isinstance(raw, (bytes, bytearray)):
        return bytes(raw)

    if not isinstance(raw, str):
        raise MalformedResponse(f"body must be a hex string or bytes, not {type(raw).__name__}")

    digits = raw[2:] if raw[:2].lower() == '0x' else raw

    try:
        return binascii.unhexlify(digits)
    except (binascii.Error, ValueError) as exc:
        raise MalformedResponse(f"body is not valid hex: {raw[:32]!r}") from exc


def to_wire(content: Union[str, bytes, bytearray], charset: str = fields.DEFAULT_CHARSET) -> str:
    """ Encode *content* as a ``0x``-prefixed hex string. Text is first
        encoded with the codec for *charset*.
    """

    if isinstance(content, str):
        content = content.encode(codec_for(charset))

    return '0x' + binascii.hexlify(bytes(content)).decode('ascii')


def opaque_body(raw_body) -> Union[str, bytes]:
    """ Return the payload bytes of *raw_body* without any text decoding.
        An empty body is returned as it arrived.
    """

    if raw_body in ('', b''):
        return raw_body

    return from_wire(raw_body)


def interpret_body(raw_body, mime_type: str, charset: str) -> Union[str, bytes]:
    """ Return the decoded text of *raw_body* if *mime_type* is text based,
        otherwise the opaque payload bytes.

        Decoding is never attempted on an empty body. For a text type it
        comes back as ``''``; otherwise it is returned as it arrived, with
        an empty hex string ('0x') coming back as ``b''``.
    """

    payload = opaque_body(raw_body)

    if not is_text(mime_type):
        return payload

    if not payload:
        return ''

    codec = codec_for(charset)

    try:
        return payload.decode(codec)
    except UnicodeDecodeError as exc:
        raise MalformedResponse(f"body is not valid {codec}") from exc

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
