""" The :class:`Handler` is the principal entry point for working with WTTP
    resources. Each method runs one request from start to finish: build the
    request envelope, hand it to the transport, then either validate the
    outcome (PUT, PATCH) or decode and interpret the response (GET, HEAD).
    Nothing about a resource is remembered between calls.
"""

import logging

from .protocol import codec
from .protocol import fields
from .protocol import headers as wttp_headers
from .protocol.errors import TransportRejected
from .protocol.validate import validate
from .transport.base import RandomIdentity

logger = logging.getLogger(__name__)


class Handler:
    """ Issue WTTP requests through *transport*, a
        :class:`wttp.transport.base.Transport` instance held for the life of
        the handler. The *identity* supplies the caller address for PUT and
        PATCH; if none is given a random one is generated. The *host* is the
        resource endpoint identifier sent with each GET, and defaults to
        the transport's address.
    """

    def __init__(self, transport, identity=None, host=None):

        if identity is None:
            identity = RandomIdentity()

        if host is None:
            host = transport.address

        self.transport = transport
        self.identity = identity
        self.host = host


    def get(self, path, range_start=0, range_end=0, if_none_match='',
            if_modified_since=0, *, accept=(), accept_charset=(),
            accept_language=()):
        """ Retrieve the resource at *path*. The returned
            :class:`GETResponse` carries whatever status the endpoint
            reported; a 404 is returned, not raised. A nonzero range selects
            a span of chunks, with a *range_end* of zero meaning 'to the
            end'. The conditional arguments are passed to the endpoint
            untouched.
        """

        args = codec.encode_get(
            path, range_start, range_end, if_none_match, if_modified_since,
            host=self.host, accept=accept, accept_charset=accept_charset,
            accept_language=accept_language)

        logger.debug("GET %s [%d:%d]", path, range_start, range_end)
        raw = self.transport.call(fields.GET, args)
        return codec.decode_get_array(raw)


    def put(self, path, content, mime_type=fields.DEFAULT_MIME_TYPE, charset=fields.DEFAULT_CHARSET):
        """ Create or replace the resource at *path* with *content*. Any
            chunks previously added with :func:`patch` are discarded.
        """

        args = codec.encode_put(path, content, mime_type, charset, caller=self.identity.address)

        logger.debug("PUT %s (%s, %s)", path, mime_type, charset)
        result = self.transport.send(fields.PUT, args)
        self._validate(fields.PUT, path, result)


    def patch(self, path, content, chunk_index, *, charset=fields.DEFAULT_CHARSET):
        """ Write *content* as chunk *chunk_index* of the existing resource
            at *path*. Chunk 0 is the one established by :func:`put`. Text
            content is encoded with *charset*, which should be the one the
            resource was stored with.
        """

        args = codec.encode_patch(path, content, chunk_index,
                                  caller=self.identity.address, charset=charset)

        logger.debug("PATCH %s chunk %d", path, chunk_index)
        result = self.transport.send(fields.PATCH, args)
        self._validate(fields.PATCH, path, result)


    def head(self, path):
        """ Retrieve only the :class:`HEADResponse` for *path*.
        """

        args = codec.encode_head(path)

        logger.debug("HEAD %s", path)
        raw = self.transport.call(fields.HEAD, args)
        return codec.decode_head_array(raw)


    def _validate(self, method, path, result):

        try:
            validate(result)
        except TransportRejected:
            logger.warning("%s %s rejected: %r", method, path, result)
            raise


    def fetch(self, path, method=fields.GET, headers=None, body=None):
        """ Perform a request described in HTTP terms. Recognized *headers*
            are If-None-Match, If-Modified-Since, Range, Accept,
            Accept-Charset, Accept-Language and Content-Type; header names
            are case-insensitive. If-Modified-Since may be an HTTP date or
            a Unix timestamp. A PATCH takes its chunk index from a
            'Range: chunks=N' header, and the charset for text content from
            Content-Type.

            Returns a :class:`GETResponse` for GET, a :class:`HEADResponse`
            for HEAD, and None for PUT and PATCH.
        """

        method = str(method).upper()
        headers = dict((str(key).lower(), value) for key, value in (headers or dict()).items())

        if method == fields.GET:
            start, end = wttp_headers.parse_range(headers.get('range'))
            return self.get(
                path, start, end,
                if_none_match=headers.get('if-none-match') or '',
                if_modified_since=wttp_headers.parse_if_modified_since(headers.get('if-modified-since')),
                accept=wttp_headers.parse_accept(headers.get('accept')),
                accept_charset=wttp_headers.parse_accept_charset(headers.get('accept-charset')),
                accept_language=wttp_headers.parse_accept_language(headers.get('accept-language')))

        if method == fields.HEAD:
            return self.head(path)

        if method == fields.PUT:
            if body is None:
                raise ValueError('a body is required for PUT requests')

            mime_type, charset = wttp_headers.parse_content_type(headers.get('content-type'))
            self.put(path, body,
                     mime_type or fields.DEFAULT_MIME_TYPE,
                     charset or fields.DEFAULT_CHARSET)
            return None

        if method == fields.PATCH:
            if body is None:
                raise ValueError('a body is required for PATCH requests')

            chunk_index = wttp_headers.parse_chunk_index(headers.get('range'))
            if chunk_index is None:
                raise ValueError("PATCH requires a 'Range: chunks=N' header")

            charset = wttp_headers.parse_charset(headers.get('content-type'))
            self.patch(path, body, chunk_index, charset=charset or fields.DEFAULT_CHARSET)
            return None

        raise ValueError('unsupported method: ' + repr(method))


# end of class Handler


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
