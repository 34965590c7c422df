""" An in-memory WTTP resource endpoint, and a :class:`Transport` that talks
    to it directly. The endpoint answers GET, HEAD, PUT and PATCH with the
    same positional shapes a remote site returns, which makes it the
    reference counterpart for the client in tests, and the backing store
    for :class:`wttp.transport.zmq.request.Server`.
"""

import hashlib
import logging
import threading
import time

from .. import json
from ..protocol import content
from ..protocol import fields
from .base import Transport, TransportError

logger = logging.getLogger(__name__)


# The methods a resource hosted here will accept.

methods = 0
for _name in (fields.GET, fields.PUT, fields.PATCH, fields.HEAD):
    methods |= 1 << fields.METHOD_BITS[_name]
del _name


class Resource:
    """ A single path's worth of state: the chunks that make up its body,
        their declared type, and the revision counter.
    """

    def __init__(self, mime_type, charset, location, admin):

        self.mime_type = mime_type
        self.charset = charset
        self.location = location
        self.admin = admin
        self.cache = ''
        self.redirect = ''

        self.chunks = dict()
        self.version = 0
        self.modified = 0


    def indices(self, start=0, end=0):
        """ Return the chunk indices in the span, in order. A nonzero *end*
            is the last chunk index included; zero means through the last
            chunk.
        """

        selected = list()

        for index in sorted(self.chunks):
            if index < start:
                continue
            if end and index > end:
                break
            selected.append(index)

        return selected


    def assemble(self, start=0, end=0):
        return b''.join(self.chunks[index] for index in self.indices(start, end))


    def etag(self):
        return '0x' + hashlib.sha256(self.assemble()).hexdigest()


# end of class Resource



class Endpoint:
    """ Hold any number of :class:`Resource` instances keyed by path. The
        *address* identifies this endpoint; the *clock* supplies the
        modification timestamps and can be replaced for testing.
    """

    def __init__(self, address=None, clock=time.time):

        if address is None:
            address = '0x' + hashlib.sha1(str(id(self)).encode()).hexdigest()

        self.address = address
        self.clock = clock
        self.resources = dict()
        self.lock = threading.Lock()

        self.handlers = {
            fields.GET: self.get,
            fields.HEAD: self.head,
            fields.PUT: self.put,
            fields.PATCH: self.patch,
        }


    def dispatch(self, method, args):
        """ Invoke *method* with the positional *args*. Arguments that do
            not have the expected shape raise ValueError.
        """

        try:
            handler = self.handlers[method]
        except KeyError:
            raise ValueError('unsupported method: ' + repr(method)) from None

        args = list(args)
        logger.debug("%s %s", method, args[0] if args else None)

        with self.lock:
            try:
                return handler(*args)
            except TypeError as exc:
                raise ValueError("bad arguments for %s: %s" % (method, exc)) from exc


    def _path(self, line):

        if not isinstance(line, (list, tuple)) or len(line) != 2:
            raise ValueError('request line must be [protocol, path]')

        protocol, path = line
        return protocol, path


    def _head(self, code, resource=None, size=None):

        line = [fields.PROTOCOL_VERSION, str(code)]

        if resource is None:
            return [line, ['', str(methods), '', ''], ['0', '0', '0'], ['0', '', '', ''], '']

        total = len(resource.assemble())
        if size is None:
            size = total

        info = [resource.cache, str(methods), resource.redirect, resource.admin]
        metadata = [str(total), str(resource.version), str(resource.modified)]
        structure = [str(size), resource.mime_type, resource.charset, resource.location]

        return [line, info, metadata, structure, resource.etag()]


    def head(self, line):

        protocol, path = self._path(line)

        if protocol != fields.PROTOCOL_VERSION:
            return self._head(505)

        resource = self.resources.get(path)
        if resource is None:
            return self._head(404)

        return self._head(200, resource)


    def get(self, line, header, request):

        protocol, path = self._path(line)

        if protocol != fields.PROTOCOL_VERSION:
            return [self._head(505), '0x']

        # The conditional fields in the request header are accepted and
        # ignored; there is no 304 handling.

        try:
            host, start, end = request
        except (TypeError, ValueError) as exc:
            raise ValueError('GET request must be [host, start, end]') from exc

        resource = self.resources.get(path)
        if resource is None:
            return [self._head(404), '0x']

        if start == 0 and end == 0:
            body = resource.assemble()
            return [self._head(200, resource), content.to_wire(body)]

        if not resource.indices(start, end):
            return [self._head(416, resource, 0), '0x']

        body = resource.assemble(start, end)
        return [self._head(206, resource, len(body)), content.to_wire(body)]


    def _rejected(self, code, error):
        logger.warning("rejected: %d %s", code, error)
        return {'status': 0, 'code': code, 'error': error}


    def _accepted(self, code, resource):
        return {
            'status': 1,
            'code': code,
            'version': resource.version,
            'etag': resource.etag(),
            'size': len(resource.assemble()),
        }


    def put(self, line, mime_type, charset, location, publisher, data):

        protocol, path = self._path(line)

        if protocol != fields.PROTOCOL_VERSION:
            return self._rejected(505, 'unsupported protocol: ' + repr(protocol))

        if not mime_type:
            return self._rejected(400, 'MIME type is required for PUT requests')

        if not location:
            return self._rejected(400, 'Content-Location is required for PUT requests')

        try:
            data = content.from_wire(data)
        except ValueError as exc:
            return self._rejected(400, str(exc))

        resource = self.resources.get(path)

        if resource is None:
            resource = Resource(mime_type, charset, location, publisher)
            self.resources[path] = resource
            code = 201
        else:
            resource.mime_type = mime_type
            resource.charset = charset
            resource.location = location
            code = 200

        resource.chunks = {0: data}
        resource.version += 1
        resource.modified = int(self.clock())

        return self._accepted(code, resource)


    def patch(self, line, data, chunk, publisher):

        protocol, path = self._path(line)

        if protocol != fields.PROTOCOL_VERSION:
            return self._rejected(505, 'unsupported protocol: ' + repr(protocol))

        resource = self.resources.get(path)
        if resource is None:
            return self._rejected(404, 'no resource at ' + repr(path))

        if isinstance(chunk, bool) or not isinstance(chunk, int) or chunk < 0:
            return self._rejected(400, 'invalid chunk index: ' + repr(chunk))

        try:
            data = content.from_wire(data)
        except ValueError as exc:
            return self._rejected(400, str(exc))

        resource.chunks[chunk] = data
        resource.version += 1
        resource.modified = int(self.clock())

        return self._accepted(200, resource)


# end of class Endpoint



class MemoryTransport(Transport):
    """ Execute requests directly against an :class:`Endpoint`. Arguments
        and results pass through the JSON encoding so that they look exactly
        as they would having crossed a real wire.
    """

    def __init__(self, endpoint=None):

        if endpoint is None:
            endpoint = Endpoint()

        self.endpoint = endpoint
        self.address = endpoint.address


    def _execute(self, method, args):

        args = json.loads(json.dumps(list(args)))

        try:
            result = self.endpoint.dispatch(method, args)
        except ValueError as exc:
            raise TransportError(str(exc)) from exc

        return json.loads(json.dumps(result))


    def call(self, method, args):

        if method not in fields.READ_METHODS:
            raise TransportError(method + ' is not a read-only method')

        return self._execute(method, args)


    def send(self, method, args):

        if method not in fields.WRITE_METHODS:
            raise TransportError(method + ' is not a state-changing method')

        return self._execute(method, args)


# end of class MemoryTransport


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
