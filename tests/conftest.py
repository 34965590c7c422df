import pytest

import wttp
from wttp.transport.memory import Endpoint, MemoryTransport
from wttp.transport.zmq.request import Server


class Clock:
    """ A stand-in for time.time() that only moves when told to.
    """

    def __init__(self, now=1700000000):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds=1):
        self.now += seconds


@pytest.fixture
def clock():
    return Clock()


@pytest.fixture
def endpoint(clock):
    return Endpoint(address='0xsite', clock=clock)


@pytest.fixture
def transport(endpoint):
    return MemoryTransport(endpoint)


@pytest.fixture
def identity():
    return wttp.transport.StaticIdentity('0xpublisher')


@pytest.fixture
def handler(transport, identity):
    return wttp.Handler(transport, identity)


@pytest.fixture
def server(endpoint):

    server = Server(endpoint)

    yield server

    server.stop()


@pytest.fixture
def make_head():
    """ Return a function building a raw five-element HEAD array, with
        any sub-array replaceable by keyword.
    """

    def make(code='200', mime_type='TEXT_PLAIN', charset='UTF_8', **overrides):
        raw = {
            'line': ['WTTP/2.0', code],
            'info': ['max-age=60', '53', '', '0xadmin'],
            'metadata': ['5', '3', '1700000000'],
            'structure': ['5', mime_type, charset, 'DATAPOINT_CHUNK'],
            'etag': '0xabc123',
        }
        raw.update(overrides)
        return [raw['line'], raw['info'], raw['metadata'], raw['structure'], raw['etag']]

    return make


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
