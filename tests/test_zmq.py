import pytest
import zmq

import wttp
from wttp.transport.base import TransportError, TransportPortError, TransportTimeout
from wttp.transport.zmq import request


@pytest.fixture
def client(server):

    client = request.Client(server.url, timeout=5)

    yield client

    client.close()


def test_server_port_range(server):

    assert request.minimum_port <= server.port <= request.maximum_port
    assert server.url == 'tcp://127.0.0.1:%d' % (server.port)


def test_round_trip(client, identity):

    handler = wttp.Handler(client, identity)

    assert handler.host == client.address

    handler.put('/index.html', '<html>Hello</html>', 'TEXT_HTML', 'UTF_8')
    handler.patch('/index.html', '<p>more</p>', 1)

    response = handler.get('/index.html')
    assert response.code == 200
    assert response.body == '<html>Hello</html><p>more</p>'

    assert handler.get('/missing.html').code == 404
    assert handler.head('/index.html').metadata.version == 2


def test_rejected_write(client, identity):

    handler = wttp.Handler(client, identity)

    with pytest.raises(wttp.TransportRejected):
        handler.patch('/missing.txt', 'x', 1)


def test_method_kind_mismatch(client):

    with pytest.raises(TransportError, match='read-only'):
        client.call('PUT', [['WTTP/2.0', '/a']])

    with pytest.raises(TransportError, match='state-changing'):
        client.send('HEAD', [['WTTP/2.0', '/a']])


def test_endpoint_failure_is_reported(client):

    with pytest.raises(TransportError, match='ValueError'):
        client.call('HEAD', [])

    # The server keeps answering afterwards.

    head = client.call('HEAD', [['WTTP/2.0', '/a']])
    assert head[0] == ['WTTP/2.0', '404']


def test_timeout():

    silent = request.zmq_context.socket(zmq.ROUTER)
    silent.setsockopt(zmq.LINGER, 0)
    port = silent.bind_to_random_port('tcp://127.0.0.1')

    client = request.Client('tcp://127.0.0.1:%d' % (port), timeout=0.2)

    try:
        with pytest.raises(TransportTimeout):
            client.call('HEAD', [['WTTP/2.0', '/a']])
    finally:
        client.close()
        silent.close()


def test_port_in_use(server, endpoint):

    with pytest.raises(TransportPortError):
        request.Server(endpoint, port=server.port)


def test_client_cache(server):

    first = request.client(server.url)
    second = request.client(server.url)

    assert first is second
    assert first.call('HEAD', [['WTTP/2.0', '/a']])[0][1] == '404'


def test_closed_client_leaves_cache(server, identity):

    handler = wttp.connect(server.url, identity)
    handler.transport.close()

    assert handler.transport.closed

    handler = wttp.connect(server.url, identity)

    assert not handler.transport.closed
    assert handler.head('/x').code == 404


def test_closed_socket_is_replaced(server):

    first = request.client(server.url)

    # Closing the socket directly bypasses Client.close().
    first.socket.close()

    second = request.client(server.url)

    assert second is not first
    assert second.call('HEAD', [['WTTP/2.0', '/a']])[0][1] == '404'


def test_close_ignores_uncached_client(server):

    cached = request.client(server.url)
    private = request.Client(server.url)

    private.close()

    assert request.client(server.url) is cached


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
