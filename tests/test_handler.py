import pytest

import wttp
from wttp.protocol import codec
from wttp.protocol import headers
from wttp.protocol.errors import MalformedResponse, TransportRejected
from wttp.transport.base import Transport


class Spy(Transport):
    """ Record every request and answer with a canned result.
    """

    address = '0xspyhost'

    def __init__(self, result=None):
        self.result = result
        self.requests = list()

    def call(self, method, args):
        self.requests.append(('call', method, args))
        return self.result

    def send(self, method, args):
        self.requests.append(('send', method, args))
        return self.result


def test_put_then_get(handler):

    handler.put('/index.html', '<html>Hello</html>', 'TEXT_HTML', 'UTF_8')
    response = handler.get('/index.html')

    assert response.code == 200
    assert response.body == '<html>Hello</html>'
    assert response.head.data_structure.mime_type == 'TEXT_HTML'
    assert response.head.data_structure.location == 'DATAPOINT_CHUNK'
    assert response.head.header_info.resource_admin == '0xpublisher'


def test_patch_appends_chunks(handler):

    handler.put('/a.txt', 'AB')
    handler.patch('/a.txt', 'CD', 1)
    handler.patch('/a.txt', 'EF', 2)

    response = handler.get('/a.txt')

    assert response.body == 'ABCDEF'
    assert response.head.metadata.size == 6
    assert response.head.metadata.version == 3


def test_missing_resource_is_not_an_error(handler):

    response = handler.get('/missing.html')

    assert response.code == 404
    assert response.head.response_line.ok is False

    assert handler.head('/missing.html').code == 404


def test_binary_content(handler):

    handler.put('/image.png', b'\x89PNG\x00\xff', 'IMAGE_PNG')
    response = handler.get('/image.png')

    assert response.body == b'\x89PNG\x00\xff'


def test_charset_round_trip(handler):

    handler.put('/latin.txt', 'café', 'TEXT_PLAIN', 'LATIN1')
    response = handler.get('/latin.txt')

    assert response.head.metadata.size == 4
    assert response.body == 'café'


def test_get_is_idempotent(handler):

    handler.put('/a.txt', 'AB')

    first = handler.get('/a.txt')
    second = handler.get('/a.txt')

    assert first.head.metadata.version == second.head.metadata.version
    assert first.head.etag == second.head.etag
    assert first.body == second.body


def test_versions_and_timestamps(handler, clock):

    handler.put('/a.txt', 'AB')
    first = handler.head('/a.txt')

    clock.advance(30)
    handler.patch('/a.txt', 'CD', 1)
    second = handler.head('/a.txt')

    assert second.metadata.version > first.metadata.version
    assert second.metadata.modified_date == first.metadata.modified_date + 30
    assert second.etag != first.etag


def test_put_replaces_chunks(handler):

    handler.put('/a.txt', 'AB')
    handler.patch('/a.txt', 'CD', 1)
    handler.put('/a.txt', 'XY')

    assert handler.get('/a.txt').body == 'XY'


def test_patch_missing_resource_is_rejected(handler):

    with pytest.raises(TransportRejected) as info:
        handler.patch('/missing.txt', 'CD', 1)

    assert info.value.result['code'] == 404


def test_chunk_range(handler):

    handler.put('/a.txt', 'AB')
    handler.patch('/a.txt', 'CD', 1)
    handler.patch('/a.txt', 'EF', 2)

    response = handler.get('/a.txt', 1, 1)
    assert response.code == 206
    assert response.body == 'CD'
    assert response.head.data_structure.size == 2
    assert response.head.metadata.size == 6

    response = handler.get('/a.txt', 1)
    assert response.code == 206
    assert response.body == 'CDEF'

    response = handler.get('/a.txt', 5, 6)
    assert response.code == 416
    assert response.body == b''


def test_get_argument_order():

    spy = Spy(result=None)
    handler = wttp.Handler(spy, wttp.transport.StaticIdentity('0xme'))

    with pytest.raises(MalformedResponse):
        handler.get('/a', 1, 2, '0xetag', 99, accept=['TEXT_HTML'])

    kind, method, args = spy.requests[0]

    assert kind == 'call'
    assert method == 'GET'
    assert args == [['WTTP/2.0', '/a'], [['TEXT_HTML'], [], [], 99, '0xetag'], ['0xspyhost', 1, 2]]


def test_write_argument_order():

    spy = Spy(result={'status': 1, 'code': 200})
    handler = wttp.Handler(spy, wttp.transport.StaticIdentity('0xme'), host='0xother')

    assert handler.host == '0xother'

    handler.put('/a', 'AB')
    handler.patch('/a', 'CD', 3)

    assert spy.requests == [
        ('send', 'PUT', [['WTTP/2.0', '/a'], 'TEXT_PLAIN', 'UTF_8', 'DATAPOINT_CHUNK', '0xme', '0x4142']),
        ('send', 'PATCH', [['WTTP/2.0', '/a'], '0x4344', 3, '0xme']),
    ]


def test_write_rejections():

    handler = wttp.Handler(Spy(result=False))

    with pytest.raises(TransportRejected):
        handler.put('/a', 'AB')

    handler = wttp.Handler(Spy(result={'status': 0, 'error': 'not the admin'}))

    with pytest.raises(TransportRejected, match='not the admin'):
        handler.patch('/a', 'AB', 1)


def test_garbage_response():

    handler = wttp.Handler(Spy(result=['not', 'a', 'response']))

    with pytest.raises(MalformedResponse):
        handler.get('/a')

    with pytest.raises(MalformedResponse):
        handler.head('/a')


def test_random_identity():

    spy = Spy(result=True)
    handler = wttp.Handler(spy)

    handler.put('/a', 'AB')

    caller = spy.requests[0][2][4]
    assert caller.startswith('0x')
    assert len(caller) == 42


def test_fetch(handler):

    handler.fetch('/page.html', 'put', {'Content-Type': 'text/html; charset=utf-8'}, '<p>hi</p>')
    handler.fetch('/page.html', 'PATCH', {'range': 'chunks=1'}, '<p>more</p>')

    response = handler.fetch('/page.html')
    assert response.code == 200
    assert response.body == '<p>hi</p><p>more</p>'
    assert response.head.data_structure.mime_type == 'TEXT_HTML'

    response = handler.fetch('/page.html', headers={'RANGE': 'chunks=1-'})
    assert response.code == 206
    assert response.body == '<p>more</p>'

    head = handler.fetch('/page.html', 'HEAD')
    assert head.code == 200


def test_fetch_put_defaults(handler):

    handler.fetch('/plain', 'PUT', body='text')

    head = handler.head('/plain')
    assert head.data_structure.mime_type == 'TEXT_PLAIN'
    assert head.data_structure.charset == 'UTF_8'


def test_fetch_errors(handler):

    with pytest.raises(ValueError):
        handler.fetch('/a', 'PUT')

    with pytest.raises(ValueError):
        handler.fetch('/a', 'PATCH', body='x')

    with pytest.raises(ValueError):
        handler.fetch('/a', 'DELETE')

    with pytest.raises(ValueError):
        handler.fetch('/a', headers={'If-Modified-Since': 'last week'})


def test_fetch_if_modified_since(make_head):

    spy = Spy(result=[make_head(), '0x41'])
    handler = wttp.Handler(spy)

    head = codec.decode_head_array(make_head())
    last_modified = headers.response_headers(head)['Last-Modified']

    response = handler.fetch('/a.txt', headers={'If-Modified-Since': last_modified})
    assert response.body == 'A'

    kind, method, args = spy.requests[-1]
    assert method == 'GET'
    assert args[1][3] == 1700000000

    handler.fetch('/a.txt', headers={'if-modified-since': '1700000123'})
    assert spy.requests[-1][2][1][3] == 1700000123


def test_fetch_if_modified_since_round_trip(handler):

    handler.put('/a.txt', 'AB')
    last_modified = headers.response_headers(handler.head('/a.txt'))['Last-Modified']

    response = handler.fetch('/a.txt', headers={'If-Modified-Since': last_modified})

    assert response.code == 200
    assert response.body == 'AB'


@pytest.mark.parametrize('charset', ['LATIN1', 'UCS_2', 'UTF_8'])
def test_patch_keeps_resource_charset(handler, charset):

    handler.put('/l.txt', 'caf', 'TEXT_PLAIN', charset)
    handler.patch('/l.txt', 'é', 1, charset=charset)

    assert handler.get('/l.txt').body == 'café'


def test_fetch_patch_charset(handler):

    handler.fetch('/l.txt', 'PUT', {'Content-Type': 'text/plain; charset=latin1'}, 'caf')
    handler.fetch('/l.txt', 'PATCH', {'Content-Type': 'text/plain; charset=latin1', 'Range': 'chunks=1'}, 'é')

    response = handler.get('/l.txt')
    assert response.head.data_structure.charset == 'LATIN1'
    assert response.body == 'café'


def test_empty_text_round_trip(handler):

    handler.put('/empty.txt', '')
    assert handler.get('/empty.txt').body == ''

    handler.put('/empty.png', b'', 'IMAGE_PNG')
    assert handler.get('/empty.png').body == b''


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
