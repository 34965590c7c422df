''' Wrapper module exposing the equivalent of :func:`json.loads` and
    :func:`json.dumps` backed by msgspec. The 'dumps' method always returns
    bytes, which is what the ZeroMQ framing puts on the wire.
'''

import msgspec


encoder = msgspec.json.Encoder()
decoder = msgspec.json.Decoder()

dumps = encoder.encode
loads = decoder.decode

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
