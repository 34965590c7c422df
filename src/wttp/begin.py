""" Implementation of the top-level :func:`connect` method. This is intended
    to be the principal entry point for users talking to a resource host
    over ZeroMQ.
"""

from . import config
from .handler import Handler
from .transport.base import RandomIdentity, StaticIdentity
from .transport.zmq import request


def connect(address=None, identity=None, timeout=None):
    """ Return a :class:`Handler` bound to the resource host at *address*.
        Anything not specified comes from :func:`wttp.config.load`. The
        *identity* may be an :class:`Identity` instance or a plain address
        string.

        The underlying ZeroMQ client is cached per address, so repeated
        calls share a single connection; each call returns a new
        :class:`Handler`, which holds no state of its own.
    """

    settings = config.load()

    if address is None:
        address = settings.address

    if timeout is None:
        timeout = settings.timeout

    if identity is None:
        identity = settings.identity

    if identity is None:
        identity = RandomIdentity()
    elif isinstance(identity, str):
        identity = StaticIdentity(identity)

    transport = request.client(address, timeout)
    return Handler(transport, identity)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
