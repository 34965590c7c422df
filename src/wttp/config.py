""" Client configuration. Everything here comes from the environment, with
    defaults suitable for talking to a resource host on the local machine:

    WTTP_ADDRESS
        ZeroMQ endpoint of the resource host.
    WTTP_TIMEOUT
        Seconds to wait for a response before giving up.
    WTTP_IDENTITY
        Caller address used for PUT and PATCH; a random address is used
        when this is not set.
"""

import os
from dataclasses import dataclass
from typing import Optional

from .transport.zmq.request import minimum_port


default_address = 'tcp://localhost:%d' % (minimum_port)
default_timeout = 5.0


@dataclass(frozen=True)
class Configuration:
    address: str = default_address
    timeout: float = default_timeout
    identity: Optional[str] = None


def load(environ=None):
    """ Return a :class:`Configuration` built from *environ*, which defaults
        to :data:`os.environ`. A timeout that is not a positive number
        raises ValueError.
    """

    if environ is None:
        environ = os.environ

    address = environ.get('WTTP_ADDRESS') or default_address
    identity = environ.get('WTTP_IDENTITY') or None

    timeout = environ.get('WTTP_TIMEOUT')
    if timeout:
        try:
            timeout = float(timeout)
        except ValueError:
            raise ValueError('WTTP_TIMEOUT must be a number, not ' + repr(timeout)) from None
        if timeout <= 0:
            raise ValueError('WTTP_TIMEOUT must be positive, not ' + repr(timeout))
    else:
        timeout = default_timeout

    return Configuration(address, timeout, identity)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
