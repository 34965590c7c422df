""" Python implementation of a WTTP client. This includes the protocol
    codec for WTTP/2.0 request and response envelopes, the resource handler
    that issues GET, HEAD, PUT and PATCH requests, and the transports that
    carry those requests to a resource host.
"""

# Utility components.

from . import json

# Submodules used by multiple other components.

from . import protocol
from . import transport
from . import config

# Primary public-facing interfaces.

from .handler import Handler
from .protocol import (
    ProtocolError,
    MalformedResponse,
    UnsupportedCharset,
    TransportRejected,
)
from .protocol.message import (
    RequestLine,
    RequestHeader,
    GETRequest,
    ResponseLine,
    HeaderInfo,
    Metadata,
    DataStructure,
    HEADResponse,
    GETResponse,
)

from . import begin
connect = begin.connect

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
