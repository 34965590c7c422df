"""
WTTP Protocol Layer
===================

This package defines the transport-agnostic request/response protocol used
by the WTTP client. It provides the envelope structures, the codec that
lays them out for the transport and reads responses back, and the rules
for interpreting bodies and validating writes.

The protocol layer MUST NOT depend on any transport implementation
(e.g. ZeroMQ, the in-memory endpoint, etc).

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

User Code
    │
    ▼
Resource Handler (wttp.handler)
    High-level semantic API
    - get()
    - put()
    - patch()
    - head()
    Hides codec + transport details

    │
    ▼
Codec (codec.py)
    Positional request encoding, schema-driven response decoding
    - Raises MalformedResponse for any structural problem
    - No transport awareness

    │
    ▼
Content Interpreter (content.py) / Validator (validate.py)
    Text versus opaque body decisions, accepted versus rejected writes

    │
    ▼
Envelope Model (message.py)
    Immutable protocol data structures

    │
    ▼
Field Vocabulary (fields.py)
    Version string, method names, MIME/charset/location tokens

---------------------------------------------------------------------

Below the Protocol Layer (for context)
--------------------------------------

Transport Layer (wttp.transport)
    Executes call() and send() against a resource endpoint
    - ZeroMQ
    - in-memory reference endpoint

---------------------------------------------------------------------
"""

from .fields import PROTOCOL_VERSION
from .errors import (
    ProtocolError,
    MalformedResponse,
    UnsupportedCharset,
    TransportRejected,
)

from . import fields
from . import message
from . import content
from . import codec
from . import validate
from . import headers


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
