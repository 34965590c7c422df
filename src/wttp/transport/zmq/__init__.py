"""ZeroMQ transport backend."""

from . import framing
from . import request
