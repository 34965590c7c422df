""" Validation of state-changing results. A PUT or PATCH result is only
    inspected for whether the remote endpoint accepted it; anything that
    reads as a rejection raises :class:`TransportRejected`. There is no
    retry here, and no attempt to undo a partial write.

    GET and HEAD results are not validated here: their status codes are
    returned to the caller as data, and their structure is checked while
    decoding in :mod:`wttp.protocol.codec`.
"""

from collections.abc import Mapping

from .errors import TransportRejected


def validate(result):
    """ Return *result* unchanged if it represents an accepted write,
        otherwise raise :class:`TransportRejected`.

        Accepted results are anything other than None or False that is not
        an explicit rejection. A mapping is a rejection if its 'status' is present and
        false, if it carries a non-empty 'error', or if its 'code' is 400 or
        greater.
    """

    if result is None:
        raise TransportRejected('no result returned for a state-changing request')

    if result is False:
        raise TransportRejected('request rejected by the remote endpoint', result)

    if isinstance(result, Mapping):
        error = result.get('error')
        if error:
            raise TransportRejected(str(error), result)

        if 'status' in result and not result['status']:
            raise TransportRejected('request rejected by the remote endpoint', result)

        code = result.get('code')
        if code is not None:
            try:
                code = int(code)
            except (TypeError, ValueError) as exc:
                raise TransportRejected('unreadable result code: ' + repr(code), result) from exc
            if code >= 400:
                raise TransportRejected('request failed with code %d' % (code), result)

    return result

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
