"""
Runtime performing a single blocking call per request. The calling thread
blocks for the duration of the call.

Streams need readinto(buffer) and write(data), both returning the byte count
of a single attempt. Raw io files and io.BytesIO qualify as they are; wrap
sockets (TLS ones included) in socket.SocketIO.
"""

from streamcoro.request import Request
from streamcoro.runtimes.common import take_pending, completed, \
    stream_errors, track
from streamcoro.logging import logger


__all__ = ["handle", "run"]


def handle(stream, request):
    """
    Fulfils one pending request against the stream and returns the completed
    request to resume the coroutine with. Short reads and writes, including
    0-byte ones, are returned as they are.
    """
    with track(request):
        kind = request.kind
        buffer = take_pending(request)
        with stream_errors(kind):
            if kind == Request.Kind.READ:
                logger.debug(f"Reading up to {len(buffer)} bytes")
                bytes_count = stream.readinto(buffer)
            else:
                logger.debug(f"Writing up to {len(buffer)} bytes")
                bytes_count = stream.write(buffer)
        return completed(kind, buffer, bytes_count)


def run(coroutine, stream):
    """
    Drives a coroutine to completion and returns its result. Faults reported
    by the coroutine are raised.
    """
    arg = None
    while True:
        result = coroutine.resume(arg)
        if not isinstance(result, Request):
            return result
        arg = handle(stream, result)
