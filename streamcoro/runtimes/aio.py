"""
Runtime performing a single asyncio call per request. The caller suspends at
the one await inside handle(), and may be cancelled there.

Streams need coroutine methods read_into(buffer) and write(data), both
returning the byte count of a single attempt. See Connection.

Cancelling handle() aborts the call. The buffer of the request is lost with
it: the coroutine that issued the request no longer owns anything and answers
further resumes with an error.
"""

import asyncio

from streamcoro.request import Request
from streamcoro.runtimes.common import take_pending, completed, \
    stream_errors, track
from streamcoro.logging import logger


__all__ = ["handle", "run"]


async def handle(stream, request):
    """
    Fulfils one pending request against the stream and returns the completed
    request to resume the coroutine with. Short reads and writes, including
    0-byte ones, are returned as they are.
    """
    with track(request):
        kind = request.kind
        buffer = take_pending(request)
        try:
            with stream_errors(kind):
                if kind == Request.Kind.READ:
                    logger.debug(f"Reading up to {len(buffer)} bytes "
                                 "asynchronously")
                    bytes_count = await stream.read_into(buffer)
                else:
                    logger.debug(f"Writing up to {len(buffer)} bytes "
                                 "asynchronously")
                    bytes_count = await stream.write(buffer)
        except asyncio.CancelledError:
            logger.debug(f"Cancelled while waiting to {kind.value}, "
                         f"{len(buffer)} bytes buffer dropped")
            raise
        return completed(kind, buffer, bytes_count)


async def run(coroutine, stream):
    """
    Drives a coroutine to completion and returns its result. Faults reported
    by the coroutine are raised.
    """
    arg = None
    while True:
        result = coroutine.resume(arg)
        if not isinstance(result, Request):
            return result
        arg = await handle(stream, result)
