"""
Bookkeeping shared by runtimes: checking that a request can be fulfilled,
and counting what was done with it.
"""

from contextlib import contextmanager

from streamcoro import metrics
from streamcoro.errors import StreamCoroutineError, StreamError, UsageError
from streamcoro.request import Output, Request
from streamcoro.logging import logger, short_exc


def take_pending(request):
    """
    Takes the buffer out of a pending READ or WRITE request. Raises the fault
    of an ERROR request, and UsageError for requests that were already
    fulfilled or consumed.
    """
    if request.consumed:
        raise UsageError(f"Runtime got a consumed {request.kind.value} "
                         "request")
    if request.is_error:
        raise request.take()
    if request.is_completed:
        raise UsageError(f"Runtime got an already fulfilled request "
                         f"{request!r}")
    return request.take()


def completed(kind, buffer, bytes_count):
    if bytes_count is None:
        raise StreamError("Stream has no data available without blocking")
    if kind == Request.Kind.READ:
        metrics.read_bytes.inc(bytes_count)
    else:
        metrics.written_bytes.inc(bytes_count)
    return Request(kind, Output(buffer, bytes_count))


@contextmanager
def stream_errors(kind):
    "Turns OSErrors of the underlying stream into StreamErrors."
    try:
        yield
    except OSError as e:
        logger.info(f"Failed to {kind.value} stream: {short_exc(e)}")
        raise StreamError(f"Failed to {kind.value} stream") from e


@contextmanager
def track(request):
    try:
        yield
    except StreamCoroutineError as e:
        metrics.failed_requests(request, e).inc()
        raise
    else:
        metrics.successful_requests(request).inc()
