class StreamCoroutineError(Exception):
    """
    Superclass for everything that can go wrong while driving a stream
    coroutine. Lets callers clean up after any failure with one except
    clause.
    """
    def type_name(self):
        return type(self).__name__


class UsageError(StreamCoroutineError):
    """
    The suspend/resume protocol was not followed: resuming without a pending
    request, resuming with a request of the wrong kind or one that was already
    consumed, resuming a finished coroutine, or handing a completed request to
    a runtime. Never retried.
    """
    pass


class StreamError(StreamCoroutineError):
    """
    The underlying stream failed while a runtime was fulfilling a request.
    Always chained to the original OSError.
    """
    pass


class UnexpectedEOFError(StreamCoroutineError):
    """
    The stream ended before a coroutine that needs an exact amount of bytes
    got all of them. Distinct from a graceful EOF, which is not an error.
    """
    pass
