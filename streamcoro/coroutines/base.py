"""
Common suspend/resume logic of coroutines that move a single chunk of bytes.
"""

from streamcoro.collections import OwnedCell
from streamcoro.request import Request
from streamcoro.logging import logger


class ChunkCoroutine:
    """
    Abstract class. Owns one buffer, hands it to the runtime in a pending
    request of kind KIND on the first resume, and gives the Output back to the
    caller on the second. The buffer is not reacquired afterwards; subclasses
    offer replace() for that.

    resume() never raises for protocol violations. It returns an ERROR request
    instead, which runtimes and drivers turn into a UsageError.
    """
    KIND = None

    def __init__(self, buffer):
        self._buffer = OwnedCell(buffer)

    def owns_buffer(self):
        return not self._buffer.empty()

    def resume(self, arg=None):
        """
        Returns an Output once the runtime fulfilled our request, a Request
        otherwise. Pass None to start, then whatever the runtime returned.
        """
        if arg is None:
            return self._suspend()

        if arg.consumed:
            return Request.error(f"{self} resumed with a consumed request")
        if arg.is_error:
            return arg
        if arg.kind != self.KIND:
            return Request.error(
                f"{self} expected a {self.KIND.value} request, "
                f"got {arg.kind.value}")
        if arg.is_pending:
            logger.debug(f"{self}: request not fulfilled yet, suspending")
            return arg

        output = arg.take()
        self._resumed(output)
        return output

    def _suspend(self):
        buffer = self._buffer.take()
        if buffer is None:
            return Request.error(
                f"{self} has no buffer to hand over; it is suspended, "
                "finished or was cancelled")
        try:
            buffer = self._prepare(buffer)
        except BufferError as e:
            self._buffer.put(buffer)
            return Request.error(f"{self} cannot resize its buffer, a view "
                                 f"of it is still held: {e}")
        logger.debug(f"{self}: need I/O on {len(buffer)} bytes, suspending")
        return Request(self.KIND, buffer)

    def _prepare(self, buffer):
        return buffer

    def _resumed(self, output):
        pass

    def __str__(self):
        return type(self).__name__
