from streamcoro.coroutines.base import ChunkCoroutine
from streamcoro.request import Request
from streamcoro.logging import logger


class Write(ChunkCoroutine):
    """
    Writes one chunk from a queue of pending bytes.

    Resuming with the completed request returns an Output whose bytes_count is
    however many bytes the runtime got the stream to accept. That can be less
    than the queue length; the rest is NOT resent. Callers that need every
    byte delivered replace() the queue with output.buffer[bytes_count:] and
    drive the coroutine again.

    Bytes can be queued with enqueue()/extend() until the queue is handed to
    the runtime. Queueing after that starts a fresh queue, the same as
    replace().
    """
    KIND = Request.Kind.WRITE

    def __init__(self, data=b""):
        ChunkCoroutine.__init__(self, None)
        self.replace(data)

    def replace(self, data):
        queue = bytearray(data)
        self._buffer.put(queue)
        logger.debug(f"Prepared {len(queue)} bytes to be written")

    def extend(self, data):
        queue = self._buffer.peek()
        if queue is None:
            self.replace(data)
            return
        prev_len = len(queue)
        queue.extend(data)
        logger.debug(f"Prepared {prev_len}+{len(queue) - prev_len} bytes to "
                     "be written")

    enqueue = extend

    def pending(self):
        "Number of queued bytes, or 0 if the queue was handed off."
        queue = self._buffer.peek()
        return 0 if queue is None else len(queue)

    def _resumed(self, output):
        logger.debug(f"{self}: resumed after {output.bytes_count}/"
                     f"{len(output.buffer)} bytes written")
