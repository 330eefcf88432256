from streamcoro.coroutines.base import ChunkCoroutine
from streamcoro.request import Request
from streamcoro.logging import logger


class Read(ChunkCoroutine):
    """
    Reads one chunk of at most `capacity` bytes.

    The first resume() hands the buffer to the runtime. Resuming with the
    completed request returns its Output, which owns the same buffer from then
    on; a bytes_count of 0 means the stream ended. To read another chunk, give
    the buffer back with replace().
    """
    KIND = Request.Kind.READ
    DEFAULT_CAPACITY = 1024

    def __init__(self, capacity=DEFAULT_CAPACITY, *, buffer=None):
        if buffer is None:
            self._check_capacity(capacity)
            buffer = bytearray(capacity)
        ChunkCoroutine.__init__(self, None)
        self.replace(buffer)

    @classmethod
    def from_buffer(cls, buffer):
        return cls(buffer=buffer)

    @classmethod
    def build(cls, config):
        return cls(config.read_capacity)

    @staticmethod
    def _check_capacity(capacity):
        if capacity <= 0:
            raise ValueError(f"Read capacity must be positive, got {capacity}")

    @property
    def capacity(self):
        return self._capacity

    @capacity.setter
    def capacity(self, capacity):
        "Takes effect when the buffer is next handed to the runtime."
        self._check_capacity(capacity)
        self._capacity = capacity

    def replace(self, buffer):
        """
        Swaps in a buffer for the next chunk; its length becomes the capacity.
        Anything but a bytearray is copied into one.
        """
        if not isinstance(buffer, bytearray):
            buffer = bytearray(buffer)
        self._check_capacity(len(buffer))
        self._capacity = len(buffer)
        self._buffer.put(buffer)
        logger.debug(f"Prepared buffer of {len(buffer)} bytes to be read")

    def _prepare(self, buffer):
        # Resizing in place keeps the allocation when shrinking.
        if len(buffer) > self._capacity:
            del buffer[self._capacity:]
        elif len(buffer) < self._capacity:
            buffer.extend(bytes(self._capacity - len(buffer)))
        return buffer

    def _resumed(self, output):
        logger.debug(f"{self}: resumed after {output.bytes_count}/"
                     f"{len(output.buffer)} bytes read")
