from streamcoro.collections import OwnedCell
from streamcoro.coroutines.read import Read
from streamcoro.errors import UnexpectedEOFError
from streamcoro.request import Request
from streamcoro.logging import logger


class ReadExact:
    """
    Reads exactly `count` bytes by driving an inner Read, chunk by chunk.

    The inner Read never asks for more than the bytes still missing, so
    whatever follows them in the stream stays there for the next operation.
    Requests of the inner Read are passed to the caller unchanged, so a
    runtime sees nothing but ordinary read requests.

    If the stream ends early, resume() returns an ERROR request carrying an
    UnexpectedEOFError instead of a short result.
    """

    def __init__(self, count, capacity=None):
        if count < 0:
            raise ValueError(f"Cannot read a negative amount of {count} bytes")
        if capacity is None:
            capacity = Read.DEFAULT_CAPACITY
        self._read = Read(capacity)
        self._total = count
        self._count = count
        self._data = OwnedCell(bytearray())

    @classmethod
    def build(cls, count, config):
        return cls(count, config.read_capacity)

    @property
    def remaining(self):
        return self._count

    def resume(self, arg=None):
        """
        Returns the bytes read once there are `count` of them, a Request
        otherwise.
        """
        while True:
            if self._data.empty():
                return Request.error(f"{self} already finished")
            if self._count == 0:
                return self._data.take()

            if self._count < self._read.capacity:
                self._read.capacity = self._count

            result = self._read.resume(arg)
            arg = None
            if isinstance(result, Request):
                return result

            if result.bytes_count == 0:
                logger.debug(f"{self}: expected {self._count} more bytes, "
                             "got unexpected EOF")
                self._data.take()
                return Request.error(UnexpectedEOFError(
                    f"Stream ended after {self._total - self._count} of "
                    f"{self._total} bytes"))

            with result.view() as chunk:
                self._data.peek().extend(chunk)
            self._count -= result.bytes_count
            self._read.replace(result.buffer)

    def __str__(self):
        return f"ReadExact({self._total})"
