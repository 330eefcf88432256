from streamcoro.collections import OwnedCell
from streamcoro.coroutines.read import Read
from streamcoro.request import Request


class ReadToEnd:
    """
    Reads until the stream ends, by driving an inner Read until it reports a
    zero-length chunk. Requests of the inner Read are passed to the caller
    unchanged. Reaching the end of the stream is how this succeeds.
    """

    def __init__(self, capacity=None):
        if capacity is None:
            capacity = Read.DEFAULT_CAPACITY
        self._read = Read(capacity)
        self._data = OwnedCell(bytearray())

    @classmethod
    def build(cls, config):
        return cls(config.read_capacity)

    def resume(self, arg=None):
        while True:
            if self._data.empty():
                return Request.error(f"{self} already finished")

            result = self._read.resume(arg)
            arg = None
            if isinstance(result, Request):
                return result

            if result.bytes_count == 0:
                return self._data.take()

            with result.view() as chunk:
                self._data.peek().extend(chunk)
            self._read.replace(result.buffer)

    def __str__(self):
        return "ReadToEnd"
