"""
The vocabulary coroutines and runtimes use to suspend and resume.

A coroutine suspends by returning a pending Request that owns the buffer it
wants read into or written from. A runtime fulfils it and returns a completed
Request owning an Output built around the same buffer. Neither side may touch
a buffer after handing it over.
"""

from enum import Enum
from streamcoro.errors import UsageError


__all__ = ["Output", "Request"]


class Output:
    """
    An owned buffer plus the count of bytes meaningfully populated at its
    start. The buffer may be larger than bytes_count so that one allocation
    can be reused across partial reads; only the prefix is valid data.
    """

    def __init__(self, buffer, bytes_count):
        if not 0 <= bytes_count <= len(buffer):
            raise ValueError(
                f"Byte count {bytes_count} out of range for buffer of "
                f"{len(buffer)} bytes")
        self.buffer = buffer
        self.bytes_count = bytes_count

    def __len__(self):
        return self.bytes_count

    def bytes(self):
        "Copy of the valid prefix."
        return bytes(self.buffer[:self.bytes_count])

    def view(self):
        """
        Zero-copy memoryview of the valid prefix. MUST be released before the
        buffer is resized, e.g. by handing it back to a read coroutine.
        """
        return memoryview(self.buffer)[:self.bytes_count]

    def __eq__(self, other):
        if not isinstance(other, Output):
            return NotImplemented
        return (self.bytes_count == other.bytes_count and
                self.buffer == other.buffer)

    def __repr__(self):
        return f"Output({self.bytes_count}/{len(self.buffer)} bytes)"


class Request:
    """
    Tagged value exchanged at a suspension point. READ and WRITE requests
    carry either a pending buffer (suspend form, going to a runtime) or a
    completed Output (resume form, coming back from it). ERROR requests carry
    the exception describing a terminal fault.

    Whoever fulfils a request calls take(), after which the request is
    consumed and any further use of it is a usage error.
    """

    class Kind(Enum):
        ERROR = "error"
        READ = "read"
        WRITE = "write"

    _CONSUMED = object()

    def __init__(self, kind, outcome):
        self.kind = kind
        self._outcome = outcome

    @classmethod
    def error(cls, error):
        "Builds an error request from an exception, or a message."
        if not isinstance(error, BaseException):
            error = UsageError(error)
        return cls(cls.Kind.ERROR, error)

    @classmethod
    def read(cls, outcome):
        return cls(cls.Kind.READ, outcome)

    @classmethod
    def write(cls, outcome):
        return cls(cls.Kind.WRITE, outcome)

    @property
    def consumed(self):
        return self._outcome is self._CONSUMED

    @property
    def is_error(self):
        return self.kind == self.Kind.ERROR

    @property
    def is_pending(self):
        return not self.is_error and not self.consumed and \
            not isinstance(self._outcome, Output)

    @property
    def is_completed(self):
        return not self.is_error and isinstance(self._outcome, Output)

    @property
    def exception(self):
        if not self.is_error or self.consumed:
            return None
        return self._outcome

    @property
    def message(self):
        if not self.is_error or self.consumed:
            return None
        return str(self._outcome)

    def take(self):
        """
        Moves the outcome (pending buffer, Output or exception) out of the
        request. Raises UsageError if it was taken already.
        """
        if self.consumed:
            raise UsageError(f"{self.kind.value} request was already consumed")
        outcome, self._outcome = self._outcome, self._CONSUMED
        return outcome

    def __repr__(self):
        if self.consumed:
            state = "consumed"
        elif self.is_error:
            state = repr(self._outcome)
        elif self.is_completed:
            state = repr(self._outcome)
        else:
            state = f"pending {len(self._outcome)} bytes"
        return f"Request.{self.kind.value}({state})"
