from streamcoro.request import Output, Request
from streamcoro.coroutines import Read, Write, ReadExact, ReadToEnd
from streamcoro.errors import StreamCoroutineError, UsageError, \
    StreamError, UnexpectedEOFError
from streamcoro.config import MainConfig, get_program_config

__all__ = ["Output", "Request", "Read", "Write", "ReadExact", "ReadToEnd",
           "StreamCoroutineError", "UsageError", "StreamError",
           "UnexpectedEOFError", "MainConfig", "get_program_config"]
