"""
Runtimes fulfil the Requests coroutines suspend with, against a real stream.
`blocking` does it with one blocking call per request, `aio` with one asyncio
call.
"""

from streamcoro.runtimes.connection import Connection

__all__ = ["Connection"]
