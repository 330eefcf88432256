import asyncio


class Connection:
    """
    Wraps an asyncio reader/writer pair into a stream for the asyncio runtime:
    a single read into a caller's buffer, and a single write reporting how
    many bytes were accepted. Writing after close() raises ConnectionError.
    """

    def __init__(self, reader, writer):
        self.reader = reader
        self.writer = writer
        self._closed = False

    @classmethod
    async def open(cls, host, port, **kwargs):
        "Connects to host:port; kwargs go to asyncio.open_connection."
        reader, writer = await asyncio.open_connection(host, port, **kwargs)
        return cls(reader, writer)

    async def read_into(self, buffer):
        data = await self.reader.read(len(buffer))
        buffer[:len(data)] = data
        return len(data)

    async def write(self, data):
        if self._closed:
            raise ConnectionError("Connection is closed")
        # The transport may keep a view of what we pass until it's sent.
        self.writer.write(bytes(data))
        await self.writer.drain()
        return len(data)

    async def close(self):
        self._closed = True
        self.writer.close()
        await self.writer.wait_closed()
        # Reader and writer share a transport, so no need to close reader.

    def closed(self):
        return self._closed

    def __str__(self):
        return f"Connection {id(self)}"
