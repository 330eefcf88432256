"""
I/O-free, resumable stream coroutines. Each one returns Requests from
resume() that a runtime has to fulfil before it can make progress.
"""

from streamcoro.coroutines.read import Read
from streamcoro.coroutines.write import Write
from streamcoro.coroutines.readexact import ReadExact
from streamcoro.coroutines.readtoend import ReadToEnd

__all__ = ["Read", "Write", "ReadExact", "ReadToEnd"]
