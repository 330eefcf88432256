import pytest
from streamcoro.request import Output, Request


pytest_plugins = ['tests.fixtures.stream', 'tests.fixtures.connection']


@pytest.fixture
def fulfil():
    """
    Stands in for a runtime: completes a pending request with given data,
    without any stream.
    """
    def do_fulfil(request, data=b"", count=None):
        buffer = request.take()
        if request.kind == Request.Kind.READ:
            buffer[:len(data)] = data
            count = len(data)
        elif count is None:
            count = len(buffer)
        return Request(request.kind, Output(buffer, count))

    return do_fulfil
