import pytest
from streamcoro.coroutines import ReadExact
from streamcoro.errors import UnexpectedEOFError, UsageError
from streamcoro.request import Output, Request


def drive(coroutine, stream):
    arg = None
    while True:
        result = coroutine.resume(arg)
        if not isinstance(result, Request):
            return result
        assert result.kind == Request.Kind.READ
        assert result.is_pending
        buffer = result.take()
        arg = Request.read(Output(buffer, stream.readinto(buffer)))


@pytest.mark.parametrize("capacity", [1, 3, 4, 5, 1024])
def test_read_exact_leaves_rest_unread(chunked_streams, capacity):
    stream = chunked_streams(b"abcdef")
    read = ReadExact(4, capacity)
    assert drive(read, stream) == b"abcd"
    assert stream.remaining() == b"ef"


@pytest.mark.parametrize("chunk", [1, 2, 3])
def test_read_exact_short_chunks(chunked_streams, chunk):
    stream = chunked_streams(b"abcdefgh", chunk=chunk)
    read = ReadExact(5, 4)
    assert drive(read, stream) == b"abcde"
    assert stream.remaining() == b"fgh"


def test_read_exact_never_requests_more_than_needed(fulfil):
    read = ReadExact(5, 3)
    request = read.resume()
    assert len(request._outcome) == 3
    request = read.resume(fulfil(request, b"abc"))
    assert len(request._outcome) == 2
    assert read.remaining == 2
    result = read.resume(fulfil(request, b"de"))
    assert result == b"abcde"


def test_read_exact_counts_bytes_actually_read(fulfil):
    read = ReadExact(4, 4)
    request = read.resume(fulfil(read.resume(), b"a"))
    assert read.remaining == 3
    assert len(request._outcome) == 3


def test_read_exact_zero_bytes_needs_no_io():
    read = ReadExact(0)
    assert read.resume() == b""


def test_read_exact_negative_count():
    with pytest.raises(ValueError):
        ReadExact(-1)


def test_read_exact_premature_eof(chunked_streams):
    stream = chunked_streams(b"abc")
    read = ReadExact(5, 2)
    result = drive_until_error(read, stream)
    assert result.is_error
    assert isinstance(result.exception, UnexpectedEOFError)
    assert "3 of 5" in result.message


def drive_until_error(coroutine, stream):
    arg = None
    while True:
        result = coroutine.resume(arg)
        if not isinstance(result, Request) or result.is_error:
            return result
        buffer = result.take()
        arg = Request.read(Output(buffer, stream.readinto(buffer)))


def test_read_exact_finished_instance_is_an_error(chunked_streams):
    read = ReadExact(2)
    drive(read, chunked_streams(b"ab"))
    result = read.resume()
    assert result.is_error
    assert isinstance(result.exception, UsageError)


def test_read_exact_after_eof_is_an_error(chunked_streams):
    read = ReadExact(2)
    drive_until_error(read, chunked_streams(b""))
    assert isinstance(read.resume().exception, UsageError)


def test_read_exact_resume_twice_without_input_is_an_error():
    read = ReadExact(3)
    read.resume()
    assert isinstance(read.resume().exception, UsageError)


def test_read_exact_build_from_config(mocker):
    read = ReadExact.build(10, mocker.Mock(read_capacity=4))
    assert len(read.resume().take()) == 4
