import pytest

from form_method.body import ChunkedBody, as_byte_source


def test_reads_across_chunks() -> None:
    body = ChunkedBody([b"_met", b"", b"hod=P", b"UT&x=y"])
    assert body.remaining == 15

    buffer = bytearray(11)
    assert body.readinto(buffer) == 11
    assert buffer == b"_method=PUT"
    assert body.remaining == 4

    rest = bytearray(4)
    body.readinto(rest)
    assert rest == b"&x=y"
    assert body.remaining == 0


def test_never_reads_past_requested_length() -> None:
    body = ChunkedBody([b"abcdef"])
    buffer = bytearray(2)
    body.readinto(buffer)
    assert buffer == b"ab"
    assert body.remaining == 4


def test_rejects_reading_more_than_remaining() -> None:
    body = ChunkedBody([b"abc"])
    with pytest.raises(ValueError):
        body.readinto(bytearray(4))
    assert body.remaining == 3


def test_empty_body() -> None:
    body = ChunkedBody()
    assert body.remaining == 0
    assert body.readinto(bytearray()) == 0


def test_as_byte_source() -> None:
    assert as_byte_source(b"abc").remaining == 3
    assert as_byte_source(bytearray(b"ab")).remaining == 2
    assert as_byte_source(memoryview(b"a")).remaining == 1

    body = ChunkedBody([b"abc"])
    assert as_byte_source(body) is body
