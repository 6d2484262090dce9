import io

import pytest

from ydecode.errors import EndOfInput
from ydecode.source import SequenceSource, StreamSource


def test_stream_source() -> None:
    source = StreamSource(io.BytesIO(b"one\r\ntwo\n\r\nthree\n"))
    assert source.readline() == b"one"
    assert source.readline() == b"two"
    assert source.readline() == b""
    assert source.readline() == b"three"
    with pytest.raises(EndOfInput):
        source.readline()


def test_stream_source_unterminated() -> None:
    source = StreamSource(io.BytesIO(b"one\r\ntwo"))
    assert source.readline() == b"one"
    with pytest.raises(EndOfInput, match="Unterminated"):
        source.readline()


def test_stream_source_reads_one_line() -> None:
    stream = io.BytesIO(b"one\r\ntwo\r\n")
    source = StreamSource(stream)
    source.readline()
    assert stream.read() == b"two\r\n"


def test_sequence_source() -> None:
    source = SequenceSource(["one", b"two", "three\r\n", "caf\udce9"])
    assert source.readline() == b"one"
    assert source.readline() == b"two"
    assert source.readline() == b"three"
    assert source.readline() == b"caf\xe9"
    assert source.position == 4
    with pytest.raises(EndOfInput):
        source.readline()
    with pytest.raises(EndOfInput):
        source.readline()


def test_sequence_source_generator() -> None:
    def lines():
        yield b"one"
        yield b"two"

    source = SequenceSource(lines())
    assert source.readline() == b"one"
    assert source.readline() == b"two"
    with pytest.raises(EndOfInput):
        source.readline()
