import pytest

from ydecode.types import Header, PartHeader, Trailer
from ydecode.utils import (
    parse_attributes,
    parse_header,
    parse_hex32,
    parse_int,
    parse_part_header,
    parse_trailer,
    strip_eol,
)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        (b"abc\r\n", b"abc"),
        (b"abc\n", b"abc"),
        (b"abc", b"abc"),
        (b"abc\r", b"abc\r"),
        (b"\r\n", b""),
    ],
)
def test_strip_eol(line: bytes, expected: bytes) -> None:
    assert strip_eol(line) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("128", 128),
        ("+5", 5),
        ("-1", -1),
        ("", 0),
        ("12a", 0),
        ("0x10", 0),
        ("1.5", 0),
    ],
)
def test_parse_int(value: str, expected: int) -> None:
    assert parse_int(value) == expected


def test_parse_int_default() -> None:
    assert parse_int("abc", default=-1) == -1


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("00000000", 0),
        ("ffffffff", 0xFFFFFFFF),
        ("DED29F4F", 0xDED29F4F),
        ("1234", 0x1234),
        ("123456789", 0x23456789),
        ("", 0),
        ("0x1234", 0),
        ("xyz", 0),
    ],
)
def test_parse_hex32(value: str, expected: int) -> None:
    assert parse_hex32(value) == expected


def test_parse_attributes() -> None:
    assert parse_attributes(" part=1 line=128 size=500 name= a b=c.bin ") == {
        "part": "1",
        "line": "128",
        "size": "500",
        "name": "a b=c.bin",
    }


def test_parse_attributes_ignores_bare_tokens() -> None:
    assert parse_attributes("size=5 junk line=128") == {"size": "5", "line": "128"}


def test_parse_attributes_splits_on_first_equals() -> None:
    assert parse_attributes("size=5=6") == {"size": "5=6"}


def test_parse_header() -> None:
    header = parse_header(b"=ybegin line=128 size=5 name=test.bin")
    assert header == Header(name="test.bin", size=5, line=128, part=None, total=0)


def test_parse_header_multipart() -> None:
    header = parse_header(
        b"=ybegin part=2 total=3 line=128 size=123456 name=my file size=9.bin"
    )
    assert header == Header(
        name="my file size=9.bin", size=123456, line=128, part=2, total=3
    )


def test_parse_header_any_order() -> None:
    header = parse_header(b"=ybegin size=10 total=1 part=1 line=64 name=x")
    assert header == Header(name="x", size=10, line=64, part=1, total=1)


def test_parse_header_soft_integers() -> None:
    header = parse_header(b"=ybegin line=abc size= part=x name=test.bin")
    assert header == Header(name="test.bin", size=0, line=0, part=0, total=0)


def test_parse_header_unknown_keys() -> None:
    header = parse_header(b"=ybegin foo=bar size=5 name=test.bin")
    assert header.size == 5


def test_parse_header_no_name() -> None:
    assert parse_header(b"=ybegin line=128 size=5").name == ""


def test_parse_header_undecodable_name() -> None:
    header = parse_header(b"=ybegin size=5 name=caf\xe9.bin")
    assert header.name.encode("utf-8", "surrogateescape") == b"caf\xe9.bin"


def test_parse_part_header() -> None:
    assert parse_part_header(b"=ypart begin=1 end=640000") == PartHeader(1, 640000)
    assert parse_part_header(b"=ypart") == PartHeader(0, 0)


def test_parse_trailer() -> None:
    trailer = parse_trailer(b"=yend size=5 part=1 pcrc32=deadbeef crc32=0000ABCD")
    assert trailer == Trailer(size=5, part=1, pcrc32=0xDEADBEEF, crc32=0xABCD)


def test_parse_trailer_defaults() -> None:
    assert parse_trailer(b"=yend size=5") == Trailer(
        size=5, part=None, pcrc32=0, crc32=0
    )


def test_parse_trailer_bad_crc() -> None:
    assert parse_trailer(b"=yend size=5 crc32=zzzz").crc32 == 0
