"""
yEnc control line parsing.
Copyright (C) 2013-2024  Byron Platt

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program.  If not, see <http://www.gnu.org/licenses/>.
"""

import re

from .types import Header, PartHeader, Trailer
from .yenc import YBEGIN, YEND, YPART

_int_re = re.compile(r"[+-]?[0-9]+")
_hex_re = re.compile(r"[0-9a-fA-F]+")


def strip_eol(line: bytes) -> bytes:
    """Strip a trailing LF and an optional CR before it."""
    if line.endswith(b"\n"):
        line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]
    return line


def parse_int(value: str, default: int = 0) -> int:
    """Parse a decimal integer.

    Args:
        value: The value as a string.
        default: Returned when the value is not a decimal integer.

    Returns:
        The integer value or the default.
    """
    if _int_re.fullmatch(value):
        return int(value)
    return default


def parse_hex32(value: str, default: int = 0) -> int:
    """Parse a hexadecimal CRC32 value.

    Args:
        value: The value as a string of hex digits. Extra leading digits are
            tolerated, only the low 32 bits are kept.
        default: Returned when the value is not hexadecimal.

    Returns:
        The value as an unsigned 32 bit integer or the default.
    """
    if _hex_re.fullmatch(value):
        return int(value, 16) & 0xFFFFFFFF
    return default


def _split_attributes(text: str) -> dict[str, str]:
    attrs = {}
    for token in text.split():
        key, sep, value = token.partition("=")
        if sep:
            attrs[key] = value
    return attrs


def parse_attributes(text: str) -> dict[str, str]:
    """Parse the key=value attributes of a yEnc control line.

    Args:
        text: A control line as a string.

    Returns:
        A dictionary of attributes. The name attribute (if any) is everything
        after `name=` up to the end of the line since filenames can contain
        spaces and equals signs. Tokens without an `=` are ignored.

    Note: Sample line.
        =ybegin part=1 total=2 line=128 size=500 name=a file.bin
    """
    name = None
    i = text.find("name=")
    if i >= 0:
        name = text[i + 5 :].strip()
        text = text[:i]
    attrs = _split_attributes(text)
    if name is not None:
        attrs["name"] = name
    return attrs


def parse_header(
    line: bytes, encoding: str = "utf-8", errors: str = "surrogateescape"
) -> Header:
    """Parse a =ybegin line.

    Args:
        line: The header line.
        encoding: Encoding used to decode the filename.
        errors: Error handling scheme used to decode the filename.

    Returns:
        The header values. Missing or unparseable integers are 0, a missing
        name is an empty string and part is None when not given.
    """
    text = line[len(YBEGIN) :].decode(encoding, errors)
    attrs = parse_attributes(text)
    part = attrs.get("part")
    return Header(
        name=attrs.get("name", ""),
        size=parse_int(attrs.get("size", "")),
        line=parse_int(attrs.get("line", "")),
        part=None if part is None else parse_int(part),
        total=parse_int(attrs.get("total", "")),
    )


def parse_part_header(line: bytes) -> PartHeader:
    """Parse a =ypart line.

    Args:
        line: The part header line.

    Returns:
        The begin and end offsets of the part.
    """
    attrs = _split_attributes(line[len(YPART) :].decode("ascii", "replace"))
    return PartHeader(
        begin=parse_int(attrs.get("begin", "")),
        end=parse_int(attrs.get("end", "")),
    )


def parse_trailer(line: bytes) -> Trailer:
    """Parse a =yend line.

    Args:
        line: The trailer line.

    Returns:
        The trailer values. Checksums that are missing or cannot be parsed
        are 0 and part is None when not given.
    """
    attrs = _split_attributes(line[len(YEND) :].decode("ascii", "replace"))
    part = attrs.get("part")
    return Trailer(
        size=parse_int(attrs.get("size", "")),
        part=None if part is None else parse_int(part),
        pcrc32=parse_hex32(attrs.get("pcrc32", "")),
        crc32=parse_hex32(attrs.get("crc32", "")),
    )
