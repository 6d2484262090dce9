from typing import NamedTuple, Union


class Header(NamedTuple):
    """Values of a =ybegin line."""

    name: str
    size: int
    line: int
    part: Union[int, None]
    total: int


class PartHeader(NamedTuple):
    """Values of a =ypart line."""

    begin: int
    end: int


class Trailer(NamedTuple):
    """Values of a =yend line."""

    size: int
    part: Union[int, None]
    pcrc32: int
    crc32: int


class Part(NamedTuple):
    """A decoded and validated part of a yEnc encoded file.

    Attributes:
        number: The part number, 0 for a single part file.
        header_size: The size of the whole file from the =ybegin header.
        size: The size of this part from the =yend trailer.
        begin: First byte of the part within the file (1-based).
        end: Last byte of the part within the file (inclusive).
        name: The filename.
        columns: The declared line length.
        total: The number of parts in the file. Only set on the part returned
            by Decoder.decode().
        crc32: The declared CRC32 of the part, 0 if none was given.
        body: The decoded data.
    """

    number: int
    header_size: int
    size: int
    begin: int
    end: int
    name: str
    columns: int
    total: int
    crc32: int
    body: bytes
