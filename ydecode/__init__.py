from .decoder import Decoder, decode, decode_bytes, decode_lines
from .errors import (
    ChecksumMismatchError,
    DuplicatePartError,
    EndOfInput,
    MissingChecksumError,
    MissingFilenameError,
    NoPartsFoundError,
    SizeMismatchError,
    TrailerOutOfOrderError,
    UnexpectedEndOfInputError,
    WholeFileChecksumMismatchError,
    YEncDataError,
    YEncError,
)
from .types import Part

__all__ = [
    "ChecksumMismatchError",
    "Decoder",
    "DuplicatePartError",
    "EndOfInput",
    "MissingChecksumError",
    "MissingFilenameError",
    "NoPartsFoundError",
    "Part",
    "SizeMismatchError",
    "TrailerOutOfOrderError",
    "UnexpectedEndOfInputError",
    "WholeFileChecksumMismatchError",
    "YEncDataError",
    "YEncError",
    "decode",
    "decode_bytes",
    "decode_lines",
]
