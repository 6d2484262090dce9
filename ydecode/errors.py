"""
yEnc decoding errors.
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

__all__ = [
    "ChecksumMismatchError",
    "DuplicatePartError",
    "EndOfInput",
    "MissingChecksumError",
    "MissingFilenameError",
    "NoPartsFoundError",
    "SizeMismatchError",
    "TrailerOutOfOrderError",
    "UnexpectedEndOfInputError",
    "WholeFileChecksumMismatchError",
    "YEncDataError",
    "YEncError",
]


class YEncError(Exception):
    """Base class for all yEnc errors."""


class EndOfInput(YEncError):
    """The line source has no more lines.

    Only benign while looking for the start of a new part, everywhere else it
    is turned into an UnexpectedEndOfInputError.
    """


class YEncDataError(YEncError):
    """yEnc data error.

    Data errors are raised when the encoded data is malformed or fails
    validation. They are fatal to the decoding session.
    """


class MissingFilenameError(YEncDataError):
    """The =ybegin header has no name."""


class UnexpectedEndOfInputError(YEncDataError):
    """The input ended in the middle of a part."""


class NoPartsFoundError(YEncDataError):
    """The input did not contain a single yEnc part."""


class MissingChecksumError(YEncDataError):
    """No checksum was declared and the decoder is strict."""


class DuplicatePartError(YEncDataError):
    """The same part of the same file was seen twice."""

    def __init__(self, name: str, number: int) -> None:
        self.name = name
        self.number = number
        super().__init__(name, number)

    def __str__(self) -> str:
        return f"Duplicate part {self.number} of {self.name!r}"


class TrailerOutOfOrderError(YEncDataError):
    """The =yend trailer belongs to another part."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(expected, actual)

    def __str__(self) -> str:
        return "=yend out of order expected part %d got %d" % (
            self.expected,
            self.actual,
        )


class SizeMismatchError(YEncDataError):
    """The decoded body size differs from the size in the trailer."""

    def __init__(self, number: int, expected: int, actual: int) -> None:
        self.number = number
        self.expected = expected
        self.actual = actual
        super().__init__(number, expected, actual)

    def __str__(self) -> str:
        return "Part %d body size %d did not match expected size %d" % (
            self.number,
            self.actual,
            self.expected,
        )


class ChecksumMismatchError(YEncDataError):
    """The CRC32 of a part body differs from the declared one."""

    def __init__(self, number: int, expected: int, actual: int) -> None:
        self.number = number
        self.expected = expected
        self.actual = actual
        super().__init__(number, expected, actual)

    def __str__(self) -> str:
        return "crc check failed for part %d expected %08x got %08x" % (
            self.number,
            self.expected,
            self.actual,
        )


class WholeFileChecksumMismatchError(YEncDataError):
    """The CRC32 of all decoded parts differs from the declared one."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(expected, actual)

    def __str__(self) -> str:
        return "crc check failed expected %08x got %08x" % (
            self.expected,
            self.actual,
        )
