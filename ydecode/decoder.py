"""
A yEnc decoder for single and multipart files.
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

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from typing import BinaryIO

from .assembler import PartAssembler
from .errors import (
    MissingChecksumError,
    NoPartsFoundError,
    WholeFileChecksumMismatchError,
)
from .source import LineSource, SequenceSource, StreamSource
from .types import Part

__all__ = ["Decoder", "decode", "decode_bytes", "decode_lines"]

log = logging.getLogger(__name__)


class Decoder:
    """yEnc Decoder.

    Decodes the yEnc parts found in a line source. Every part is validated
    against its declared size and CRC32 as it is decoded and, when a
    multipart file is complete, the CRC32 of the whole file is checked.

    Note: Decoders are not thread safe, use one decoder per input.
    """

    def __init__(
        self,
        source: LineSource,
        limit: int | None = None,
        strict: bool = False,
    ) -> None:
        """Constructor for Decoder.

        Args:
            source: The line source to decode.
            limit: Stop after decoding this many parts. None (the default)
                decodes until the source runs out.
            strict: Treat missing checksums as errors.

        Raises:
            ValueError: If limit is not a positive integer or None.
        """
        self.strict = strict
        self.assembler = PartAssembler(source, limit=limit, strict=strict)

    @classmethod
    def from_stream(
        cls, stream: BinaryIO, limit: int | None = None, strict: bool = False
    ) -> Decoder:
        """Create a decoder reading lines from a binary file-like object."""
        return cls(StreamSource(stream), limit=limit, strict=strict)

    @classmethod
    def from_bytes(
        cls, data: bytes, limit: int | None = None, strict: bool = False
    ) -> Decoder:
        """Create a decoder for encoded data held in memory."""
        return cls.from_stream(io.BytesIO(data), limit=limit, strict=strict)

    @classmethod
    def from_lines(
        cls, lines: Iterable[bytes | str], limit: int, strict: bool = False
    ) -> Decoder:
        """Create a decoder for pre-split lines.

        Args:
            lines: The lines, with or without line terminators. Can be any
                iterable including a generator that never ends.
            limit: The number of parts to decode. A line feed cannot tell
                "no more lines" from "no more lines yet" so it is required.
            strict: Treat missing checksums as errors.

        Raises:
            ValueError: If limit is not a positive integer.
        """
        if limit is None:
            raise ValueError("limit is required for line input")
        return cls(SequenceSource(lines), limit=limit, strict=strict)

    @property
    def parts(self) -> list[Part]:
        """The parts decoded so far, including those decoded before an error."""
        return self.assembler.session.parts

    @property
    def multipart(self) -> bool:
        return self.assembler.session.multipart

    @property
    def total(self) -> int:
        return self.assembler.session.total

    @property
    def complete(self) -> bool:
        """Whether the decoded parts look like a complete multipart file."""
        parts = self.parts
        if not self.multipart or len(parts) < 2:
            return False
        if parts[-1].number != len(parts):
            return False
        return not self.total or len(parts) == self.total

    def run(self) -> list[Part]:
        """Decode until the input runs out or the limit is reached.

        Returns:
            The decoded parts.

        Raises:
            YEncDataError: If a part is malformed or fails validation.
        """
        return self.assembler.run()

    def validate(self) -> None:
        """Check the CRC32 of the whole file.

        The check is skipped when no whole file CRC32 was declared.

        Raises:
            WholeFileChecksumMismatchError: If the checksum does not match.
            MissingChecksumError: If no checksum was declared and the decoder
                is strict.
        """
        session = self.assembler.session
        if not session.declared_crc32:
            if self.strict:
                raise MissingChecksumError("No crc32 for the whole file")
            log.debug("No crc32 for the whole file, skipping check")
            return
        if session.crc32 != session.declared_crc32:
            raise WholeFileChecksumMismatchError(session.declared_crc32, session.crc32)
        log.debug("Whole file crc32 %08x OK", session.crc32)

    def decode(self) -> Part:
        """Decode the input and return the first part.

        The whole file CRC32 is only checked when the decoded parts form a
        complete multipart file (see `complete`).

        Returns:
            The first part decoded. Its total is set if the =ybegin header
            declared one.

        Raises:
            NoPartsFoundError: If the input holds no yEnc parts.
            WholeFileChecksumMismatchError: If the whole file check fails. The
                parts decoded are still available from `parts`.
            YEncDataError: If a part is malformed or fails validation.
        """
        parts = self.run()
        if not parts:
            raise NoPartsFoundError("No yEnc parts found")
        if self.complete:
            self.validate()
        else:
            log.debug("Skipping whole file check with %d parts", len(parts))
        part = parts[0]
        if self.total:
            part = part._replace(total=self.total)
        return part


def decode(stream: BinaryIO, strict: bool = False) -> Part:
    """Decode the yEnc data read from a binary file-like object.

    See Decoder.decode().
    """
    return Decoder.from_stream(stream, strict=strict).decode()


def decode_bytes(data: bytes, strict: bool = False) -> Part:
    """Decode yEnc data held in memory.

    See Decoder.decode().
    """
    return Decoder.from_bytes(data, strict=strict).decode()


def decode_lines(
    lines: Iterable[bytes | str], limit: int, strict: bool = False
) -> Part:
    """Decode pre-split yEnc lines.

    See Decoder.from_lines() and Decoder.decode().
    """
    return Decoder.from_lines(lines, limit, strict=strict).decode()
