"""
yEnc part assembler.
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

import logging
import zlib

from .errors import (
    ChecksumMismatchError,
    DuplicatePartError,
    EndOfInput,
    MissingChecksumError,
    MissingFilenameError,
    SizeMismatchError,
    TrailerOutOfOrderError,
    UnexpectedEndOfInputError,
)
from .source import LineSource
from .types import Header, Part, Trailer
from .utils import parse_header, parse_part_header, parse_trailer
from .yenc import YBEGIN, YEND, YPART, LineDecoder

__all__ = ["PartAssembler", "Session"]

log = logging.getLogger(__name__)


class Session:
    """State of one decoding session.

    Attributes:
        multipart: True once a =ybegin header with a part number is seen.
        total: The number of parts declared by the =ybegin header.
        parts: The validated parts in the order they were decoded.
        crc32: Running CRC32 of every byte decoded in the session.
        declared_crc32: The whole file CRC32 from the last trailer, 0 if none.
        seen: The (name, number) pairs of the parts decoded so far.
        decoder: The line decoder, carries escapes from line to line.
    """

    def __init__(self) -> None:
        self.multipart = False
        self.total = 0
        self.parts: list[Part] = []
        self.crc32 = 0
        self.declared_crc32 = 0
        self.seen: set[tuple[str, int]] = set()
        self.decoder = LineDecoder()


class _PartBuilder:
    """A part while it is being decoded."""

    def __init__(self, header: Header) -> None:
        self.number = header.part or 0
        self.header_size = header.size
        self.name = header.name
        self.columns = header.line
        self.size = 0
        self.begin = 0
        self.end = 0
        self.crc32 = 0
        self.body = bytearray()
        self.running_crc32 = 0

    def append(self, data: bytes) -> None:
        self.body += data
        self.running_crc32 = zlib.crc32(data, self.running_crc32)

    def validate(self, strict: bool = False) -> None:
        if len(self.body) != self.size:
            raise SizeMismatchError(self.number, self.size, len(self.body))
        if not self.crc32:
            if strict:
                raise MissingChecksumError(f"No crc32 for part {self.number}")
            log.debug("No crc32 for part %d, skipping check", self.number)
            return
        if self.running_crc32 != self.crc32:
            raise ChecksumMismatchError(self.number, self.crc32, self.running_crc32)

    def build(self) -> Part:
        return Part(
            number=self.number,
            header_size=self.header_size,
            size=self.size,
            begin=self.begin,
            end=self.end,
            name=self.name,
            columns=self.columns,
            total=0,
            crc32=self.crc32,
            body=bytes(self.body),
        )


class PartAssembler:
    """Drives a session from the line source to a list of validated parts.

    Each part goes through the following steps: find the =ybegin header, find
    the =ypart header (multipart only), decode the body up to the =yend
    trailer, apply the trailer and validate.
    """

    encoding = "utf-8"
    errors = "surrogateescape"

    def __init__(
        self,
        source: LineSource,
        limit: int | None = None,
        strict: bool = False,
        session: Session | None = None,
    ) -> None:
        """Constructor for PartAssembler.

        Args:
            source: Where the lines come from.
            limit: Stop after this many parts have been decoded. None means
                decode until the source runs out.
            strict: Treat a missing per-part checksum as an error.
            session: Session state to continue, a new one by default.

        Raises:
            ValueError: If limit is not a positive integer or None.
        """
        if limit is not None and limit < 1:
            raise ValueError("limit must be a positive integer or None")
        self.source = source
        self.limit = limit
        self.strict = strict
        self.session = session or Session()

    def _read_header(self, session: Session) -> _PartBuilder:
        """Skips to the next =ybegin line and starts a new part from it.

        Raises:
            EndOfInput: If the source runs out first.
            MissingFilenameError: If the header has no name.
            DuplicatePartError: If this part was already decoded.
        """
        while True:
            line = self.source.readline()
            if line.startswith(YBEGIN):
                break
        header = parse_header(line, self.encoding, self.errors)
        log.debug("Found =ybegin name=%r part=%s", header.name, header.part)
        if header.part is not None:
            session.multipart = True
        if header.total:
            session.total = header.total
        if not header.name:
            raise MissingFilenameError("=ybegin header has no name")
        builder = _PartBuilder(header)
        key = (builder.name, builder.number)
        if key in session.seen:
            raise DuplicatePartError(*key)
        session.seen.add(key)
        return builder

    def _read_part_header(self, builder: _PartBuilder) -> None:
        """Skips to the next =ypart line and applies it to the part.

        Raises:
            UnexpectedEndOfInputError: If the source runs out first.
        """
        try:
            while True:
                line = self.source.readline()
                if line.startswith(YPART):
                    break
        except EndOfInput as e:
            raise UnexpectedEndOfInputError(
                f"Missing =ypart for part {builder.number}"
            ) from e
        part_header = parse_part_header(line)
        builder.begin = part_header.begin
        builder.end = part_header.end
        log.debug(
            "Found =ypart begin=%d end=%d for part %d",
            builder.begin,
            builder.end,
            builder.number,
        )

    def _read_body(self, session: Session, builder: _PartBuilder) -> Trailer:
        """Decodes lines into the part until the =yend trailer.

        Returns:
            The parsed trailer.

        Raises:
            UnexpectedEndOfInputError: If the source runs out first.
        """
        decoder = session.decoder
        decoder.reset()
        while True:
            try:
                line = self.source.readline()
            except EndOfInput as e:
                raise UnexpectedEndOfInputError(
                    f"Missing =yend for part {builder.number}"
                ) from e
            if line.startswith(YEND):
                return parse_trailer(line)
            if self.source.skip_framing and line.startswith((YBEGIN, YPART)):
                log.debug("Skipping repeated header in body of part %d", builder.number)
                continue
            data = decoder.decode(line)
            builder.append(data)
            session.crc32 = zlib.crc32(data, session.crc32)

    def _apply_trailer(
        self, session: Session, builder: _PartBuilder, trailer: Trailer
    ) -> None:
        """Applies the trailer values to the part and session.

        Raises:
            TrailerOutOfOrderError: If the trailer is for a different part.
        """
        log.debug(
            "Found =yend size=%d part=%s pcrc32=%08x crc32=%08x",
            trailer.size,
            trailer.part,
            trailer.pcrc32,
            trailer.crc32,
        )
        if trailer.part is not None and trailer.part != builder.number:
            raise TrailerOutOfOrderError(builder.number, trailer.part)
        builder.size = trailer.size
        if trailer.pcrc32:
            builder.crc32 = trailer.pcrc32
        if trailer.crc32:
            session.declared_crc32 = trailer.crc32
            # a single part file only has the one checksum
            if not session.multipart and not builder.crc32:
                builder.crc32 = trailer.crc32

    def next_part(self) -> Part:
        """Decodes and validates the next part.

        Returns:
            The validated part. It is also appended to the session parts.

        Raises:
            EndOfInput: If the source runs out before a =ybegin header.
            YEncDataError: If the part is malformed or fails validation.
        """
        session = self.session
        builder = self._read_header(session)
        if session.multipart:
            self._read_part_header(builder)
        trailer = self._read_body(session, builder)
        self._apply_trailer(session, builder, trailer)
        builder.validate(self.strict)
        part = builder.build()
        session.parts.append(part)
        log.debug("Decoded part %d of %r (%d bytes)", part.number, part.name, part.size)
        return part

    def run(self) -> list[Part]:
        """Decodes parts until the source runs out or the limit is reached.

        Returns:
            All parts decoded in the session, possibly none.

        Raises:
            YEncDataError: On the first malformed or invalid part.
        """
        session = self.session
        while self.limit is None or len(session.parts) < self.limit:
            try:
                self.next_part()
            except EndOfInput:
                log.debug("End of input after %d parts", len(session.parts))
                break
        else:
            log.debug("Limit of %d parts reached", self.limit)
        return session.parts
