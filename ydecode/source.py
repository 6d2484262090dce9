"""
Line sources for the yEnc decoder.
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

from collections.abc import Iterable
from typing import BinaryIO

from .errors import EndOfInput
from .utils import strip_eol

__all__ = ["LineSource", "SequenceSource", "StreamSource"]


class LineSource:
    """An ordered supply of lines for a decoding session.

    Attributes:
        skip_framing: Whether =ybegin and =ypart lines found inside a part
            body should be skipped instead of decoded.
    """

    skip_framing = False

    def readline(self) -> bytes:
        """Read the next line.

        Returns:
            The line without line terminators.

        Raises:
            EndOfInput: When there are no more lines.
        """
        raise NotImplementedError


class StreamSource(LineSource):
    """Lines read from a binary file-like object.

    Lines are terminated by LF with an optional CR before it. Only one line
    is read per request so the stream is left positioned after the last line
    consumed.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream

    def readline(self) -> bytes:
        line = self.stream.readline()
        if not line:
            raise EndOfInput("End of stream")
        if not line.endswith(b"\n"):
            raise EndOfInput(f"Unterminated line at end of stream ({len(line)} bytes)")
        return strip_eol(line)


class SequenceSource(LineSource):
    """Lines taken from a sequence (or any iterable) of pre-split lines.

    Text lines are encoded to bytes using `encoding` and `errors`. Any line
    terminators still present are stripped.
    """

    skip_framing = True
    encoding = "utf-8"
    errors = "surrogateescape"

    def __init__(self, lines: Iterable[bytes | str]) -> None:
        self._lines = iter(lines)
        self.position = 0

    def readline(self) -> bytes:
        try:
            line = next(self._lines)
        except StopIteration:
            raise EndOfInput(f"No more lines after line {self.position}") from None
        self.position += 1
        if isinstance(line, str):
            line = line.encode(self.encoding, self.errors)
        return strip_eol(line)
