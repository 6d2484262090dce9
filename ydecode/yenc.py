"""
Basic yEnc line decoder.
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

__all__ = ["YBEGIN", "YPART", "YEND", "LineDecoder"]


YBEGIN = b"=ybegin"
YPART = b"=ypart"
YEND = b"=yend"

_ESCAPE = 0x3D

# byte -> (byte - 42) & 0xFF
_TABLE = bytes((b - 42) & 0xFF for b in range(256))


class LineDecoder:
    """A yEnc line decoder.

    Lines are expected without their line terminators. An escape character at
    the end of a line is carried over and applied to the first byte of the
    next line.
    """

    def __init__(self) -> None:
        self.escape = False

    def reset(self) -> None:
        self.escape = False

    def decode(self, line: bytes) -> bytes:
        """Decode a single line of yEnc data.

        Args:
            line: An encoded line without line terminators.

        Returns:
            The decoded data. It is shorter than the line by the number of
            escape characters consumed.
        """
        if not self.escape and _ESCAPE not in line:
            return line.translate(_TABLE)
        data = bytearray()
        for b in line:
            if self.escape:
                b = (b - 106) & 0xFF
                self.escape = False
            elif b == _ESCAPE:
                self.escape = True
                continue
            else:
                b = (b - 42) & 0xFF
            data.append(b)
        return bytes(data)
