"""Magic header that identifies a serialized trie."""

from __future__ import annotations

from typing import BinaryIO

HEADER_SIZE = 16
_MAGIC = b"We love Marisa.\0"


class Header:
    """The 16-byte magic string at the start of every trie image."""

    def read(self, stream: BinaryIO) -> None:
        """Read the header from a binary stream and check it.

        Raises EOFError if the stream ends early and ValueError if the
        bytes are not a valid header.
        """
        data = stream.read(HEADER_SIZE)
        if len(data) < HEADER_SIZE:
            raise EOFError("unexpected end of stream while reading header")
        if not self.validate(data):
            raise ValueError("Invalid MARISA header")

    def write(self, stream: BinaryIO) -> None:
        """Write the header to a binary stream."""
        stream.write(_MAGIC)

    def io_size(self) -> int:
        """Return the number of bytes the header occupies on disk."""
        return HEADER_SIZE

    @staticmethod
    def validate(data: bytes) -> bool:
        """Return True if ``data`` is exactly the magic header."""
        return bytes(data) == _MAGIC

    @staticmethod
    def bytes() -> bytes:
        """Return the header bytes."""
        return _MAGIC