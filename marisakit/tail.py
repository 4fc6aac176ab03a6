"""Suffix storage shared by the last level of a trie."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

from .history import UINT32_MAX
from .state import State


class TailMode(IntEnum):
    """How tail strings are terminated."""

    TEXT_TAIL = 0x01000
    BINARY_TAIL = 0x02000


class Tail:
    """Concatenated suffix strings with common suffixes merged.

    In text mode each string ends with a NUL byte. In binary mode a
    parallel list of end flags marks the last byte of each string, so
    strings may contain NUL bytes.
    """

    def __init__(self) -> None:
        self._buf = bytearray()
        self._end_flags: list[bool] = []

    @property
    def mode(self) -> TailMode:
        """The termination mode of the stored strings."""
        return TailMode.BINARY_TAIL if self._end_flags else TailMode.TEXT_TAIL

    @property
    def buffer(self) -> bytes:
        """The raw tail buffer."""
        return bytes(self._buf)

    @property
    def end_flags(self) -> tuple[bool, ...]:
        """End-of-string markers; empty in text mode."""
        return tuple(self._end_flags)

    def __len__(self) -> int:
        return len(self._buf)

    def __bool__(self) -> bool:
        return bool(self._buf)

    def __getitem__(self, offset: int) -> int:
        if not 0 <= offset < len(self._buf):
            raise IndexError("Offset out of bounds")
        return self._buf[offset]

    def clear(self) -> None:
        """Remove all stored strings."""
        self._buf = bytearray()
        self._end_flags = []

    def build(
        self,
        entries: Iterable[bytes],
        mode: TailMode = TailMode.TEXT_TAIL,
    ) -> list[int]:
        """Store ``entries`` and return the offset of each, in input order.

        Text mode switches to binary mode if any entry holds a NUL byte.
        Raises ValueError for an empty entry.
        """
        items = [bytes(entry) for entry in entries]
        if mode == TailMode.TEXT_TAIL and any(0 in item for item in items):
            mode = TailMode.BINARY_TAIL

        buf = bytearray()
        end_flags: list[bool] = []
        offsets = [0] * len(items)

        order = sorted(range(len(items)), key=lambda i: items[i][::-1])

        last_id = -1
        last_rev = b""
        for current_id in reversed(order):
            current = items[current_id]
            if not current:
                raise ValueError("Entry length must be > 0")
            current_rev = current[::-1]

            match_len = 0
            for a, b in zip(current_rev, last_rev):
                if a != b:
                    break
                match_len += 1

            if match_len == len(current) and last_rev:
                offsets[current_id] = offsets[last_id] + (len(last_rev) - match_len)
            else:
                offsets[current_id] = len(buf)
                buf.extend(current)
                if mode == TailMode.TEXT_TAIL:
                    buf.append(0)
                else:
                    end_flags.extend([False] * (len(current) - 1))
                    end_flags.append(True)
                if len(buf) > UINT32_MAX:
                    raise OverflowError("Tail buffer too large")

            last_id = current_id
            last_rev = current_rev

        self._buf = buf
        self._end_flags = end_flags
        return offsets

    def restore(self, state: State, offset: int) -> None:
        """Append the string stored at ``offset`` to the state's key buffer."""
        if not self._buf:
            return
        if not self._end_flags:
            end = self._buf.find(0, offset)
            if end < 0:
                end = len(self._buf)
            state.key_buf.extend(self._buf[offset:end])
        else:
            i = offset
            while True:
                state.key_buf.append(self._buf[i])
                if self._end_flags[i]:
                    break
                i += 1

    def match(self, state: State, query: bytes, offset: int) -> bool:
        """Match the rest of ``query`` against the string at ``offset``.

        Advances ``state.query_pos`` over matched bytes. Returns True if
        the whole stored string was matched.
        """
        if not self._buf:
            return False
        query = bytes(query)
        query_pos = state.query_pos
        if query_pos >= len(query):
            raise IndexError("Query position out of bounds")

        i = offset
        if not self._end_flags:
            while True:
                if i >= len(self._buf) or self._buf[i] != query[query_pos]:
                    return False
                query_pos += 1
                state.query_pos = query_pos
                i += 1
                if i >= len(self._buf):
                    return False
                if self._buf[i] == 0:
                    return True
                if query_pos >= len(query):
                    return False
        while True:
            if self._buf[i] != query[query_pos]:
                return False
            query_pos += 1
            state.query_pos = query_pos
            is_end = self._end_flags[i]
            i += 1
            if is_end:
                return True
            if query_pos >= len(query):
                return False

    def prefix_match(self, state: State, query: bytes, offset: int) -> bool:
        """Match ``query`` as a prefix of the string at ``offset``.

        Matched bytes and, once the query runs out, the rest of the stored
        string are appended to the state's key buffer.
        """
        if not self._buf:
            return False
        query = bytes(query)
        query_pos = state.query_pos

        i = offset
        if not self._end_flags:
            while True:
                if self._buf[i] != query[query_pos]:
                    return False
                state.key_buf.append(self._buf[i])
                query_pos += 1
                state.query_pos = query_pos
                i += 1
                if i >= len(self._buf) or self._buf[i] == 0:
                    return True
                if query_pos >= len(query):
                    break
            end = self._buf.find(0, i)
            if end < 0:
                end = len(self._buf)
            state.key_buf.extend(self._buf[i:end])
            return True

        while True:
            if self._buf[i] != query[query_pos]:
                return False
            state.key_buf.append(self._buf[i])
            query_pos += 1
            state.query_pos = query_pos
            is_end = self._end_flags[i]
            i += 1
            if is_end:
                return True
            if query_pos >= len(query):
                break
        while True:
            state.key_buf.append(self._buf[i])
            if self._end_flags[i]:
                break
            i += 1
        return True