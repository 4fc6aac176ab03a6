"""Keys used while building a trie: forward and reversed byte-string views."""

from __future__ import annotations

from functools import total_ordering

from .history import UINT32_MAX


def _check_u32(name: str, value: int) -> int:
    value = int(value)
    if not 0 <= value <= UINT32_MAX:
        raise ValueError(f"{name} out of 32-bit unsigned range: {value}")
    return value


class _KeyMeta:
    """Weight-or-terminal slot and id shared by both key kinds."""

    __slots__ = ("_weight", "_terminal", "_id")

    def __init__(self) -> None:
        self._weight: float | None = None
        self._terminal: int | None = 0
        self._id = 0

    @property
    def weight(self) -> float:
        """Weight of the key; raises ValueError if a terminal was set instead."""
        if self._weight is None:
            raise ValueError("Weight not set")
        return self._weight

    @weight.setter
    def weight(self, value: float) -> None:
        self._weight = float(value)
        self._terminal = None

    @property
    def terminal(self) -> int:
        """Terminal node position; raises ValueError if a weight was set instead."""
        if self._terminal is None:
            raise ValueError("Terminal not set")
        return self._terminal

    @terminal.setter
    def terminal(self, value: int) -> None:
        self._terminal = _check_u32("terminal", value)
        self._weight = None

    @property
    def id(self) -> int:
        """Key id."""
        return self._id

    @id.setter
    def id(self, value: int) -> None:
        self._id = _check_u32("id", value)


def _check_substr(pos: int, length: int, size: int) -> None:
    if pos < 0 or length < 0:
        raise IndexError("substring bounds must be non-negative")
    if pos > size:
        raise IndexError("pos out of bounds")
    if length > size:
        raise IndexError("length out of bounds")
    if pos > size - length:
        raise IndexError("substring out of bounds")


@total_ordering
class Key(_KeyMeta):
    """A byte string read front to back, with a weight or terminal and an id."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes = b"") -> None:
        super().__init__()
        self._data = b""
        self.data = data

    @property
    def data(self) -> bytes:
        """The bytes of the key."""
        return self._data

    @data.setter
    def data(self, value: bytes) -> None:
        value = bytes(value)
        if len(value) > UINT32_MAX:
            raise ValueError("String too long")
        self._data = value

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        if not 0 <= index < len(self._data):
            raise IndexError("Index out of bounds")
        return self._data[index]

    def __bytes__(self) -> bytes:
        return self._data

    def substr(self, pos: int, length: int) -> None:
        """Narrow the key to ``length`` bytes starting at ``pos``."""
        _check_substr(pos, length, len(self._data))
        self._data = self._data[pos:pos + length]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other: Key) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self._data < other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Key({self._data!r}, id={self._id})"


@total_ordering
class ReverseKey(_KeyMeta):
    """A byte string read back to front, with a weight or terminal and an id.

    Index 0 is the last byte of the current view.
    """

    __slots__ = ("_data", "_end", "_length")

    def __init__(self, data: bytes = b"") -> None:
        super().__init__()
        self._data = b""
        self._end = 0
        self._length = 0
        self.data = data

    @property
    def data(self) -> bytes:
        """The forward bytes currently in view."""
        return self._data[self._end - self._length:self._end]

    @data.setter
    def data(self, value: bytes) -> None:
        value = bytes(value)
        if len(value) > UINT32_MAX:
            raise ValueError("String too long")
        self._data = value
        self._end = len(value)
        self._length = len(value)

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int) -> int:
        if not 0 <= index < self._length:
            raise IndexError("Index out of bounds")
        return self._data[self._end - index - 1]

    def __bytes__(self) -> bytes:
        return self.data

    def _reversed(self) -> bytes:
        return self.data[::-1]

    def substr(self, pos: int, length: int) -> None:
        """Skip ``pos`` bytes in reverse order and keep the next ``length``."""
        _check_substr(pos, length, self._length)
        self._end -= pos
        self._length = length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReverseKey):
            return NotImplemented
        return self.data == other.data

    def __lt__(self, other: ReverseKey) -> bool:
        if not isinstance(other, ReverseKey):
            return NotImplemented
        return self._reversed() < other._reversed()

    def __hash__(self) -> int:
        return hash(self.data)

    def __repr__(self) -> str:
        return f"ReverseKey({self.data!r}, id={self._id})"