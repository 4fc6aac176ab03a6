"""Search state carried by an agent across trie operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .history import UINT32_MAX, History

_U32_FIELDS = frozenset({"node_id", "query_pos", "history_pos"})


class StatusCode(Enum):
    """What a search agent is currently ready to do."""

    READY_TO_ALL = "ready_to_all"
    READY_TO_COMMON_PREFIX_SEARCH = "ready_to_common_prefix_search"
    READY_TO_PREDICTIVE_SEARCH = "ready_to_predictive_search"
    END_OF_COMMON_PREFIX_SEARCH = "end_of_common_prefix_search"
    END_OF_PREDICTIVE_SEARCH = "end_of_predictive_search"


@dataclass
class State:
    """Position in the trie and query, key buffer and traversal history."""

    key_buf: bytearray = field(default_factory=bytearray)
    history: list[History] = field(default_factory=list)
    node_id: int = 0
    query_pos: int = 0
    history_pos: int = 0
    status_code: StatusCode = StatusCode.READY_TO_ALL

    def __setattr__(self, name: str, value: object) -> None:
        if name in _U32_FIELDS:
            value = int(value)  # type: ignore[arg-type]
            if not 0 <= value <= UINT32_MAX:
                raise ValueError(f"{name} out of 32-bit unsigned range: {value}")
        elif name == "status_code" and not isinstance(value, StatusCode):
            raise TypeError(f"status_code must be a StatusCode, not {value!r}")
        super().__setattr__(name, value)

    def reset(self) -> None:
        """Make the state ready for any operation."""
        self.status_code = StatusCode.READY_TO_ALL

    def lookup_init(self) -> None:
        """Prepare for an exact lookup."""
        self.node_id = 0
        self.query_pos = 0
        self.status_code = StatusCode.READY_TO_ALL

    def reverse_lookup_init(self) -> None:
        """Prepare for a reverse lookup by clearing the key buffer."""
        self.key_buf.clear()
        self.status_code = StatusCode.READY_TO_ALL

    def common_prefix_search_init(self) -> None:
        """Prepare for a common prefix search."""
        self.node_id = 0
        self.query_pos = 0
        self.status_code = StatusCode.READY_TO_COMMON_PREFIX_SEARCH

    def predictive_search_init(self) -> None:
        """Prepare for a predictive search, clearing key buffer and history."""
        self.key_buf.clear()
        self.history.clear()
        self.node_id = 0
        self.query_pos = 0
        self.history_pos = 0
        self.status_code = StatusCode.READY_TO_PREDICTIVE_SEARCH