"""Per-step record of a trie traversal."""

from __future__ import annotations

from dataclasses import dataclass

UINT32_MAX = 0xFFFFFFFF
INVALID_LINK_ID = UINT32_MAX
INVALID_KEY_ID = UINT32_MAX


def _check_u32(name: str, value: int) -> int:
    value = int(value)
    if not 0 <= value <= UINT32_MAX:
        raise ValueError(f"{name} out of 32-bit unsigned range: {value}")
    return value


@dataclass
class History:
    """Traversal state at one depth: node, LOUDS position, key position, link and key ids."""

    node_id: int = 0
    louds_pos: int = 0
    key_pos: int = 0
    link_id: int = INVALID_LINK_ID
    key_id: int = INVALID_KEY_ID

    def __setattr__(self, name: str, value: int) -> None:
        super().__setattr__(name, _check_u32(name, value))