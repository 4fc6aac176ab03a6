"""Low-level pieces of a static MARISA-style trie: header, history, ranges, keys, search state and tail storage."""

__version__ = "0.4.0"
__all__ = ["header", "history", "range", "key", "state", "tail"]