# marisakit

Low-level pieces of a static MARISA-style trie, in plain Python with no
third-party dependencies.

## Modules

- `marisakit.header` – `Header`, the 16-byte magic `b"We love Marisa.\0"`
  that starts a trie image. `Header.validate(data)` returns whether a byte
  string is exactly the magic, `Header.bytes()` returns it, `io_size()`
  returns 16. `write(stream)` writes it to a binary stream; `read(stream)`
  reads 16 bytes and raises `EOFError` if the stream ends early or
  `ValueError` if the bytes do not match.
- `marisakit.history` – `History`, a dataclass for one traversal step with
  `node_id`, `louds_pos`, `key_pos`, `link_id` and `key_id`. The ids default
  to `INVALID_LINK_ID` / `INVALID_KEY_ID` (`0xFFFFFFFF`); every field must
  fit in 32 unsigned bits, otherwise `ValueError` is raised.
- `marisakit.range` – `Range` (`begin`, `end`, `key_pos`, each a 32-bit
  unsigned value) and `WeightedRange` (a `range` plus a `weight`), with
  `make_range` and `make_weighted_range`. Weighted ranges compare and sort
  by weight alone.
- `marisakit.key` – `Key`, a byte string read front to back, and
  `ReverseKey`, read back to front (index 0 is the last byte). Both support
  `len()`, indexing, `bytes()`, ordering, a `weight` or a `terminal` (setting
  one makes the other raise `ValueError` when read), an `id`, and
  `substr(pos, length)` to narrow the view in place.
- `marisakit.state` – `State`, holding `key_buf`, `history`, `node_id`,
  `query_pos`, `history_pos` and a `StatusCode`, with `reset`,
  `lookup_init`, `reverse_lookup_init`, `common_prefix_search_init` and
  `predictive_search_init`.
- `marisakit.tail` – `Tail` and `TailMode`. `build(entries, mode)` stores
  non-empty byte strings, sharing common suffixes, and returns each entry's
  offset in input order. Text mode ends each string with a NUL byte and
  switches to binary mode (end flags) if any entry holds a NUL. `restore`,
  `match` and `prefix_match` work against a `State` and a query; `clear`
  empties the tail.

## Example

```python
from marisakit.header import Header
from marisakit.key import Key
from marisakit.state import State
from marisakit.tail import Tail

assert Header.validate(Header.bytes())
assert not Header.validate(b"Invalid header!\0")

key = Key(b"hello world")
key.substr(6, 5)
assert bytes(key) == b"world"

tail = Tail()
offsets = tail.build([b"apple", b"ple"])
assert offsets == [0, 2]          # "ple" shares the end of "apple"
assert tail.buffer == b"apple\x00"

state = State()
tail.restore(state, offsets[1])
assert bytes(state.key_buf) == b"ple"

state = State()
assert tail.match(state, b"apple", offsets[0])
assert state.query_pos == 5
```

## What it does not do

The package has no trie of its own: there is no LOUDS structure, bit
vector, search agent or key set, so it cannot build a trie from keys, look
keys up, enumerate prefixes or predictions, or save and load a complete
trie file. It provides no command-line tools. Only the header is read from
and written to streams.

## Tests

```
pip install "marisakit[test]"
pytest
```