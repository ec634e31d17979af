# harbol

A small set of data structures and lexing helpers for Python 3.10 and later.
It needs no packages outside the standard library.

## What's inside

- `harbol.deque.Deque` is a double-ended queue. Its nodes sit in a pool of
  slots and are linked to each other by index.
  - `append` and `prepend` return the node index of the value they add.
  - You can walk the queue with `head`, `tail`, `next_node`, `prev_node` and
    `get`, or iterate `nodes()` for the indices.
  - `pop_front`, `pop_back`, `front` and `back` raise `IndexError` when the
    queue is empty.
  - Freed slots are used again before the pool grows. A full pool doubles in
    size.
  - `reset()` empties the queue but keeps the pool. `clear()` releases the
    pool too.
- `harbol.hashmap.OrderedHashMap` is a hash map that keeps keys in the order
  they were inserted. The buckets chain over entry indices.
  - By key: `map[key]`, `insert` (returns `False` if the key already exists),
    `get`, `del map[key]` and `index_of`.
  - By position: `get_at`, `set_at` and `remove_at`.
  - By value: `index_of_value` and `key_of`.
  - The table doubles with `rehash` when it is full. `keys()`, `values()` and
    `items()` return lists.
- `harbol.messages` has `format_message` and the `Diagnostics` class.
  - They write lines of the form `(file:line:col) kind: **** message ****`.
  - The kind is shown in red for errors and magenta for warnings, unless you
    pass `color=False`.
  - `Diagnostics` writes to standard error unless you give it another stream.
    It counts what it writes in `error_count` and `warning_count`.
- `harbol.lex` holds lexing helpers for source text. Positions are indices
  into the text.
  - `text`: character classes, skipping of strings and comments, clearing of
    comments, UTF-8 encoding and decoding (`encode_utf8`, `read_utf8`,
    `utf8_to_runes`, `runes_to_utf8`), and readers for hex, octal and `\u`
    escapes.
  - `decimal`: `lex_c_decimal` and `lex_go_decimal`.
  - `hexadecimal`: `lex_c_hex` and `lex_go_hex`, which include hex floats.
  - `numbers`: the octal and binary lexers, plus `lex_c_number` and
    `lex_go_number`, which pick the right lexer for the literal.
  - `literals`: `lex_c_string`, `lex_go_string`, the identifier lexers,
    `lex_until`, and conversion of lexemes to numbers with `parse_c_int`,
    `parse_go_int`, `parse_c_uint`, `parse_go_uint` and `parse_float`.
  - `errors`: the `LexCode` result codes, the `Lexeme` result and
    `describe(code)`. A `Lexeme` has `code`, `text`, `end` and `is_float`, and
    the properties `ok` and `message`.

## Examples

```python
from harbol.deque import Deque

dq = Deque(8)
for n in (1, 2, 3, 4):
    dq.append(n)
dq.prepend(0)
print(list(dq))        # [0, 1, 2, 3, 4]
print(dq.pop_front())  # 0
print(dq.pop_back())   # 4
```

```python
from harbol.hashmap import OrderedHashMap

m = OrderedHashMap(8)
m["1"] = 1
m["2"] = 2
m["2"] = 20
print(m.items())         # [('1', 1), ('2', 20)]
print(m.key_of(1))       # '1'
del m["1"]
print(len(m))            # 1
```

```python
import sys
from harbol.messages import Diagnostics

diag = Diagnostics(sys.stderr, True)
diag.error("syntax", "unexpected token", "main.c", 3, 14)
print(diag.error_count)  # 1
```

```python
from harbol.lex.numbers import lex_c_number

lexeme = lex_c_number("0x1.b7p-1 rest", 0)
print(lexeme.ok, lexeme.text, lexeme.is_float, lexeme.message)
# True 0x1.b7p-1 True No Lexing Error.
```

## What it does not do

This is a library only. It installs no command-line program. The lexers read
one literal, identifier or comment at a time. There is no complete tokenizer
or parser for a whole language.

## Running the tests

```
pip install -e ".[test]"
pytest
```