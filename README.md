# ftkit

A small library of everyday helpers: ASCII character classes, integer
parsing and fixed-width arithmetic, string splitting and trimming, substring
search, NUL-terminated string comparison and bounded copying, byte-buffer
operations, a singly linked list, a buffered line reader and simple output to
file descriptors. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ftkit.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper` and `to_lower`. Each accepts an integer code or a one-character
  string; the case converters return the same kind of value they were given
  and change only ASCII letters.
- `ftkit.numbers`: `atoi`, `itoa`, `absolute`, `gcd`, `int_sqrt`, `is_prime`,
  `fast_bin_pow` and `fast_bit_pow`. `atoi` parses a leading decimal number
  and gives a 32-bit signed result; the power functions wrap modulo 2**64.
  `int_sqrt` returns 0 when the argument has no exact integer root, and
  `is_prime` reports values below 2 as prime.
- `ftkit.strings`: `split` (drops empty words), `trim` (spaces, tabs and
  newlines), `substring` (raises `IndexError` past the end, `ValueError` on
  negative arguments) and `join`.
- `ftkit.search`: `find`, `find_bounded`, `find_kmp`, `prefix_function`,
  `find_char` and `rfind_char`. They return an index, or `None` when nothing
  is found. Searching for `"\0"` with `find_char` or `rfind_char` finds the end
  of the string.
- `ftkit.compare`: `compare` and `compare_n` return the difference between the
  codes of the first differing characters (0 when equal); `equal` and
  `equal_n` return `False` when either argument is `None`.
- `ftkit.buffers`: `bounded_concat` (returns a `ConcatResult` of the text and
  the length it tried to build), `concat_n`, `copy_n` (pads with NUL
  characters), `map_chars`, `map_chars_indexed`, `iter_chars` and
  `iter_chars_indexed`. An embedded NUL ends the text it appears in.
- `ftkit.memory`: `mem_set`, `mem_copy`, `mem_ccopy`, `mem_move`, `mem_chr`
  and `mem_compare`. Functions that write need a `bytearray` or writable
  `memoryview`; ranges past the end of a buffer raise `IndexError` and
  negative counts raise `ValueError`.
- `ftkit.linked`: `Node` and `LinkedList`. `push` and `pop` work at the head,
  `map` builds a new list, `clear` empties it, and `nodes` iterates over the
  nodes. A list built from an iterable keeps the iterable's order.
- `ftkit.lines`: `LineReader`, which reads newline-separated lines from file
  descriptors with `read_line` or `lines`, keeping separate pending data for
  each descriptor (0 to `MAX_FD - 1`).
- `ftkit.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, which write
  to a file descriptor (standard output by default) and return the number of
  bytes written. A negative descriptor writes nothing.

## Examples

```python
from ftkit.strings import split, trim
from ftkit.numbers import atoi, itoa
from ftkit.search import find_kmp
from ftkit.linked import LinkedList

split("**hello*world**", "*")      # ['hello', 'world']
trim("  \tpadded text\n")          # 'padded text'
atoi("  -42abc")                   # -42
itoa(-1234)                        # '-1234'
find_kmp("abcabcd", "abcd")        # 3

items = LinkedList()
items.push("b")
items.push("a")
list(items)                        # ['a', 'b']
```

Reading lines from a descriptor:

```python
import os
from ftkit.lines import LineReader

reader = LineReader()
fd = os.open("notes.txt", os.O_RDONLY)
for line in reader.lines(fd):
    print(line)
os.close(fd)
```

## What it does not do

ftkit is a library only. It installs no command-line program.