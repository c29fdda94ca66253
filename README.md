# ftlib

A small utility library with no dependencies outside the standard library.

## Modules

- `ftlib.chars` – ASCII tests `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `is_space`; `to_lower` and `to_upper`; `is_integer`, which checks
  that a string is an optional `-` followed by digits fitting a 32-bit int.
  Characters may be given as an int code or a one-character string.
- `ftlib.memory` – helpers on `bytes`/`bytearray`: `bzero`, `calloc`, `memchr`
  (returns an index or `None`), `memcmp`, `memcpy`, `memset`, and `memmove`,
  which copies between two offsets inside one buffer.
- `ftlib.numbers` – `atoi`, `atoi_base` (a base is a string of distinct symbols;
  an invalid base raises `ValueError`), `itoa`, `convert_nbr_base`, `nbrlen`,
  `nbrlen_uint`. Results follow 32-bit int wrapping where the text overflows.
- `ftlib.strings` – `strchr`, `strrchr`, `strnstr` (all return indices or `None`),
  `strncmp`, `strlcpy` and `strlcat` (return the resulting text and the full
  length), `strjoin`, `strjoin_all` (`None` for an empty result), `substr`,
  `strtrim`, `split`, `strmapi` and `striteri` (on a mutable sequence of characters).
- `ftlib.linked_list` – `Node` and `LinkedList` with `add_front`, `add_back`,
  `last`, `clear`, `for_each`, `map`, `len()` and iteration.
- `ftlib.vector` – `Vector`, a growable array with an explicit `capacity` that
  doubles when full; `None` is never stored.
- `ftlib.dynstring` – `DynamicString`, growable text with an explicit `capacity`:
  `push_back`, `pop_back`, `append`, `insert`, `replace`, `replace_all`, `clear`,
  `reserve`, `shrink_to_fit`, `is_empty`.
- `ftlib.output` – `putchar_fd`, `putstr_fd`, `putendl_fd`, `nputstr_fd`,
  `putnbr_fd`, `putnbr_uint_fd`: write to a raw file descriptor and return the
  number of bytes written.
- `ftlib.get_next_line` – `LineReader`, which reads a file descriptor one line at
  a time as `bytes`, and `get_next_line(fd)`, which keeps one reader per descriptor.
- `ftlib.printf` – `format_printf` returns formatted text; `printf` and `vprintf`
  write it to standard output. Conversions: `%c %s %p %d %i %u %x %X %%`.
  `to_hex` and `to_hex_fixed` give hexadecimal text.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftlib.strings import split, strtrim
from ftlib.numbers import atoi, convert_nbr_base
from ftlib.printf import format_printf
from ftlib.vector import Vector

split("  hello  world ", " ")               # ['hello', 'world']
strtrim("xxhixx", "x")                      # 'hi'
atoi("  -42abc")                            # -42
convert_nbr_base(255, "0123456789abcdef")   # 'ff'

format_printf("%s has %d items (%x)", "box", 26, 26)  # 'box has 26 items (1a)'

vec = Vector(2)
vec.push_back("a")
vec.push_back("b")
vec.push_back("c")                          # capacity grows to 4
list(vec)                                   # ['a', 'b', 'c']
```

Reading lines from a descriptor:

```python
import os
from ftlib.get_next_line import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 2048):
    print(line.decode(), end="")
os.close(fd)
```

## What it does not do

- There is no command-line tool; everything is used from Python.
- `printf` has no flags, field widths, precision or length modifiers; an
  unknown conversion raises `ValueError`.
- `LineReader` skips NUL bytes in its input and returns raw `bytes`; decoding
  is left to the caller.