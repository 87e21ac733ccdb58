# ftkit

A small library of everyday helpers, grouped by what they work on. It has no
dependencies outside the standard library.

## Modules

### `ftkit.chars`

ASCII classification and case mapping. Every function takes either an integer
code point or a one-character string.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` (0–127), `is_print` (32–126)
  return `bool`.
- `to_upper`, `to_lower` change only ASCII letters and return the same kind of
  value they were given (`to_upper("a") == "A"`, `to_upper(97) == 65`).

### `ftkit.output`

Writing to a text stream; `stream` defaults to standard output.

- `put_char(c, stream)`: a one-character string, or an int taken as a byte value.
- `put_str(s, stream)`: `None` writes nothing.
- `put_endl(s, stream)`: the string followed by a newline.
- `put_nbr(n, stream)`: an integer in decimal.

### `ftkit.memory`

Operations on bytes-like objects. Destinations must be writable
(`bytearray`, writable `memoryview`); counts that run past a buffer raise
`ValueError`.

- `mem_set(dest, c, count)`, `bzero(dest, n)`: fill bytes.
- `mem_copy(dest, src, n)`: copy the first `n` bytes of `src` into `dest`.
- `mem_move(buffer, dest, src, n)`: copy `n` bytes within `buffer` between two
  offsets; overlapping regions are handled.
- `mem_chr(data, c, n)`: index of the first matching byte, or `None`.
- `mem_cmp(a, b, n)`: difference of the first differing bytes, or 0.
- `calloc(nmemb, size)`: a zero-filled `bytearray`; raises `MemoryError` when
  the size would overflow.

### `ftkit.strings`

Bounded string primitives. A string is treated as ending at its first `"\0"`,
and searches return an index or `None`.

- `strlen`, `strdup`, `strchr`, `strrchr`, `strncmp`, `strnstr`.
- `strlcpy(src, size)` and `strlcat(dst, src, size)` return a `BoundedResult`
  with `text` (what fits), `length` (the full length the result would have had)
  and a `truncated` property.

### `ftkit.transform`

- `atoi(s)`, `atol(s)`: parse a leading decimal integer, skipping whitespace and
  accepting one sign; the result wraps to the platform's `int`/`long` width.
- `itoa(n)`: decimal text; raises `OverflowError` outside the `int` range.
- `split(s, c)`: words separated by runs of `c`, empty words dropped.
- `substr(s, start, length)`, `strjoin(s1, s2)`, `strtrim(s, charset)`.
- `strmapi(s, f)`: a new string of `f(index, char)`.
- `striteri(chars, f)`: calls `f(index, char)` over a mutable sequence of
  characters, replacing a character when `f` returns one.

### `ftkit.linked`

A singly linked list: `Node(content, next)` and `LinkedList(items)` with
`push_front`, `push_back`, `last`, `len()`, iteration over values, `for_each`,
`map(f, delete)`, `clear(delete)` and `delete_node(node, delete)`. The optional
`delete` callback is called on each value that is removed; `map` calls it on the
values already produced if `f` raises.

### `ftkit.printf`

A minimal formatter supporting `%c %s %d %i %u %x %X %p %%`. Integers wrap to the
platform's `int`/`unsigned int` width; `%s` of `None` prints `(null)`, `%p` of
`None` prints `(nil)`; an unknown conversion prints nothing.

- `format_text(fmt, *args)` returns the text.
- `printf(fmt, *args, stream=None)` writes it and returns the number of
  characters written.

### `ftkit.lines`

`LineReader(stream, buffer_size=10)` reads a stream of `str` or `bytes` a fixed
number of units at a time. `read_line()` returns the next line with its newline
(the last line may lack one), or `None` at the end; iterating yields lines.

## Examples

```python
import io

from ftkit.transform import atoi, split, strtrim
from ftkit.printf import format_text
from ftkit.linked import LinkedList
from ftkit.lines import LineReader

atoi("   -42abc")                 # -42
split("a,,b,c", ",")              # ['a', 'b', 'c']
strtrim("  Hello World  ", " ")   # 'Hello World'

format_text("%d items at %x", 42, 255)   # '42 items at ff'

items = LinkedList([1, 2, 3])
len(items)                               # 3
list(items.map(lambda x: x * 10))        # [10, 20, 30]

for line in LineReader(io.StringIO("one\ntwo\n"), 10):
    print(line, end="")
```

## What it does not do

ftkit is a library only: it installs no command-line tool. `LineReader` and the
output helpers work on Python stream objects, not on raw file descriptors.

## Installation

```
pip install .
```

## Running the tests

```
pip install ".[test]"
pytest
```