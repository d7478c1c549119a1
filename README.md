# libft

A small toolkit of everyday helpers. It covers ASCII character classes, string search and
transformation, byte-buffer operations, number conversion with C integer widths, a singly
linked list, and a compact `printf`-style formatter. It has no runtime dependencies.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Modules

| Module             | Contents                                                                   |
|--------------------|----------------------------------------------------------------------------|
| `libft.chars`      | `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper` |
| `libft.convert`    | `atoi`, `atol`, `itoa`                                                     |
| `libft.memory`     | `memset`, `bzero`, `calloc`, `memcpy`, `memmove`, `memchr`, `memcmp`       |
| `libft.search`     | `strlen`, `strchr`, `strrchr`, `strnstr`, `strncmp`, `strdup`, `strlcpy`, `strlcat` |
| `libft.transform`  | `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`             |
| `libft.output`     | `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`                       |
| `libft.printf`     | `sprintf`, `printf`                                                        |
| `libft.linked`     | `Node`, `LinkedList`                                                       |

### Notes on behaviour

- `libft.chars`: each function takes a one-character string or an integer code. The
  classifiers return a `bool`. `to_lower` and `to_upper` return the same kind they were given.
- `libft.convert`: `atoi` skips leading whitespace and one sign, then reads digits. Its result
  is truncated to 32 bits. When the accumulator overflows, it returns -1 for a positive number
  and 0 for a negative one. `atol` wraps to 64 bits. `itoa` accepts only 32-bit signed
  integers and raises `OverflowError` otherwise.
- `libft.memory`: functions work on `bytearray` or `memoryview` buffers. They raise
  `ValueError` when a byte count is negative or longer than a buffer. `memchr` returns an
  index or `None`. `calloc` returns a zeroed `bytearray` and raises `OverflowError` when the
  size exceeds the 64-bit range.
- `libft.search`: positions are indices, and `None` means "not found". Searching for `"\0"`
  with `strchr` or `strrchr` returns `len(s)`. `strlcpy(src, size)` returns the copied text
  and `len(src)`. `strlcat(dst, src, size)` returns the resulting text and the length it
  tried to create.
- `libft.transform`: `split` drops empty words. `striteri` calls `f(i, item)` on a mutable
  sequence and stores any result that is not `None` back in place.
- `libft.output`: each function writes to the given text stream, or to `sys.stdout` when
  no stream is given.
- `libft.printf`: `printf` supports `%c %s %p %d %i %u %x %X %%`. A `None` argument prints
  `(null)` for `%s` and `(nil)` for `%p`. An unknown conversion produces nothing and consumes
  no argument. A format that ends in a lone `%` raises `ValueError`.

## Examples

Convert between text and numbers:

```python
from libft.convert import atoi, itoa

atoi("  -42abc")   # -42
itoa(-2147483648)  # "-2147483648"
```

Split and trim strings:

```python
from libft.transform import split, strtrim

split("  hello  world ", " ")   # ["hello", "world"]
strtrim("xxhixx", "x")          # "hi"
```

Work with byte buffers:

```python
from libft.memory import calloc, memset, memchr

buf = calloc(4, 2)       # bytearray of eight zero bytes
memset(buf, ord("a"), 3)
memchr(buf, 0, 8)        # 3
```

Format output:

```python
import sys
from libft.printf import sprintf, printf

sprintf("%d items, %x hex, %s", 3, 255, "done")   # "3 items, ff hex, done"
printf("%c%s\n", "o", "k", stream=sys.stdout)     # writes "ok\n", returns 3
```

Use the linked list:

```python
from libft.linked import LinkedList, Node

items = LinkedList()
items.add_back(Node(1))
items.add_front(Node(0))
len(items)                                           # 2
list(items)                                          # [0, 1]
doubled = items.map(lambda v: v * 2, delete=lambda v: None)
list(doubled)                                        # [0, 2]
items.clear(print)                                   # prints 0 then 1; list is empty
```

## What it does not do

This is a library only. It provides no command-line program. The formatter supports only the
conversions listed above. It has no field widths, flags, or precision.

## Running the tests

```
pytest
```