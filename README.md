# libft

A compact collection of low-level helpers. It has no dependencies beyond the standard library. Each module covers one area:

| Module          | What it gives you                                                              |
|-----------------|--------------------------------------------------------------------------------|
| `libft.chars`   | ASCII tests (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`) and `to_upper` / `to_lower` |
| `libft.memory`  | `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc` on byte buffers |
| `libft.strings` | C-style string routines: `strlen`, `strcpy`, `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strdup`, `substr`, `strjoin`, `strtrim`, `strmapi`, `striteri` |
| `libft.convert` | `atoi`, `itoa` and `split` on a single separator character                     |
| `libft.output`  | `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` write to a file descriptor |
| `libft.printf`  | `printf`, `dprintf` and `format_string` supporting `%c %s %p %d %i %u %x %X %%` |
| `libft.lines`   | `LineReader` and `get_next_line`, which read a descriptor line by line         |
| `libft.linked`  | `Node` and `LinkedList`, a singly linked list                                  |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Character helpers accept an integer code or a one-character string and
return a value of the same kind:

```python
from libft.chars import is_alpha, to_upper

is_alpha(ord("a"))   # True
to_upper("q")        # "Q"
to_upper(ord("q"))   # 81
```

Memory helpers work on `bytearray` buffers; `memmove` moves a region within
one buffer by offset:

```python
from libft.memory import memmove, memchr, calloc

buf = bytearray(b"abcdef")
memmove(buf, 2, 0, 3)    # bytearray(b'ababcf')
memchr(b"hello", ord("l"), 5)   # 2
calloc(0, 4)             # bytearray(b'\x00')
```

String helpers treat a NUL character as the end of a string. Search functions
return an index, or `None` when nothing is found; the bounded copy functions
fill a `bytearray` and return the length they tried to create:

```python
from libft.strings import strtrim, substr, strnstr, strchr, strlcpy
from libft.convert import atoi, itoa, split

strtrim("xxhelloxx", "x")        # "hello"
substr("hello world", 6, 5)      # "world"
strnstr("hello world", "wor", 11)   # 6
strchr("hello", "z")             # None

dst = bytearray(4)
strlcpy(dst, "hello", 4)         # 5; dst is now bytearray(b'hel\x00')

split("  a b  c ", " ")          # ["a", "b", "c"]
atoi("  -42abc")                 # -42
itoa(-2147483648)                # "-2147483648"
```

Formatted output returns the number of bytes written. An empty format, or
one ending in a lone `%`, raises `ValueError`:

```python
from libft.printf import printf, format_string

printf("%s has %d items (%x)\n", "cart", 255, 255)
format_string("%p", 0)           # "(nil)"
format_string("%u", -1)          # "4294967295"
```

Reading lines from a file descriptor. Lines come back as `bytes`, each with
its trailing newline:

```python
import os
from libft.lines import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 42):
    print(line.decode(), end="")
os.close(fd)
```

`get_next_line(fd)` does the same one call at a time, keeping unread data per
descriptor and returning `None` at the end.

A singly linked list:

```python
from libft.linked import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
doubled = items.map(lambda x: x * 2, lambda x: None)
list(doubled)   # [0, 2, 4, 6]
len(items)      # 4
items.last().content   # 3
```

## What it does not do

This is a library only: it installs no command-line program.