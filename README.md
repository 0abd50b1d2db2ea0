# ftkit

A small toolkit of everyday helpers. It covers these areas:

- ASCII character classification
- decimal integer conversion
- byte-buffer operations
- string searching and manipulation
- a doubly linked list
- output to raw file descriptors
- a compact printf-style formatter
- a buffered line reader

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `ftkit.chartype`

This module classifies characters and changes their case, using ASCII rules only.

- **Classification:** `isalnum`, `isalpha`, `isascii`, `isdigit`, `isprint` and `isspace` each take a one-character string or an integer code and return a `bool`.
- **Case mapping:** `tolower` and `toupper` return the same kind of value they are given, a string for a string and an int for an int.
- **Whole strings:** `isnumeric(text)` is true when the text is an optional `+` or `-` followed only by digits. The empty string counts as numeric, and so does a bare sign.

### `ftkit.maths`

- `absolute(nb)`
- `square(x)`
- `minimum(a, b)`: returns `b` when the two are equal.
- `maximum(a, b)`: returns `a` when the two are equal.
- `swap(a, b)`: returns the pair `(b, a)`.

### `ftkit.conversion`

- `atoi(text)` skips leading whitespace and honours one `+` or `-`. It stops at the first non-digit and returns 0 when there are no digits.
- `itoa(n)` returns the decimal text of `n`.

### `ftkit.memory`

These helpers work on byte buffers.

- `memset(buffer, value, n)` and `bzero(buffer, n)` fill a `bytearray` in place and return it. The value is truncated to a byte.
- `calloc(count, size)` returns a zero-filled `bytearray`. It raises `OverflowError` if the total size would not fit an unsigned 64-bit length.
- `memchr(data, c, n)` returns the index of the first matching byte, or `None`.
- `memcmp(s1, s2, n)` returns 0, or the difference of the first differing bytes.
- `memcpy(dest, src, n)` copies `n` bytes into the start of `dest`.
- `memmove(buffer, dest, src, n)` copies `n` bytes within one buffer, from offset `src` to offset `dest`. The two regions may overlap.

A negative count, or a count that runs past a buffer, raises `ValueError`.

### `ftkit.strsearch`

- `strlen(text)`
- `strchr(text, c)` and `strrchr(text, c)` return an index or `None`. Searching for `"\0"` gives `len(text)`.
- `strcmp(s1, s2)` and `strncmp(s1, s2, n)` return the difference between the codes of the first characters that differ. The end of a string counts as code 0.
- `strnstr(big, little, length)` searches only the first `length` characters of `big`. It returns the starting index, or `None`.
- `is_just_space(text)`

### `ftkit.strmanip`

- `concat(*args)`
- `split(text, sep)` splits on a single character and drops empty words.
- `strdup(text)`
- `striteri(chars, func)` rewrites a mutable sequence of characters in place.
- `strjoin(s1, s2)`
- `strlcat(dest, src, size)` returns a pair: the resulting string and the length the full result would have had. It follows bounded-buffer rules, so `size` counts the terminator.
- `strlcpy(dest, src, size)` also returns a pair: the resulting string and `len(src)`.
- `strmapi(text, func)`
- `strtrim(text, charset)`
- `substr(text, start, length)`

### `ftkit.linkedlist`

This module provides `Node`, which has `content`, `next` and `prev`, and `LinkedList`.

You build a `LinkedList` from any iterable. It supports:

- `push_front` and `push_back`, which both return the new node
- `last()`
- `nodes()`
- `len()`
- iteration over the contents
- `clear(delete)`
- `for_each(func)`
- `map(func, delete)`, which returns a new list

If `func` raises part-way through a `map`, the contents mapped so far are passed to `delete` and the exception propagates.

### `ftkit.fdio`

`putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd` each write to a raw file descriptor with `os.write`. None of them writes anything when the descriptor is negative, and none writes anything when the text is `None`.

### `ftkit.printf`

This module supports the conversions `%c %s %p %d %i %u %x %X %%`.

- `format_string(fmt, *args)` returns the expanded text.
- `printf(fmt, *args)` writes the expanded text to `sys.stdout` and returns its length.
- `printf_colour(colour, fmt, *args)` wraps the output in the given colour sequence followed by `"\033[0m"`. The length it returns counts only the expanded format.

Conversion rules:

- `%d`, `%i`, `%u`, `%x` and `%X` treat their argument as a 32-bit integer.
- `%s` prints `(null)` for `None`.
- `%p` prints `(nil)` for a null address.
- An unknown conversion produces nothing and uses no argument.

Errors:

- A lone `%` at the end of the format raises `ValueError`.
- Running out of arguments raises `TypeError`.

The building blocks are also available on their own: `format_char`, `format_str`, `format_signed`, `format_unsigned` and `format_pointer`.

### `ftkit.linereader`

`LineReader(fd, buffer_size=1024)` reads a file descriptor in chunks of `buffer_size` bytes and hands out the data one line at a time.

- `read_line()` returns the next line as `bytes`, with its trailing newline kept. It returns `None` at the end of the input.
- Iterating over the reader yields every remaining line.

## Examples

```python
from ftkit.conversion import atoi, itoa
from ftkit.strmanip import split, strtrim
from ftkit.printf import format_string
from ftkit.linkedlist import LinkedList

atoi("   -42abc")                              # -42
itoa(-2147483648)                          # "-2147483648"
split("  hello  world ", " ")              # ["hello", "world"]
strtrim("xxhixx", "x")                     # "hi"
format_string("%d-%x-%s", 255, 255, None)  # "255-ff-(null)"

items = LinkedList([1, 2, 3])
list(items.map(lambda x: x * 2))           # [2, 4, 6]
```

Reading a file line by line:

```python
import os
from ftkit.linereader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in LineReader(fd):
        print(line.decode(), end="")
finally:
    os.close(fd)
```