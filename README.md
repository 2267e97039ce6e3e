# ftprintf

`ftprintf` is a small printf that supports a fixed set of conversions. It
also includes helpers for ASCII characters, byte buffers and strings, and
functions that write text to a stream.

It is a library. It has no command-line program.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Formatting

`ftprintf.formatter.sprintf` returns the formatted text.
`ftprintf.formatter.printf` writes that text to `file` and returns the
number of characters it wrote. When `file` is not given, it writes to
standard output.

```python
from ftprintf.formatter import sprintf, printf

sprintf("%s has %d items (%x)", "cart", 42, 255)   # 'cart has 42 items (ff)'
sprintf("%p", 0)                                   # '0x0'
sprintf("%s", None)                                # '(null)'

count = printf("%c%c\n", "o", "k")                 # prints "ok", count == 3
```

Supported conversions:

| spec      | argument                          | output                     |
|-----------|-----------------------------------|----------------------------|
| `%c`      | one-character string or int code  | the character              |
| `%s`      | any value, or `None`              | `str(value)`, or `(null)`  |
| `%p`      | integer, or `None` for zero       | `0x` then lowercase hex    |
| `%d` `%i` | integer, read as signed 32-bit    | decimal                    |
| `%u`      | integer, read as unsigned 32-bit  | decimal                    |
| `%x` `%X` | integer, read as unsigned 32-bit  | lowercase or uppercase hex |
| `%%`      | none                              | `%`                        |

The formatter has no flags, widths or precisions. A letter after `%` that
is not in the table produces no output and uses no argument. A `%` at the
end of the format also produces nothing. When a conversion needs an
argument and none are left, the formatter raises `TypeError`. The format
string is read only up to its first `"\0"`.

`format_conversion(spec, args)` renders a single conversion. It takes its
argument from an iterator. The module also provides `format_hex`,
`format_pointer`, `uitoa` and `hex_len`.

## Helpers

- `ftprintf.chartype`: ASCII tests `isalpha`, `isdigit`, `isalnum`,
  `isascii` and `isprint`, and case mapping `toupper` and `tolower`. Each
  accepts an int code or a one-character string. The case functions return
  the same kind of value they were given.
- `ftprintf.memory`: operations on byte buffers.
  - `memset`, `bzero`, `memcpy`, `memchr` and `memcmp` work on the start of
    a buffer.
  - `calloc` returns a zeroed `bytearray`.
  - `memmove(buf, dst, src, n)` copies between offsets within one buffer,
    and the two ranges may overlap.
  - A length past the end of a buffer raises `ValueError`.
- `ftprintf.strings`: `strlen`, `strdup`, `strchr`, `strrchr`, `strnstr`,
  `strncmp`, `strlcpy` and `strlcat`.
  - Searches return an index, or `None` when nothing is found.
  - `strlcpy` and `strlcat` return a tuple of the new contents and the
    length they report.
- `ftprintf.transform`: `atoi`, `itoa`, `count_digits`, `split`, `substr`,
  `strjoin`, `strtrim`, `strmapi` and `striteri`.
  - `atoi` wraps values that fall outside the signed 32-bit range.
  - `split` drops empty pieces.
- `ftprintf.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`.
  Each writes to a text stream and returns the number of characters it
  wrote. `putstr_fd` and `putendl_fd` write nothing when given `None`.

Every string helper reads its input only up to the first `"\0"`.

```python
import sys
from ftprintf.transform import split, atoi
from ftprintf.strings import strchr, strlcpy
from ftprintf.output import putnbr_fd

split("  a b  c ", " ")             # ['a', 'b', 'c']
atoi("  -42abc")                    # -42
strchr("hello", "l")                # 2
strlcpy("", "hello", 3)             # ('he', 5)
putnbr_fd(-2147483648, sys.stdout)  # writes -2147483648, returns 11
```