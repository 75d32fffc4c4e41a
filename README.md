# minishell

A set of small helper modules meant to support a shell front end. Most of
them follow the behaviour of the classic C library routines, but they take
and return ordinary Python values.

## Installing

```
pip install .
```

## Modules

### `minishell.charclass`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower` and
`to_upper`. Each accepts a one-character string or an integer code; the case
conversions return a value of the same kind and only touch ASCII letters.

```python
from minishell.charclass import is_alnum, to_upper

is_alnum("7")      # True
to_upper("q")      # "Q"
to_upper(97)       # 65
```

### `minishell.convert`

- `atoi(text)` skips leading whitespace, reads one optional sign and the
  digits that follow, and stops at the first non-digit. Text with no digits
  gives `0`.
- `itoa(n)` returns the decimal text of an integer.

### `minishell.memory`

Operations on `bytearray` and other byte buffers: `memset`, `bzero`,
`calloc(count, size)`, `memcpy(dst, src, n)`, `memmove(buf, dst, src, n)`
(moves bytes inside one buffer between offsets, overlap-safe),
`memchr(data, value, n)` (an index or `None`) and `memcmp(a, b, n)` (the
difference of the first unequal bytes; `None` buffers compare below present
ones). Lengths that are negative or run past a buffer raise `ValueError`.

### `minishell.textutils`

`strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`,
`strdup`, `strjoin`, `substr`, `strtrim`, `split`, `strmapi` and `striteri`.
Searches return an index or `None`. `strlcpy` and `strlcat` return a tuple
of the resulting text and the length the C routine would report.
`split(s, sep)` drops empty pieces.

```python
from minishell.textutils import split, strlcat

split("  ls  -l ", " ")        # ["ls", "-l"]
strlcat("abc", "defg", 6)      # ("abcde", 7)
```

### `minishell.linkedlist`

`LinkedList` is a singly linked list of `Node` objects, built optionally from
an iterable. It offers `add_front`, `add_back`, `last`, `remove_first`,
`clear`, `for_each`, `map`, `len()` and iteration over the contents.
`remove_first`, `clear` and `map` take an optional `delete` callback that is
given each content removed (in `map`, the contents built so far when `func`
raises).

### `minishell.output`

`write_char`, `write_str`, `write_endl` and `write_number` write to a text
stream, standard output by default. A `None` string writes nothing.

### `minishell.printf`

- `format_string(fmt, *args)` expands the conversions `%c`, `%s`, `%p`,
  `%d`, `%i`, `%u`, `%x`, `%X` and `%%`. `%s` of `None` gives `(null)`;
  `%u`, `%x` and `%X` treat the value as a 32-bit unsigned integer; an
  unknown conversion produces nothing. Missing arguments raise `TypeError`.
- `print_formatted(fmt, *args, stream=None)` writes the result and returns
  the number of characters written.
- `format_hex(n, upper=False)` and `format_pointer(address)` (`0x`-prefixed,
  or `(nil)` for a null address).

```python
from minishell.printf import format_string

format_string("%s=%d (%x)", "n", 255, 255)   # "n=255 (ff)"
```

### `minishell.linereader`

`LineReader(source, buffer_size=5)` reads lines from a file descriptor or a
file-like object, text or binary, pulling `buffer_size` units at a time.
`read_line()` returns the next line with its newline (the last line may lack
one), or `None` at the end; iterating over the reader yields every line.

```python
import io
from minishell.linereader import LineReader

list(LineReader(io.StringIO("one\ntwo")))    # ["one\n", "two"]
```

## What this package does not do

There is no interactive shell and no command to run. The package does not
tokenize, syntax-check or parse command lines, and it has no prompt, no
pipelines and no redirections; it provides only the helper modules above.

## Tests

```
pip install .[test]
pytest
```