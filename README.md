# libft

Small helpers modelled on the classic C library routines. They accept
Python `str` values and bytes-like objects (`bytes`, `bytearray`,
`memoryview`). A string's content ends at its first NUL character or byte,
or at the end of the object if it has none.

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

### `libft.charclass`

Character tests and case mapping on ASCII: `isalnum`, `isalpha`, `isascii`,
`isdigit`, `isprint`, `tolower`, `toupper`. Each accepts an integer code or a
one-character string. The tests return `bool`. `tolower` and `toupper` return
a value of the same type as their argument. A string of any other length
raises `ValueError`, and other types raise `TypeError`.

### `libft.memory`

Byte-buffer operations: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
`memcpy`, `memmove`.

- `memset` and `bzero` fill a writable buffer in place and return it.
- `memcpy` and `memmove` copy into a writable buffer in place and return it.
- `calloc(nmemb, size)` returns a zero-filled `bytearray`.
- `memchr` returns the index of the first matching byte, or `None`.
- `memcmp` returns 0 or the difference of the first differing bytes.

A byte count that is negative or larger than a buffer it covers raises
`ValueError`. Writing to a read-only buffer raises `TypeError`.

### `libft.cstring`

NUL-terminated string routines: `strlen`, `strchr`, `strrchr`, `strnstr`,
`strncmp`, `strlcpy`, `strlcat`.

- Searches return an index into the string, or `None` when nothing is
  found. Searching for NUL with `strchr` or `strrchr` returns the
  string's length.
- `strncmp` returns 0 or the difference of the first differing
  characters, taken as unsigned codes.
- `strlcpy` and `strlcat` write into a writable byte buffer such as a
  `bytearray`, always NUL-terminate within `size`, and return the length
  of the string they tried to make. `size` may not exceed the buffer.

### `libft.strutil`

Functions that build new strings: `strdup`, `substr`, `strjoin`,
`strtrim`, `split`, `strmapi`, `striteri`, `itoa`, `atoi`.

The result has the same kind as the input: `str` for `str` and `bytes`
for anything bytes-like.

- `split` drops empty words.
- `striteri` walks a mutable sequence such as a `list` or `bytearray` up to
  its first NUL. Where the callback returns a value, that value replaces
  the element in place.
- `itoa` accepts only 32-bit signed integers. Any other value raises
  `OverflowError`.
- `atoi` skips leading ASCII whitespace and accepts one sign. It stops at
  the first non-digit. A result out of the 32-bit signed range wraps around.

### `libft.output`

Functions that write to a file descriptor: `putchar_fd`, `putstr_fd`,
`putendl_fd`, `putnbr_fd`. `fd` is an integer descriptor or any object with a
`fileno()` method. Text is written UTF-8 encoded, and bytes are written as
they are.

## Example

```python
from libft.strutil import split, itoa, atoi
from libft.cstring import strchr, strlcpy
from libft.charclass import toupper

split("give me a blade", " ")   # ['give', 'me', 'a', 'blade']
itoa(-663253)                   # '-663253'
atoi("  -986abc")               # -986
toupper("a")                    # 'A'
toupper(97)                     # 65
strchr("poppante", "a")         # 5

buf = bytearray(10)
strlcpy(buf, b"hey friends", 10)  # 11; buf holds b"hey frien\0"
```

```python
from libft.output import putnbr_fd

putnbr_fd(80084, 1)             # writes "80084" to standard output
```

## Scope

This is a library only. It provides no command-line program.