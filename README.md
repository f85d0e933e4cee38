# minishell

Building blocks for a small shell: string helpers and a line reader that
pulls a stream through a fixed-size buffer.

## Installing

    pip install .

## String helpers

`minishell.strutil` provides:

- `is_space(char)`: true for a space or any of tab, newline, vertical tab,
  form feed and carriage return.
- `atoi(text)` and `atoll(text)`: parse a leading decimal integer after
  optional whitespace and one `+` or `-`, stopping at the first non-digit
  (0 when there are no digits). The result wraps to a signed 32-bit or
  64-bit value.
- `itoa(n)`: decimal text of a signed 32-bit integer; raises
  `OverflowError` outside that range.
- `split(text, sep)`: split on a single character, dropping empty pieces;
  raises `ValueError` if `sep` is not exactly one character.
- `strtrim(text, charset)`: strip characters in `charset` from both ends;
  `None` leaves the text unchanged.
- `strnstr(haystack, needle, length)`: index of `needle` lying wholly within
  the first `length` characters, or `None`; an empty needle gives 0.
- `substr(text, start, length)`: at most `length` characters from `start`;
  empty when `start` is at or past the end; `ValueError` for negatives.
- `strncmp(first, second, n)`: compare up to `n` characters, returning 0 or
  the code-point difference at the first mismatch (end of string counts as 0).

```python
from minishell.strutil import split, atoi

split("  ls   -l ", " ")   # ['ls', '-l']
atoi("  -42abc")           # -42
```

## Reading lines

`minishell.linereader.LineReader(stream, buffer_size=42)` reads
`buffer_size` units at a time and returns one line per `read_line()` call,
keeping the trailing newline, or `None` at the end of the stream. Data read
past a newline is kept for the next call. It works with text and binary
streams, is iterable, and `read_lines(stream, buffer_size)` yields every
line. A `buffer_size` below 1 raises `ValueError`.

```python
import io
from minishell.linereader import read_lines

list(read_lines(io.StringIO("a\nb"), 1))   # ['a\n', 'b']
```

## What it does not do

The package has no lexer, no syntax checker and no interactive prompt, and
it installs no command. It offers the helpers above for use from Python.

## Tests

    pip install .[test]
    pytest