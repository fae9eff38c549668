# quirkprintf

A small printf-style formatter. It handles the conversions `c`, `s`, `p`,
`d`, `i`, `u`, `x`, `X` and `%`, together with the flags `-`, `0`, `.`,
`#`, `+`, space and a field width. Its corner cases are fixed by its own
rules, so it will sometimes disagree with the C library's `printf` or with
Python's `%` operator.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Usage

`format_string` builds the formatted text and returns it:

```python
from quirkprintf.printer import format_string

format_string("%d apples", 42)          # "42 apples"
format_string("[%5s]", "ab")            # "[   ab]"
format_string("[%-5d]", 7)              # "[7    ]"
format_string("%#x", 255)               # "0xff"
format_string("%p", None)               # "(nil)"
format_string("%s", None)               # "(null)"
```

`printf` does the same formatting, writes the result to a text stream
(standard output by default) and returns the number of characters it
wrote:

```python
import io
from quirkprintf.printer import printf

buffer = io.StringIO()
count = printf("%05d|%+d\n", 42, 7, file=buffer)
# buffer.getvalue() == "00042|+7\n", count == 9
```

Integer arguments for `d`, `i`, `u`, `x` and `X` wrap to 32 bits, as a C
`int` or `unsigned int` would; pointer arguments for `p` wrap to 64 bits,
and `None` or `0` renders as `(nil)`.

## Errors

- A `%` that is never closed by a conversion character raises
  `quirkprintf.spec.FormatError` (a subclass of `ValueError`).
- Too few arguments for the specifiers raises `TypeError`, as does a
  format that is not a string or an argument of the wrong kind.

## Building blocks

Each formatting stage can also be used on its own:

- `quirkprintf.spec.parse_specifiers` splits a format string into
  `FormatSpec` records, each holding its `DataType` and its `Flags`.
- `quirkprintf.conversions.render_raw` turns one argument into text
  before any flags are applied.
- `quirkprintf.flags` applies precision, zero fill, the plus sign and the
  hexadecimal prefix; `quirkprintf.padding` applies alignment, space
  insertion and width.
- `quirkprintf.printer.resolve_conflicts` and `apply_flags` decide which
  flags survive for a specifier and run them in order.
- `quirkprintf.textutils` holds the string helpers the other modules use,
  such as `atoi`, `itoa`, `split`, `strtrim` and `substr`.

## What it does not do

There are no length modifiers (`l`, `h`, `ll`), no floating-point
conversions (`f`, `e`, `g`), no `*` widths taken from arguments and no
command-line tool: the package is used from Python code only.