# ftkit

A small collection of helpers for characters, integers, strings, byte
buffers, linked lists, line-by-line reading, error reporting and
printf-style formatting. It has no dependencies outside the standard library.

## Installation

```
pip install ftkit
```

To run the test suite:

```
pip install "ftkit[test]"
pytest
```

## Modules

### `ftkit.chars`

ASCII character classes and case changes. Each function accepts a
one-character string or an integer code. The predicates `is_alpha`,
`is_digit`, `is_alnum`, `is_ascii` and `is_print` return `bool`. `to_upper`
and `to_lower` return a value of the same kind they were given and leave
non-letters unchanged. `abs_int(n)` returns the absolute value.

### `ftkit.numbers`

- `atoi(text)` skips leading whitespace, reads one optional sign and then
  digits. It ignores anything that follows and returns 0 when there are no digits.
- `itoa(n)` returns the decimal text of `n`.
- `uitoa(n)` returns the decimal text of a non-negative integer. Zero gives
  the empty string. A negative value raises `ValueError`.
- `number_length(n)` returns the number of characters in the decimal text,
  sign included.

### `ftkit.text`

Searches return indices, or `None` when nothing is found.

- `find_char` and `find_last_char` find a character. Searching for `"\0"`
  returns `len(s)`.
- `find_within(haystack, needle, length)` looks only at the first occurrence
  of `needle`. It returns `None` if that occurrence does not lie wholly
  within `length`.
- `compare(s1, s2, n)` compares at most `n` characters and returns a
  character-code difference or 0.
- `substring`, `trim`, `split` and `join` slice, strip and combine strings.
  `split` drops empty pieces, and `join` treats a missing first string as
  empty.
- `bounded_copy(src, size)` and `bounded_concat(dst, src, size)` return the
  bounded buffer contents together with the length the result would have
  had without the bound.
- `map_indexed(s, func)` builds a string from `func(index, char)`.

### `ftkit.memory`

Helpers for `bytearray` buffers:

- `fill(buffer, value, count)` sets the first `count` bytes.
- `zeroed(count, size)` returns a new zero-filled buffer.
- `copy_into(dst, src, count)` copies bytes, and is safe when `src` views `dst`.
- `find_byte(data, value, count)` finds a byte.
- `compare_bytes(a, b, count)` compares bytes.

A negative count raises `ValueError`. A count longer than a buffer raises
`IndexError`.

### `ftkit.linked`

`LinkedList` is a singly linked list. It supports:

- `push_front` and `push_back`
- `last()`, which raises `IndexError` when the list is empty
- `len()` and iteration
- `for_each(func)`
- `map(func)`, which returns a new list
- `clear(release=None)`, which passes each element to `release` before removing it

### `ftkit.output`

`put_char`, `put_str`, `put_endl`, `put_nbr`, `put_hex` (with `uppercase`),
`put_ptr` and `put_set` write to a given text stream, or to standard output.
Each returns the number of characters written.

### `ftkit.lines`

`LineReader(stream, buffer_size=5)` reads a text or binary stream in chunks
of `buffer_size`. `read_line()` returns each line with its trailing newline,
or `None` when the stream has nothing more. Iterating over the reader yields
every remaining line.

### `ftkit.errors`

`report_error(message, stream=None)` writes `Error` and then the message,
each on its own line, to standard error or to the given stream. The module
also defines message constants: `INVALID_MAP`, `INVALID_ARGUMENTS`,
`IO_ERROR`, `UNKNOWN_ERROR`, `NO_SUCH_FILE`, `X11_ERROR`, `TEXTURE_ERROR`
and `FILE_ERROR`.

### `ftkit.formatting`

printf-style formatting with conversions `%c %s %p %d %i %u %x %X %%`, the
flags `- 0 + space #`, width and precision.

- `parse_option(spec)` returns a `FormatOption`.
- `format_char`, `format_str`, `format_int`, `format_unsigned`, `format_hex`
  and `format_ptr` format one value each.
- `sformat(fmt, *args)` returns the formatted text.
- `printf(fmt, *args)` writes the formatted text to standard output and
  returns its length.

Some details of the behaviour:

- `None` formats as `(null)` under `%s`.
- Integers are taken as 32-bit values and pointers as 64-bit values.
- An unknown conversion character prints nothing.
- Too few arguments raise `TypeError`.

## Examples

```python
from ftkit.text import split, trim
from ftkit.numbers import atoi, itoa
from ftkit.formatting import sformat

split("  hello  world ", " ")      # ['hello', 'world']
trim("\t map line \n", "\t \n")    # 'map line'
atoi("   -42abc")                  # -42
itoa(-2147483648)                  # '-2147483648'
sformat("%-5d|%#x", 42, 255)       # '42   |0xff'
```

Reading a file line by line:

```python
from ftkit.lines import LineReader

with open("scene.cub") as handle:
    for line in LineReader(handle, 5):
        print(line, end="")
```

Linked lists:

```python
from ftkit.linked import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
doubled = items.map(lambda value: value * 2)
list(doubled)   # [0, 2, 4, 6]
len(doubled)    # 4
```

## What it does not do

`ftkit` is a library only. It installs no command, and it has no map loading,
rendering or windowing of its own.