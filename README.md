# libft

Classic C-library helpers with C semantics, written as plain Python
functions and classes. No third-party dependencies.

## Modules

- `libft.chars`: ASCII classification and case conversion: `isalpha`,
  `isupper`, `islower`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `ispunct`, `isxdigit`, `toupper`, `tolower`. Each accepts an integer code
  or a one-character string; classifiers return `bool`, case conversion
  returns the same kind it was given.
- `libft.numbers`: `atoi` (skips leading whitespace, one optional sign,
  stops at the first non-digit, wraps to a 32-bit signed int), `itoa` and
  `ltoa` (decimal text of 32- and 64-bit signed integers, `OverflowError`
  outside that range) and `isspace`.
- `libft.memory`: operations on `bytearray`/`memoryview` buffers:
  `memset`, `bzero`, `memcpy`, `memmove(buf, dest, src, n)` (offsets within
  one buffer, overlap allowed), `memchr` (returns an index or `None`),
  `memcmp` and `calloc`. Lengths past the end of a buffer raise
  `IndexError`.
- `libft.strings`: `strlen`, `strnlen`, `strchr`, `strrchr`, `strcmp`,
  `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `strncpy`, `strdup`,
  `strndup`. A string ends at its first `"\0"`. Searches return an index
  or `None`; `strlcpy` and `strlcat` return the resulting text together
  with the length C would report.
- `libft.transform`: `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  `striteri`. Given `None` for a string they return `None`.
- `libft.lists`: a singly linked list, `LinkedList`, built from `Node`
  links, with `add_front`, `add_back`, `last`, `clear`, `iterate`, `map`,
  `len()` and iteration over the contents.
- `libft.fdio`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` write
  to any text stream; `putchar` and `putstr` write to standard output.
- `libft.printf`: `printf` (writes to standard output or to `stream=`, and
  returns the number of characters written), `sformat` (returns the text
  instead) and `format_arg`. Supports the `c s p d i u x X %` conversions
  with the `# +-0` flags, width, precision and `*`.
- `libft.spec`, `libft.layout`, `libft.radix`: the pieces `printf` is
  built from: parsing a specification (`parse_spec`, `resolve_spec`,
  `pop_arg`, `Spec`, `Flag`, `Conversion`), laying out padding and sign
  (`Field`, `render` and helpers), and hexadecimal text (`ltox`, `ptox`).

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from libft.printf import printf, sformat
from libft.transform import split, strtrim
from libft.numbers import atoi
from libft.lists import LinkedList

text = sformat("[%-5d|%05x|%.3s]", 42, 255, "abcdef")
# '[42   |000ff|abc]'

count = printf("%s has %d items\n", "list", 3)  # writes to stdout, returns 17

split("  a  b c ", " ")      # ['a', 'b', 'c']
strtrim("xxhixx", "x")       # 'hi'
atoi("  -123abc")            # -123

items = LinkedList(["a", "b"])
items.add_back("c")
list(items.map(str.upper, None))   # ['A', 'B', 'C']
```

A format string that cannot be converted, such as a width too large for a
32-bit `int` or a conversion with no argument left for it, raises
`libft.spec.FormatError`. Arguments of the wrong type raise `TypeError`.

## What it does not do

`printf` has no floating-point conversions (`f`, `e`, `g`), no length
modifiers (`l`, `h`, ...) and no `o` conversion. The package is a library
only; it installs no command-line program.