# ftlib

A compact collection of low-level helpers in plain Python, with no
third-party dependencies.

## Modules

- `ftlib.chars` – ASCII character classification and case conversion:
  `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `isspace`,
  `toupper`, `tolower`. Each takes an integer code or a one-character
  string; the case converters return the same kind of value they were given.
- `ftlib.numbers` – lenient integer parsing (`atoi` wraps like a 32-bit
  signed integer, `atol` like a 64-bit one), `itoa`, digit counting
  (`intlen`, `uintlen`, `hexlen`), `iabs`, and random values read from
  `/dev/random` (`rand_uchar`, `rand_int`, which return 1 if the device
  cannot be read).
- `ftlib.strings` – string helpers with C-string semantics (text is read up
  to its first NUL): `strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`,
  `strcmp`, `strncmp`, `strdup`, `substr`, `strnstr`, `strtrim`, `strjoin`,
  `split`, `strmapi`, `striteri`. Search functions return an index or
  `None`; `strlcpy` and `strlcat` return the resulting text together with
  the length they tried to create.
- `ftlib.output` – writing to an operating-system file descriptor:
  `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`, `putunbr_fd`,
  `putlongnbr_fd`, `puthexnbr_fd`. Each returns the number of bytes written.
- `ftlib.linkedlist` – a singly linked list: `Node` (with `release`) and
  `LinkedList` (`push_front`, `push_back`, `len()`, iteration over contents,
  `last`, `second_to_last`, `clear`, `for_each`, `map`).
- `ftlib.gnl` – reading a file descriptor one line at a time: `LineReader`
  and `get_next_line`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftlib.chars import toupper
from ftlib.numbers import atoi, itoa
from ftlib.strings import split, strchr, strlcpy, strnstr, strtrim

toupper("a")                          # "A"
toupper(97)                           # 65
atoi("  \t-42abc")                    # -42
itoa(-2147483648)                     # "-2147483648"
split("Just  a simple phrase", " ")   # ["Just", "a", "simple", "phrase"]
strtrim("abcdef", "abef")             # "cd"
strchr("abcdef", "c")                 # 2
strnstr("abcdef", "cde", 2)           # None
strlcpy("", "bbbbbbbbbb", 5)          # ("bbbb", 10)
```

Writing to standard output:

```python
from ftlib.output import putendl_fd, putnbr_fd

putnbr_fd(-42, 1)        # writes "-42", returns 3
putendl_fd("done", 1)    # writes "done\n", returns 5
```

Reading lines from a file descriptor:

```python
import os
from ftlib.gnl import LineReader, get_next_line

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 42):
    print(line, end="")
os.close(fd)

fd = os.open("notes.txt", os.O_RDONLY)
first = get_next_line(fd)   # None once the input is exhausted
os.close(fd)
```

Building a linked list:

```python
from ftlib.linkedlist import LinkedList, Node

lst = LinkedList(Node("a"))
lst.push_back(Node("b"))
lst.push_front(Node("z"))
len(lst)                                      # 3
list(lst)                                     # ["z", "a", "b"]
list(lst.map(str.upper, lambda content: None))  # ["Z", "A", "B"]
```

## What it does not do

The package has no printf-style formatter: there is no function that
expands `%d`, `%s` and similar conversions with flags, width and precision.
To write numbers it offers only the `put*_fd` functions in `ftlib.output`.
Nor does it provide helpers for byte buffers (setting, copying, searching
or comparing raw memory); its string functions work on Python `str` only.