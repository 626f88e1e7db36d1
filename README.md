# cubescape

cubescape is a small library of text and data helpers for a grid-map game.
It has character classification, C-style string routines, a printf-like formatter,
a doubly linked list, a delimiter-keeping tokenizer and a chunked line reader.
It depends only on the standard library.

## Installing

```
pip install .
```

## Modules

### `cubescape.chars`

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` take a one-character string or an int code and test it against the ASCII ranges.
- `to_upper`, `to_lower` change the case of an ASCII letter. They return the same kind of value they were given, either a string or an int.
- `c_atoi(text)` skips leading whitespace and accepts one optional sign. It then reads digits up to the first non-digit. On overflow it gives -1 for a positive number and 0 for a negative one. Otherwise the value is narrowed to a 32-bit int.
- `itoa(n)` gives the decimal text of an int.

```python
from cubescape.chars import c_atoi, itoa
c_atoi("  -42abc")   # -42
itoa(-7)             # "-7"
```

### `cubescape.strings`

Each search function returns an index, or `None` when nothing is found:

- `strchr` and `strrchr` find a character. Searching for `"\0"` finds the terminator at `len(text)`.
- `strnstr` finds a needle that lies wholly within a length limit.
- `strpbrk` finds the first character that belongs to a set.

`strcmp` and `strncmp` return the difference between the first pair of character codes that differ, or 0.

The module also has these helpers:

- `substr` takes a piece of a string.
- `strjoin` joins two strings. If one of them is `None`, it returns the other.
- `trim` strips a set of characters from both ends.
- `strmapi` maps `func(index, char)` over a string.
- `striteri` applies `func(index, char)` to a mutable sequence in place. Any return value other than `None` replaces the element.
- `split_words` splits on one separator and drops the empty pieces.

### `cubescape.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream, which is standard output by default. `put_str` and `put_endl` write nothing for `None`.

### `cubescape.printf`

`render(fmt, *args)` expands the conversions `%c %s %p %d %i %u %x %X`. Any other character after `%` is written as itself. `fprintf(stream, fmt, *args)` writes the expansion and returns its length. The building blocks are also public: `format_number`, `format_unsigned`, `format_hex`, `format_address` and `format_string`.

```python
from cubescape.printf import render
render("%d items at %p", 3, 255)   # "3 items at 0xff"
render("%s", None)                 # "(null)"
```

### `cubescape.linkedlist`

`LinkedList` is a doubly linked list of non-`None` contents.

- `push_front`, `push_back` and `insert_after` return the new `Node`.
- `remove(node, release)` and `clear(release)` unlink nodes. If a `release` callback is given, each content is passed to it first.
- `first()` and `last()` return a node, or `None` for an empty list.
- `len()` gives the number of nodes, iterating yields the contents, and `nodes()` yields the nodes themselves.
- `Node.first()` and `Node.last()` walk to the ends of a node's chain.

### `cubescape.tokens`

`split_keep(text, charset)` splits at every delimiter and keeps each delimiter as a token of its own. `split_keep_collapsed` does the same, but keeps only one token for a run of the same delimiter.

```python
from cubescape.tokens import split_keep, split_keep_collapsed
split_keep("a|b||c", "|")            # ["a", "|", "b", "|", "|", "c"]
split_keep_collapsed("a|b||c", "|")  # ["a", "|", "b", "|", "c"]
```

### `cubescape.lines`

`LineReader(stream, chunk_size=4096)` reads a text or binary stream in chunks and keeps each line's newline. `read_line()` returns `None` at the end of the stream. The reader is iterable, and `iter_lines(stream)` is a shortcut for iterating over one.

## What this package does not do

There is no command and no window. The package does not parse `.cub` scene files, does not validate maps, and has no player, minimap or game loop. It provides only the helper modules listed above.

## Tests

```
pip install .[test]
pytest
```