# lskit

Small, dependency-free building blocks for programs that list directories
the way `ls` does.

## What is inside

- `lskit.chars`: ASCII character tests and case mapping (`isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`), which
  take either a one-character string or an integer code; `atoi` (parses a
  leading integer, giving 0 when there are no digits), `itoa`, `itoa_dec`;
  and the membership helpers `is_in_set` and `str_in_set`.
- `lskit.compare`: comparisons and searches that treat strings as
  NUL-terminated: `strcmp`, `strncmp`, `strcmp_ci` (ignores ASCII case),
  `strcmp_local` (ignores case and one leading dot of hidden files, keeping
  `.` and `..` as they are). `strnstr`, `strchr` and `strrchr` return the
  index of the match, or `None`.
- `lskit.slicing`: `split` (drops empty words), `strtrim`, `substr`, and
  `strlcpy` / `strlcat`, which return the resulting text together with the
  length they tried to create, so truncation can be detected.
- `lskit.paths`: `pathdup` drops trailing slashes (paths of one or two
  characters, such as `/` and `//`, are kept), `pathjoin` adds a `/`
  between the parts only when the base does not already end in one, and
  `strjoin` concatenates.
- `lskit.collate`: `ls_strcmp` compares names on their letters and digits
  first, ignoring case, leading dots and punctuation, then breaks ties
  (lower case before upper case, then a plain comparison, then the number
  of leading dots); `sort_names(names, reverse)` sorts with it.
- `lskit.color`: `ColorType`, `FileType` and the `FileInfo` dataclass
  (name, type, permission mode or `None`, broken-link flag). `classify`
  picks a colour class from the entry's type, its setuid/setgid/execute
  bits, sticky and other-writable bits on directories, a broken symlink
  flag, and its extension against the archive, image and audio extension
  lists you pass in. `no_color` always gives `ColorType.DEFT`.
- `lskit.columns`: `compute_layout(widths, term_width, min_space)` finds
  the fewest lines on which the entries, laid out column-major, fit the
  width (each column as wide as its widest entry plus `min_space`; one
  entry per line when nothing fits) and returns a `ColumnLayout`, with
  `columns_in_line` and `entry_index`. `format_columns` renders names as
  padded lines, and `terminal_width` reports the width of standard output,
  or 80 when it is not a terminal.

## Examples

```python
from lskit.chars import atoi, itoa
from lskit.compare import strcmp
from lskit.slicing import split
from lskit.paths import pathjoin, pathdup

atoi("  -42xyz")          # -42
itoa(-17)                 # "-17"
strcmp("abc", "abd") < 0  # True
split("a//b/", "/")       # ["a", "b"]
pathjoin("/usr", "bin")   # "/usr/bin"
pathdup("dir///")         # "dir"
```

Sorting names as a listing would:

```python
from lskit.collate import sort_names

names = sort_names(["README", ".profile", "Makefile", "src"], False)
```

Choosing a colour class:

```python
from lskit.color import FileInfo, FileType, classify

info = FileInfo("backup.tar", FileType.REGULAR, 0o644)
classify(info, archive_ext={"tar", "gz"})   # ColorType.ARCH
```

Laying names out in columns:

```python
from lskit.columns import compute_layout, format_columns, terminal_width

layout = compute_layout([len(n) for n in names], terminal_width(), 2)
lines = format_columns(names, terminal_width(), 2)
```

## What it does not do

lskit is a library of parts, not a listing program. It has no command to
run, it does not read directories or file status itself (you build
`FileInfo` values yourself), it does not produce long-format listings, and
`classify` returns a colour class, not terminal escape sequences.

## Running the tests

The test suite uses pytest, available through the `test` extra:

```
pip install -e .[test]
pytest
```