# shelfkeeper

Building blocks for a small library catalogue that runs at a console.

## What is in the package

- `shelfkeeper.date`
  - `Date(year, month, day)` is a calendar date that checks itself. A year
    below 1500 or after next year gives a bad status. So does a month outside
    1 to 12, or a day that does not fit the month, leap years included.
    `date.status()` returns a `DateStatus`, and `bool(date)` is true only for
    a valid date.
  - `str(date)` gives `YYYY/MM/DD` for a valid date. For an invalid date it
    gives the status message, for example `Bad Month Value`.
  - You can compare dates. `a - b` gives the number of days between them, and
    `days_since_epoch()` gives the day number counted from 0001/01/01.
  - `Date.parse(text)` reads `year<sep>month<sep>day`, for example
    `2024/11/17`. If the text cannot be read, the result has the status
    `CIN_FAILED` (`cin Failed`).
  - `Date.today()` returns today's date. `system_today()` returns today's
    `(year, month, day)`. The context manager `fixed_today(year, month, day)`
    pins "today" to a fixed date inside a `with` block.
- `shelfkeeper.menu.Menu` is a titled menu with up to 20 numbered items and a
  final ` 0- Exit` line.
  - `add(*items)` appends items and returns the menu, so calls can be chained.
    `len(menu)` is the number of items, and `menu[i]` wraps around that
    number.
  - `render()` returns the menu text, ending with the `> ` prompt.
  - `run(infile, outfile)` shows the menu and reads lines until it gets a
    number between 0 and the item count. After each invalid entry it writes
    `Invalid Selection, try again: `. If the input runs out, it raises
    `EOFError`.
- `shelfkeeper.streamable.Streamable` is the abstract interface for objects
  that can be written to and read from text streams. `dump(stream)` writes the
  object only if it is valid.
- `shelfkeeper.publication.Publication` is a periodical with a shelf number,
  a title, a lending member, a reference number and a date.
  - Written to `sys.stdout`, it is a fixed-width row, for example
    `| P123 | Seneca Weekly................. | N/A  | 2024/11/17 |`.
  - Written to any other stream, it is one tab-separated record:
    `P<TAB>ref<TAB>shelf<TAB>title<TAB>member<TAB>date`.
  - `read(stream)` prompts for the shelf number, title and date when the
    stream is `sys.stdin`. From any other stream it parses one record line,
    and the leading type letter is optional.
  - Bad input raises `PublicationReadError`, and missing input raises
    `EOFError`.
  - `set_member(id)` puts the publication on loan to a five-digit member id.
    Any other value marks it available.
- `shelfkeeper.book.Book` is a `Publication` that also has an author, and its
  type letter is `B`. Lending a book with `set_member` also sets its checkout
  date to today.
- `shelfkeeper.lib` holds the shared limits and widths: `TITLE_WIDTH`,
  `AUTHOR_WIDTH`, `SHELF_ID_LEN`, `MAX_LOAN_DAYS` and `LIBRARY_CAPACITY`.
- `shelfkeeper.libapp.LibApp` is the menu-driven front end of the
  application.

## Installing

```
pip install .
```

## Running

```
shelfkeeper
```

The main menu offers four actions: add a publication, remove one, check one
out, or return one. Each action asks you to confirm where that applies. If
you choose `0` after making changes, a second menu asks you to save and exit,
to go back, or to discard the changes after a further confirmation.

## What it does not do

The application is a shell around the menus. Loading, saving, searching,
adding, removing, checking out and returning only print a message and record
that something changed. No catalogue is kept in memory or stored on disk, and
`LibApp` does not use the `Publication` and `Book` classes.

## Example

```python
import io
from shelfkeeper.book import Book
from shelfkeeper.date import fixed_today

with fixed_today(2024, 12, 25):
    book = Book()
    book.read(io.StringIO("9999\tP123\tSeneca Handbook\t0\t2024/11/17\tJane Doe\n"))
    out = io.StringIO()
    book.write(out)
    print(out.getvalue())
    # B	9999	P123	Seneca Handbook	0	2024/11/17	Jane Doe
```

## Tests

```
pip install .[test]
pytest
```