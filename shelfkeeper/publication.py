"""Library publications with console and tab-separated file representations."""

from __future__ import annotations

import sys
from typing import TextIO

from .date import Date
from .lib import SHELF_ID_LEN, TITLE_WIDTH
from .streamable import Streamable

_MAX_TEXT = 255
_MIN_MEMBER = 10000
_MAX_MEMBER = 99999


class PublicationReadError(ValueError):
    """Raised when a publication record cannot be read."""


def _read_line(stream: TextIO) -> str:
    line = stream.readline()
    if not line:
        raise EOFError("no publication data available")
    return line.rstrip("\r\n")


def _prompt(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _parse_int(text: str, what: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise PublicationReadError(f"bad {what}: {text!r}") from None


def _check_length(text: str, what: str) -> str:
    if len(text) > _MAX_TEXT:
        raise PublicationReadError(f"{what} longer than {_MAX_TEXT} characters")
    return text


class Publication(Streamable):
    """A periodical held by the library, possibly on loan to a member."""

    def __init__(self) -> None:
        self._title: str | None = None
        self._shelf_id = ""
        self._membership = 0
        self.ref = -1
        self._date = Date.today()

    @property
    def title(self) -> str | None:
        return self._title

    @property
    def shelf_id(self) -> str:
        return self._shelf_id

    @property
    def membership(self) -> int:
        return self._membership

    @property
    def checkout_date(self) -> Date:
        return self._date

    def type_code(self) -> str:
        """Return the record type letter."""
        return "P"

    def set_member(self, member_id: int) -> None:
        """Lend to a five-digit member id; any other value marks it available."""
        in_range = _MIN_MEMBER <= member_id <= _MAX_MEMBER
        self._membership = member_id if in_range else 0

    def reset_date(self) -> None:
        """Set the checkout date to today."""
        self._date = Date.today()

    def on_loan(self) -> bool:
        return self._membership != 0

    def matches(self, title: str) -> bool:
        """Return True if ``title`` occurs within this publication's title."""
        return self._title is not None and title in self._title

    def is_console(self, stream: object) -> bool:
        return stream is sys.stdin or stream is sys.stdout

    def write(self, stream: TextIO) -> None:
        title = self._title or ""
        if self.is_console(stream):
            member = f"{self._membership:<5}" if self._membership else " N/A "
            stream.write(
                f"| {self._shelf_id:>{SHELF_ID_LEN}} | "
                f"{title[:TITLE_WIDTH]:.<{TITLE_WIDTH}} | "
                f"{member} | {self._date} |"
            )
        else:
            stream.write(
                f"{self.type_code()}\t{self.ref}\t{self._shelf_id}\t{title}\t"
                f"{self._membership}\t{self._date}"
            )

    def read(self, stream: TextIO) -> None:
        """Read a publication, prompting on the console or parsing one file record.

        A file record may start with the type letter. On failure the
        publication is left empty and :class:`PublicationReadError` is raised;
        :class:`EOFError` is raised when no input is left.
        """
        self._clear()
        if self.is_console(stream):
            self._read_console(stream)
            self._read_extra_console(stream)
        else:
            fields = _read_line(stream).split("\t")
            if fields[0] == self.type_code():
                fields = fields[1:]
            rest = self._read_record(fields)
            self._read_extra_fields(rest)

    def _clear(self) -> None:
        self._title = None
        self._shelf_id = ""
        self._membership = 0
        self.ref = -1
        self.reset_date()

    def _read_console(self, stream: TextIO) -> None:
        _prompt("Shelf No: ")
        shelf_id = _read_line(stream)
        if len(shelf_id) != SHELF_ID_LEN:
            raise PublicationReadError(
                f"shelf number must be {SHELF_ID_LEN} characters"
            )
        _prompt("Title: ")
        title = _check_length(_read_line(stream), "title")
        _prompt("Date: ")
        date = Date.parse(_read_line(stream))
        self._commit(title, shelf_id, 0, date, -1)

    def _read_record(self, fields: list[str]) -> list[str]:
        if len(fields) < 5:
            raise PublicationReadError("incomplete publication record")
        ref = _parse_int(fields[0], "reference")
        shelf_id = fields[1]
        if len(shelf_id) > SHELF_ID_LEN:
            raise PublicationReadError(
                f"shelf number longer than {SHELF_ID_LEN} characters"
            )
        title = _check_length(fields[2], "title")
        membership = _parse_int(fields[3], "membership")
        date = Date.parse(fields[4])
        self._commit(title, shelf_id, membership, date, ref)
        return fields[5:]

    def _commit(
        self, title: str, shelf_id: str, membership: int, date: Date, ref: int
    ) -> None:
        if not date:
            raise PublicationReadError(f"bad date: {date}")
        self._title = title
        self._shelf_id = shelf_id
        self.set_member(membership)
        self._date = date
        self.ref = ref

    def _read_extra_console(self, stream: TextIO) -> None:
        """Read fields that follow the common ones on the console."""

    def _read_extra_fields(self, fields: list[str]) -> None:
        """Consume record fields that follow the common ones."""

    def __bool__(self) -> bool:
        return bool(self._title) and bool(self._shelf_id)

    def __str__(self) -> str:
        return self._title or ""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(title={self._title!r}, "
            f"shelf_id={self._shelf_id!r}, membership={self._membership}, "
            f"ref={self.ref}, date={self._date})"
        )