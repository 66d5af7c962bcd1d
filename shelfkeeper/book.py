"""Books: publications that also carry an author."""

from __future__ import annotations

import sys
from typing import TextIO

from .lib import AUTHOR_WIDTH
from .publication import Publication, PublicationReadError, _read_line

_MAX_AUTHOR = 255


class Book(Publication):
    """A publication with an author; lending it stamps today's date."""

    def __init__(self) -> None:
        super().__init__()
        self._author: str | None = None

    @property
    def author(self) -> str | None:
        return self._author

    def type_code(self) -> str:
        return "B"

    def set_member(self, member_id: int) -> None:
        super().set_member(member_id)
        self.reset_date()

    def write(self, stream: TextIO) -> None:
        super().write(stream)
        author = self._author or ""
        if self.is_console(stream):
            stream.write(f" {author[:AUTHOR_WIDTH]:<{AUTHOR_WIDTH}} |")
        else:
            stream.write(f"\t{author}")

    def read(self, stream: TextIO) -> None:
        self._author = None
        super().read(stream)

    def _set_author(self, author: str) -> None:
        if len(author) > _MAX_AUTHOR:
            raise PublicationReadError(
                f"author longer than {_MAX_AUTHOR} characters"
            )
        self._author = author or None

    def _read_extra_console(self, stream: TextIO) -> None:
        sys.stdout.write("Author: ")
        sys.stdout.flush()
        self._set_author(_read_line(stream))

    def _read_extra_fields(self, fields: list[str]) -> None:
        self._set_author("\t".join(fields))

    def __bool__(self) -> bool:
        return bool(self._author) and super().__bool__()