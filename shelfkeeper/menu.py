"""Numbered console menus that read a validated selection."""

from __future__ import annotations

import re
import sys
from typing import TextIO

MAX_MENU_ITEM = 20
INVALID_SELECTION = "Invalid Selection, try again: "

_NUMBER = re.compile(r"[+-]?\d+")


class Menu:
    """A titled list of up to ``MAX_MENU_ITEM`` options plus an Exit choice (0)."""

    def __init__(self, title: str | None = None) -> None:
        self._title = title or None
        self._items: list[str] = []

    @property
    def title(self) -> str:
        return self._title or ""

    def add(self, *args: str | None) -> Menu:
        """Append items in order; items beyond the capacity are ignored."""
        for item in args:
            if len(self._items) < MAX_MENU_ITEM:
                self._items.append(item or "")
        return self

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __getitem__(self, index: int) -> str:
        """Return the item at ``index``, wrapping around the number of items."""
        if not self._items:
            raise IndexError("menu has no items")
        return self._items[index % len(self._items)]

    def __str__(self) -> str:
        return self.title

    def __repr__(self) -> str:
        return f"Menu({self._title!r}, items={self._items!r})"

    def render(self) -> str:
        """Return the menu text as shown to the user, ending with the prompt."""
        lines = [self.title]
        lines.extend(f" {number}- {item}" for number, item in enumerate(self._items, 1))
        lines.append(" 0- Exit")
        return "\n".join(lines) + "\n> "

    def run(self, infile: TextIO | None = None, outfile: TextIO | None = None) -> int:
        """Show the menu and return a selection between 0 and ``len(self)``.

        Invalid entries are reported and the user is asked again; running out
        of input raises :class:`EOFError`.
        """
        infile = sys.stdin if infile is None else infile
        outfile = sys.stdout if outfile is None else outfile
        outfile.write(self.render())
        outfile.flush()
        while True:
            selection = _read_selection(infile)
            if selection is not None and selection <= len(self._items):
                return selection
            outfile.write(INVALID_SELECTION)
            outfile.flush()


def _read_selection(infile: TextIO) -> int | None:
    """Read the next non-blank line and return its leading number, if usable."""
    for line in infile:
        tokens = line.split()
        if not tokens:
            continue
        match = _NUMBER.match(tokens[0])
        if match is None:
            return None
        value = int(match.group())
        return value if value >= 0 else None
    raise EOFError("no menu selection available")