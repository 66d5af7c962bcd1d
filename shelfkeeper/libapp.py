"""Menu-driven library application shell."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .menu import Menu

APP_TITLE = "Seneca Library Application"
EXIT_TITLE = "Changes have been made to the data, what would you like to do?"
_RULE = "-" * 43


class LibApp:
    """Main loop of the library application: add, remove, check out and return."""

    def __init__(self, infile: TextIO | None = None, outfile: TextIO | None = None) -> None:
        self._infile = sys.stdin if infile is None else infile
        self._outfile = sys.stdout if outfile is None else outfile
        self._changed = False
        self._main_menu = Menu(APP_TITLE).add(
            "Add New Publication",
            "Remove Publication",
            "Checkout publication from library",
            "Return publication to library",
        )
        self._exit_menu = Menu(EXIT_TITLE).add(
            "Save changes and exit",
            "Cancel and go back to the main menu",
        )
        self._load()

    @property
    def changed(self) -> bool:
        """True once any action has modified the library data."""
        return self._changed

    def _say(self, *lines: str) -> None:
        for line in lines:
            self._outfile.write(line + "\n")
        self._outfile.flush()

    def _confirm(self, message: str) -> bool:
        return Menu(message).add("Yes").run(self._infile, self._outfile) == 1

    def _load(self) -> None:
        self._say("Loading Data")

    def _save(self) -> None:
        self._say("Saving Data")

    def _search(self) -> None:
        self._say("Searching for publication")

    def _return_publication(self) -> None:
        self._search()
        self._say("Returning publication", "Publication returned", "")
        self._changed = True

    def _new_publication(self) -> None:
        self._say("Adding new publication to library")
        if self._confirm("Add this publication to library?"):
            self._changed = True
            self._say("Publication added", "")
        else:
            self._say("")

    def _remove_publication(self) -> None:
        self._say("Removing publication from library")
        self._search()
        if self._confirm("Remove this publication from the library?"):
            self._changed = True
            self._say("Publication removed", "")

    def _check_out_publication(self) -> None:
        self._search()
        if self._confirm("Check out publication?"):
            self._changed = True
            self._say("Publication checked out", "")

    def _leave(self) -> bool:
        """Handle the Exit choice; return True if the application should stop."""
        if not self._changed:
            return True
        choice = self._exit_menu.run(self._infile, self._outfile)
        if choice == 1:
            self._save()
            return True
        if choice == 2:
            self._say("")
            return False
        return self._confirm("This will discard all the changes are you sure?")

    def run(self) -> None:
        """Run the main menu until the user leaves the application."""
        actions = {
            1: self._new_publication,
            2: self._remove_publication,
            3: self._check_out_publication,
            4: self._return_publication,
        }
        done = False
        while not done:
            selection = self._main_menu.run(self._infile, self._outfile)
            if selection == 0:
                done = self._leave()
            else:
                actions[selection]()
        self._say("", _RULE, f"Thanks for using {APP_TITLE}")


def main(argv: list[str] | None = None) -> int:
    """Start the library application on the console."""
    parser = argparse.ArgumentParser(
        prog="shelfkeeper", description="Run the library application."
    )
    parser.parse_args(argv)
    app = LibApp(sys.stdin, sys.stdout)
    try:
        app.run()
    except EOFError:
        sys.stdout.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())