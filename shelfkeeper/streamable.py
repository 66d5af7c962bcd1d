"""Interface for objects that can be written to and read from text streams."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO


class Streamable(ABC):
    """An object with console and file representations."""

    @abstractmethod
    def write(self, stream: TextIO) -> None:
        """Write the object to ``stream``."""

    @abstractmethod
    def read(self, stream: TextIO) -> None:
        """Replace the object's contents with data read from ``stream``."""

    @abstractmethod
    def is_console(self, stream: object) -> bool:
        """Return True if ``stream`` is the interactive console."""

    @abstractmethod
    def __bool__(self) -> bool:
        """Return True if the object holds valid data."""

    def dump(self, stream: TextIO) -> TextIO:
        """Write the object to ``stream`` only if it is valid; return ``stream``."""
        if self:
            self.write(stream)
        return stream