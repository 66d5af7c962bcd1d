"""Library catalogue pieces: validated dates, console menus, publications, books and an application shell."""

__version__ = "0.4.0"
__all__ = ["book", "date", "lib", "libapp", "menu", "publication", "streamable"]