import io
import sys

import pytest

from shelfkeeper.book import Book
from shelfkeeper.date import Date, fixed_today
from shelfkeeper.publication import PublicationReadError

RECORD = "B\t2001\tB001\tThe Story of My Experiments with Truth\t0\t2024/11/17\tMohandas Karamchand Gandhi"


def test_type_code():
    assert Book().type_code() == "B"


def test_default_book_is_invalid():
    book = Book()
    assert not book
    assert book.author is None


def test_file_round_trip():
    with fixed_today(2024, 12, 25):
        book = Book()
        book.read(io.StringIO(RECORD + "\n"))
    assert book
    assert book.author == "Mohandas Karamchand Gandhi"
    assert book.title == "The Story of My Experiments with Truth"
    assert book.ref == 2001
    out = io.StringIO()
    book.write(out)
    assert out.getvalue() == RECORD


def test_missing_author_makes_book_invalid():
    with fixed_today(2024, 12, 25):
        book = Book()
        book.read(io.StringIO("B\t1\tB001\tTitle\t0\t2024/01/02\t\n"))
    assert book.title == "Title"
    assert book.author is None
    assert not book


def test_failed_read_clears_author():
    with fixed_today(2024, 12, 25):
        book = Book()
        book.read(io.StringIO(RECORD + "\n"))
        with pytest.raises(PublicationReadError):
            book.read(io.StringIO("B\t1\tB001\tTitle\t0\t2024/13/17\tSomeone\n"))
    assert book.author is None
    assert not book


def test_console_read(monkeypatch, capsys):
    text = "P123\nThe Story of My Experiments with Truth\n2024/11/17\nMohandas Karamchand Gandhi\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    with fixed_today(2024, 12, 25):
        book = Book()
        book.read(sys.stdin)
    assert capsys.readouterr().out == "Shelf No: Title: Date: Author: "
    assert book.author == "Mohandas Karamchand Gandhi"
    assert book


def test_console_write_truncates_author(monkeypatch, capsys):
    text = "P123\nThe Story of My Experiments with Truth\n2024/11/17\nMohandas Karamchand Gandhi\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    with fixed_today(2024, 12, 25):
        book = Book()
        book.read(sys.stdin)
    capsys.readouterr()
    book.write(sys.stdout)
    out = capsys.readouterr().out
    assert out.startswith("| P123 | ")
    assert out.endswith(" Mohandas Karamc |")


def test_set_member_resets_date():
    with fixed_today(2024, 12, 25):
        book = Book()
        book.read(io.StringIO(RECORD + "\n"))
        assert book.checkout_date == Date(2024, 11, 17)
        book.set_member(12345)
    assert book.on_loan()
    assert book.checkout_date == Date(2024, 12, 25)


def test_file_read_keeps_record_date_when_on_loan():
    with fixed_today(2024, 12, 25):
        book = Book()
        book.read(io.StringIO("B\t3\tB002\tTitle\t54321\t2024/02/03\tAuthor Name\n"))
    assert book.membership == 54321
    assert book.checkout_date == Date(2024, 2, 3)


def test_dump_writes_valid_book():
    with fixed_today(2024, 12, 25):
        book = Book()
        book.read(io.StringIO(RECORD + "\n"))
    out = io.StringIO()
    book.dump(out)
    assert out.getvalue() == RECORD