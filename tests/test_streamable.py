import io
import sys

import pytest

from shelfkeeper.streamable import Streamable


class Note(Streamable):
    def __init__(self, text=""):
        self.text = text

    def write(self, stream):
        prefix = "console:" if self.is_console(stream) else "file:"
        stream.write(prefix + self.text)

    def read(self, stream):
        self.text = stream.readline().rstrip("\n")

    def is_console(self, stream):
        return stream is sys.stdin or stream is sys.stdout

    def __bool__(self):
        return bool(self.text)


def test_cannot_instantiate_interface():
    with pytest.raises(TypeError):
        Streamable()


def test_dump_writes_valid_object():
    out = io.StringIO()
    assert Streamable.dump(Note("hello"), out) is out
    assert out.getvalue() == "file:hello"


def test_dump_skips_invalid_object():
    out = io.StringIO()
    assert Streamable.dump(Note(), out) is out
    assert out.getvalue() == ""


def test_read_then_dump_round_trip():
    note = Note()
    note.read(io.StringIO("shelf note\nnext"))
    assert note.text == "shelf note"
    out = io.StringIO()
    Streamable.dump(note, out)
    assert out.getvalue() == "file:shelf note"


def test_incomplete_subclass_is_abstract():
    class Partial(Streamable):
        def write(self, stream):
            stream.write("x")

    with pytest.raises(TypeError):
        Partial()

    out = io.StringIO()
    Streamable.dump(Note("complete"), out)
    assert out.getvalue() == "file:complete"