import io

from grftools.inject import LineInjector


def test_reads_stream_lines():
    injector = LineInjector()
    injector.inject_into(io.StringIO("first\nsecond\n"))
    assert injector.getline() == "first"
    assert injector.getline() == "second"
    assert injector.getline() is None


def test_injected_lines_come_first_in_order():
    injector = LineInjector()
    injector.inject_into(io.StringIO("stream\n"))
    injector.inject("a")
    injector.inject("b")
    assert [injector.getline() for _ in range(3)] == ["a", "b", "stream"]


def test_peek_does_not_consume():
    injector = LineInjector()
    injector.inject_into(io.StringIO("xyz\n"))
    assert injector.peek() == "x"
    assert injector.peek() == "x"
    assert injector.getline() == "xyz"
    assert injector.peek() is None


def test_peek_sees_injected_line():
    injector = LineInjector()
    injector.inject_into(io.StringIO("stream\n"))
    injector.inject("inj")
    assert injector.peek() == "i"
    assert injector.getline() == "inj"
    assert injector.peek() == "s"


def test_inject_after_peek_still_takes_priority():
    injector = LineInjector()
    injector.inject_into(io.StringIO("stream\n"))
    assert injector.peek() == "s"
    injector.inject("new")
    assert injector.getline() == "new"
    assert injector.getline() == "stream"


def test_without_stream_inject_writes_output():
    out = io.StringIO()
    injector = LineInjector(out)
    injector.inject("hello")
    injector.inject("world")
    assert out.getvalue() == "hello\nworld\n"


def test_inject_into_clears_queue():
    injector = LineInjector()
    injector.inject_into(io.StringIO(""))
    injector.inject("dropped")
    injector.inject_into(io.StringIO("kept\n"))
    assert injector.getline() == "kept"
    assert injector.getline() is None


def test_last_line_without_newline():
    injector = LineInjector()
    injector.inject_into(io.StringIO("one\ntwo"))
    assert injector.getline() == "one"
    assert injector.getline() == "two"
    assert injector.getline() is None


def test_empty_line_in_stream():
    injector = LineInjector()
    injector.inject_into(io.StringIO("\nnext\n"))
    assert injector.peek() == "\n"
    assert injector.getline() == ""
    assert injector.getline() == "next"