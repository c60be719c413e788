import io
import threading

from threadkit.safeout import SafeCout


def test_flush_writes_line_and_clears_buffer():
    stream = io.StringIO()
    out = SafeCout(stream)
    buf = io.StringIO()
    buf.write("hello ")
    buf.write("world")
    written = out.flush(buf)
    assert written == "hello world"
    assert stream.getvalue() == "hello world\n"
    assert buf.getvalue() == ""


def test_buffer_reusable_after_flush():
    stream = io.StringIO()
    out = SafeCout(stream)
    buf = io.StringIO()
    buf.write("a")
    out.flush(buf)
    buf.write("b")
    out.flush(buf)
    assert stream.getvalue().splitlines() == ["a", "b"]


def test_concurrent_lines_not_interleaved():
    stream = io.StringIO()
    out = SafeCout(stream)

    def work(ident):
        buf = io.StringIO()
        for k in range(50):
            buf.write(f"thread {ident} line {k}")
            out.flush(buf)

    threads = [threading.Thread(target=work, args=(i,)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)
    assert all(not t.is_alive() for t in threads)
    lines = stream.getvalue().splitlines()
    expected = {f"thread {i} line {k}" for i in range(4) for k in range(50)}
    assert len(lines) == 200
    assert set(lines) == expected