import io
import threading

from fwos.console import emit


def test_emit_writes_line_to_stream():
    buf = io.StringIO()
    emit("hello", buf)
    assert buf.getvalue() == "hello\n"


def test_emit_defaults_to_stdout(capsys):
    emit("[FWOS] line")
    assert capsys.readouterr().out == "[FWOS] line\n"


def test_emit_appends_successive_lines_in_order():
    buf = io.StringIO()
    emit("first", buf)
    emit("second", buf)
    assert buf.getvalue() == "first\nsecond\n"


def test_concurrent_emits_keep_lines_whole():
    buf = io.StringIO()
    messages = [f"message-{n}-" + "x" * 50 for n in range(40)]
    start = threading.Barrier(len(messages))

    def write(message):
        start.wait()
        emit(message, buf)

    threads = [threading.Thread(target=write, args=(m,)) for m in messages]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    emit("done", buf)

    output = buf.getvalue()
    assert output.endswith("done\n")
    lines = output.splitlines()
    assert len(lines) == len(messages) + 1
    assert lines[-1] == "done"
    assert sorted(lines[:-1]) == sorted(messages)