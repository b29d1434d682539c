"""Unit tests for output sink acquisition and release."""

import io
import sys

import pytest

import peoplegen.sink as sink_module
from peoplegen.exceptions import OutputWriteError, SinkError
from peoplegen.sink import STDOUT_NAME, Sink, open_sink, with_sink


class TrackingStream(io.StringIO):
    """StringIO that counts flushes and can fail on demand."""

    def __init__(self, fail_writes=False):
        super().__init__()
        self.flushes = 0
        self.fail_writes = fail_writes

    def write(self, s):
        if self.fail_writes:
            raise OSError(28, "No space left on device")
        return super().write(s)

    def flush(self):
        self.flushes += 1
        super().flush()


class FailingCloseStream(io.StringIO):
    """StringIO whose first close() raises, as a deferred write error would."""

    def __init__(self):
        super().__init__()
        self.closes = 0

    def close(self):
        if self.closed:
            return
        self.closes += 1
        super().close()
        raise OSError(5, "Input/output error")


@pytest.fixture
def failing_close(monkeypatch):
    """Make open_sink open a FailingCloseStream instead of a real file."""
    streams = []

    def fake_open(*args, **kwargs):
        streams.append(FailingCloseStream())
        return streams[-1]

    monkeypatch.setattr(sink_module, "open", fake_open, raising=False)
    return streams


def test_file_written_and_closed(tmp_path):
    path = tmp_path / "out.txt"
    with open_sink(path) as sink:
        sink.write("hello\n", records=1)
        stream = sink._stream

    assert stream.closed
    assert path.read_text() == "hello\n"
    assert sink.chars_written == 6
    assert sink.records_written == 1


def test_file_truncated(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("old contents that are longer\n")
    with open_sink(path) as sink:
        sink.write("new\n")
    assert path.read_text() == "new\n"


def test_file_closed_when_body_raises(tmp_path):
    path = tmp_path / "out.txt"
    seen = []

    with pytest.raises(RuntimeError, match="boom"):
        with open_sink(path) as sink:
            seen.append(sink)
            sink.write("partial")
            raise RuntimeError("boom")

    assert seen[0]._stream.closed
    assert path.read_text() == "partial"


def test_missing_directory_is_sink_error(tmp_path):
    path = tmp_path / "missing" / "out.txt"
    ran = []

    with pytest.raises(SinkError) as excinfo:
        with_sink(path, lambda sink: ran.append(sink))

    assert ran == []
    assert excinfo.value.destination == path
    assert "Cannot open" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_directory_destination_is_sink_error(tmp_path):
    with pytest.raises(SinkError):
        with_sink(tmp_path, lambda sink: None)


def test_with_sink_returns_body_result(tmp_path):
    assert with_sink(tmp_path / "out.txt", lambda sink: 42) == 42


def test_stdout_flushed_on_success(monkeypatch):
    stream = TrackingStream()
    monkeypatch.setattr(sys, "stdout", stream)

    with open_sink(None) as sink:
        assert sink.name == STDOUT_NAME
        sink.write("data\n")

    assert stream.getvalue() == "data\n"
    assert stream.flushes == 1
    assert not stream.closed


def test_stdout_not_flushed_when_body_raises(monkeypatch):
    # Flushing stdout happens only on the success path; a failed body leaves
    # stdout untouched.
    stream = TrackingStream()
    monkeypatch.setattr(sys, "stdout", stream)

    with pytest.raises(RuntimeError):
        with open_sink(None) as sink:
            sink.write("data\n")
            raise RuntimeError("boom")

    assert stream.flushes == 0
    assert not stream.closed


def test_write_failure_is_output_write_error():
    sink = Sink(TrackingStream(fail_writes=True), "<broken>")
    with pytest.raises(OutputWriteError, match="<broken>"):
        sink.write("data")
    assert sink.chars_written == 0


def test_unencodable_text_is_output_write_error():
    stream = io.TextIOWrapper(io.BytesIO(), encoding="ascii")
    sink = Sink(stream, "<ascii>")

    with pytest.raises(OutputWriteError, match="<ascii>") as excinfo:
        sink.write("José\n", records=1)

    assert isinstance(excinfo.value.__cause__, UnicodeEncodeError)
    assert sink.records_written == 0


def test_closed_stream_is_output_write_error():
    stream = io.StringIO()
    stream.close()
    sink = Sink(stream, "<closed>")

    with pytest.raises(OutputWriteError):
        sink.write("data\n")
    with pytest.raises(OutputWriteError):
        sink.flush()


def test_close_failure_is_output_write_error(tmp_path, failing_close):
    with pytest.raises(OutputWriteError, match="Failed closing") as excinfo:
        with open_sink(tmp_path / "out.txt") as sink:
            sink.write("data\n", records=1)

    assert isinstance(excinfo.value.__cause__, OSError)
    assert failing_close[0].closes == 1
    assert sink.records_written == 1


def test_close_failure_after_body_raises(tmp_path, failing_close):
    with pytest.raises(OutputWriteError, match="Failed closing") as excinfo:
        with open_sink(tmp_path / "out.txt"):
            raise RuntimeError("boom")

    close_error = excinfo.value.__cause__
    assert isinstance(close_error, OSError)
    assert isinstance(close_error.__context__, RuntimeError)
    assert failing_close[0].closes == 1
