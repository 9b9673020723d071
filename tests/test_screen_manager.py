import io
import threading

from newsroom.queues import BoundedBuffer
from newsroom.screen_manager import EDITOR_COUNT, screen_manager


def _buffer(lines, size=10):
    buffer = BoundedBuffer(size)
    for line in lines:
        buffer.insert(line)
    return buffer


def test_prints_lines_then_done():
    buffer = _buffer(["first", "second"])
    out = io.StringIO()
    screen_manager(buffer, 2, out)
    assert out.getvalue().splitlines() == ["first", "second", "DONE"]
    assert buffer.is_empty()


def test_zero_products_prints_done_at_once():
    buffer = _buffer(["left"])
    out = io.StringIO()
    screen_manager(buffer, 0, out)
    assert out.getvalue() == "DONE\n"
    assert len(buffer) == 1


def test_empty_marker_is_skipped_and_not_counted():
    buffer = _buffer(["EMPTY", "real"])
    out = io.StringIO()
    screen_manager(buffer, 1, out)
    assert out.getvalue().splitlines() == ["real", "DONE"]


def test_stops_when_editors_finish_and_buffer_empty():
    buffer = _buffer(["only"])
    buffer.finished_editors = EDITOR_COUNT
    out = io.StringIO()
    screen_manager(buffer, 5, out)
    assert out.getvalue().splitlines() == ["only", "DONE"]


def test_count_limit_leaves_remaining_lines():
    buffer = _buffer(["a", "b", "c"])
    out = io.StringIO()
    screen_manager(buffer, 2, out)
    assert out.getvalue().splitlines() == ["a", "b", "DONE"]
    assert buffer.remove() == "c"


def test_waits_for_lines_from_another_thread():
    buffer = BoundedBuffer(1)
    out = io.StringIO()
    worker = threading.Thread(target=screen_manager, args=(buffer, 3, out))
    worker.start()
    for line in ("x", "y", "z"):
        buffer.insert(line)
    worker.join(5)
    assert not worker.is_alive()
    assert out.getvalue().splitlines() == ["x", "y", "z", "DONE"]
    assert buffer.is_empty()