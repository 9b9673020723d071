"""Co-editors that edit one category of articles for the screen."""

from __future__ import annotations

import threading
import time
from typing import Mapping

from .queues import BoundedBuffer, UnboundedQueue

EDIT_DELAY = 0.1

_finish_lock = threading.Lock()


def co_editor(
    kind: str,
    editor_queues: Mapping[str, UnboundedQueue],
    screen_buffer: BoundedBuffer,
) -> None:
    """Edit every article of category ``kind`` and pass it to the screen buffer.

    Returns once the category's queue is done and empty, after counting this
    editor among the buffer's finished editors.
    """
    try:
        queue = editor_queues[kind]
    except KeyError:
        raise ValueError(f"Invalid co-editor type: {kind}") from None
    while True:
        finished = queue.done
        item = queue.dequeue()
        if item is None:
            if finished:
                with _finish_lock:
                    screen_buffer.finished_editors += 1
                return
            time.sleep(0)
            continue
        time.sleep(EDIT_DELAY)
        screen_buffer.insert(item.render())