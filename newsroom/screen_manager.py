"""The screen manager that prints edited articles."""

from __future__ import annotations

import sys
import time
from typing import Optional, TextIO

from .dispatch import CATEGORIES
from .queues import BoundedBuffer

EDITOR_COUNT = len(CATEGORIES)


def screen_manager(
    screen_buffer: BoundedBuffer,
    count_of_products: int,
    out: Optional[TextIO] = None,
) -> None:
    """Print lines from the screen buffer until all products are shown, then DONE.

    Also stops once every co-editor has finished and the buffer is empty.
    Lines reading EMPTY are skipped and not counted.
    """
    out = out if out is not None else sys.stdout
    remaining = count_of_products
    while True:
        finished = screen_buffer.finished_editors >= EDITOR_COUNT
        if remaining == 0 or (finished and screen_buffer.is_empty()):
            print("DONE", file=out)
            return
        if screen_buffer.is_empty():
            time.sleep(0)
            continue
        text = screen_buffer.remove()
        if text == "EMPTY":
            continue
        print(text, file=out)
        remaining -= 1