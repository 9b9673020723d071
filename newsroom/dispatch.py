"""The dispatcher that sorts producers' articles into the editors' queues."""

from __future__ import annotations

import time
from typing import Mapping, Optional, Sequence

from .item import Item
from .producer import Producer
from .queues import ProducerQueue, UnboundedQueue

CATEGORIES = ("SPORTS", "NEWS", "WEATHER")


def category_of(value: int) -> Optional[str]:
    """The category name a producer's value stands for, or None if it stands for none."""
    if 1 <= value <= len(CATEGORIES):
        return CATEGORIES[value - 1]
    return None


def dispatch(
    producers: Sequence[Producer],
    producer_queues: Sequence[ProducerQueue],
    editor_queues: Mapping[str, UnboundedQueue],
) -> None:
    """Move articles round-robin from the producer queues to the editor queues.

    Each article is numbered per producer and category in the order it is
    dispatched.  Returns once every producer queue is done and drained, after
    marking every editor queue done.
    """
    if len(producers) != len(producer_queues):
        raise ValueError("every producer needs exactly one queue")
    pairs = list(zip(producers, producer_queues))
    remaining = sum(1 for _, queue in pairs if not queue.drained)
    while remaining:
        progressed = False
        for producer, queue in pairs:
            if queue.drained:
                continue
            finished = queue.done
            value = queue.dequeue()
            if value is not None:
                progressed = True
                name = category_of(value)
                if name is None:
                    continue
                item = Item(producer.number, queue.counters[name], name)
                editor_queues[name].enqueue(item)
                queue.counters[name] += 1
            elif finished:
                queue.drained = True
                remaining -= 1
                progressed = True
        if not progressed:
            time.sleep(0)
    for editor_queue in editor_queues.values():
        editor_queue.done = True