"""Producers that write random article categories into their own queue."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from .queues import ProducerQueue


@dataclass(frozen=True)
class Producer:
    """One producer from the configuration file.

    ``number`` is the number shown on screen, ``num_products`` how many
    articles it writes and ``queue_size`` the size of its own queue.
    """

    number: int
    num_products: int
    queue_size: int


def produce(
    producer: Producer,
    queue: ProducerQueue,
    rng: Optional[random.Random] = None,
) -> None:
    """Enqueue ``producer.num_products`` random categories (1 to 3), then mark the queue done.

    Blocks whenever the queue is full until the dispatcher makes room.
    """
    rng = rng if rng is not None else random.Random()
    for _ in range(producer.num_products):
        queue.enqueue(rng.randint(1, 3))
    queue.done = True