"""Reading the configuration and running the whole newsroom."""

from __future__ import annotations

import random
import re
import sys
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, TextIO, Union

from .coeditor import co_editor
from .dispatch import CATEGORIES, dispatch
from .producer import Producer, produce
from .queues import BoundedBuffer, ProducerQueue, UnboundedQueue
from .screen_manager import screen_manager

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_QUEUE_SIZE = re.compile(r"\s*queue\s+size\s*=\s*([+-]?\d+)")
_CO_EDITOR_PREFIX = "Co-Editor queue size ="


@dataclass
class Config:
    """The producers and the screen buffer size read from a configuration file."""

    producers: List[Producer] = field(default_factory=list)
    co_editor_queue_size: int = 0

    @property
    def count_of_products(self) -> int:
        """How many articles all producers write together."""
        return sum(p.num_products for p in self.producers)


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise ValueError(f"configuration ends before the {what}")
    return line


def read_config(path: Union[str, Path]) -> Config:
    """Parse a configuration file of PRODUCER blocks and a co-editor queue size."""
    config = Config()
    found_co_editor_size = False
    with open(path, encoding="utf-8") as handle:
        lines = iter(handle)
        for line in lines:
            if line.startswith("PRODUCER"):
                number = _leading_int(line[9:])
                num_products = _leading_int(_next_line(lines, "product count"))
                size_line = _next_line(lines, "producer queue size")
                match = _QUEUE_SIZE.match(size_line)
                if match is None:
                    raise ValueError(f"expected a queue size line, got {size_line.strip()!r}")
                config.producers.append(Producer(number, num_products, int(match.group(1))))
            elif line.startswith(_CO_EDITOR_PREFIX):
                match = _LEADING_INT.match(line[len(_CO_EDITOR_PREFIX):])
                if match is None:
                    raise ValueError(f"bad co-editor queue size line: {line.strip()!r}")
                config.co_editor_queue_size = int(match.group(1))
                found_co_editor_size = True
    if not found_co_editor_size:
        raise ValueError("configuration has no co-editor queue size")
    return config


def run(
    config: Config,
    out: Optional[TextIO] = None,
    rng: Optional[random.Random] = None,
) -> None:
    """Run producers, dispatcher, co-editors and screen manager until all is shown."""
    out = out if out is not None else sys.stdout
    rng = rng if rng is not None else random.Random()
    producer_queues = [ProducerQueue(p.queue_size) for p in config.producers]
    editor_queues = {name: UnboundedQueue() for name in CATEGORIES}
    screen_buffer = BoundedBuffer(config.co_editor_queue_size)

    threads = [
        threading.Thread(target=produce, args=(p, q, rng), name=f"producer-{p.number}")
        for p, q in zip(config.producers, producer_queues)
    ]
    threads.append(
        threading.Thread(
            target=dispatch,
            args=(config.producers, producer_queues, editor_queues),
            name="dispatcher",
        )
    )
    threads.extend(
        threading.Thread(
            target=co_editor, args=(name, editor_queues, screen_buffer), name=f"editor-{name}"
        )
        for name in CATEGORIES
    )
    threads.append(
        threading.Thread(
            target=screen_manager,
            args=(screen_buffer, config.count_of_products, out),
            name="screen-manager",
        )
    )
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: run the newsroom described by one configuration file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Please provide the file name as a command-line argument.")
        return 1
    try:
        config = read_config(args[0])
    except OSError as exc:
        print(f"Failed to open the file: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1
    try:
        run(config, sys.stdout, random.Random())
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1
    return 0