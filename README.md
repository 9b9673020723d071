# newsroom

A small multi-threaded news-broadcast pipeline.

Several producers each write a fixed number of articles (sports, news or
weather, chosen at random) into their own fixed-size queue. A single
dispatcher visits the producer queues round-robin and sorts every article
into one of three unbounded queues, one per category. A co-editor per
category "edits" each article (a 0.1 second pause) and passes its screen line
on to a shared bounded buffer, from which the screen manager prints it. When
every article has been shown, the screen manager prints `DONE`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Configuration file

The program is driven by a plain-text configuration file. Each producer is
described by three lines: `PRODUCER` followed by its number, how many
articles it writes, and the size of its queue. The size of the co-editors'
shared screen buffer is given on a line of its own starting with
`Co-Editor queue size =`. Other lines are ignored.

```
PRODUCER 1
30
queue size = 5

PRODUCER 2
25
queue size = 3

PRODUCER 3
16
queue size = 30

Co-Editor queue size = 17
```

A file that has no co-editor queue size line, ends in the middle of a
producer block, or has a producer block whose third line is not a
`queue size = N` line is rejected. Queue sizes must be positive.

## Running

```
newsroom config.txt
```

Every article is printed as it reaches the screen, in the form

```
Producer 2 SPORTS 0
Producer 1 WEATHER 3
...
DONE
```

where the last number counts the articles of that category from that
producer in the order they were dispatched, starting at 0. Lines from
different producers and categories interleave according to thread
scheduling.

Without exactly one argument, the command prints a usage hint and exits with
status 1. If the file cannot be opened or the configuration is invalid, it
prints a message to standard error and exits with status 1.

## Using it from Python

```python
import random
import sys

from newsroom.app import read_config, run

config = read_config("config.txt")
print(config.count_of_products)
run(config, sys.stdout, random.Random(1))
```

`read_config` returns a `Config` holding a list of `Producer` entries
(`number`, `num_products`, `queue_size`) and `co_editor_queue_size`.
`run` starts one thread per producer, the dispatcher, three co-editors and
the screen manager, and returns when all of them have finished. `main(argv)`
is the command's entry point and returns its exit status.

The building blocks are available on their own as well:

- `newsroom.semaphore`: `BinarySemaphore` and `CountingSemaphore`, built on a
  condition variable, with `wait()`, `signal()` and a `value` property.
- `newsroom.item`: `Item` (`producer`, `count`, `name`), one article, with
  `render()` giving its screen line.
- `newsroom.queues`: `ProducerQueue` (fixed-size FIFO whose `enqueue` blocks
  while full and whose `dequeue` returns `None` when empty), `UnboundedQueue`
  (per-category article queue) and `BoundedBuffer` (the screen buffer, whose
  `insert` and `remove` block on two counting semaphores).
- `newsroom.producer`: `Producer` and `produce(producer, queue, rng)`.
- `newsroom.dispatch`: `dispatch(producers, producer_queues, editor_queues)`,
  plus `CATEGORIES` and `category_of(value)` mapping 1, 2, 3 to `SPORTS`,
  `NEWS`, `WEATHER`.
- `newsroom.coeditor`: `co_editor(kind, editor_queues, screen_buffer)`, which
  raises `ValueError` for an unknown category.
- `newsroom.screen_manager`: `screen_manager(screen_buffer,
  count_of_products, out)`.