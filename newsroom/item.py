"""Articles passed between the stages of the newsroom."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An article of one category written by one producer."""

    producer: int
    count: int
    name: str

    def render(self) -> str:
        """The line under which the article is shown on screen."""
        return f"Producer {self.producer} {self.name} {self.count}"