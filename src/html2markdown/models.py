"""Render options and per-node context flags."""

from __future__ import annotations

from enum import Flag, auto

from pydantic import BaseModel, ConfigDict


class Options(BaseModel):
    """Stylistic switches, fixed for the duration of a render."""

    model_config = ConfigDict(frozen=True)

    unordered_list_bullets: bool = False  # "•" instead of "*"
    escape_markdown: bool = False
    mastodon: bool = False  # honour invisible/ellipsis span classes
    swiftui: bool = False  # headings as bold text
    bold_tag: bool = False  # "#tag" links become bold text
    bold_mention: bool = False  # "@user" links become bold text

    def combine(self, *others: Options) -> Options:
        """Return a new Options with every flag set in any of the inputs."""
        merged = self.model_dump()
        for other in others:
            for key, value in other.model_dump().items():
                merged[key] = merged[key] or value
        return Options(**merged)


class Context(Flag):
    """Flags a node computes for its own children."""

    NONE = 0
    FIRST_CHILD = auto()
    FINAL_CHILD = auto()
    SINGLE_CHILD_IN_ROOT = auto()
    PRE = auto()
    CODE = auto()
    UNORDERED_LIST = auto()
    ORDERED_LIST = auto()
