"""Tagging — membership and tag-list edits for anything that has tags."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class Taggable(Protocol):
    """Anything that provides tags."""

    @property
    def tags(self) -> Sequence[str]: ...


def has_tag(entity: Taggable, tag: str) -> bool:
    """Return whether *entity* has the given *tag*.

    Exact string match: no case folding, no trimming.
    """
    return tag in entity.tags


def with_tags(tags: Sequence[str], *add: str) -> list[str]:
    """Return *tags* with *add* appended, without duplicates.

    Examples:
        >>> with_tags(["a", "b"], "b", "c", "c")
        ['a', 'b', 'c']
    """
    out: list[str] = []
    for tag in (*tags, *add):
        if tag not in out:
            out.append(tag)
    return out


def without_tags(tags: Sequence[str], *remove: str) -> list[str]:
    """Return *tags* with every tag in *remove* dropped."""
    dropped = set(remove)
    return [tag for tag in tags if tag not in dropped]
