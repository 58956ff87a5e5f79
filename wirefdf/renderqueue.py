"""Ordering of draw calls by depth."""

from __future__ import annotations

from typing import Callable, Iterable, List, TypeVar

T = TypeVar("T")


def sort_render_queue(entries: Iterable[T], key: Callable[[T], int]) -> List[T]:
    """Return the entries ordered by ascending depth.

    Each entry is placed in front of every already placed entry of equal
    depth, so entries sharing a depth end up in reverse of their original order.
    """
    return sorted(reversed(list(entries)), key=key)