"""Folder path segmentation and ordering.

Paths cross the collaborator boundary as ``/``-delimited strings; inside the
engine they are tuples of segments. A root folder has exactly one segment.
"""
from __future__ import annotations

from typing import Iterable, Iterator

DELIMITER = "/"

Segments = tuple[str, ...]


def split_path(path: str | Segments) -> Segments:
    if isinstance(path, tuple):
        return path
    return tuple(part for part in path.strip(DELIMITER).split(DELIMITER) if part)


def join_path(segments: Iterable[str]) -> str:
    return DELIMITER.join(segments)


def is_root(segments: Segments) -> bool:
    return len(segments) == 1


def parent_of(segments: Segments) -> Segments:
    return segments[:-1]


def name_of(segments: Segments) -> str:
    return segments[-1] if segments else ""


def ancestors(segments: Segments) -> Iterator[Segments]:
    """Yield every ancestor from the immediate parent up to the root."""
    for end in range(len(segments) - 1, 0, -1):
        yield segments[:end]


def sort_key(name: str) -> tuple[str, str]:
    """Case-insensitive ordering, with the original spelling as a stable tie-break.

    Names are compared by the code points of their ``casefold()`` form, not by
    locale collation. Punctuation, digits and accented letters can therefore
    sort differently from a locale-aware comparison; for example ``"Zebra"``
    comes before ``"Éclair"``.
    """
    return (name.casefold(), name)


def sorted_names(names: Iterable[str]) -> list[str]:
    return sorted(set(names), key=sort_key)
