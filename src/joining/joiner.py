# src/joining/joiner.py
"""Concatenate CoNLL-U texts into a single document.

Texts are joined with one line feed and nothing else: no trimming, no
deduplication, no renumbering. Joining the chunks of a sliced file in
order therefore restores that file exactly.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from conllukit.core.conllu import LINE_SEPARATOR


def join_texts(texts: Iterable[str]) -> str:
    """Join texts in the given order with a single line feed between them."""
    return LINE_SEPARATOR.join(texts)


def order_sources(
    paths: Sequence[Path],
    sort_alphabetically: bool = False,
) -> list[Path]:
    """Return paths in join order.

    The given order is kept unless sort_alphabetically is set, in which case
    paths are ordered by file name, case-insensitively, ties broken by the
    full path.
    """
    if not sort_alphabetically:
        return list(paths)
    return sorted(paths, key=lambda p: (p.name.lower(), str(p)))
