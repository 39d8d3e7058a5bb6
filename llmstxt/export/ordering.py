"""Deterministic page ordering: canonical ids first, then everything else."""

from __future__ import annotations

from typing import Sequence

from llmstxt.models import DocumentEntry


def resolve_order(
    canonical: Sequence[str],
    corpus: Sequence[DocumentEntry],
) -> list[DocumentEntry]:
    """Merge a canonical id list with the corpus into one page sequence.

    Entries named in *canonical* come first, in canonical order; ids the
    corpus does not contain are skipped.  Every remaining entry follows in
    the corpus's own order.  Each corpus entry appears exactly once.
    """
    by_id = {entry.id: entry for entry in corpus}
    visited: set[str] = set()
    ordered: list[DocumentEntry] = []

    for doc_id in canonical:
        entry = by_id.get(doc_id)
        if entry is None or doc_id in visited:
            continue
        ordered.append(entry)
        visited.add(doc_id)

    for entry in corpus:
        if entry.id not in visited:
            ordered.append(entry)
            visited.add(entry.id)

    return ordered
