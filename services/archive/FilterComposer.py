"""Combines the corpus, the AI-ranked match list and the categorical filters into the visible result list."""

from collections.abc import Sequence

from shared.models.document import ArchiveDocument
from shared.models.search import FilterSelection


def _build_rank_index(ai_match_ids: Sequence[str]) -> dict[str, int]:
    """Map each id to the position of its first occurrence in the ranked list."""
    ranks: dict[str, int] = {}
    for position, doc_id in enumerate(ai_match_ids):
        ranks.setdefault(doc_id, position)
    return ranks


def compose(
    corpus: Sequence[ArchiveDocument],
    ai_match_ids: Sequence[str] | None,
    filters: FilterSelection,
) -> list[ArchiveDocument]:
    """Compute the ordered result list.

    With an active AI match list the corpus is narrowed to the mentioned
    documents and reordered by relevance rank; ids unknown to the corpus are
    ignored. The category, year and tag filters are then applied with AND
    semantics, preserving the current order.

    Args:
        corpus: Documents in their natural order.
        ai_match_ids: Ranked ids from a semantic search, or None when no AI search is active.
        filters: The categorical filter selection.

    Returns:
        list[ArchiveDocument]: The filtered documents (possibly empty).
    """
    docs = list(corpus)

    if ai_match_ids is not None:
        ranks = _build_rank_index(ai_match_ids)
        docs = sorted((doc for doc in docs if doc.id in ranks), key=lambda doc: ranks[doc.id])

    if filters.category is not None:
        docs = [doc for doc in docs if doc.category == filters.category]
    if filters.year is not None:
        docs = [doc for doc in docs if doc.year == filters.year]
    if filters.tag is not None:
        docs = [doc for doc in docs if filters.tag in doc.tags]

    return docs
