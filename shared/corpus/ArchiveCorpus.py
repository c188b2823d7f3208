"""Read-only document corpus.

Loads the catalog once at startup and exposes it as an ordered, immutable
sequence plus the facet values observed in it (categories, years, tags).
"""

import json
import os
from collections.abc import Iterator, Sequence

from pydantic import TypeAdapter

from shared.models.document import ArchiveDocument

DEFAULT_CORPUS_PATH = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data", "documents.json")

_DOCUMENT_LIST = TypeAdapter(list[ArchiveDocument])


class ArchiveCorpus(Sequence):
    """Ordered collection of ArchiveDocument records with unique ids."""

    def __init__(self, documents: Sequence[ArchiveDocument]) -> None:
        self._documents: tuple[ArchiveDocument, ...] = tuple(documents)
        self._by_id: dict[str, ArchiveDocument] = {}
        for doc in self._documents:
            if doc.id in self._by_id:
                raise ValueError(f"Duplicate document id '{doc.id}' in corpus.")
            self._by_id[doc.id] = doc

    @classmethod
    def from_json_file(cls, path: str = DEFAULT_CORPUS_PATH) -> "ArchiveCorpus":
        """Load and validate a JSON catalog file.

        Args:
            path (str): Path to a JSON array of document records.

        Returns:
            ArchiveCorpus: The validated corpus, in file order.

        Raises:
            ValueError: If the file is not a JSON array of valid records or ids repeat.
        """
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
        return cls(_DOCUMENT_LIST.validate_python(raw))

    ##########################################
    ############## SEQUENCE ##################
    ##########################################

    def __getitem__(self, index):
        return self._documents[index]

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[ArchiveDocument]:
        return iter(self._documents)

    ##########################################
    ################ LOOKUP ##################
    ##########################################

    def get_document(self, doc_id: str) -> ArchiveDocument | None:
        return self._by_id.get(doc_id)

    ##########################################
    ################ FACETS ##################
    ##########################################

    def get_years(self) -> list[int]:
        """Distinct years, newest first."""
        return sorted({doc.year for doc in self._documents}, reverse=True)

    def get_tags(self) -> list[str]:
        """Distinct tags, alphabetically."""
        return sorted({tag for doc in self._documents for tag in doc.tags})
