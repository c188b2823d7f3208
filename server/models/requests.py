from typing import Annotated

from pydantic import BaseModel, StringConstraints

from shared.models.document import Category, Language

# a chip value must carry text; blank strings are not "no value"
ChipText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class SearchSubmitRequest(BaseModel):
    query: str


class FilterUpdateRequest(BaseModel):
    category: Category | None = None
    year: int | None = None
    tag: ChipText | None = None


class FilterToggleRequest(BaseModel):
    """One chip click. Category accepts "All" to clear."""

    category: ChipText | None = None
    year: int | None = None
    tag: ChipText | None = None


class LanguageRequest(BaseModel):
    language: Language
