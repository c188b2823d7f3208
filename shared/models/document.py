"""Pydantic models for archive documents.

Hierarchy:
  Category         — closed set of archive sections.
  DocKind          — file kind of the preview asset.
  Language         — the two UI / translation languages.
  ArchiveDocument  — immutable catalog record.
"""

from datetime import date as Date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Category(str, Enum):
    EDUCATION = "Education"
    PROFESSIONAL_EXPERIENCE = "Professional Experience"
    PROJECTS = "Projects"
    CERTIFICATIONS = "Certifications"
    AWARDS = "Awards"
    PUBLICATIONS = "Publications"
    SPEAKING = "Speaking"
    PRESS = "Press"


# UI sentinel for "no category constraint"
CATEGORY_ALL = "All"


class DocKind(str, Enum):
    PDF = "PDF"
    JPG = "JPG"
    PNG = "PNG"


class Language(str, Enum):
    EN = "EN"
    ES = "ES"

    def display_name(self) -> str:
        return "English" if self is Language.EN else "Spanish"


class ArchiveDocument(BaseModel):
    """A single catalog record (diploma, award, publication, ...).

    Records are frozen: the corpus is never mutated at runtime. The year is
    stored alongside the date for cheap filtering and must agree with it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(min_length=1)
    title: str
    original_title: str | None = Field(default=None, alias="originalTitle")
    description: str
    date: Date
    year: int
    category: Category
    tags: list[str] = []
    type: DocKind
    thumbnail_url: str = Field(alias="thumbnailUrl")
    content: str

    @model_validator(mode="after")
    def _check_year_matches_date(self) -> "ArchiveDocument":
        if self.year != self.date.year:
            raise ValueError(
                f"Document '{self.id}': year {self.year} does not match date {self.date.isoformat()}."
            )
        return self

    def get_summary_text(self) -> str:
        """One-line summary sent to the AI service instead of the full record."""
        return " | ".join(
            [
                self.title,
                self.description,
                self.date.isoformat(),
                ", ".join(self.tags),
                self.category.value,
            ]
        )
