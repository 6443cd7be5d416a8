"""Domain models for the quotes dataset and persisted author records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AuthorInput(BaseModel):
    """An author entry as it appears in the source dataset."""

    model_config = ConfigDict(frozen=True)

    author_id: int | str = Field(..., description="Stable author identifier")
    author: str = Field(..., description="Display name")
    quotes: list[str] = Field(default_factory=list, description="Quotes in source order")


class QuoteDataset(BaseModel):
    """Top-level quotes document."""

    authors: list[AuthorInput] = Field(..., description="Authors in source order")


class AuthorRecord(BaseModel):
    """
    Persisted state for one author.

    Extra keys found in a stored record are kept so a rewrite never drops them.
    """

    model_config = ConfigDict(extra="allow")

    author_id: int | str
    author: str
    quotes: list[str] = Field(default_factory=list)
    image_url: str | None = None

    @classmethod
    def from_input(cls, author: AuthorInput, image_url: str | None = None) -> AuthorRecord:
        """Create a new record from a dataset entry, quotes passed through as given."""
        return cls(
            author_id=author.author_id,
            author=author.author,
            quotes=list(author.quotes),
            image_url=image_url,
        )

    def merge_quotes(self, quotes: list[str]) -> int:
        """
        Append quotes that are not already present.

        Membership is checked against the growing list, so repeated strings
        within ``quotes`` are only added once.

        Returns:
            Number of quotes appended
        """
        added = 0
        for quote in quotes:
            if quote not in self.quotes:
                self.quotes.append(quote)
                added += 1
        return added

    @property
    def needs_image(self) -> bool:
        return not self.image_url


class SyncOutcome(BaseModel):
    """Counters describing a completed sync run."""

    authors_processed: int = 0
    authors_created: int = 0
    authors_updated: int = 0
    quotes_added: int = 0
    images_resolved: int = 0
    image_failures: int = 0
