"""Key builders for author records in the key-value store."""


class RecordKeys:
    """Key builders for consistent key formatting."""

    AUTHOR_PREFIX = "author_"

    @classmethod
    def author(cls, author_id: int | str) -> str:
        """Key for an author record by dataset author ID."""
        return f"{cls.AUTHOR_PREFIX}{author_id}"
