"""Source locations for doc comments and the tags parsed out of them."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Span(BaseModel):
    """Where a tag sits in its source file (1-based line and column)."""

    model_config = ConfigDict(frozen=True)

    line: int
    column: int = 1
    length: int = 0


class DocComment(BaseModel):
    """The comment an entry was built from.

    Entries only hold a reference to this for diagnostics; they never
    modify it and it is not part of their serialized form.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    path: str | None = None
    start_line: int = 1
    end_line: int = 1


class CommentStore:
    """Owns doc comments for a run and hands out stable integer ids."""

    def __init__(self) -> None:
        self._comments: list[DocComment] = []

    def add(self, comment: DocComment) -> int:
        """Store a comment and return its id."""
        self._comments.append(comment)
        return len(self._comments) - 1

    def get(self, comment_id: int) -> DocComment:
        """Look up a comment by id.

        Raises:
            KeyError: If no comment was stored under that id.
        """
        if not 0 <= comment_id < len(self._comments):
            raise KeyError(comment_id)
        return self._comments[comment_id]

    def __len__(self) -> int:
        return len(self._comments)

    def __iter__(self):
        return iter(self._comments)
