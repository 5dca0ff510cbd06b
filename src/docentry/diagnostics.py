"""Errors and tag diagnostics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator

if TYPE_CHECKING:
    from .source import DocComment, Span
    from .tags import BaseTag


class DocEntryError(Exception):
    """Base exception for docentry."""


@dataclass(frozen=True)
class Diagnostic:
    """A problem with one tag."""

    tag: BaseTag
    message: str

    @property
    def span(self) -> Span | None:
        return self.tag.span

    def render(self, source: DocComment | None = None) -> str:
        """Format as ``path:line:column: message``.

        Location parts that aren't known are left out.
        """
        location = []
        if source is not None and source.path:
            location.append(source.path)
        if self.span is not None:
            location.extend([str(self.span.line), str(self.span.column)])
        prefix = ":".join(location)
        return f"{prefix}: {self.message}" if prefix else self.message


class Diagnostics(DocEntryError):
    """Every tag problem found in one doc comment.

    Raised instead of returning an entry; no entry is produced when any
    diagnostic exists.
    """

    def __init__(
        self, diagnostics: Iterable[Diagnostic], source: DocComment | None = None
    ):
        self.diagnostics: list[Diagnostic] = list(diagnostics)
        self.source = source
        super().__init__(self.render())

    def __reduce__(self):
        # args holds the rendered text; rebuild from the diagnostics instead
        return (type(self), (self.diagnostics, self.source))

    @classmethod
    def collect(
        cls, diagnostics: Iterable[Diagnostic], source: DocComment | None = None
    ) -> Diagnostics | None:
        """Bundle diagnostics, or return None if there are none."""
        diagnostics = list(diagnostics)
        if not diagnostics:
            return None
        return cls(diagnostics, source)

    @property
    def tags(self) -> list[BaseTag]:
        """The offending tags, in report order."""
        return [d.tag for d in self.diagnostics]

    def render(self) -> str:
        return "\n".join(d.render(self.source) for d in self.diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)

    def __len__(self) -> int:
        return len(self.diagnostics)
