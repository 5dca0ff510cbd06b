"""Fields shared by every doc entry."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ..source import DocComment


class DocEntry(BaseModel):
    """A validated documentation entry for one declaration.

    Entries are frozen: they're built once from a complete tag sequence and
    handed to a renderer as-is.
    """

    model_config = ConfigDict(frozen=True)

    # Optional fields dropped from to_dict() output when unset
    omit_if_none: ClassVar[tuple[str, ...]] = ("since", "deprecated")

    name: str
    description: str = Field(serialization_alias="desc")
    within: str
    source: DocComment = Field(exclude=True, repr=False)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form for renderers."""
        data = self.model_dump(mode="json", by_alias=True)
        for key in self.omit_if_none:
            if key in data and data[key] is None:
                del data[key]
        return data
