"""Doc entries for type aliases and interfaces."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from ..config import ParseOptions
from ..tags import CustomTag, DeprecatedTag, FieldTag
from .base import DocEntry
from .builder import DocEntryParseArguments, EntryKind, parse_entry


class TypeDocEntry(DocEntry):
    """A named type. ``type_fields`` come from @field tags, in order."""

    omit_if_none: ClassVar[tuple[str, ...]] = ("lua_type", "since", "deprecated")

    lua_type: str | None = None
    type_fields: tuple[FieldTag, ...] = Field(
        default=(), serialization_alias="fields"
    )
    custom_tags: tuple[CustomTag, ...] = Field(default=(), serialization_alias="tags")

    private: bool = False
    unreleased: bool = False
    ignore: bool = False

    since: str | None = None
    deprecated: DeprecatedTag | None = None

    @classmethod
    def parse(
        cls,
        args: DocEntryParseArguments,
        lua_type: str | None = None,
        options: ParseOptions | None = None,
    ) -> TypeDocEntry:
        """Build a type entry from a comment's tags.

        Raises:
            Diagnostics: One diagnostic per tag that types don't use.
        """
        return parse_entry(EntryKind.TYPE, cls, args, options, lua_type=lua_type)
