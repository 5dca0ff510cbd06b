"""Doc entries for class properties."""

from __future__ import annotations

from pydantic import Field

from ..config import ParseOptions
from ..realm import RealmField
from ..tags import CustomTag, DeprecatedTag
from .base import DocEntry
from .builder import DocEntryParseArguments, EntryKind, parse_entry


class PropertyDocEntry(DocEntry):
    """A property on a class. ``lua_type`` comes from the declaring @prop tag."""

    lua_type: str
    custom_tags: tuple[CustomTag, ...] = Field(default=(), serialization_alias="tags")

    realm: RealmField = ()
    private: bool = False
    unreleased: bool = False
    ignore: bool = False
    readonly: bool = False

    since: str | None = None
    deprecated: DeprecatedTag | None = None

    @classmethod
    def parse(
        cls,
        args: DocEntryParseArguments,
        lua_type: str,
        options: ParseOptions | None = None,
    ) -> PropertyDocEntry:
        """Build a property entry from a comment's tags.

        Raises:
            Diagnostics: One diagnostic per tag that properties don't use.
        """
        return parse_entry(EntryKind.PROPERTY, cls, args, options, lua_type=lua_type)
