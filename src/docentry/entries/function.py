"""Doc entries for functions and methods."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from ..config import ParseOptions
from ..realm import RealmField
from ..tags import CustomTag, DeprecatedTag, ErrorTag, ParamTag, ReturnTag
from .base import DocEntry
from .builder import DocEntryParseArguments, EntryKind, parse_entry


class FunctionType(str, Enum):
    """Separates functions (called with a dot) from methods (called with a colon)."""

    METHOD = "method"
    STATIC = "static"


class FunctionDocEntry(DocEntry):
    """A DocEntry for a function or method."""

    params: tuple[ParamTag, ...] = ()
    returns: tuple[ReturnTag, ...] = ()
    custom_tags: tuple[CustomTag, ...] = Field(default=(), serialization_alias="tags")
    errors: tuple[ErrorTag, ...] = ()
    entry_kind: FunctionType = Field(serialization_alias="function_type")

    realm: RealmField = ()
    private: bool = False
    unreleased: bool = False
    yields: bool = False
    ignore: bool = False

    since: str | None = None
    deprecated: DeprecatedTag | None = None

    @classmethod
    def parse(
        cls,
        args: DocEntryParseArguments,
        function_type: FunctionType,
        options: ParseOptions | None = None,
    ) -> FunctionDocEntry:
        """Build a function entry from a comment's tags.

        Raises:
            Diagnostics: One diagnostic per tag that functions don't use.
        """
        return parse_entry(
            EntryKind.FUNCTION, cls, args, options, entry_kind=function_type
        )
