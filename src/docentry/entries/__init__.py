from docentry.entries.base import DocEntry
from docentry.entries.builder import (
    ACCEPTED_TAGS,
    BuilderState,
    DocEntryParseArguments,
    EntryBuilder,
    EntryKind,
    parse_entry,
)
from docentry.entries.function import FunctionDocEntry, FunctionType
from docentry.entries.property import PropertyDocEntry
from docentry.entries.typedef import TypeDocEntry

__all__ = [
    "ACCEPTED_TAGS",
    "BuilderState",
    "DocEntry",
    "DocEntryParseArguments",
    "EntryBuilder",
    "EntryKind",
    "FunctionDocEntry",
    "FunctionType",
    "PropertyDocEntry",
    "TypeDocEntry",
    "parse_entry",
]
