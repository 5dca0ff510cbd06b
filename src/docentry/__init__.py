"""docentry - validated documentation entries from parsed doc comment tags."""

from docentry.config import ParseOptions
from docentry.diagnostics import Diagnostic, Diagnostics, DocEntryError
from docentry.entries import (
    DocEntry,
    DocEntryParseArguments,
    EntryBuilder,
    EntryKind,
    FunctionDocEntry,
    FunctionType,
    PropertyDocEntry,
    TypeDocEntry,
)
from docentry.realm import Realm, RealmSet
from docentry.source import CommentStore, DocComment, Span
from docentry.tags import TagKind, parse_tags

__all__ = [
    "CommentStore",
    "Diagnostic",
    "Diagnostics",
    "DocComment",
    "DocEntry",
    "DocEntryError",
    "DocEntryParseArguments",
    "EntryBuilder",
    "EntryKind",
    "FunctionDocEntry",
    "FunctionType",
    "ParseOptions",
    "PropertyDocEntry",
    "Realm",
    "RealmSet",
    "Span",
    "TagKind",
    "TypeDocEntry",
    "parse_tags",
]
