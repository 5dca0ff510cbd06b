"""Shared tag dispatch for all entry kinds.

Each entry kind accepts a fixed set of tag kinds (``ACCEPTED_TAGS``). Every
tag kind maps to one handler in ``TAG_HANDLERS`` that knows which entry field
it fills, or to None when no entry stores it. A builder walks the tags in
order, applies accepted ones and collects a diagnostic for each of the rest,
then either builds the entry or raises ``Diagnostics`` with all of them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, TypeVar

from ..config import DEFAULT_OPTIONS, ParseOptions
from ..diagnostics import Diagnostic, Diagnostics
from ..realm import Realm, RealmSet
from ..source import DocComment
from ..tags import BaseTag, TagKind
from .base import DocEntry

log = logging.getLogger(__name__)

E = TypeVar("E", bound=DocEntry)


@dataclass
class DocEntryParseArguments:
    """Base fields for an entry plus the tags from its comment."""

    name: str
    desc: str
    within: str | None
    source: DocComment
    tags: list[BaseTag] = field(default_factory=list)


class EntryKind(str, Enum):
    FUNCTION = "function"
    PROPERTY = "property"
    TYPE = "type"


class BuilderState(Enum):
    EMPTY = "empty"
    ACCUMULATING = "accumulating"
    SUCCESS = "success"
    FAILED = "failed"


class _Append:
    """Add the tag to a list field, keeping source order."""

    singular = False

    def __init__(self, field_name: str):
        self.field = field_name

    def initial(self) -> list[BaseTag]:
        return []

    def apply(self, fields: dict[str, Any], tag: BaseTag) -> None:
        fields[self.field].append(tag)


class _Replace:
    """Set a single-valued field; a later tag replaces an earlier one."""

    singular = True

    def __init__(
        self, field_name: str, value: Callable[[Any], Any] = lambda tag: tag
    ):
        self.field = field_name
        self.value = value

    def initial(self) -> None:
        return None

    def apply(self, fields: dict[str, Any], tag: BaseTag) -> None:
        fields[self.field] = self.value(tag)


class _Flag:
    """Set a boolean field. Repeating the tag changes nothing."""

    singular = False

    def __init__(self, field_name: str):
        self.field = field_name

    def initial(self) -> bool:
        return False

    def apply(self, fields: dict[str, Any], tag: BaseTag) -> None:
        fields[self.field] = True


class _AddRealm:
    singular = False
    field = "realm"

    def __init__(self, realm: Realm):
        self.realm = realm

    def initial(self) -> RealmSet:
        return RealmSet()

    def apply(self, fields: dict[str, Any], tag: BaseTag) -> None:
        fields[self.field].add(self.realm)


# None: no entry has a field for this tag, so it is always reported.
TAG_HANDLERS: dict[TagKind, _Append | _Replace | _Flag | _AddRealm | None] = {
    TagKind.PARAM: _Append("params"),
    TagKind.RETURN: _Append("returns"),
    TagKind.DEPRECATED: _Replace("deprecated"),
    TagKind.SINCE: _Replace("since", lambda tag: tag.version),
    TagKind.CUSTOM: _Append("custom_tags"),
    TagKind.ERROR: _Append("errors"),
    TagKind.FIELD: _Append("type_fields"),
    TagKind.WITHIN: None,
    TagKind.CLASS: None,
    TagKind.FUNCTION: None,
    TagKind.PROPERTY: None,
    TagKind.TYPE: None,
    TagKind.INTERFACE: None,
    TagKind.EXTERNAL: None,
    TagKind.INDEX: None,
    TagKind.PRIVATE: _Flag("private"),
    TagKind.UNRELEASED: _Flag("unreleased"),
    TagKind.YIELDS: _Flag("yields"),
    TagKind.IGNORE: _Flag("ignore"),
    TagKind.READONLY: _Flag("readonly"),
    TagKind.SERVER: _AddRealm(Realm.SERVER),
    TagKind.CLIENT: _AddRealm(Realm.CLIENT),
}

ACCEPTED_TAGS: dict[EntryKind, frozenset[TagKind]] = {
    EntryKind.FUNCTION: frozenset(
        {
            TagKind.PARAM,
            TagKind.RETURN,
            TagKind.DEPRECATED,
            TagKind.SINCE,
            TagKind.CUSTOM,
            TagKind.ERROR,
            TagKind.PRIVATE,
            TagKind.UNRELEASED,
            TagKind.YIELDS,
            TagKind.IGNORE,
            TagKind.SERVER,
            TagKind.CLIENT,
        }
    ),
    EntryKind.PROPERTY: frozenset(
        {
            TagKind.DEPRECATED,
            TagKind.SINCE,
            TagKind.CUSTOM,
            TagKind.PRIVATE,
            TagKind.UNRELEASED,
            TagKind.IGNORE,
            TagKind.READONLY,
            TagKind.SERVER,
            TagKind.CLIENT,
        }
    ),
    EntryKind.TYPE: frozenset(
        {
            TagKind.FIELD,
            TagKind.DEPRECATED,
            TagKind.SINCE,
            TagKind.CUSTOM,
            TagKind.PRIVATE,
            TagKind.UNRELEASED,
            TagKind.IGNORE,
        }
    ),
}


def _check_tables() -> None:
    """Fail at import if a tag kind or an accepted tag has no handler."""
    missing = set(TagKind) - set(TAG_HANDLERS)
    if missing:
        names = ", ".join(sorted(kind.value for kind in missing))
        raise RuntimeError(f"No handler declared for tag kinds: {names}")

    for entry_kind, accepted in ACCEPTED_TAGS.items():
        unhandled = [kind.value for kind in accepted if TAG_HANDLERS[kind] is None]
        if unhandled:
            raise RuntimeError(
                f"{entry_kind.value} entries accept tags with no field: "
                f"{', '.join(sorted(unhandled))}"
            )


_check_tables()


def _freeze(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(value)
    if isinstance(value, RealmSet):
        return value.freeze()
    return value


class EntryBuilder:
    """Accumulates one entry from its tags.

    A builder is single-use: once ``build`` has succeeded or failed it can't
    take more tags.

    Example:
        builder = EntryBuilder(
            EntryKind.FUNCTION,
            FunctionDocEntry,
            name="spawn",
            desc="Spawns a player.",
            within="Players",
            source=comment,
            entry_kind=FunctionType.STATIC,
        )
        entry = builder.build(tags)
    """

    def __init__(
        self,
        kind: EntryKind,
        entry_cls: type[E],
        *,
        name: str,
        desc: str,
        within: str | None,
        source: DocComment,
        options: ParseOptions | None = None,
        **extra: Any,
    ) -> None:
        self.kind = kind
        self.state = BuilderState.EMPTY
        self._entry_cls = entry_cls
        self._accepted = ACCEPTED_TAGS[kind]
        self._options = options or DEFAULT_OPTIONS
        self._source = source
        self._base = {
            "name": name,
            "description": desc,
            "within": within,
            "source": source,
            **extra,
        }
        self._fields: dict[str, Any] = {}
        for tag_kind in self._accepted:
            handler = TAG_HANDLERS[tag_kind]
            self._fields.setdefault(handler.field, handler.initial())
        self._seen: set[str] = set()
        self._rejected: list[Diagnostic] = []

    @property
    def unused_message(self) -> str:
        return f"This tag is unused by {self.kind.value} doc entries."

    def add(self, tag: BaseTag) -> None:
        """Apply one tag, or record a diagnostic if this kind doesn't use it."""
        if self.state in (BuilderState.SUCCESS, BuilderState.FAILED):
            raise RuntimeError(f"Builder for {self._base['name']!r} already finished")
        self.state = BuilderState.ACCUMULATING

        if tag.tag_kind not in self._accepted:
            self._rejected.append(tag.diagnostic(self.unused_message))
            return

        handler = TAG_HANDLERS[tag.tag_kind]
        if handler.singular and self._options.strict_singular:
            if handler.field in self._seen:
                self._rejected.append(
                    tag.diagnostic(f"Only one {tag.label} tag is allowed.")
                )
                return
            self._seen.add(handler.field)

        handler.apply(self._fields, tag)

    def finish(self) -> E:
        """Build the entry.

        Raises:
            Diagnostics: If any tag was rejected. No entry is built.
        """
        if self.state in (BuilderState.SUCCESS, BuilderState.FAILED):
            raise RuntimeError(f"Builder for {self._base['name']!r} already finished")

        diagnostics = Diagnostics.collect(self._rejected, self._source)
        if diagnostics is not None:
            self.state = BuilderState.FAILED
            log.debug(
                "Rejected %d tag(s) on %s entry %r",
                len(diagnostics),
                self.kind.value,
                self._base["name"],
            )
            raise diagnostics

        fields = {name: _freeze(value) for name, value in self._fields.items()}
        entry = self._entry_cls(**self._base, **fields)
        self.state = BuilderState.SUCCESS
        log.debug("Built %s entry %r", self.kind.value, entry.name)
        return entry

    def build(self, tags: Iterable[BaseTag]) -> E:
        """Consume every tag in order, then build the entry."""
        for tag in tags:
            self.add(tag)
        return self.finish()


def parse_entry(
    kind: EntryKind,
    entry_cls: type[E],
    args: DocEntryParseArguments,
    options: ParseOptions | None = None,
    **extra: Any,
) -> E:
    """Build an entry of ``entry_cls`` from parse arguments.

    Raises:
        Diagnostics: If any tag isn't usable by this entry kind.
    """
    builder = EntryBuilder(
        kind,
        entry_cls,
        name=args.name,
        desc=args.desc,
        within=args.within,
        source=args.source,
        options=options,
        **extra,
    )
    return builder.build(args.tags)
