"""Tag values extracted from doc comments.

The set of tags is closed: every tag class is listed in ``TagKind`` and in the
``Tag`` union. Tags arrive already parsed; this module only defines their
shapes and the ``parse_tags`` loader for the dict/JSON interchange form, e.g.:

    parse_tags([
        {"kind": "param", "name": "player", "lua_type": "Player"},
        {"kind": "server"},
    ])
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, ClassVar, Iterable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .diagnostics import Diagnostic
from .source import Span


class TagKind(str, Enum):
    PARAM = "param"
    RETURN = "return"
    DEPRECATED = "deprecated"
    SINCE = "since"
    CUSTOM = "tag"
    ERROR = "error"
    FIELD = "field"
    WITHIN = "within"
    CLASS = "class"
    FUNCTION = "function"
    PROPERTY = "prop"
    TYPE = "type"
    INTERFACE = "interface"
    EXTERNAL = "external"
    INDEX = "index"
    PRIVATE = "private"
    UNRELEASED = "unreleased"
    YIELDS = "yields"
    IGNORE = "ignore"
    READONLY = "readonly"
    SERVER = "server"
    CLIENT = "client"


class BaseTag(BaseModel):
    """Common base for all tags.

    ``kind`` and ``span`` are bookkeeping and are left out of serialized
    payloads.
    """

    model_config = ConfigDict(frozen=True)

    tag_kind: ClassVar[TagKind]

    span: Span | None = Field(default=None, exclude=True, repr=False)

    @property
    def label(self) -> str:
        """The tag as written in a comment, e.g. ``@param``."""
        return f"@{self.tag_kind.value}"

    def diagnostic(self, message: str) -> Diagnostic:
        """Build a diagnostic pointing at this tag."""
        return Diagnostic(tag=self, message=message)


class ParamTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.PARAM
    kind: Literal["param"] = Field(default="param", exclude=True)

    name: str
    lua_type: str | None = None
    desc: str = ""


class ReturnTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.RETURN
    kind: Literal["return"] = Field(default="return", exclude=True)

    lua_type: str | None = None
    desc: str = ""


class DeprecatedTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.DEPRECATED
    kind: Literal["deprecated"] = Field(default="deprecated", exclude=True)

    version: str
    desc: str | None = None


class SinceTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.SINCE
    kind: Literal["since"] = Field(default="since", exclude=True)

    version: str


class CustomTag(BaseTag):
    """Free-form ``@tag name`` used by renderers for grouping."""

    tag_kind: ClassVar[TagKind] = TagKind.CUSTOM
    kind: Literal["tag"] = Field(default="tag", exclude=True)

    name: str


class ErrorTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.ERROR
    kind: Literal["error"] = Field(default="error", exclude=True)

    lua_type: str | None = None
    desc: str = ""


class FieldTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.FIELD
    kind: Literal["field"] = Field(default="field", exclude=True)

    name: str
    lua_type: str | None = None
    desc: str = ""


# Declaration tags. The comment lexer uses these to pick the entry kind and
# container, so no entry builder accepts them.


class WithinTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.WITHIN
    kind: Literal["within"] = Field(default="within", exclude=True)

    name: str


class ClassTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.CLASS
    kind: Literal["class"] = Field(default="class", exclude=True)

    name: str


class FunctionTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.FUNCTION
    kind: Literal["function"] = Field(default="function", exclude=True)

    name: str


class PropertyTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.PROPERTY
    kind: Literal["prop"] = Field(default="prop", exclude=True)

    name: str
    lua_type: str | None = None


class TypeTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.TYPE
    kind: Literal["type"] = Field(default="type", exclude=True)

    name: str
    lua_type: str | None = None


class InterfaceTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.INTERFACE
    kind: Literal["interface"] = Field(default="interface", exclude=True)

    name: str


class ExternalTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.EXTERNAL
    kind: Literal["external"] = Field(default="external", exclude=True)

    name: str
    url: str


class IndexTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.INDEX
    kind: Literal["index"] = Field(default="index", exclude=True)

    name: str


# Markers


class PrivateTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.PRIVATE
    kind: Literal["private"] = Field(default="private", exclude=True)


class UnreleasedTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.UNRELEASED
    kind: Literal["unreleased"] = Field(default="unreleased", exclude=True)


class YieldsTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.YIELDS
    kind: Literal["yields"] = Field(default="yields", exclude=True)


class IgnoreTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.IGNORE
    kind: Literal["ignore"] = Field(default="ignore", exclude=True)


class ReadOnlyTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.READONLY
    kind: Literal["readonly"] = Field(default="readonly", exclude=True)


class ServerTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.SERVER
    kind: Literal["server"] = Field(default="server", exclude=True)


class ClientTag(BaseTag):
    tag_kind: ClassVar[TagKind] = TagKind.CLIENT
    kind: Literal["client"] = Field(default="client", exclude=True)


Tag = Annotated[
    Union[
        ParamTag,
        ReturnTag,
        DeprecatedTag,
        SinceTag,
        CustomTag,
        ErrorTag,
        FieldTag,
        WithinTag,
        ClassTag,
        FunctionTag,
        PropertyTag,
        TypeTag,
        InterfaceTag,
        ExternalTag,
        IndexTag,
        PrivateTag,
        UnreleasedTag,
        YieldsTag,
        IgnoreTag,
        ReadOnlyTag,
        ServerTag,
        ClientTag,
    ],
    Field(discriminator="kind"),
]

_TAG_LIST = TypeAdapter(list[Tag])


def parse_tags(data: Iterable[dict[str, Any]]) -> list[BaseTag]:
    """Load tags from their dict form, keyed by ``kind``.

    Raises:
        pydantic.ValidationError: On an unknown kind or a malformed payload.
    """
    return _TAG_LIST.validate_python(list(data))
