"""Tag factories for tests. Each tag gets its own line so diagnostics can be told apart."""

from itertools import count

from docentry.source import Span
from docentry.tags import (
    ClassTag,
    ClientTag,
    CustomTag,
    DeprecatedTag,
    ErrorTag,
    FieldTag,
    IgnoreTag,
    PrivateTag,
    ReadOnlyTag,
    ReturnTag,
    ParamTag,
    ServerTag,
    SinceTag,
    UnreleasedTag,
    WithinTag,
    YieldsTag,
)

_lines = count(1)


def span():
    return Span(line=next(_lines), column=5)


def param(name, lua_type=None, desc=""):
    return ParamTag(name=name, lua_type=lua_type, desc=desc, span=span())


def ret(lua_type, desc=""):
    return ReturnTag(lua_type=lua_type, desc=desc, span=span())


def error(lua_type, desc=""):
    return ErrorTag(lua_type=lua_type, desc=desc, span=span())


def field(name, lua_type=None, desc=""):
    return FieldTag(name=name, lua_type=lua_type, desc=desc, span=span())


def custom(name):
    return CustomTag(name=name, span=span())


def since(version):
    return SinceTag(version=version, span=span())


def deprecated(version, desc=None):
    return DeprecatedTag(version=version, desc=desc, span=span())


def within(name):
    return WithinTag(name=name, span=span())


def class_(name):
    return ClassTag(name=name, span=span())


def private():
    return PrivateTag(span=span())


def unreleased():
    return UnreleasedTag(span=span())


def yields():
    return YieldsTag(span=span())


def ignore():
    return IgnoreTag(span=span())


def readonly():
    return ReadOnlyTag(span=span())


def server():
    return ServerTag(span=span())


def client():
    return ClientTag(span=span())


def all_function_tags():
    """One of every tag a function entry accepts."""
    return [
        param("player", "Player"),
        ret("boolean"),
        deprecated("2.0", "Use spawnAt"),
        since("1.0"),
        custom("spawning"),
        error("SpawnError"),
        private(),
        unreleased(),
        yields(),
        ignore(),
        server(),
        client(),
    ]
