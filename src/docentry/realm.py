"""Execution realms (server/client) that an entry applies to."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSet
from enum import Enum
from typing import Annotated

from pydantic import AfterValidator


class Realm(str, Enum):
    """Execution context marker. Declaration order is the output order."""

    SERVER = "Server"
    CLIENT = "Client"


_REALM_ORDER = {realm: index for index, realm in enumerate(Realm)}


def sorted_realms(realms: Iterable[Realm]) -> list[Realm]:
    """Return realms in fixed order (Server before Client)."""
    return sorted(set(realms), key=_REALM_ORDER.__getitem__)


class RealmSet(MutableSet):
    """Deduplicating set of realms that always iterates Server, Client."""

    def __init__(self, realms: Iterable[Realm] = ()) -> None:
        self._realms: set[Realm] = set()
        for realm in realms:
            self.add(realm)

    def add(self, value: Realm) -> None:
        self._realms.add(Realm(value))

    def discard(self, value: Realm) -> None:
        self._realms.discard(value)

    def __contains__(self, value: object) -> bool:
        return value in self._realms

    def __iter__(self) -> Iterator[Realm]:
        return iter(sorted_realms(self._realms))

    def __len__(self) -> int:
        return len(self._realms)

    def __repr__(self) -> str:
        return f"RealmSet({[realm.value for realm in self]})"

    def freeze(self) -> tuple[Realm, ...]:
        """Ordered snapshot for storing on an immutable entry."""
        return tuple(self)


# Entry field type: deduplicated tuple in Server, Client order
RealmField = Annotated[
    tuple[Realm, ...],
    AfterValidator(lambda realms: tuple(sorted_realms(realms))),
]
