"""Shared pytest fixtures for docentry tests."""

import pytest
from docentry import DocComment, DocEntryParseArguments


@pytest.fixture
def comment():
    """A doc comment the entries under test point back to."""
    return DocComment(
        text="--- Spawns a player.\n--- @param player Player",
        path="src/Players.lua",
        start_line=10,
        end_line=11,
    )


@pytest.fixture
def make_args(comment):
    """
    Factory for parse arguments.

    Defaults to a function called "spawn" inside "Players".
    """

    def _make(tags=(), name="spawn", desc="Spawns a player.", within="Players"):
        return DocEntryParseArguments(
            name=name,
            desc=desc,
            within=within,
            source=comment,
            tags=list(tags),
        )

    return _make
