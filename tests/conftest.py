import os
from collections.abc import Callable

import pytest
from commandlines import Command, CommandConventions


@pytest.fixture(autouse=True)
def clean_commandlines_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep COMMANDLINES_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("COMMANDLINES_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def make_command() -> Callable[..., Command]:
    def _make(*tokens: str, conventions: CommandConventions | None = None) -> Command:
        return Command(["prog", *tokens], conventions=conventions)

    return _make
