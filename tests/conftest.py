"""Shared pytest fixtures for the create-bmd test suite.

Provides reusable fixtures for:
- An isolated per-user config directory
- A fake Bot Maker for Discord installation
- Scripted answers standing in for questionary prompts
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from create_bmd.config import CONFIG_DIR_ENV, ConfigStore


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Per-user config directory redirected into the test's tmp dir."""
    directory = tmp_path / "appdata" / "create-bmd"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(directory))
    return directory


@pytest.fixture
def store(config_dir: Path) -> ConfigStore:
    """A ConfigStore backed by the isolated config directory."""
    return ConfigStore(config_dir)


@pytest.fixture
def bmd_install(tmp_path: Path) -> Path:
    """A directory that looks like a Bot Maker for Discord installation."""
    root = tmp_path / "Bot Maker For Discord"
    (root / "resources").mkdir(parents=True)
    (root / "AppData" / "Actions").mkdir(parents=True)
    (root / "AppData" / "Events").mkdir(parents=True)
    return root


@pytest.fixture(autouse=True)
def no_known_install_paths(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep auto-detection away from whatever is installed on the test machine."""
    monkeypatch.setattr("create_bmd.installation.common_bmd_paths", lambda system=None: [])


# ---------------------------------------------------------------------------
# Scripted prompts
# ---------------------------------------------------------------------------

USE_DEFAULT = object()
"""Answer marker: reply with whatever default the question offered."""


class ScriptedQuestionary:
    """Stand-in for the ``questionary`` module that replays canned answers.

    Each ``text``/``select`` call consumes the next answer.  An exception
    class or instance as the answer is raised from ``unsafe_ask``.  Every
    question asked is recorded in ``calls`` as ``(kind, message, kwargs)``.
    """

    def __init__(self, answers: list[Any]) -> None:
        self.answers = list(answers)
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def text(self, message: str, **kwargs: Any) -> MagicMock:
        return self._question("text", message, kwargs)

    def select(self, message: str, **kwargs: Any) -> MagicMock:
        return self._question("select", message, kwargs)

    def messages(self) -> list[str]:
        return [message for _, message, _ in self.calls]

    def kwargs_for(self, fragment: str) -> dict[str, Any]:
        """Keyword arguments of the first question whose message contains *fragment*."""
        for _, message, kwargs in self.calls:
            if fragment in message:
                return kwargs
        raise AssertionError(f"No question containing {fragment!r} was asked")

    def _question(self, kind: str, message: str, kwargs: dict[str, Any]) -> MagicMock:
        self.calls.append((kind, message, kwargs))
        if not self.answers:
            raise AssertionError(f"Unexpected question: {message!r}")
        answer = self.answers.pop(0)

        question = MagicMock()
        if answer is USE_DEFAULT:
            question.unsafe_ask.return_value = kwargs.get("default", "")
        elif isinstance(answer, BaseException) or (
            isinstance(answer, type) and issubclass(answer, BaseException)
        ):
            question.unsafe_ask.side_effect = answer
        else:
            question.unsafe_ask.return_value = answer
        return question


@pytest.fixture
def scripted_prompts(monkeypatch: pytest.MonkeyPatch):
    """Factory: ``scripted_prompts([...answers])`` patches every prompt site."""

    def _install(answers: list[Any]) -> ScriptedQuestionary:
        scripted = ScriptedQuestionary(answers)
        monkeypatch.setattr("create_bmd.prompts.questionary", scripted)
        monkeypatch.setattr("create_bmd.installation.questionary", scripted)
        return scripted

    return _install


@pytest.fixture
def use_default() -> object:
    """The ``USE_DEFAULT`` answer marker."""
    return USE_DEFAULT
