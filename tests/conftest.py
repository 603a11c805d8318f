"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import pytest

from kitsetup.adapters.mock import MockAdapter
from kitsetup.core.models.settings import SetupSettings
from kitsetup.core.services.runtime import CommandRunner


class ScriptedPrompter:
    """Prompter that answers from a ``label fragment → answer`` table.

    Questions without a matching fragment get their default. Every
    question and status message is recorded for assertions.
    """

    def __init__(self, answers: Mapping[str, Any] | None = None):
        self.answers = dict(answers or {})
        self.asked: list[str] = []
        self.messages: list[tuple[str, str]] = []

    def _answer(self, label: str, default: Any) -> Any:
        self.asked.append(label)
        for fragment, value in self.answers.items():
            if fragment in label:
                return value
        return default

    def confirm(self, label, *, default=True, hint=""):
        return bool(self._answer(label, default))

    def select(self, label, options, *, default=None):
        value = self._answer(label, default if default is not None else next(iter(options)))
        assert value in options, f"{value!r} is not an option of {label!r}"
        return value

    def multiselect(self, label, options):
        values = list(self._answer(label, []))
        assert all(v in options for v in values)
        return values

    def number(self, label, *, default):
        return int(self._answer(label, default))

    def info(self, message):
        self.messages.append(("info", message))

    def note(self, message):
        self.messages.append(("note", message))

    def warning(self, message):
        self.messages.append(("warning", message))

    @property
    def warnings(self) -> list[str]:
        return [m for level, m in self.messages if level == "warning"]

    @property
    def transcript(self) -> str:
        return "\n".join(m for _, m in self.messages)


@pytest.fixture
def scripted():
    """Factory for ScriptedPrompter instances."""
    return ScriptedPrompter


@pytest.fixture
def mock_adapter() -> MockAdapter:
    return MockAdapter()


@pytest.fixture
def laravel_project(tmp_path: Path) -> Path:
    """A minimal application root: composer.json, artisan and an env template."""
    (tmp_path / "composer.json").write_text(json.dumps({"name": "pepperfm/starter"}))
    (tmp_path / "artisan").write_text("#!/usr/bin/env php\n<?php\n")
    (tmp_path / ".env.example").write_text(
        "APP_NAME=Laravel\n"
        "APP_ENV=local\n"
        "# container user\n"
        "WWWUSER=\n"
        "DB_CONNECTION=sqlite\n"
    )
    return tmp_path


@pytest.fixture
def runner(laravel_project: Path, mock_adapter: MockAdapter) -> CommandRunner:
    """Direct (non-container) runner over the mock adapter."""
    return CommandRunner(project_root=laravel_project, adapter=mock_adapter, settings=SetupSettings())


@pytest.fixture
def make_sail():
    """Factory that drops a Sail helper script into a project."""

    def _make(project_root: Path, rel: str = "vendor/bin/sail", executable: bool = True) -> Path:
        path = project_root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("#!/bin/sh\nexec \"$@\"\n")
        path.chmod(0o755 if executable else 0o644)
        return path

    return _make
