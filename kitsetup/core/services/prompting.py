"""
Prompter protocol — the only way core services talk to the operator.

The CLI supplies a click-backed implementation; tests supply a scripted
one. Services never import click themselves.
"""

from __future__ import annotations

from typing import Mapping, Protocol


class Prompter(Protocol):
    """Interactive questions plus three flavours of status output."""

    def confirm(self, label: str, *, default: bool = True, hint: str = "") -> bool:
        """Yes/no question."""
        ...

    def select(self, label: str, options: Mapping[str, str], *, default: str | None = None) -> str:
        """Pick exactly one key of ``options`` (values are display labels)."""
        ...

    def multiselect(self, label: str, options: Mapping[str, str]) -> list[str]:
        """Pick any number of keys of ``options``, returned in option order."""
        ...

    def number(self, label: str, *, default: int) -> int:
        """Ask for a non-negative integer."""
        ...

    def info(self, message: str) -> None: ...

    def note(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...
