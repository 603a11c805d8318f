"""
Click-backed prompter — the terminal side of the Prompter protocol.

With ``assume_defaults`` every question is answered with its default
and the answer is echoed, so an unattended run still leaves a readable
transcript. ``err`` routes everything to stderr (used with --json).
"""

from __future__ import annotations

from typing import Mapping

import click


class ClickPrompter:
    def __init__(self, *, assume_defaults: bool = False, err: bool = False):
        self.assume_defaults = assume_defaults
        self.err = err

    # ── Questions ───────────────────────────────────────────────

    def confirm(self, label: str, *, default: bool = True, hint: str = "") -> bool:
        if hint:
            click.secho(f"   {hint}", dim=True, err=self.err)
        if self.assume_defaults:
            self._answered(label, "yes" if default else "no")
            return default
        return click.confirm(label, default=default, err=self.err)

    def select(self, label: str, options: Mapping[str, str], *, default: str | None = None) -> str:
        keys = list(options)
        default_key = default if default in options else keys[0]
        if self.assume_defaults:
            self._answered(label, options[default_key])
            return default_key

        click.secho(label, bold=True, err=self.err)
        for number, key in enumerate(keys, start=1):
            click.echo(f"  {number}) {options[key]}", err=self.err)

        picked = click.prompt(
            "Choice",
            type=click.IntRange(1, len(keys)),
            default=keys.index(default_key) + 1,
            err=self.err,
        )
        return keys[picked - 1]

    def multiselect(self, label: str, options: Mapping[str, str]) -> list[str]:
        keys = list(options)
        if self.assume_defaults:
            self._answered(label, "none")
            return []

        click.secho(label, bold=True, err=self.err)
        for number, key in enumerate(keys, start=1):
            click.echo(f"  {number}) {options[key]}", err=self.err)

        def parse(value: str) -> list[str]:
            picked: set[int] = set()
            for part in value.replace(" ", ",").split(","):
                if not part:
                    continue
                if not part.isdigit() or not 1 <= int(part) <= len(keys):
                    raise click.BadParameter(f"{part!r} is not one of 1-{len(keys)}")
                picked.add(int(part))
            return [keys[n - 1] for n in sorted(picked)]

        return click.prompt(
            "Numbers, comma separated (blank for none)",
            default="",
            show_default=False,
            value_proc=parse,
            err=self.err,
        )

    def number(self, label: str, *, default: int) -> int:
        if self.assume_defaults:
            self._answered(label, str(default))
            return default
        return click.prompt(label, type=click.IntRange(min=0), default=default, err=self.err)

    # ── Status output ───────────────────────────────────────────

    def info(self, message: str) -> None:
        click.secho(message, fg="cyan", err=self.err)

    def note(self, message: str) -> None:
        click.echo(message, err=self.err)

    def warning(self, message: str) -> None:
        click.secho(message, fg="yellow", err=self.err)

    def output(self, line: str) -> None:
        """Sink for streamed command output."""
        click.echo(line, err=self.err)

    def _answered(self, label: str, answer: str) -> None:
        click.echo(f"{label} ", nl=False, err=self.err)
        click.secho(answer, fg="green", err=self.err)
