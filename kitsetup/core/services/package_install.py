"""
Package installer — one ``composer require`` per package list.

A failed install is reported and recorded, never raised: the rest of
the setup still runs and the operator can re-run after fixing it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from kitsetup.core.models.action import Receipt
from kitsetup.core.models.package import PackageSpecifier
from kitsetup.core.services.prompting import Prompter
from kitsetup.core.services.runtime import CommandRunner

logger = logging.getLogger(__name__)


@dataclass
class InstallResult:
    """What one installer invocation did."""

    dev: bool
    packages: list[str] = field(default_factory=list)
    receipt: Receipt | None = None   # None when there was nothing to install

    @property
    def ok(self) -> bool:
        return self.receipt is None or not self.receipt.failed

    @property
    def skipped(self) -> bool:
        return self.receipt is None

    def to_dict(self) -> dict:
        return {
            "dev": self.dev,
            "packages": list(self.packages),
            "status": "skipped" if self.receipt is None else self.receipt.status,
            "error": self.receipt.error if self.receipt else None,
        }


def normalize_specifiers(specs: Iterable[PackageSpecifier | str]) -> list[str]:
    """Trim, drop blanks and de-duplicate by identifier, keeping first occurrence."""
    seen: set[str] = set()
    result: list[str] = []
    for raw in specs:
        spec = raw if isinstance(raw, PackageSpecifier) else PackageSpecifier.parse(raw)
        if not spec.name or spec.name in seen:
            continue
        seen.add(spec.name)
        result.append(str(spec))
    return result


def build_require_command(runner: CommandRunner, packages: list[str], *, dev: bool) -> list[str]:
    """``composer require [--dev] [--no-interaction] [--with-all-dependencies] <pkg>...``"""
    flags: list[str] = []
    if dev:
        flags.append("--dev")
    if runner.settings.no_interaction:
        flags.append("--no-interaction")
    if runner.settings.with_all_dependencies:
        # lets composer move locked transitive deps, needed for major upgrades
        flags.append("--with-all-dependencies")
    return runner.composer("require", *flags, *packages)


def install_packages(
    specs: Iterable[PackageSpecifier | str],
    *,
    dev: bool,
    runner: CommandRunner,
    prompter: Prompter,
) -> InstallResult:
    packages = normalize_specifiers(specs)
    if not packages:
        return InstallResult(dev=dev)

    kind = "dev" if dev else "runtime"
    action = runner.action(
        f"install:{kind}",
        build_require_command(runner, packages, dev=dev),
        name=f"Install {kind} packages",
    )

    prompter.info(f"→ Running: {action.command_line}")
    receipt = runner.run(action)

    if receipt.failed:
        logger.warning("Install of %s failed: %s", ", ".join(packages), receipt.error)
        prompter.warning(f"⚠ Failed to install: {', '.join(packages)}")
        if receipt.error:
            prompter.note(receipt.error)

    return InstallResult(dev=dev, packages=packages, receipt=receipt)
