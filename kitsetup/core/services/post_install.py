"""
Post-install runner — artisan follow-ups for the selected packages.

Best effort throughout: a failing command is reported and the next
command (and the next package) still runs. Packages without an entry
in the directive table are skipped without a word.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from kitsetup.core.data.catalog import (
    ADMIN_USER_DIRECTIVE,
    ADMIN_USER_PACKAGE,
    DIRECTIVES,
    Directive,
)
from kitsetup.core.models.action import Receipt
from kitsetup.core.models.package import Package, PackageSpecifier, Selection
from kitsetup.core.services.prompting import Prompter
from kitsetup.core.services.runtime import CommandRunner

logger = logging.getLogger(__name__)


@dataclass
class PostInstallResult:
    receipts: list[Receipt] = field(default_factory=list)
    configured: list[str] = field(default_factory=list)
    admin_user: bool | None = None   # None: never offered

    @property
    def failed(self) -> list[Receipt]:
        return [r for r in self.receipts if r.failed]

    def to_dict(self) -> dict:
        return {
            "configured": list(self.configured),
            "commands": [
                {
                    "id": r.action_id,
                    "status": r.status,
                    "argv": r.metadata.get("argv", []),
                    "error": r.error,
                }
                for r in self.receipts
            ],
            "failed": len(self.failed),
            "admin_user": self.admin_user,
        }


def directives_for(spec: PackageSpecifier | str) -> tuple[Directive, ...]:
    """Directives for a specifier's bare identifier; empty when unknown."""
    if not isinstance(spec, PackageSpecifier):
        spec = PackageSpecifier.parse(spec)
    package = spec.package
    if package is None:
        return ()
    return DIRECTIVES.get(package, ())


def run_post_install(
    selection: Selection,
    *,
    runner: CommandRunner,
    prompter: Prompter,
) -> PostInstallResult:
    result = PostInstallResult()
    for spec in selection.all():
        run_package_directives(spec, runner=runner, prompter=prompter, result=result)
    return result


def run_package_directives(
    spec: PackageSpecifier,
    *,
    runner: CommandRunner,
    prompter: Prompter,
    result: PostInstallResult,
) -> None:
    package = spec.package
    if package is None:
        logger.debug("No post-install directives for unknown package %s", spec.name)
        return

    directives = directives_for(spec)
    for index, directive in enumerate(directives):
        action = runner.action(
            f"post:{package.value}:{index}",
            runner.artisan(*directive.argv(runner.containerized)),
            package=package.value,
        )
        prompter.info(f"→ Running post-install command for {package.value}: {action.command_line}")
        receipt = runner.run(action)
        result.receipts.append(receipt)
        _report(receipt, prompter, f"⚠ Post-install command failed for {package.value}: {action.command_line}")

    if directives:
        result.configured.append(package.value)

    if package is ADMIN_USER_PACKAGE:
        result.admin_user = maybe_create_admin_user(runner=runner, prompter=prompter, result=result)


def maybe_create_admin_user(
    *,
    runner: CommandRunner,
    prompter: Prompter,
    result: PostInstallResult,
) -> bool:
    """Offer to create the admin-panel user. Returns whether the operator accepted."""
    create = prompter.confirm(
        "Create an admin user for Filament now?",
        default=True,
        hint=f"Runs: php artisan {' '.join(ADMIN_USER_DIRECTIVE.args)}",
    )
    if not create:
        return False

    action = runner.action(
        "post:admin-user",
        runner.artisan(*ADMIN_USER_DIRECTIVE.argv(runner.containerized)),
        package=Package.FILAMENT.value,
    )
    prompter.info(f"→ Running: {action.command_line}")
    receipt = runner.run(action)
    result.receipts.append(receipt)
    _report(receipt, prompter, "⚠ Failed to create Filament user.")
    return True


def _report(receipt: Receipt, prompter: Prompter, failure_message: str) -> None:
    if receipt.failed:
        logger.warning("%s (%s)", failure_message, receipt.error)
        prompter.warning(failure_message)
        if receipt.error:
            prompter.note(receipt.error)
