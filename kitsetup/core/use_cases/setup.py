"""
Setup use case — the whole optional-setup run, top to bottom.

Resolves the project, configures the env file, collects the package
selection, installs it and runs the post-install directives. External
command failures are carried in the result; only problems that stop
the setup from running at all end up in ``error``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from kitsetup.adapters.base import Adapter
from kitsetup.core.config.loader import ConfigError, load_settings, resolve_project_root
from kitsetup.core.models.action import Receipt
from kitsetup.core.models.package import Selection
from kitsetup.core.models.settings import SetupSettings
from kitsetup.core.services.env_config import EnvFileError, EnvResult, configure_environment
from kitsetup.core.services.package_install import InstallResult, install_packages
from kitsetup.core.services.post_install import PostInstallResult, run_post_install
from kitsetup.core.services.prompting import Prompter
from kitsetup.core.services.runtime import CommandRunner
from kitsetup.core.services.selection import collect_selection

logger = logging.getLogger(__name__)


@dataclass
class SetupResult:
    """Everything one setup run did."""

    project_root: Path | None = None
    environment: EnvResult | None = None
    selection: Selection = field(default_factory=Selection)
    installs: list[InstallResult] = field(default_factory=list)
    post_install: PostInstallResult | None = None
    post_install_skipped: bool = False
    containerized: bool = False
    error: str | None = None

    @property
    def failures(self) -> list[Receipt]:
        failed = [i.receipt for i in self.installs if i.receipt is not None and i.receipt.failed]
        if self.post_install:
            failed.extend(self.post_install.failed)
        return failed

    @property
    def failed_count(self) -> int:
        return len(self.failures)

    def to_dict(self) -> dict:
        result: dict = {}
        if self.error:
            result["error"] = self.error
            return result

        result["project_root"] = str(self.project_root)
        result["containerized"] = self.containerized
        result["environment"] = self.environment.to_dict() if self.environment else None
        result["selection"] = self.selection.to_dict()
        result["installs"] = [i.to_dict() for i in self.installs]
        result["post_install"] = self.post_install.to_dict() if self.post_install else None
        result["post_install_skipped"] = self.post_install_skipped
        result["failed"] = self.failed_count
        return result


def run_setup(
    *,
    prompter: Prompter,
    adapter: Adapter,
    project_root: Path | None = None,
    settings: SetupSettings | None = None,
    run_post: bool = True,
    dry_run: bool = False,
) -> SetupResult:
    """Run the interactive setup.

    Args:
        prompter: Asks the questions and shows status notes.
        adapter: Executes composer / artisan commands.
        project_root: Explicit root; searched upward from cwd when None.
        settings: Overrides; loaded from starter-setup.yml when None.
        run_post: False skips the post-install directives.
        dry_run: Build and show the commands without executing them.
    """
    result = SetupResult()

    try:
        root = resolve_project_root(project_root)
        settings = settings or load_settings(root)
    except ConfigError as e:
        result.error = str(e)
        return result

    result.project_root = root
    prompter.info("🔧 Laravel Starter Kit: Optional Setup")

    try:
        result.environment = configure_environment(root, prompter, settings)
    except EnvFileError as e:
        logger.error("Environment configuration failed: %s", e)
        result.error = str(e)
        return result

    result.selection = collect_selection(prompter)

    if result.selection.is_empty:
        prompter.note("⚠️ No packages selected for installation.")
        return result

    runner = CommandRunner.detect(root, adapter, settings, dry_run=dry_run)
    result.containerized = runner.containerized

    result.installs = [
        install_packages(result.selection.runtime, dev=False, runner=runner, prompter=prompter),
        install_packages(result.selection.dev, dev=True, runner=runner, prompter=prompter),
    ]

    if run_post and settings.post_install:
        result.post_install = run_post_install(result.selection, runner=runner, prompter=prompter)
    else:
        result.post_install_skipped = True

    prompter.note("✅ Setup complete.")
    logger.info("Setup finished with %d failed command(s)", result.failed_count)
    return result
