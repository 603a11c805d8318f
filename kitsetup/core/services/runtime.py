"""
Command runtime — builds composer/artisan argv and dispatches them.

When the project ships an executable Sail helper (``./sail`` or
``./vendor/bin/sail``), every command goes through it; otherwise the
host's composer and php are invoked directly.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from kitsetup.adapters.base import Adapter
from kitsetup.core.models.action import Action, Receipt
from kitsetup.core.models.settings import SetupSettings

logger = logging.getLogger(__name__)

# Probed in order; the first executable one wins.
WRAPPER_PATHS = ("sail", "vendor/bin/sail")


def find_container_wrapper(project_root: Path) -> str | None:
    """Return the wrapper as a ``./relative`` command, or None."""
    for rel in WRAPPER_PATHS:
        candidate = project_root / rel
        if candidate.is_file() and os.access(candidate, os.X_OK):
            return f"./{rel}"
    return None


@dataclass(frozen=True)
class CommandRunner:
    """Turns command intents into Actions and runs them through an adapter."""

    project_root: Path
    adapter: Adapter
    settings: SetupSettings = field(default_factory=SetupSettings)
    wrapper: str | None = None
    dry_run: bool = False

    @classmethod
    def detect(
        cls,
        project_root: Path,
        adapter: Adapter,
        settings: SetupSettings | None = None,
        *,
        dry_run: bool = False,
    ) -> CommandRunner:
        wrapper = find_container_wrapper(project_root)
        if wrapper:
            logger.info("Using container wrapper %s", wrapper)
        return cls(
            project_root=project_root,
            adapter=adapter,
            settings=settings or SetupSettings(),
            wrapper=wrapper,
            dry_run=dry_run,
        )

    @property
    def containerized(self) -> bool:
        return self.wrapper is not None

    def composer(self, *args: str) -> list[str]:
        if self.wrapper:
            return [self.wrapper, "composer", *args]
        return [self.settings.composer, *args]

    def artisan(self, *args: str) -> list[str]:
        if self.wrapper:
            return [self.wrapper, "php", "artisan", *args]
        return [self.settings.php, "artisan", *args]

    def action(
        self,
        action_id: str,
        argv: list[str],
        *,
        name: str = "",
        package: str | None = None,
    ) -> Action:
        return Action(
            id=action_id,
            name=name,
            argv=argv,
            cwd=str(self.project_root),
            timeout=self.settings.timeout,
            package=package,
        )

    def run(self, action: Action) -> Receipt:
        receipt = self.adapter.run(action, project_root=str(self.project_root), dry_run=self.dry_run)
        logger.debug("%s → %s (%dms)", action.id, receipt.status, receipt.duration_ms)
        return receipt
