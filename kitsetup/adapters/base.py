"""
Adapter base — the protocol contract between the setup and its tools.

The use cases never start processes themselves; they build Actions and
hand them to an adapter, which returns a Receipt.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from pydantic import BaseModel

from kitsetup.core.models.action import Action, Receipt

# Receives each line of a command's standard output as it is produced.
OutputSink = Callable[[str], None]


class ExecutionContext(BaseModel):
    """Everything an adapter needs to execute an action."""

    action: Action
    project_root: str = "."
    dry_run: bool = False

    @property
    def working_dir(self) -> str:
        """Resolved working directory for the action."""
        if self.action.cwd and self.action.cwd != ".":
            return self.action.cwd
        return self.project_root


class Adapter(ABC):
    """Abstract base class for all adapters.

    Adapters perform external side effects and return receipts.
    They NEVER raise exceptions — failures are captured in the Receipt.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'shell', 'mock')."""

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Validate that the action can be executed.

        Returns:
            (is_valid, error_message). error_message is empty if valid.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Execute the action and return a receipt.

        MUST never raise exceptions. All failures are captured
        in the Receipt with status='failed'.
        """

    def run(self, action: Action, project_root: str = ".", dry_run: bool = False) -> Receipt:
        """Validate then execute ``action``; invalid actions fail without running."""
        context = ExecutionContext(action=action, project_root=project_root, dry_run=dry_run)
        valid, error = self.validate(context)
        if not valid:
            return Receipt.failure(adapter=self.name, action_id=action.id, error=error)
        return self.execute(context)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
