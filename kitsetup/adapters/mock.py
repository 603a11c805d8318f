"""
Mock adapter — test double for command execution.

Records every action it receives and returns success unless a failure
was configured for that action ID or command.
"""

from __future__ import annotations

from kitsetup.adapters.base import Adapter, ExecutionContext
from kitsetup.core.models.action import Action, Receipt


class MockAdapter(Adapter):
    """Universal mock adapter.

    By default, returns success for everything. Can be configured
    with custom responses per action ID or per command line.
    """

    def __init__(
        self,
        adapter_name: str = "mock",
        default_output: str = "[mock] executed",
    ):
        self._name = adapter_name
        self._default_output = default_output
        self._responses: dict[str, Receipt] = {}
        self._failing_commands: dict[str, str] = {}
        self._call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[ExecutionContext]:
        """All execution contexts this mock has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        """Number of times execute has been called."""
        return len(self._call_log)

    @property
    def actions(self) -> list[Action]:
        return [ctx.action for ctx in self._call_log]

    @property
    def commands(self) -> list[list[str]]:
        """The argv of every executed action, in order."""
        return [list(ctx.action.argv) for ctx in self._call_log]

    def set_response(self, action_id: str, receipt: Receipt) -> None:
        """Set a custom response for a specific action ID."""
        self._responses[action_id] = receipt

    def set_failure(self, action_id: str, error: str = "Mock failure") -> None:
        """Configure a specific action to fail."""
        self._responses[action_id] = Receipt.failure(
            adapter=self._name,
            action_id=action_id,
            error=error,
        )

    def fail_command(self, command_line: str, error: str = "Mock failure") -> None:
        """Configure every action whose joined argv equals ``command_line`` to fail."""
        self._failing_commands[command_line] = error

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self._call_log.append(context)
        action = context.action

        if action.id in self._responses:
            return self._responses[action.id]

        if action.command_line in self._failing_commands:
            return Receipt.failure(
                adapter=self._name,
                action_id=action.id,
                error=self._failing_commands[action.command_line],
                metadata={"argv": list(action.argv)},
            )

        return Receipt.success(
            adapter=self._name,
            action_id=action.id,
            output=self._default_output,
            metadata={"mock": True, "argv": list(action.argv)},
        )

    def reset(self) -> None:
        """Clear call log and custom responses."""
        self._call_log.clear()
        self._responses.clear()
        self._failing_commands.clear()
