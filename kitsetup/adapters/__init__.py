"""Adapters — bindings for the external commands the setup runs.

Public re-exports for convenient access.
"""

from kitsetup.adapters.base import Adapter, ExecutionContext, OutputSink
from kitsetup.adapters.mock import MockAdapter
from kitsetup.adapters.shell.command import ShellCommandAdapter

__all__ = [
    "Adapter",
    "ExecutionContext",
    "MockAdapter",
    "OutputSink",
    "ShellCommandAdapter",
]
