"""
Shell command adapter — execute an argv list and stream its output.

Standard output is forwarded line by line to the sink while the child
runs; standard error is captured and attached to the receipt so a
failure can be reported with its diagnostics.

Each child gets its own session, so a timeout (or any error while
reading its output) kills everything it started, including the
processes behind a container wrapper script.
"""

from __future__ import annotations

import logging
import os
import signal
import subprocess
import tempfile
import threading
import time
from datetime import UTC, datetime
from pathlib import Path

from kitsetup.adapters.base import Adapter, ExecutionContext, OutputSink
from kitsetup.core.models.action import Receipt

logger = logging.getLogger(__name__)

# Receipts keep only the tail of long installer logs.
_MAX_CAPTURE = 4000


class ShellCommandAdapter(Adapter):
    """Run external commands without a shell, one at a time.

    Args:
        sink: Called with each stdout line as it arrives. ``None``
            captures silently.
    """

    def __init__(self, sink: OutputSink | None = None):
        self._sink = sink

    @property
    def name(self) -> str:
        return "shell"

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        if not context.action.argv:
            return False, "Missing command: empty argv"

        cwd = context.working_dir
        if cwd and not Path(cwd).is_dir():
            return False, f"Working directory does not exist: {cwd}"

        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        action = context.action
        argv = list(action.argv)
        cwd = context.working_dir

        if context.dry_run:
            return Receipt.skip(
                adapter=self.name,
                action_id=action.id,
                reason=f"[dry-run] {action.command_line}",
                metadata={"argv": argv},
            )

        logger.debug("Executing: %s (cwd=%s, timeout=%ss)", action.command_line, cwd, action.timeout)
        started_at = datetime.now(UTC).isoformat()
        start = time.monotonic()
        lines: list[str] = []
        timed_out = threading.Event()
        proc: subprocess.Popen | None = None

        try:
            with tempfile.TemporaryFile(mode="w+", encoding="utf-8", errors="replace") as err_file:
                proc = subprocess.Popen(
                    argv,
                    cwd=cwd,
                    stdout=subprocess.PIPE,
                    stderr=err_file,
                    text=True,
                    encoding="utf-8",
                    errors="replace",
                    bufsize=1,
                    start_new_session=True,
                )
                timer = threading.Timer(action.timeout, _kill, args=(proc, timed_out))
                timer.daemon = True
                timer.start()
                try:
                    if proc.stdout:
                        for line in proc.stdout:
                            line = line.rstrip("\n")
                            lines.append(line)
                            if self._sink is not None:
                                self._sink(line)
                    proc.wait()
                finally:
                    timer.cancel()

                err_file.seek(0)
                stderr = err_file.read().strip()

        except FileNotFoundError:
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"Command not found: {argv[0]}",
                started_at=started_at,
                metadata={"argv": argv},
            )
        except Exception as e:
            logger.exception("Subprocess error: %s", argv)
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"Command execution error: {e}",
                started_at=started_at,
                duration_ms=int((time.monotonic() - start) * 1000),
                metadata={"argv": argv},
            )
        finally:
            if proc is not None:
                if proc.poll() is None:
                    _terminate(proc)
                    proc.wait()
                if proc.stdout:
                    proc.stdout.close()

        elapsed_ms = int((time.monotonic() - start) * 1000)
        output = "\n".join(lines).strip()[-_MAX_CAPTURE:]
        stderr = stderr[-_MAX_CAPTURE:]
        timing = {"started_at": started_at, "duration_ms": elapsed_ms}

        if timed_out.is_set():
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"Command timed out after {action.timeout}s",
                metadata={"argv": argv, "timeout": action.timeout, "stderr": stderr, "stdout": output},
                **timing,
            )

        if proc.returncode == 0:
            return Receipt.success(
                adapter=self.name,
                action_id=action.id,
                output=output,
                metadata={"argv": argv, "return_code": 0, "stderr": stderr},
                **timing,
            )

        return Receipt.failure(
            adapter=self.name,
            action_id=action.id,
            error=stderr or f"Command exited with code {proc.returncode}",
            output=output,
            metadata={"argv": argv, "return_code": proc.returncode, "stderr": stderr},
            **timing,
        )


def _kill(proc: subprocess.Popen, flag: threading.Event) -> None:
    """Timer callback: mark the run as timed out and kill the child's session."""
    flag.set()
    _terminate(proc)


def _terminate(proc: subprocess.Popen) -> None:
    """Kill the child and every process it started."""
    if not hasattr(os, "killpg"):
        proc.kill()
        return
    try:
        os.killpg(proc.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass
