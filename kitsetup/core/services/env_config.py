"""
Environment configurator — WWWUSER / WWWGROUP in the project's .env.

Sail runs the application container as the host user; these two keys
tell it which uid/gid that is. The file is created from the template
when missing, and only the two managed lines are ever touched.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from kitsetup.core.models.settings import SetupSettings
from kitsetup.core.services.prompting import Prompter

logger = logging.getLogger(__name__)

USER_KEY = "WWWUSER"
GROUP_KEY = "WWWGROUP"

# Used when the platform has no notion of uid/gid.
FALLBACK_ID = 1000


class EnvFileError(Exception):
    """Raised when the environment file cannot be created or written."""


@dataclass
class EnvResult:
    """Outcome of the environment step."""

    status: Literal["updated", "skipped"]
    path: Path
    created_from_template: bool = False
    values: dict[str, int] = field(default_factory=dict)
    reason: str = ""

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "path": str(self.path),
            "created_from_template": self.created_from_template,
            "values": dict(self.values),
            "reason": self.reason,
        }


def replace_or_append(content: str, key: str, value: str | int) -> str:
    """Set ``key`` in dotenv text.

    The first ``KEY=...`` line is rewritten in place. When there is none,
    the text is normalised to end in exactly one newline and the new line
    is appended. Every other line is left as it was.
    """
    line = f"{key}={value}"
    pattern = re.compile(rf"^{re.escape(key)}=[^\r\n]*", re.MULTILINE)

    if pattern.search(content):
        return pattern.sub(lambda _m: line, content, count=1)

    base = content.rstrip("\r\n")
    if base:
        return f"{base}\n{line}\n"
    return f"{line}\n"


def detect_ids() -> tuple[int, int]:
    """The current process's uid and gid, or the fallback on platforms without them."""
    getuid = getattr(os, "getuid", None)
    getgid = getattr(os, "getgid", None)
    uid = getuid() if getuid else FALLBACK_ID
    gid = getgid() if getgid else FALLBACK_ID
    return uid, gid


def configure_environment(
    project_root: Path,
    prompter: Prompter,
    settings: SetupSettings | None = None,
) -> EnvResult:
    """Ensure the env file exists and carries WWWUSER / WWWGROUP.

    Raises:
        EnvFileError: If the template cannot be copied or the file
            cannot be read or written.
    """
    settings = settings or SetupSettings()
    env_path = project_root / settings.env_file
    template_path = project_root / settings.env_template
    created = False

    if not env_path.exists() and template_path.is_file():
        try:
            shutil.copyfile(template_path, env_path)
        except OSError as e:
            raise EnvFileError(f"Cannot create {env_path} from {template_path.name}: {e}") from e
        logger.info("Created %s from %s", env_path, template_path)
        created = True

    if not env_path.is_file():
        prompter.warning(f"⚠️ {settings.env_file} file not found, skipping environment configuration.")
        return EnvResult(status="skipped", path=env_path, reason="env file not found")

    detected_uid, detected_gid = detect_ids()
    auto_detect = prompter.confirm(
        f"Auto-detect your UID and GID for {USER_KEY}/{GROUP_KEY}?",
        default=True,
    )
    if auto_detect:
        uid, gid = detected_uid, detected_gid
    else:
        uid = prompter.number("Enter your user ID (UID)", default=detected_uid)
        gid = prompter.number("Enter your group ID (GID)", default=detected_gid)

    try:
        with open(env_path, encoding="utf-8", newline="") as fh:
            content = fh.read()
    except OSError as e:
        raise EnvFileError(f"Cannot read {env_path}: {e}") from e

    content = replace_or_append(content, USER_KEY, uid)
    content = replace_or_append(content, GROUP_KEY, gid)

    try:
        env_path.write_text(content, encoding="utf-8", newline="")
    except OSError as e:
        raise EnvFileError(f"Cannot write {env_path}: {e}") from e

    prompter.info(f"🔐 Updated {settings.env_file} with {USER_KEY}={uid} and {GROUP_KEY}={gid}")
    return EnvResult(
        status="updated",
        path=env_path,
        created_from_template=created,
        values={USER_KEY: uid, GROUP_KEY: gid},
    )
