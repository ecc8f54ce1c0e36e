"""Install orchestration.

The CLI owns argument handling and printing; this module owns the install
path itself: a private workspace, one download, one child process. Printing
goes through `InstallHooks` so the flow stays reusable from tests and other
entry points.
"""

from __future__ import annotations

import sys
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator

from core.config import MIN_PYTHON, OFFICIAL_SETUP_URL, SETUP_SCRIPT_NAME, WORKSPACE_PREFIX
from core.domain.errors import VersionError
from core.domain.models import ParsedArguments
from core.interfaces.installer import ScriptFetcher, ScriptRunner
from core.logging import get_logger

logger = get_logger(__name__)


@dataclass
class InstallHooks:
    """Optional callbacks for UI layers."""

    status: Callable[[str], None] | None = None


def ensure_python_version(version_info: tuple[int, ...] | None = None) -> None:
    version_info = tuple(sys.version_info) if version_info is None else tuple(version_info)
    if version_info[:2] < MIN_PYTHON:
        current = ".".join(str(part) for part in version_info[:3])
        required = ".".join(str(part) for part in MIN_PYTHON)
        raise VersionError(f"Python {required}+ is required. Current version: {current}")


@contextmanager
def temporary_workspace() -> Iterator[Path]:
    """Private directory that is removed on every exit path."""

    with tempfile.TemporaryDirectory(prefix=WORKSPACE_PREFIX, ignore_cleanup_errors=True) as raw:
        workspace = Path(raw)
        logger.debug("Created workspace %s", workspace)
        try:
            yield workspace
        finally:
            logger.debug("Removing workspace %s", workspace)


def run_install(
    args: ParsedArguments,
    *,
    fetcher: ScriptFetcher,
    runner: ScriptRunner,
    hooks: InstallHooks | None = None,
    setup_url: str = OFFICIAL_SETUP_URL,
) -> int:
    """Fetch the setup wizard, run it, and return its exit code."""

    hooks = hooks or InstallHooks()

    def _status(message: str) -> None:
        if hooks.status:
            hooks.status(message)

    _status("Installing Semoia MCP...")
    _status(f"Fetching setup wizard from: {setup_url}")

    with temporary_workspace() as workspace:
        source = fetcher(setup_url, args.timeout_ms)
        script_path = workspace / SETUP_SCRIPT_NAME
        script_path.write_text(source, encoding="utf-8", newline="")
        logger.debug("Wrote %d characters to %s", len(source), script_path)
        return runner(script_path, args.passthrough_args)
