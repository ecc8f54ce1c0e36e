"""Contracts for the two side-effecting install steps.

Why Protocol:
- The orchestrator depends on a structural contract, not on httpx or
  subprocess, so tests can hand it plain functions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class ScriptFetcher(Protocol):
    """Downloads the setup wizard source.

    Raises `FetchError` on timeout, bad status, empty body or network failure.
    """

    def __call__(self, url: str, timeout_ms: int) -> str: ...


@runtime_checkable
class ScriptRunner(Protocol):
    """Runs a script file and returns the child's exit code.

    Raises `RunError` when the child cannot start or dies from a signal.
    """

    def __call__(self, script_path: Path, passthrough_args: Sequence[str]) -> int: ...
