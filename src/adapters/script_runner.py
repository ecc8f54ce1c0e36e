"""Setup wizard execution.

The wizard is interactive. When the installer itself is fed through a pipe
(`curl ... | python -`), stdin is the pipe, not the keyboard, so on POSIX the
child gets the controlling terminal as stdin instead. stdout/stderr are always
inherited.
"""

from __future__ import annotations

import os
import signal
import subprocess
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Sequence, TextIO

from core.domain.errors import RunError, RunErrorKind
from core.logging import get_logger

logger = get_logger(__name__)

TTY_DEVICE = "/dev/tty"


def _stdin_is_interactive(stream: TextIO | None) -> bool:
    if stream is None:
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError, OSError):
        return False


def _open_terminal_device() -> BinaryIO:
    return open(TTY_DEVICE, "rb", buffering=0)


@contextmanager
def attached_stdin(
    *,
    interactive: bool | None = None,
    os_name: str | None = None,
) -> Iterator[BinaryIO | None]:
    """Yield a handle to use as the child's stdin, or None to inherit.

    The terminal device is tried only when stdin is not a TTY and the
    platform has one. Any failure to open it falls back to inheritance.
    An opened handle is closed when the context exits.
    """

    if interactive is None:
        interactive = _stdin_is_interactive(sys.stdin)
    if os_name is None:
        os_name = os.name

    if interactive or os_name == "nt":
        yield None
        return

    try:
        handle = _open_terminal_device()
    except OSError as exc:
        logger.debug("%s unavailable, inheriting stdin: %s", TTY_DEVICE, exc)
        yield None
        return

    logger.debug("stdin is not a TTY; attaching %s to the setup wizard", TTY_DEVICE)
    try:
        yield handle
    finally:
        handle.close()


def _wait(process: subprocess.Popen) -> int | None:
    # The child shares our terminal and receives Ctrl+C itself; keep waiting
    # until it decides to exit.
    while True:
        try:
            return process.wait()
        except KeyboardInterrupt:
            logger.debug("Interrupt received, waiting for setup wizard (pid %s)", process.pid)


def _signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return str(signum)


def exit_code_from_returncode(returncode: int | None) -> int:
    """Map a `Popen.returncode` to the installer's exit code.

    Negative values mean the child was killed by a signal. A missing code is
    reported as 1.
    """

    if returncode is None:
        return 1
    if returncode < 0:
        name = _signal_name(-returncode)
        raise RunError(
            RunErrorKind.SIGNAL,
            f"Setup process terminated with signal: {name}",
            signal=name,
        )
    return returncode


def run_setup_script(
    script_path: Path,
    passthrough_args: Sequence[str],
    *,
    executable: str | None = None,
) -> int:
    """Run `script_path` with the current interpreter and return its exit code."""

    command = [executable or sys.executable, str(script_path), *passthrough_args]
    with attached_stdin() as stdin:
        logger.debug("Spawning %s", command)
        try:
            process = subprocess.Popen(command, stdin=stdin, env=os.environ.copy())
        except OSError as exc:
            raise RunError(
                RunErrorKind.SPAWN_FAILURE,
                f"Could not start setup wizard: {exc}",
            ) from exc
        returncode = _wait(process)

    logger.debug("Setup wizard exited with %s", returncode)
    return exit_code_from_returncode(returncode)
