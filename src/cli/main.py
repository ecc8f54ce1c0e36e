"""`install-mcp` entry point.

Flow: version check -> parse -> help | dry run | install. Every failure ends
as a single `Install failed: ...` line on stderr and exit code 1; a finished
install exits with the setup wizard's own code.
"""

from __future__ import annotations

import sys
from typing import Sequence

from rich.console import Console

from adapters.script_runner import run_setup_script
from adapters.setup_fetcher import fetch_setup_script
from cli.arguments import parse_args
from cli.ui_components import print_dry_run, print_error, print_help, print_line
from core.config import OFFICIAL_SETUP_URL, AppSettings
from core.interfaces.installer import ScriptFetcher, ScriptRunner
from core.logging import configure_logging, get_logger
from core.services.install_pipeline import InstallHooks, ensure_python_version, run_install

_console = Console()
_err_console = Console(stderr=True)

logger = get_logger(__name__)


def main(
    argv: Sequence[str] | None = None,
    *,
    fetcher: ScriptFetcher = fetch_setup_script,
    runner: ScriptRunner = run_setup_script,
) -> int:
    """Run the installer and return the process exit code."""

    tokens = list(sys.argv[1:] if argv is None else argv)

    try:
        configure_logging(level=AppSettings().log_level)
        ensure_python_version()
        args = parse_args(tokens)

        if args.show_help:
            print_help(_console)
            return 0

        setup_url = OFFICIAL_SETUP_URL
        if args.dry_run:
            print_dry_run(_console, args, setup_url)
            return 0

        hooks = InstallHooks(status=lambda message: print_line(_console, message))
        return run_install(args, fetcher=fetcher, runner=runner, hooks=hooks, setup_url=setup_url)
    except KeyboardInterrupt:
        print_error(_err_console, "Install failed: interrupted")
        return 1
    except Exception as exc:
        logger.debug("Install failed", exc_info=True)
        print_error(_err_console, f"Install failed: {str(exc) or type(exc).__name__}")
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
