"""CLI output components (Rich).

Why separate components:
- Keeps command flow free of presentation details.
- Diagnostic lines are printed literally (no markup, no highlighting) so
  brackets and URLs come out exactly as written.
"""

from __future__ import annotations

import json

from rich.console import Console
from rich.text import Text

from core.config import DEFAULT_TIMEOUT_MS, OFFICIAL_SETUP_URL
from core.domain.models import ParsedArguments


def print_line(console: Console, message: str = "") -> None:
    console.print(message, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_help(console: Console) -> None:
    console.print(Text("Semoia MCP Installer CLI", style="bold cyan"), soft_wrap=True)
    lines = [
        "",
        "Usage:",
        "  install-mcp [target|options]",
        "",
        "Examples:",
        "  install-mcp",
        "  install-mcp cursor",
        "",
        "Options:",
        "  -h, --help              Show help",
        f"      --timeout <ms>      Download timeout in milliseconds (default: {DEFAULT_TIMEOUT_MS})",
        "      --dry-run           Print resolved values and exit",
        "      --                  Pass every following argument to the setup wizard",
        "",
        f"Official setup endpoint: {OFFICIAL_SETUP_URL}",
        "",
        "Any other args are passed through to the setup wizard.",
    ]
    for line in lines:
        print_line(console, line)


def print_dry_run(console: Console, args: ParsedArguments, setup_url: str) -> None:
    print_line(console, f"setupUrl={setup_url}")
    print_line(console, f"timeoutMs={args.timeout_ms}")
    passthrough = json.dumps(list(args.passthrough_args), ensure_ascii=False, separators=(",", ":"))
    print_line(console, f"passthroughArgs={passthrough}")


def print_error(console: Console, message: str) -> None:
    console.print(Text(message, style="red"), soft_wrap=True)
