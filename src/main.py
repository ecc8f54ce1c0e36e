"""`python -m main` entry for the installer.

Why it exists:
- Runs `install-mcp` from `src/` during development, besides the console script.
- On Windows, stdout/stderr are switched to UTF-8 before anything prints, so
  help text and `--dry-run` output can show non-ASCII passthrough arguments.
  The setup wizard child inherits the same console handles.
"""

from __future__ import annotations

import sys

# Workaround for UnicodeEncodeError on Windows terminals/CI (cp1252 vs utf-8).
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
