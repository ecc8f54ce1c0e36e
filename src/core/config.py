"""Core configuration.

Why here:
- The endpoint and its defaults live in one place, away from the CLI.
- Adapters (HTTP, subprocess) read the same constants.

The setup endpoint is deliberately a constant and not a setting: nothing the
user passes (flags, env vars, .env files) can point the installer elsewhere.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__version__ = "1.0.0"

OFFICIAL_SETUP_URL = "https://beta.trysemoia.com/api/setup-script?type=py"
DEFAULT_TIMEOUT_MS = 30_000
USER_AGENT = f"semoia-install-mcp/{__version__}"

MIN_PYTHON = (3, 10)

WORKSPACE_PREFIX = "semoia-install-mcp-"
SETUP_SCRIPT_NAME = "setup_wizard.py"

# Longest slice of an error body echoed back to the user.
BODY_EXCERPT_LIMIT = 200


class AppSettings(BaseSettings):
    """Ambient settings for the installer process.

    Only diagnostics are configurable. The child process environment is
    passed through untouched and is not modelled here.
    """

    model_config = SettingsConfigDict(
        env_prefix="INSTALL_MCP_",
        extra="ignore",
        case_sensitive=False,
    )

    log_level: str = Field(
        default="WARNING",
        description="Log level for diagnostics on stderr; unknown or empty values mean WARNING.",
    )
