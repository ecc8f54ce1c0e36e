"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- The `timeout_ms > 0` invariant is checked once, at construction.
- A frozen model cannot be mutated after parsing, so every later step sees
  exactly what the user asked for.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.config import DEFAULT_TIMEOUT_MS


class ParsedArguments(BaseModel):
    """Structured intent extracted from the raw command line."""

    model_config = ConfigDict(frozen=True)

    show_help: bool = Field(
        default=False,
        description="Print usage and exit.",
    )
    dry_run: bool = Field(
        default=False,
        description="Report resolved values without network or subprocess activity.",
    )
    timeout_ms: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        gt=0,
        description="Download deadline in milliseconds.",
    )
    passthrough_args: tuple[str, ...] = Field(
        default=(),
        description="Tokens forwarded verbatim to the setup wizard, in order.",
    )
