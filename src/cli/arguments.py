"""Command-line token parser.

Why not argparse/click:
- `--` has to reach this loop intact: everything after it belongs to the
  setup wizard, including tokens that look like our own options.
- Unknown tokens are not errors; they are forwarded to the wizard in order.
"""

from __future__ import annotations

import math
from typing import Sequence

from core.domain.errors import PolicyError, ValidationError
from core.domain.models import ParsedArguments

_SEPARATOR = "--"
_TIMEOUT = "--timeout"
_TIMEOUT_PREFIX = "--timeout="
_FORBIDDEN = frozenset({"-l", "--local", "--setup-url"})
_FORBIDDEN_PREFIX = "--setup-url="

POLICY_MESSAGE = (
    "This CLI is end-user only and uses the official Semoia domain. "
    "Local/custom setup URL is not supported."
)


def parse_timeout(raw: str) -> int:
    """Parse a positive millisecond count, keeping the integer part."""

    try:
        value = float(raw)
    except ValueError:
        raise ValidationError(f"Invalid timeout value: {raw}") from None
    if not math.isfinite(value) or value <= 0 or math.floor(value) < 1:
        raise ValidationError(f"Invalid timeout value: {raw}")
    return math.floor(value)


def parse_args(tokens: Sequence[str]) -> ParsedArguments:
    """Turn raw tokens (without the program name) into `ParsedArguments`."""

    show_help = False
    dry_run = False
    timeout_ms: int | None = None
    passthrough: list[str] = []

    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1

        if token == _SEPARATOR:
            passthrough.extend(tokens[index:])
            break
        if token in ("-h", "--help"):
            show_help = True
            continue
        if token == "--dry-run":
            dry_run = True
            continue
        if token in _FORBIDDEN or token.startswith(_FORBIDDEN_PREFIX):
            raise PolicyError(POLICY_MESSAGE)
        if token == _TIMEOUT:
            value = tokens[index] if index < len(tokens) else ""
            if not value:
                raise ValidationError("Missing value for --timeout")
            timeout_ms = parse_timeout(value)
            index += 1
            continue
        if token.startswith(_TIMEOUT_PREFIX):
            timeout_ms = parse_timeout(token[len(_TIMEOUT_PREFIX):])
            continue
        passthrough.append(token)

    values: dict[str, object] = {
        "show_help": show_help,
        "dry_run": dry_run,
        "passthrough_args": tuple(passthrough),
    }
    if timeout_ms is not None:
        values["timeout_ms"] = timeout_ms
    return ParsedArguments(**values)
