"""Error types for the check flow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

CheckErrorKind = Literal[
    "invalid_config",
    "listing_failed",
]


@dataclass(frozen=True, slots=True)
class CheckError:
    """Terminating error of one check; no partial output accompanies it."""

    kind: CheckErrorKind
    message: str
    hint: str | None = None
