"""Per-request caller identity passed explicitly into service calls."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AccountContext:
    """The authenticated account on whose behalf an operation runs."""

    account_id: int
    name: str
