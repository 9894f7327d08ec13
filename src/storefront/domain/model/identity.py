"""Identifier generation for new records."""

from __future__ import annotations

import secrets
import string
import time

_BASE36 = string.digits + string.ascii_uppercase


def random_token(length: int) -> str:
    return "".join(secrets.choice(_BASE36) for _ in range(length))


def new_order_id() -> str:
    return random_token(9)


def new_client_id() -> str:
    """Per-session token that tells "my orders" apart; not an identity."""
    return "C-" + random_token(6)


def timestamped_id(prefix: str) -> str:
    """``p1718000000000`` style ids used for products and categories."""
    return f"{prefix}{time.time_ns() // 1_000_000}{random_token(3).lower()}"
