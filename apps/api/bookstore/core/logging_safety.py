"""Helpers that keep user identifiers and credentials out of log lines."""

from __future__ import annotations

import hashlib
from typing import Any


def safe_log_identifier(value: Any, *, prefix: str) -> str:
    """Stable, non-reversible stand-in for an identifier in log fields."""
    text = str(value or "").strip().lower()
    if not text:
        return f"{prefix}-missing"
    return f"{prefix}-{hashlib.sha256(text.encode('utf-8')).hexdigest()[:12]}"


def mask_email(email: Any) -> str:
    """``jane.doe@example.com`` -> ``j***@example.com``."""
    text = str(email or "").strip()
    local, sep, domain = text.partition("@")
    if not sep or not local:
        return "***"
    return f"{local[0]}***@{domain}"
