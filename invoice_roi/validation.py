"""Boundary checks for free-text fields supplied with user actions."""

from __future__ import annotations

from typing import Optional

from invoice_roi.errors import InvalidInputError


def require_text(value: Optional[str], label: str) -> str:
    """Return the stripped value, rejecting None and blank strings."""
    if value is None or not value.strip():
        raise InvalidInputError(f"{label} is required")
    return value.strip()


def validate_email(value: Optional[str], label: str = "Email") -> str:
    email = require_text(value, label)
    local, sep, domain = email.partition("@")
    if not sep or not local or "." not in domain:
        raise InvalidInputError(f"Invalid email address: {email!r}")
    return email
