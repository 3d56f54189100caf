"""Input validators used by forms before calling the services."""

import re

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^[6-9]\d{9}$")


def normalize_phone(phone: str) -> str:
    """Strip spaces and dashes from a phone number.

    Args:
        phone: Raw number as typed.

    Returns:
        str: The digits and any leading ``+``.
    """
    return re.sub(r"[\s-]", "", phone or "")


def validate_phone(phone: str) -> bool:
    """Ten-digit Indian mobile number starting with 6–9."""
    return bool(PHONE_RE.match(normalize_phone(phone)))


def validate_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email or ""))
