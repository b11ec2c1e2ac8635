"""Validators."""

import re


def validate_phone(phone: str) -> bool:
    """Validate phone number."""
    # 10+ digits, optionally separated by spaces or dashes
    pattern = r'^\+?[\d\s-]{10,}$'
    return bool(re.match(pattern, phone))


def validate_url(url: str) -> bool:
    """Validate URL format."""
    pattern = r'^https?://(?:www\.)?[-a-zA-Z0-9@:%._\+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b(?:[-a-zA-Z0-9()@:%_\+.~#?&/=]*)$'
    return bool(re.match(pattern, url))
