"""
Syntactic hostname validation. No DNS lookups happen here.
"""

import re

# RFC 1123 label: 1-63 chars, alphanumeric at both ends, hyphens inside
_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"

_LABEL_RE = re.compile(_LABEL)
_HOSTNAME_RE = re.compile(rf"{_LABEL}(?:\.{_LABEL})*")

MAX_HOSTNAME_LENGTH = 253


def is_valid_hostname(value) -> bool:
    """
    True when `value` is a dot-separated sequence of valid DNS labels.
    A single trailing dot (fully qualified form) is accepted.
    """
    if not isinstance(value, str) or not value:
        return False
    if value.endswith("."):
        value = value[:-1]
    if not value or len(value) > MAX_HOSTNAME_LENGTH:
        return False
    return _HOSTNAME_RE.fullmatch(value) is not None


def is_valid_subdomain(value) -> bool:
    """True when `value` is exactly one DNS label (no dots)."""
    if not isinstance(value, str) or not value:
        return False
    return _LABEL_RE.fullmatch(value) is not None
