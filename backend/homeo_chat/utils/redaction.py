"""
Helpers for keeping credentials out of responses and logs.
"""
from typing import Iterable

REDACTED = "***REDACTED***"


def redact(text: str, secrets: Iterable[str]) -> str:
    """Replace every occurrence of each secret in ``text``."""
    for secret in secrets:
        if secret:
            text = text.replace(secret, REDACTED)
    return text
