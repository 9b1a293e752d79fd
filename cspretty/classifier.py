import re

from enum import Enum
from typing import NamedTuple

# region Constants
SAFE_KEYWORDS: frozenset[str] = frozenset({"'self'", "'none'"})

# `data:` is probably fine for images, but it is flagged anyway
UNSAFE_KEYWORDS: frozenset[str] = frozenset({"'unsafe-inline'", "'unsafe-eval'", "data:"})

# Unanchored on purpose, `*.trusted.com` has to match through its `trusted.com` part
HOST_PATTERN: re.Pattern[str] = re.compile(r"(https?://)?(\w+\.)+(\w)+")
# endregion


# region Structures
class Classification(Enum):
    """
    Category of a single CSP source value. The category decides how the value is painted
    by the renderer.
    """

    SAFE = "safe"
    UNSAFE = "unsafe"
    PLAIN = "plain"
    MALFORMED = "malformed"


class Token(NamedTuple):
    """
    Structure representing one source value of a directive together with its classification.
    """

    text: str
    classification: Classification

    @classmethod
    def from_text(cls, text: str) -> "Token":
        return cls(text, classify(text))


# endregion


# region Classification
def is_host(value: str) -> bool:
    """
    Checks whether the value contains something that looks like a hostname or URL, e.g.
    `example.com` or `https://cdn.example.com`.

    Args:
        value (str): Source value taken from a directive.

    Returns:
        bool: True when any part of the value matches the host pattern.
    """
    return HOST_PATTERN.search(value) is not None


def classify(value: str) -> Classification:
    """
    Decides the category of a source value. Keywords are checked first, anything else is
    considered plain when it looks like a host and malformed otherwise.

    Args:
        value (str): Source value taken from a directive, e.g. 'self' or *.example.com

    Returns:
        Classification: Category of the value. Every string maps to exactly one category.
    """
    if value in SAFE_KEYWORDS:
        return Classification.SAFE

    if value in UNSAFE_KEYWORDS:
        return Classification.UNSAFE

    if is_host(value):
        return Classification.PLAIN

    return Classification.MALFORMED


# endregion
