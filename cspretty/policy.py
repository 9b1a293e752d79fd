import re

from typing import NamedTuple

from .classifier import Token

# region Constants
HEADER_PREFIX: str = "content-security-policy:"
HEADER_PREFIX_PATTERN: re.Pattern[str] = re.compile(
    re.escape(HEADER_PREFIX), re.IGNORECASE | re.ASCII
)
DIRECTIVE_SEPARATOR: str = ";"

# Unicode White_Space only, the \x1c-\x1f separators are part of a word
WHITESPACE_PATTERN: re.Pattern[str] = re.compile(
    "[\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)
# endregion


# region Structures
class DirectiveRow(NamedTuple):
    """
    Structure representing one CSP directive, its name and the classified source values in
    the order they were written.
    """

    name: str
    tokens: tuple[Token, ...]


# endregion


# region Parsing
def extract_header(line: str) -> str:
    """
    Strips an optional `Content-Security-Policy:` prefix from the line. The prefix is matched
    case-insensitively, the rest of the line keeps its original case.

    Args:
        line (str): Raw input line, either a bare policy or a whole HTTP header.

    Returns:
        str: Everything after the first prefix occurrence, or the whole line without a prefix.
    """
    match = HEADER_PREFIX_PATTERN.search(line)

    if match is None:
        return line

    return line[match.end() :]


def split_policy(text: str) -> list[str]:
    return text.split(DIRECTIVE_SEPARATOR)


def parse_row(segment: str) -> DirectiveRow | None:
    """
    Parses a single directive such as `img-src 'self' cdn.example.com`.

    Args:
        segment (str): One semicolon delimited part of the policy.

    Returns:
        DirectiveRow | None: Parsed directive or None when the segment has less than two words
        (empty segments, directives without values).
    """
    words = [word for word in WHITESPACE_PATTERN.split(segment) if word]

    if len(words) < 2:
        return None

    name, *values = words

    return DirectiveRow(name, tuple(Token.from_text(value) for value in values))


def parse_policy(text: str) -> list[DirectiveRow]:
    rows: list[DirectiveRow] = []

    for segment in split_policy(text):
        row = parse_row(segment)

        if row is not None:
            rows.append(row)

    return rows


# endregion
