"""Glob matching for object keys with recursive ``**`` support.

Patterns are translated once into an anchored regular expression:

    ``*``       any run of characters inside one segment (never ``/``)
    ``**``      as a whole segment, any number of segments including none
    ``?``       exactly one character other than ``/``
    ``[...]``   character class with ranges and ``!``/``^`` negation
    ``{a,b}``   alternation, alternatives may hold other wildcards
    ``\\x``      the character ``x`` taken literally

Any ``**`` that is not a whole segment behaves like ``*``.
"""

import re
from typing import Optional

from bucket_glob.core.exceptions import PatternError

SEPARATOR = "/"

_ANY_SEGMENTS_PREFIX = "(?:.*/)?"
_ANY_SEGMENTS_SUFFIX = "(?:/.*)?"
_ANY = ".*"
_SEGMENT_ANY = "[^/]*"
_SEGMENT_CHAR = "[^/]"


def _parse_class(pattern: str, start: int) -> tuple[str, int]:
    """Translate the class opened at ``pattern[start]``.

    Returns the regex for the class and the index just past its ``]``.
    """
    i = start + 1
    negate = False
    if i < len(pattern) and pattern[i] in "!^":
        negate = True
        i += 1

    members = []
    first = True
    while True:
        if i >= len(pattern):
            raise PatternError(f"Unterminated character class in pattern: {pattern}")

        char = pattern[i]
        if char == "]" and not first:
            i += 1
            break
        first = False

        if char == "\\":
            i += 1
            if i >= len(pattern):
                raise PatternError(f"Trailing escape in pattern: {pattern}")
            char = pattern[i]

        # Range such as a-z; a '-' right before ']' is literal
        if (
            i + 2 < len(pattern)
            and pattern[i + 1] == "-"
            and pattern[i + 2] != "]"
        ):
            end_index = i + 2
            end = pattern[end_index]
            if end == "\\":
                end_index += 1
                if end_index >= len(pattern):
                    raise PatternError(f"Trailing escape in pattern: {pattern}")
                end = pattern[end_index]
            if end < char:
                raise PatternError(
                    f"Invalid range '{char}-{end}' in pattern: {pattern}"
                )
            members.append(f"{re.escape(char)}-{re.escape(end)}")
            i = end_index + 1
        else:
            members.append(re.escape(char))
            i += 1

    body = "".join(members)
    if negate:
        return f"[^/{body}]", i
    return f"(?!/)[{body}]", i


def translate(pattern: str) -> str:
    """Translate a glob pattern into an anchored regular expression.

    Raises:
        PatternError: On an unterminated class or brace, a reversed range,
            or a trailing escape
    """
    parts = []
    depth = 0
    i = 0
    length = len(pattern)

    while i < length:
        char = pattern[i]

        if char == "*":
            prev_char: Optional[str] = pattern[i - 1] if i > 0 else None
            star_count = 1
            while i + 1 < length and pattern[i + 1] == "*":
                star_count += 1
                i += 1
            next_char: Optional[str] = pattern[i + 1] if i + 1 < length else None

            starts_segment = prev_char is None or prev_char == SEPARATOR or (
                depth > 0 and prev_char in "{,"
            )
            ends_segment = next_char is None or next_char == SEPARATOR or (
                depth > 0 and next_char in ",}"
            )

            if star_count > 1 and starts_segment and ends_segment:
                if next_char == SEPARATOR:
                    parts.append(_ANY_SEGMENTS_PREFIX)
                    i += 1
                else:
                    parts.append(_ANY)
            else:
                parts.append(_SEGMENT_ANY)

        elif char == "?":
            parts.append(_SEGMENT_CHAR)

        elif char == "[":
            class_regex, i = _parse_class(pattern, i)
            parts.append(class_regex)
            continue

        elif char == "\\":
            i += 1
            if i >= length:
                raise PatternError(f"Trailing escape in pattern: {pattern}")
            parts.append(re.escape(pattern[i]))

        elif char == "{":
            depth += 1
            parts.append("(?:")

        elif char == "}" and depth > 0:
            depth -= 1
            parts.append(")")

        elif char == "," and depth > 0:
            parts.append("|")

        elif char == SEPARATOR and pattern[i:] == "/**" and depth == 0:
            # 'dir/**' also matches 'dir' itself
            parts.append(_ANY_SEGMENTS_SUFFIX)
            break

        else:
            parts.append(re.escape(char))

        i += 1

    if depth > 0:
        raise PatternError(f"Unterminated brace in pattern: {pattern}")

    return "".join(parts)


class GlobPattern:
    """A compiled glob pattern.

    Compiling validates the pattern, so a bad pattern fails before any key
    is tested.
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        try:
            self._regex = re.compile(translate(pattern), re.DOTALL)
        except re.error as e:
            raise PatternError(f"Invalid glob pattern '{pattern}': {e}") from e

    def match(self, key: str) -> bool:
        """Return True if the whole key matches the pattern."""
        return self._regex.fullmatch(key) is not None

    def __str__(self) -> str:
        return self.pattern

    def __repr__(self) -> str:
        return f"{type(self).__qualname__}(pattern={self.pattern!r})"


def match(pattern: str, key: str) -> bool:
    """Test a single key against a glob pattern."""
    return GlobPattern(pattern).match(key)
