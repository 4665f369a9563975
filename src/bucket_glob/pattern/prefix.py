"""Literal prefix extraction for server-side listing."""

# Characters that give a pattern meaning beyond a literal key
WILDCARD_CHARACTERS = frozenset("*?[{\\")


def extract_prefix(pattern: str) -> str:
    """Return the part of a pattern before its first wildcard character.

    The prefix only narrows the listing request; the full pattern still
    decides which keys match.

    Examples:
        >>> extract_prefix("logs/**/*.txt")
        'logs/'
        >>> extract_prefix("reports/2024.csv")
        'reports/2024.csv'
    """
    for index, char in enumerate(pattern):
        if char in WILDCARD_CHARACTERS:
            return pattern[:index]
    return pattern
