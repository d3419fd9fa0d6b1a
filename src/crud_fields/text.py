"""String helpers used to derive display text from identifiers."""

import re

_WORD_SEPARATORS = re.compile(r"[\s_\-]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def title_case(value: str) -> str:
    """
    Turn an identifier into a human-readable title.

    Underscores, dashes and camelCase boundaries split words, and every
    word gets its first letter capitalized:

        >>> title_case("published_at")
        'Published At'
        >>> title_case("categoryId")
        'Category Id'
    """
    value = _CAMEL_BOUNDARY.sub(" ", value)
    words = [word for word in _WORD_SEPARATORS.split(value) if word]
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)
