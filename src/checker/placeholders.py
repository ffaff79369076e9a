"""Template placeholder extraction."""

import re
from typing import FrozenSet

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


def extract_placeholders(text: str) -> FrozenSet[str]:
    """Return the distinct names used as ``{name}`` placeholders in ``text``.

    >>> sorted(extract_placeholders("Hello {name}, you have {count} items"))
    ['count', 'name']
    """
    return frozenset(PLACEHOLDER_PATTERN.findall(text))
