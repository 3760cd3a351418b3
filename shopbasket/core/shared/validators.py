"""
Shared Validators

Input scrubbing helpers for customer-supplied values.
"""

import re
from collections.abc import Mapping
from typing import Any

TAG_PATTERN = re.compile(r"<[a-zA-Z/!?][^>]*>?")
COMMENT_PATTERN = re.compile(r"<!--.*?-->", re.DOTALL)
SCRIPT_PATTERN = re.compile(r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)


def strip_tags(value: str) -> str:
    """
    Remove HTML/XML markup from a string.

    Script and style blocks are dropped together with their content,
    comments and remaining tags are removed; entities are left untouched.
    """
    value = SCRIPT_PATTERN.sub("", value)
    value = COMMENT_PATTERN.sub("", value)
    return TAG_PATTERN.sub("", value)


def sanitize_scalars(values: Mapping[str, Any]) -> dict[str, Any]:
    """
    Strip tags from every scalar value of a mapping (prevents stored XSS).

    Non-string scalars are converted to strings; booleans and None and
    nested structures are kept as they are.
    """
    result: dict[str, Any] = {}
    for key, value in values.items():
        if isinstance(value, bool) or value is None:
            result[key] = value
        elif isinstance(value, (str, int, float)):
            result[key] = strip_tags(str(value))
        else:
            result[key] = value
    return result
