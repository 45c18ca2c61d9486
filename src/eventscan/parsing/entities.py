"""HTML entity decoding for the fixed entity set the events platform emits."""

from __future__ import annotations

import re
from typing import Any

_NAMED_ENTITIES = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "ndash": "–",
    "mdash": "—",
    "nbsp": " ",
}

_ENTITY_PATTERN = re.compile(
    r"&(?:(?P<named>amp|lt|gt|quot|ndash|mdash|nbsp)|#(?P<dec>\d+)|#[xX](?P<hex>[0-9a-fA-F]+));"
)

_MAX_CODE_POINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


def _replace(match: re.Match[str]) -> str:
    named = match.group("named")
    if named is not None:
        return _NAMED_ENTITIES[named]
    digits = match.group("dec")
    code = int(digits, 10) if digits is not None else int(match.group("hex"), 16)
    if code > _MAX_CODE_POINT or code in _SURROGATES:
        return match.group(0)
    return chr(code)


def decode_entities(value: Any) -> str:
    """Decode named (``&amp;`` ... ``&nbsp;``) and numeric (``&#39;``, ``&#x2019;``) entities.

    Single left-to-right pass: decoded text is never re-scanned, so ``&amp;lt;``
    becomes ``&lt;``. Unknown or malformed entities, and code points that are not
    encodable characters (surrogates, beyond U+10FFFF), are left verbatim.
    Non-string input yields an empty string.
    """
    if not isinstance(value, str) or not value:
        return ""
    return _ENTITY_PATTERN.sub(_replace, value)
