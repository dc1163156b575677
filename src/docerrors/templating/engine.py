"""
Placeholder substitution for message templates and its narrow inverse.

Templates contain ``{name}`` placeholders. A name is any run of characters
that are neither braces nor whitespace; dotted names (``{properties.min}``)
resolve through nested context values. There is no escaping, so rendered
output cannot contain a literal placeholder.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping, Tuple

from ..utils.lookup import get_path

PLACEHOLDER_RE = re.compile(r"\{\s*([^{}\s]+)\s*\}")

DUPLICATE_KEY_TEMPLATE = (
    "E11000 duplicate key error collection: {collection} index: {index} dup key: { : {value} }"
)
# Newer servers name the key inside the braces.
NAMED_DUPLICATE_KEY_TEMPLATE = (
    "E11000 duplicate key error collection: {collection} index: {index} dup key: { {key}: {value} }"
)
DUPLICATE_KEY_TEMPLATES = (DUPLICATE_KEY_TEMPLATE, NAMED_DUPLICATE_KEY_TEMPLATE)
INDEX_TEMPLATE = "{path}_{direction}"


def compile(template: str, context: Mapping[str, Any]) -> str:  # noqa: A001
    """
    Render ``template`` by replacing every placeholder with the value found
    at that path in ``context``. Unknown names render as an empty string.
    """
    text = "" if template is None else str(template)

    def substitute(match: re.Match) -> str:
        return _stringify(get_path(context, match.group(1)))

    return PLACEHOLDER_RE.sub(substitute, text)


def decompile(template: str, text: str, *, from_right: bool = False) -> Dict[str, str]:
    """
    Recover the values that :func:`compile` substituted into ``text``.

    This is a targeted parser for fixed-format messages such as
    :data:`DUPLICATE_KEY_TEMPLATE`, not a general inverse. ``text`` is cut at
    each literal segment of the template in order, so it only works when
    those segments never occur inside the captured values. With
    ``from_right`` the segments are located from the end of ``text``, which
    keeps separators inside the leading value (``first_name_1``).
    """
    keys, fixed = _split_template(template)
    values = _cut(text, fixed, from_right=from_right)

    if len(values) > len(keys) and values[0] == "":
        values.pop(0)
    if len(values) > len(keys) and values[-1] == "":
        values.pop()

    return {key: values[index] if index < len(values) else "" for index, key in enumerate(keys)}


def _split_template(template: str) -> Tuple[List[str], List[str]]:
    keys: List[str] = []
    fixed: List[str] = []
    cursor = 0
    for match in PLACEHOLDER_RE.finditer(template):
        keys.append(match.group(1))
        fixed.append(template[cursor:match.start()])
        cursor = match.end()
    fixed.append(template[cursor:])
    return keys, [segment for segment in fixed if segment]


def _cut(text: str, fixed: List[str], *, from_right: bool) -> List[str]:
    if from_right:
        reversed_text = text[::-1]
        pieces = _cut(reversed_text, [segment[::-1] for segment in reversed(fixed)], from_right=False)
        return [piece[::-1] for piece in reversed(pieces)]

    pieces: List[str] = []
    cursor = 0
    for segment in fixed:
        position = text.find(segment, cursor)
        if position < 0:
            break
        pieces.append(text[cursor:position])
        cursor = position + len(segment)
    pieces.append(text[cursor:])
    return pieces


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(item) for item in value)
    return str(value)
