"""Frontmatter splitting and decoding for a restricted YAML-like grammar.

Supported: `key: scalar`, `key:` followed by `- item` lines, quoted scalars that
continue over indented lines, and soft-wrapped plain strings. Scalars are typed
by shape: quoted -> str, true/false -> bool, decimal -> int/float, else str.
"""

import json
import math
import re
from typing import Iterable, NamedTuple

from folio.core.models import Scalar, Value


DELIMITER = '---'
QUOTES = ('"', "'")
BOM = '\ufeff'

LINE_RE = re.compile(r'\r?\n')
KEY_RE = re.compile(r'^\s*([A-Za-z0-9_]+):\s*(.*)$')
LIST_ITEM_RE = re.compile(r'^\s*-\s+(.*)$')
INDENT_RE = re.compile(r'^\s+')
NUMBER_RE = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$')
INT_RE = re.compile(r'^[+-]?\d+$')


class Frontmatter(NamedTuple):
    attributes: dict[str, Value]
    body: str


def _is_quoted(text: str) -> bool:
    return len(text) >= 2 and text[0] in QUOTES and text[-1] == text[0]


def _unquote(text: str) -> str:
    """Strip enclosing quotes; an unmatched opening quote is dropped on its own."""
    if _is_quoted(text):
        return text[1:-1]
    return text[1:] if text[:1] in QUOTES else text


def parse_scalar(text: str) -> Scalar:
    """Decode one scalar: quoted string, boolean, finite decimal number, or plain string."""
    trimmed = text.strip()
    if _is_quoted(trimmed):
        return trimmed[1:-1]
    if trimmed == 'true':
        return True
    if trimmed == 'false':
        return False
    if NUMBER_RE.match(trimmed):
        if INT_RE.match(trimmed):
            return int(trimmed)
        number = float(trimmed)
        if math.isfinite(number):
            return int(number) if number.is_integer() else number
    return trimmed


def parse_attributes(lines: Iterable[str]) -> dict[str, Value]:
    """Decode frontmatter lines into an ordered attribute mapping. Never raises."""
    attrs: dict[str, Value] = {}
    current = None      # key receiving list items and soft-wrapped lines
    multiline = None    # key holding a quoted scalar that is still open

    for line in lines:
        if not line.strip():
            continue
        indented = INDENT_RE.match(line) is not None

        if multiline and indented:
            value = f'{attrs[multiline]} {line.strip()}'
            if _is_quoted(value):
                attrs[multiline] = value[1:-1]
                multiline = None
            else:
                attrs[multiline] = value
            continue

        item = LIST_ITEM_RE.match(line)
        if item and current:
            if isinstance(attrs[current], list):
                attrs[current].append(parse_scalar(item.group(1)))
            continue

        if indented and current and isinstance(attrs[current], str):
            attrs[current] = f'{attrs[current]} {line.strip()}'.strip()
            continue

        kv = KEY_RE.match(line)
        if not kv:
            continue

        if multiline:
            attrs[multiline] = _unquote(attrs[multiline])
            multiline = None

        key, value = kv.group(1), kv.group(2).strip()
        current = key
        if not value:
            attrs[key] = []
        elif value[0] in QUOTES and not _is_quoted(value):
            attrs[key] = value
            multiline = key
        else:
            attrs[key] = parse_scalar(value)

    if multiline:
        attrs[multiline] = _unquote(attrs[multiline])
    return attrs


def parse_frontmatter(text: str) -> Frontmatter:
    """Split text into (attributes, body). Without a leading '---' line the text is all body."""
    lines = LINE_RE.split(text or '')
    if lines[0].lstrip(BOM).strip() != DELIMITER:
        return Frontmatter({}, text)

    end = 1
    while end < len(lines) and lines[end].strip() != DELIMITER:
        end += 1

    return Frontmatter(parse_attributes(lines[1:end]), '\n'.join(lines[end + 1:]))


def _format_scalar(value) -> str:
    if value is None:
        return '""'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(str(value), ensure_ascii=False)


def dump_frontmatter(attributes: dict[str, Value], body: str = '') -> str:
    """Serialize attributes back into a '---' block followed by body."""
    lines = [DELIMITER]
    for key, value in attributes.items():
        if isinstance(value, list):
            lines.append(f'{key}:')
            lines.extend(f'  - {_format_scalar(v)}' for v in value)
        else:
            lines.append(f'{key}: {_format_scalar(value)}')
    lines.append(DELIMITER)
    return '\n'.join(lines) + '\n' + (body or '')
