"""Export: map parsed entries to index records and write HTML fragments + the JSON index"""

import json
from pathlib import Path

from folio.core.models import IndexEntry, ParsedDoc
from folio.core.utils.hashing import file_matches


REQUIRED_KEYS = ('id', 'title', 'section')


def validate_entry(attributes: dict, filename: str) -> None:
    """Raise ValueError when a required attribute is missing or empty."""
    for key in REQUIRED_KEYS:
        if attributes.get(key) in (None, '', [], False):
            raise ValueError(f'Entry missing "{key}" in {filename}')


def _as_list(value) -> list | None:
    if value is None or value == '':
        return None
    return value if isinstance(value, list) else [value]


def build_entry(doc: ParsedDoc, images: list, content_dir: str = 'content') -> IndexEntry:
    """Build the index record for doc; missing optional keys stay unset."""
    attrs = doc.attributes

    def opt(key: str):
        value = attrs.get(key)
        return None if value == [] else value

    return IndexEntry(
        id=attrs['id'],
        title=attrs['title'],
        section=attrs['section'],
        slug=doc.slug,
        type=opt('type'),
        year=opt('year'),
        full_date=opt('fullDate'),
        tags=_as_list(attrs.get('tags')),
        summary=opt('summary'),
        images=images,
        featured=bool(attrs.get('featured')),
        pinned=bool(attrs.get('pinned')),
        link=opt('link'),
        content_path=opt('contentPath') or f'{content_dir}/{doc.slug}.html',
    )


def _year_key(year) -> float:
    if isinstance(year, bool):
        return 0
    if isinstance(year, (int, float)):
        return year
    try:
        return float(year)
    except (TypeError, ValueError):
        return 0


def sort_entries(entries: list[IndexEntry]) -> list[IndexEntry]:
    """Newest year first, then title (case-insensitive)."""
    return sorted(entries, key=lambda e: (-_year_key(e.year), str(e.title).casefold()))


def write_if_changed(path: Path, text: str) -> bool:
    """Write text to path unless the file already holds identical content. Returns True if written."""
    if file_matches(path, text):
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding='utf-8')
    return True


def write_index(entries: list[IndexEntry], index_path: Path) -> Path:
    """Write the sorted content index as a JSON array."""
    index_path.parent.mkdir(parents=True, exist_ok=True)
    index_path.write_text(
        json.dumps([e.to_json() for e in entries], indent=2, ensure_ascii=False),
        encoding='utf-8',
    )
    return index_path
