"""CMS select-option refresh: fold newType/newTags into entries and rewrite option blocks"""


TYPE_MARKERS = ('# BEGIN_AUTO_TYPE_OPTIONS', '# END_AUTO_TYPE_OPTIONS')
TAG_MARKERS = ('# BEGIN_AUTO_TAG_OPTIONS', '# END_AUTO_TAG_OPTIONS')


def parse_new_tags(value) -> list[str]:
    """newTags may be a list or a comma-separated string."""
    if value is None or value == '' or value is False:
        return []
    if isinstance(value, list):
        return [str(v) for v in value if str(v)]
    return [t.strip() for t in str(value).split(',') if t.strip()]


def dedupe(values: list) -> list[str]:
    """Drop blanks and case-insensitive duplicates, keeping the first spelling."""
    seen = set()
    out = []
    for v in values:
        trimmed = str(v if v is not None else '').strip()
        if trimmed and trimmed.lower() not in seen:
            seen.add(trimmed.lower())
            out.append(trimmed)
    return out


def fold_new_fields(attributes: dict) -> tuple[dict, bool]:
    """Merge newType into type and newTags into tags. Returns (attributes, changed)."""
    cleaned = dict(attributes)
    changed = False

    if 'newType' in attributes:
        new_type = str(attributes['newType'] or '').strip()
        if new_type:
            cleaned['type'] = new_type
        del cleaned['newType']
        changed = True

    tags = attributes.get('tags')
    tags = tags if isinstance(tags, list) else []
    merged = dedupe(tags + parse_new_tags(attributes.get('newTags')))
    if len(merged) != len(tags) or 'newTags' in attributes:
        cleaned['tags'] = merged
        cleaned.pop('newTags', None)
        changed = True

    return cleaned, changed


def _option_text(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return ",".join(_option_text(v) for v in value)
    return str(value)


def add_unique(seen: dict[str, str], value) -> None:
    """Record value under its lowercase key unless blank, null-ish, or already present.

    List values (a bare `key:` decodes to []) are joined with commas, so [] is blank.
    """
    if value is None or value == "" or value is False:
        return
    trimmed = _option_text(value).strip()
    lower = trimmed.lower()
    if not trimmed or lower in ("null", "undefined"):
        return
    seen.setdefault(lower, trimmed)


def sort_values(seen: dict[str, str]) -> list[str]:
    return sorted(seen.values(), key=str.casefold)


def format_options(values: list[str]) -> list[str]:
    if not values:
        return ['options: []']
    escaped = [v.replace('"', '\\"') for v in values]
    return ['options:'] + [f'  - "{v}"' for v in escaped]


def replace_section(content: str, markers: tuple[str, str], new_lines: list[str]) -> str:
    """Replace the lines between a marker pair, indenting new_lines like the start marker."""
    start_token, end_token = markers
    lines = content.splitlines()
    start = next((i for i, ln in enumerate(lines) if start_token in ln), -1)
    end = next((i for i, ln in enumerate(lines) if end_token in ln), -1)
    if start == -1 or end == -1 or end <= start:
        raise ValueError(f'Could not find markers {start_token} / {end_token}')

    start_line = lines[start]
    indent = start_line[:len(start_line) - len(start_line.lstrip())]
    indented = [f'{indent}{ln}' if ln else indent for ln in new_lines]
    return '\n'.join(lines[:start + 1] + indented + lines[end:])


def update_cms_config(content: str, types: list[str], tags: list[str]) -> str:
    """Rewrite both auto-generated option blocks; result always ends with a newline."""
    updated = replace_section(content, TYPE_MARKERS, format_options(types))
    updated = replace_section(updated, TAG_MARKERS, format_options(tags))
    return updated if updated.endswith('\n') else updated + '\n'
