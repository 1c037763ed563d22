"""Slug generation for entry identifiers"""

import re


def slugify(text) -> str:
    """Convert text to a lowercase, hyphen-separated slug of [a-z0-9] runs."""
    text = str(text if text is not None else '').lower().strip()
    text = re.sub(r'[^a-z0-9]+', '-', text)
    return text.strip('-')
