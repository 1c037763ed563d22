"""Image target parsing and image discovery in markdown bodies"""

import re
from typing import NamedTuple


TARGET_RE = re.compile(r'^(\S+)(?:\s+"(.*)")?$')
IMAGE_RE = re.compile(r'!\[[^\]]*\]\(([^)]+)\)')


class ImageTarget(NamedTuple):
    url: str
    title: str


def parse_image_target(target: str) -> ImageTarget:
    """Split an image/link target like 'pic.png "A caption"' into (url, title)."""
    trimmed = (target or '').strip()
    m = TARGET_RE.match(trimmed)
    if m:
        return ImageTarget(m.group(1), m.group(2) or '')

    url, *rest = trimmed.split() or ['']
    return ImageTarget(url, ' '.join(rest).strip())


def extract_images(markdown: str) -> list[str]:
    """Return image urls referenced by ![alt](target) in document order, skipping empty urls."""
    urls = (parse_image_target(m.group(1)).url for m in IMAGE_RE.finditer(markdown or ''))
    return [u for u in urls if u]
