"""Entry discovery and per-file frontmatter parsing"""

from pathlib import Path

from folio.core.frontmatter import parse_frontmatter
from folio.core.models import ParsedDoc
from folio.core.utils.hashing import sha256
from folio.core.utils.slug import slugify


MD_EXTENSIONS = {'.md', '.markdown'}


def discover_files(path: Path) -> list[Path]:
    """Return sorted markdown files directly under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix.lower() in MD_EXTENSIONS else []
    if not path.is_dir():
        return []
    return sorted(p for p in path.iterdir() if p.is_file() and p.suffix.lower() in MD_EXTENSIONS)


def derive_slug(attributes: dict, fallback: str) -> str:
    """Slug from the first non-empty of slug, title, id; else the fallback text."""
    for key in ('slug', 'title', 'id'):
        value = attributes.get(key)
        if value:
            return slugify(value)
    return slugify(fallback)


def parse_text(raw: str, path: Path) -> ParsedDoc:
    """Parse already-loaded entry text into a ParsedDoc."""
    attributes, body = parse_frontmatter(raw)
    return ParsedDoc(
        path=path,
        slug=derive_slug(attributes, path.stem),
        raw=raw,
        body=body,
        attributes=attributes,
        hash=sha256(raw),
    )


def parse_file(path: Path) -> ParsedDoc:
    """Read and parse a single entry file."""
    return parse_text(path.read_text(encoding='utf-8'), path)
