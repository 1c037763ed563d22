"""Pipeline step functions: build the content index and refresh CMS options"""

import logging
from pathlib import Path

from folio.core.export import build_entry, sort_entries, validate_entry, write_if_changed, write_index
from folio.core.frontmatter import dump_frontmatter
from folio.core.images import extract_images
from folio.core.markdown import render
from folio.core.models import IndexEntry
from folio.core.options import add_unique, fold_new_fields, sort_values, update_cms_config
from folio.core.parse import discover_files, parse_file


logger = logging.getLogger(__name__)


def _warn_pinned(entries: list[IndexEntry]) -> None:
    pinned = [e for e in entries if e.pinned]
    if len(pinned) > 1:
        logger.warning(
            "Multiple pinned entries found; the most recent will be used for the homepage hero: %s",
            ", ".join(str(e.slug or e.id) for e in pinned),
        )
    elif not pinned:
        logger.warning("No pinned entry found; homepage hero will stay empty until one is pinned.")


def run_build(
    path: str,
    site_root: Path,
    index_path: Path,
    content_dir: str = 'content',
    legacy_fence_markup: bool = False,
    ) -> tuple[dict[str, int], list[tuple[str, Path, str]]]:
    """Render every entry under path and write HTML fragments plus the sorted JSON index.

    Returns (counts, results) where results holds (slug, html_path, status) with
    status 'written' or 'unchanged'. Any per-file failure is raised as RuntimeError.
    """
    counts = {"written": 0, "unchanged": 0}
    results = []
    entries = []

    for p in discover_files(Path(path)):
        try:
            doc = parse_file(p)
            validate_entry(doc.attributes, p.name)

            images = doc.attributes.get('images')
            images = [i for i in images if i] if isinstance(images, list) else []
            if not images:
                images = extract_images(doc.body)
                if images:
                    logger.debug("Derived %d image(s) from body of %s", len(images), p.name)

            entry = build_entry(doc, images, content_dir)
            html_path = site_root / entry.content_path
            written = write_if_changed(html_path, render(doc.body, legacy_fence_markup))
        except Exception as e:
            raise RuntimeError(f"Failed to build {p}: {e}") from e

        status = "written" if written else "unchanged"
        logger.debug("%s: %s -> %s", status, p, html_path)
        counts[status] += 1
        results.append((entry.slug, html_path, status))
        entries.append(entry)

    write_index(sort_entries(entries), index_path)
    _warn_pinned(entries)
    return counts, results


def run_refresh(
    path: str,
    cms_config: Path | None = None,
    ) -> tuple[list[str], list[str], list[Path]]:
    """Fold newType/newTags into entries, collect unique types and tags, update cms_config.

    Returns (types, tags, rewritten_paths). cms_config is only touched when it exists.
    """
    types: dict[str, str] = {}
    tags: dict[str, str] = {}
    rewritten = []

    for p in discover_files(Path(path)):
        doc = parse_file(p)
        cleaned, changed = fold_new_fields(doc.attributes)
        if changed:
            p.write_text(dump_frontmatter(cleaned, doc.body), encoding='utf-8')
            rewritten.append(p)
            logger.debug("Rewrote frontmatter of %s", p)

        add_unique(types, cleaned.get('type'))
        entry_tags = cleaned.get('tags')
        for tag in entry_tags if isinstance(entry_tags, list) else [entry_tags]:
            add_unique(tags, tag)

    type_values, tag_values = sort_values(types), sort_values(tags)
    if cms_config is not None and cms_config.exists():
        cms_config.write_text(
            update_cms_config(cms_config.read_text(encoding='utf-8'), type_values, tag_values),
            encoding='utf-8',
        )
    elif cms_config is not None:
        logger.warning("CMS config %s not found; option blocks not updated.", cms_config)
    return type_values, tag_values, rewritten
