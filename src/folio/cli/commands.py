"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from folio.config import Settings, load_config
from folio.core.frontmatter import parse_frontmatter
from folio.core.markdown import render
from folio.core.pipeline import run_build, run_refresh


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def build_cmd(
    path: Annotated[Optional[str], typer.Argument(help="Entry file or directory (default: entries_dir)")] = None,
    root: Annotated[Optional[str], typer.Option("--site-root", help="Directory output paths are relative to")] = None,
    index: Annotated[Optional[str], typer.Option("--index-path", help="JSON index path, relative to site root")] = None,
    legacy: Annotated[bool, typer.Option("--legacy-fence-markup", help="Keep legacy markup for bare code fences")] = False,
    ):
    """Render entries to HTML fragments and write the JSON content index."""
    settings = _settings(overrides={
        "site_root": root, "index_path": index, "legacy_fence_markup": legacy or None,
    })
    site_root = Path(settings.site_root)
    source = path or str(site_root / settings.entries_dir)

    try:
        counts, results = run_build(
            source, site_root, site_root / settings.index_path,
            settings.content_dir, settings.legacy_fence_markup,
        )
    except (RuntimeError, OSError) as e:
        _fail(str(e))

    for slug, html_path, status in results:
        typer.echo(f"  {status}: {slug} -> {html_path}")
    typer.echo(
        f"Built {len(results)} entries "
        f"({counts['written']} written, {counts['unchanged']} unchanged)."
    )


def render_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to render")],
    legacy: Annotated[bool, typer.Option("--legacy-fence-markup", help="Keep legacy markup for bare code fences")] = False,
    ):
    """Print the HTML fragment for one document body (frontmatter is stripped)."""
    settings = _settings(overrides={"legacy_fence_markup": legacy or None})
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        _fail(f"Could not read {path}", e)
    _, body = parse_frontmatter(text)
    typer.echo(render(body, settings.legacy_fence_markup))


def options_cmd(
    path: Annotated[Optional[str], typer.Argument(help="Entry directory (default: entries_dir)")] = None,
    cms_config: Annotated[Optional[str], typer.Option("--cms-config", help="CMS config with auto option markers")] = None,
    ):
    """Fold newType/newTags into entries and refresh the CMS type/tag options."""
    settings = _settings(overrides={"cms_config": cms_config})
    site_root = Path(settings.site_root)
    source = path or str(site_root / settings.entries_dir)

    try:
        types, tags, rewritten = run_refresh(source, site_root / settings.cms_config)
    except (OSError, ValueError) as e:
        _fail("Option refresh failed", e)

    for p in rewritten:
        typer.echo(f"  rewrote: {p}")
    typer.echo(f"Types ({len(types)}): {', '.join(types)}")
    typer.echo(f"Tags ({len(tags)}): {', '.join(tags)}")
