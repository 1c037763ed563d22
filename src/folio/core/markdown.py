"""Restricted markdown to HTML renderer: headings, fenced code, paragraphs, inline rules.

Block pass: a single forward scan over lines producing Heading, CodeBlock and
Paragraph blocks. Inline pass: HTML-escape first, then apply INLINE_RULES in
order. Rule order is significant: images must run before links and bold
before italic.
"""

import re

from folio.core.images import parse_image_target
from folio.core.models import Block, CodeBlock, Heading, Paragraph


LINE_RE = re.compile(r'\r?\n')
FENCE = '```'
HEADING_PREFIXES = (('### ', 3), ('## ', 2), ('# ', 1))
EMPTY_HTML = '<p></p>'

_HTML_ESCAPES = (
    ('&', '&amp;'),
    ('<', '&lt;'),
    ('>', '&gt;'),
    ('"', '&quot;'),
    ("'", '&#39;'),
)


def escape_html(text: str) -> str:
    """Escape & < > " ' for element content."""
    for char, entity in _HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


def escape_attribute(text: str) -> str:
    """Escape only double quotes; used for urls and language tags."""
    return text.replace('"', '&quot;')


def _image(m: re.Match) -> str:
    url = parse_image_target(m.group(2)).url
    if not url:
        return m.group(0)
    return f'<img src="{escape_attribute(url)}" alt="{escape_attribute(m.group(1))}">'


def _link(m: re.Match) -> str:
    return f'<a href="{escape_attribute(m.group(2))}">{m.group(1)}</a>'


INLINE_RULES = (
    (re.compile(r'!\[(.*?)\]\((.+?)\)'), _image),
    (re.compile(r'\*\*(.+?)\*\*'),       r'<strong>\1</strong>'),
    (re.compile(r'\*(.+?)\*'),           r'<em>\1</em>'),
    (re.compile(r'`([^`]+)`'),           r'<code>\1</code>'),
    (re.compile(r'\[(.+?)\]\((.+?)\)'),  _link),
)


def render_inline(text: str) -> str:
    """Escape text, then apply the inline substitution rules in order."""
    html = escape_html(text)
    for pattern, repl in INLINE_RULES:
        html = pattern.sub(repl, html)
    return html


def _classify(text: str) -> Block:
    for prefix, level in HEADING_PREFIXES:
        if text.startswith(prefix):
            return Heading(level=level, text=text[len(prefix):])
    return Paragraph(text=text)


def split_blocks(markdown: str) -> list[Block]:
    """Segment markdown into blocks in document order; blank lines only separate."""
    lines = LINE_RE.split(markdown or '')
    blocks: list[Block] = []
    i = 0

    while i < len(lines):
        stripped = lines[i].strip()

        if stripped.startswith(FENCE):
            lang = stripped[len(FENCE):].strip()
            buf = []
            i += 1
            while i < len(lines) and not lines[i].strip().startswith(FENCE):
                buf.append(lines[i])
                i += 1
            blocks.append(CodeBlock(lang=lang, raw_text='\n'.join(buf)))
            i += 1  # closing fence, if any
            continue

        if not stripped:
            i += 1
            continue

        para = []
        while i < len(lines) and lines[i].strip():
            para.append(lines[i])
            i += 1
        text = '\n'.join(para).strip()
        if text:
            blocks.append(_classify(text))

    return blocks


def render_block(block: Block, legacy_fence_markup: bool = False) -> str:
    """Render a single block to an HTML fragment."""
    if isinstance(block, Heading):
        return f'<h{block.level}>{render_inline(block.text)}</h{block.level}>'
    if isinstance(block, CodeBlock):
        code = escape_html(block.raw_text)
        if block.lang:
            return f'<pre><code class="language-{escape_attribute(block.lang)}">{code}</code></pre>'
        # previously published pages carry a stray quote on bare fences
        open_tag = '<code">' if legacy_fence_markup else '<code>'
        return f'<pre>{open_tag}{code}</code></pre>'
    inline = render_inline(block.text).replace('\n', '<br>')
    return f'<p>{inline}</p>'


def render(markdown: str, legacy_fence_markup: bool = False) -> str:
    """Render restricted markdown to an HTML fragment. Never raises."""
    blocks = split_blocks(markdown)
    return '\n'.join(render_block(b, legacy_fence_markup) for b in blocks) or EMPTY_HTML
