"""
Gallery renderer.

Turns decoded emoji records into the complete HTML document served at GET /.
The template text is a constant (render/gallery_html.py); it is compiled once
and reused, so a malformed template surfaces at startup rather than mid-request.

Public API:
    distinct_groups(records)         → list[str]
    GalleryPage.from_records(records)
    render(records, groups)          → str
    render_gallery(records)          → str
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import lru_cache

import jinja2

from render.gallery_html import GALLERY_TEMPLATE
from upstream.models import EmojiRecord


class TemplateError(Exception):
    """The gallery template failed to compile or render."""


# ---------------------------------------------------------------------------
# Template
# ---------------------------------------------------------------------------

def compile_template(source: str) -> jinja2.Template:
    env = jinja2.Environment(autoescape=True, undefined=jinja2.StrictUndefined)
    try:
        return env.from_string(source)
    except jinja2.TemplateSyntaxError as exc:
        raise TemplateError(f"Template syntax error on line {exc.lineno}: {exc.message}") from exc


@lru_cache(maxsize=1)
def gallery_template() -> jinja2.Template:
    """The compiled GALLERY_TEMPLATE, built on first use."""
    return compile_template(GALLERY_TEMPLATE)


# ---------------------------------------------------------------------------
# View-model
# ---------------------------------------------------------------------------

def distinct_groups(records: Iterable[EmojiRecord]) -> list[str]:
    """Every group label that appears in records, once each, sorted."""
    return sorted({r.group for r in records})


@dataclass(frozen=True)
class GalleryPage:
    records: Sequence[EmojiRecord]
    groups: Sequence[str]

    @classmethod
    def from_records(cls, records: Sequence[EmojiRecord]) -> "GalleryPage":
        return cls(records=records, groups=distinct_groups(records))


# ---------------------------------------------------------------------------
# Render
# ---------------------------------------------------------------------------

def render(
    records: Sequence[EmojiRecord],
    groups: Sequence[str],
    template: jinja2.Template | None = None,
) -> str:
    """
    Substitute records and groups into the gallery template.

    name/category/group are HTML-escaped; the glyph is emitted as raw markup.
    Output depends only on the arguments.
    """
    if template is None:
        template = gallery_template()
    try:
        return template.render(records=records, groups=groups)
    except jinja2.TemplateError as exc:
        raise TemplateError(f"Failed to render gallery: {exc}") from exc


def render_gallery(records: Sequence[EmojiRecord]) -> str:
    page = GalleryPage.from_records(records)
    return render(page.records, page.groups)
