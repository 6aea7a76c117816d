"""Document shell around a content node."""

from __future__ import annotations

from .builder import attr, body, cls, for_each, head, html, link, meta, script, title, when
from .dom_model import Node
from .models import PageMetadata, ScriptRef


def _script(ref: ScriptRef) -> Node:
    return script(
        attr("type", ref.type),
        attr("src", ref.src),
        attr("defer", "") if ref.defer else None,
    )


def assemble(content: Node, page_meta: PageMetadata) -> Node:
    """Wrap ``content`` in html/head/body, filling in ``page_meta``.

    Same content and metadata always give a structurally identical tree.
    """

    head_scripts = [ref for ref in page_meta.scripts if ref.in_head]
    body_scripts = [ref for ref in page_meta.scripts if not ref.in_head]

    return html(
        attr("lang", page_meta.lang),
        head(
            meta(attr("charset", "utf-8")),
            meta(
                attr("name", "viewport"),
                attr("content", "width=device-width, initial-scale=1"),
            ),
            title(page_meta.title),
            when(
                page_meta.description,
                meta(attr("name", "description"), attr("content", page_meta.description or "")),
            ),
            for_each(
                page_meta.stylesheets,
                lambda href: link(attr("rel", "stylesheet"), attr("href", href)),
            ),
            for_each(head_scripts, _script),
        ),
        body(
            cls(page_meta.body_class) if page_meta.body_class else None,
            content,
            for_each(body_scripts, _script),
        ),
    )


__all__ = ["assemble"]
