"""Landing page body projected from content records."""

from __future__ import annotations

from typing import Optional

from .builder import (
    a,
    attr,
    cls,
    code,
    data,
    div,
    for_each,
    h1,
    h3,
    h5,
    href,
    id_,
    li,
    p,
    pre,
    raw,
    span,
    textf,
    ul,
    when,
)
from .dom_model import Node
from .models import Feature, LandingContent, LiveExample, Link

_LINK_STYLES = {
    "primary": "btn-primary",
    "secondary": "btn-ghost",
    "accent": "btn-accent",
}


def _language_badge(name: str) -> Node:
    return div(
        cls("avatar avatar-xl"),
        span(
            cls("w-24 h-24 mask bg-gradient-to-t from-base-200 to-base-300 p-4 mask-hexagon"),
            attr("title", name),
            name,
        ),
    )


def _feature_details(details: list[str]) -> Node:
    if len(details) == 1:
        return div(details[0])
    return div(
        cls("breadcrumbs"),
        ul(cls("flex flex-wrap gap-2 justify-center items-center"), for_each(details, li)),
    )


def _feature_item(feature: Feature) -> Node:
    return li(
        div(
            cls("flex flex-col gap-1 justify-center items-center"),
            div(
                cls("flex gap-2 items-center"),
                raw(feature.icon) if feature.icon else None,
                feature.description,
            ),
            div(cls("text-lg opacity-50 p-2 rounded"), _feature_details(feature.details)),
        )
    )


def _live_example(example: LiveExample) -> Node:
    return div(
        cls("flex flex-col gap-2 w-full"),
        h3(cls("text-3xl font-bold"), example.title),
        div(
            id_(example.element_id),
            cls("flex justify-center p-4 items-center gap-2"),
            data("signal-get", f"'{example.endpoint}'"),
            data("on-load", example.trigger),
            span(example.loading_text),
        ),
        when(example.note, h5(cls("text-2xl font-bold"), example.note or "")),
    )


def _badge(*children) -> Node:
    return div(cls("badge badge-accent flex-1 gap-1"), *children)


def _action_link(link: Link) -> Node:
    return a(
        cls("btn btn-lg flex-1"),
        cls(_LINK_STYLES[link.style]),
        href(link.href),
        link.label,
    )


def build_landing(content: LandingContent, *, bundle_size: Optional[str] = None) -> Node:
    """Build the landing page body.

    ``bundle_size`` is the human readable compressed size of the client
    bundle; the badge is omitted when it is not known.
    """

    languages_link = content.languages_link
    return div(
        cls("flex-1 flex flex-wrap md:p-16 text-xl flex-col items-center text-center"),
        div(
            cls("max-w-4xl flex flex-col items-center justify-center gap-16"),
            div(
                h1(cls("text-6xl font-bold"), content.headline),
                when(content.tagline, p(content.tagline or "")),
            ),
            when(
                content.languages,
                div(
                    cls("flex flex-wrap gap-6 justify-center items-center"),
                    div(
                        cls("flex flex-wrap gap-2 justify-center items-center text-6xl"),
                        for_each(content.languages, _language_badge),
                    ),
                    when(
                        languages_link,
                        a(
                            cls("link-accent text-4xl"),
                            href(languages_link.href if languages_link else ""),
                            languages_link.label if languages_link else "",
                        ),
                    ),
                ),
            ),
            div(
                cls("flex flex-col gap-2 w-full"),
                when(
                    content.code_sample,
                    h3(cls("text-3xl font-bold"), content.code_sample_title),
                    div(
                        cls("bg-base-100 shadow-inner text-base-content p-4 rounded-box"),
                        pre(code(cls("language-html"), content.code_sample or "")),
                    ),
                ),
                div(
                    cls("flex gap-2 justify-center items-center"),
                    when(bundle_size, _badge(textf("{} w/ all extensions", bundle_size))),
                    _badge(textf("{:d} Dependencies", content.dependency_count)),
                    when(content.tree_shakeable, _badge("Fully Tree Shakeable")),
                ),
            ),
            _live_example(content.live_example) if content.live_example else None,
            when(
                content.features,
                div(
                    cls("card w-full shadow-2xl ring-4 bg-base-300 ring-secondary"),
                    div(
                        cls("card-body flex flex-col justify-center items-center"),
                        ul(
                            cls("flex flex-col gap-6 justify-center items-center text-2xl"),
                            for_each(content.features, _feature_item),
                        ),
                    ),
                ),
            ),
            when(
                content.built_with or content.author,
                div(
                    cls("flex flex-col gap-2 justify-center items-center"),
                    when(
                        content.built_with,
                        "Built with ",
                        div(
                            cls("flex gap-1 justify-center items-center"),
                            for_each(
                                content.built_with,
                                lambda name: span(cls("badge badge-outline"), name),
                            ),
                        ),
                    ),
                    when(
                        content.author,
                        div(
                            cls("flex gap-2 justify-center items-center"),
                            "by ",
                            a(
                                cls("link-accent"),
                                href(content.author.href if content.author else ""),
                                content.author.label if content.author else "",
                            ),
                        ),
                    ),
                ),
            ),
            when(
                content.links,
                div(cls("w-full flex gap-2 items-center"), for_each(content.links, _action_link)),
            ),
        ),
    )


__all__ = ["build_landing"]
