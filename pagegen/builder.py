"""Node construction helpers and composition combinators."""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, Iterable, TypeVar

from .dom_model import Attr, ClassToken, Fragment, Node, Raw, Text, add_class, set_attribute
from .errors import BuildError

T = TypeVar("T")

Modifier = Attr | ClassToken | Node | Text | Raw | Fragment | str | None


def _as_child(value: Any) -> Node | Text | Raw | Fragment | None:
    """Resolve a child-like value, or raise BuildError."""

    if value is None or isinstance(value, (Node, Text, Raw, Fragment)):
        return value
    if isinstance(value, str):
        return Text(value)
    if hasattr(value, "__html__"):
        return Raw(str(value.__html__()))
    raise BuildError(f"unsupported child value of type {type(value).__name__}")


def apply_modifier(node: Node, modifier: Modifier) -> None:
    if isinstance(modifier, Attr):
        set_attribute(node, modifier.name, modifier.value)
    elif isinstance(modifier, ClassToken):
        add_class(node, modifier.value)
    else:
        child = _as_child(modifier)
        if child is not None:
            node.append(child)


def element(tag: str, *modifiers: Modifier) -> Node:
    """Build a node, applying modifiers strictly in the order given.

    A modifier is an attribute (``attr``/``cls``/...), a child node, a text
    leaf (or plain string), raw markup, a fragment, or ``None`` for nothing.
    """

    node = Node(tag=tag)
    for modifier in modifiers:
        apply_modifier(node, modifier)
    return node


def attr(name: str, value: str) -> Attr:
    return Attr(name=name, value=value)


def cls(value: str) -> ClassToken:
    """Class modifier; repeated uses on one node accumulate in call order."""

    return ClassToken(value)


def id_(value: str) -> Attr:
    return Attr("id", value)


def href(value: str) -> Attr:
    return Attr("href", value)


def data(name: str, value: str) -> Attr:
    """``data-<name>`` attribute, as used by reactive front-end libraries."""

    return Attr(f"data-{name}", value)


def text(value: str) -> Text:
    return Text(value)


def textf(fmt: str, *args: Any, **kwargs: Any) -> Text:
    return Text(fmt.format(*args, **kwargs))


def raw(markup: Any) -> Raw:
    """Trusted markup emitted verbatim; accepts ``__html__`` objects."""

    if hasattr(markup, "__html__"):
        markup = markup.__html__()
    return Raw(markup)


def for_each(items: Iterable[T], project: Callable[[T], Any]) -> Fragment:
    """Project every item into a child, in input order, without filtering."""

    fragment = Fragment()
    for item in items:
        child = _as_child(project(item))
        if child is not None:
            fragment.extend(child)
    return fragment


def when(condition: Any, *children: Any) -> Fragment:
    """Children as a fragment when ``condition`` is truthy, else empty."""

    fragment = Fragment()
    if not condition:
        return fragment
    for value in children:
        child = _as_child(value)
        if child is not None:
            fragment.extend(child)
    return fragment


html = partial(element, "html")
head = partial(element, "head")
body = partial(element, "body")
title = partial(element, "title")
meta = partial(element, "meta")
link = partial(element, "link")
script = partial(element, "script")
div = partial(element, "div")
span = partial(element, "span")
p = partial(element, "p")
a = partial(element, "a")
ul = partial(element, "ul")
li = partial(element, "li")
h1 = partial(element, "h1")
h2 = partial(element, "h2")
h3 = partial(element, "h3")
h4 = partial(element, "h4")
h5 = partial(element, "h5")
button = partial(element, "button")
input_ = partial(element, "input")
img = partial(element, "img")
section = partial(element, "section")
main = partial(element, "main")
header = partial(element, "header")
footer = partial(element, "footer")
nav = partial(element, "nav")
pre = partial(element, "pre")
code = partial(element, "code")


__all__ = [
    "Modifier",
    "a",
    "apply_modifier",
    "attr",
    "body",
    "button",
    "cls",
    "code",
    "data",
    "div",
    "element",
    "footer",
    "for_each",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "head",
    "header",
    "href",
    "html",
    "id_",
    "img",
    "input_",
    "li",
    "link",
    "main",
    "meta",
    "nav",
    "p",
    "pre",
    "raw",
    "script",
    "section",
    "span",
    "text",
    "textf",
    "title",
    "ul",
    "when",
]
