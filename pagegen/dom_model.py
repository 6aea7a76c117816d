"""In-memory markup tree: nodes, leaves, fragments and attribute merging."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Union

from .errors import BuildError

# Elements that never carry children and render as <tag .../>.
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

ACCUMULATING_ATTRIBUTES = frozenset({"class"})

_INVALID_NAME = re.compile(r"[\s\"'<>/=]")


@dataclass(frozen=True)
class Text:
    """Text leaf holding unescaped content."""

    content: str

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            raise BuildError(
                f"text content must be a string, got {type(self.content).__name__}"
            )


@dataclass(frozen=True)
class Raw:
    """Trusted, already serialized markup emitted verbatim."""

    markup: str

    def __post_init__(self) -> None:
        if not isinstance(self.markup, str):
            raise BuildError(
                f"raw markup must be a string, got {type(self.markup).__name__}"
            )


@dataclass(frozen=True)
class Attr:
    """Modifier that sets (or, for class, appends to) an attribute."""

    name: str
    value: str


@dataclass(frozen=True)
class ClassToken:
    """Modifier that appends one value to the class attribute."""

    value: str


@dataclass
class Node:
    tag: str
    attrs: Dict[str, str] = field(default_factory=dict)
    children: List["Child"] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.tag, str) or not self.tag or _INVALID_NAME.search(self.tag):
            raise BuildError(f"invalid tag {self.tag!r}")
        for name, value in self.attrs.items():
            _check_attribute(name, value)
        # Initial children go through the same checks as append().
        initial, self.children = self.children, []
        for child in initial:
            self.append(child)

    @property
    def is_void(self) -> bool:
        return self.tag in VOID_ELEMENTS

    def set_attribute(self, name: str, value: str) -> "Node":
        set_attribute(self, name, value)
        return self

    def add_class(self, value: str) -> "Node":
        add_class(self, value)
        return self

    def append(self, child: "Child | Fragment") -> "Node":
        """Append a child; fragments are spliced in member order."""

        if isinstance(child, Fragment):
            for member in child.children:
                self.append(member)
            return self
        if not isinstance(child, (Node, Text, Raw)):
            raise BuildError(f"cannot append {type(child).__name__} as a child")
        if self.is_void:
            raise BuildError(f"<{self.tag}> is a void element and takes no children")
        self.children.append(child)
        return self


Child = Union[Node, Text, Raw]


@dataclass
class Fragment:
    """Ordered children with no enclosing tag of their own."""

    children: List[Child] = field(default_factory=list)

    def __post_init__(self) -> None:
        initial, self.children = self.children, []
        for child in initial:
            self.extend(child)

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self):
        return iter(self.children)

    def extend(self, child: "Child | Fragment") -> None:
        if isinstance(child, Fragment):
            self.children.extend(child.children)
        elif isinstance(child, (Node, Text, Raw)):
            self.children.append(child)
        else:
            raise BuildError(f"cannot add {type(child).__name__} to a fragment")


def _check_attribute(name: object, value: object) -> None:
    if not isinstance(name, str) or not name or _INVALID_NAME.search(name):
        raise BuildError(f"invalid attribute name {name!r}")
    if not isinstance(value, str):
        raise BuildError(
            f"attribute {name!r} value must be a string, got {type(value).__name__}"
        )


def set_attribute(node: Node, name: str, value: str) -> None:
    """Set an attribute, overwriting any prior value.

    Accumulating attributes (``class``) are appended to instead of replaced.
    """

    _check_attribute(name, value)
    if name in ACCUMULATING_ATTRIBUTES:
        add_class(node, value)
        return
    node.attrs[name] = value


def add_class(node: Node, value: str) -> None:
    """Append ``value`` to the class attribute, space separated.

    Repeated tokens are kept as-is, so adding "a" twice yields "a a".
    """

    _check_attribute("class", value)
    existing = node.attrs.get("class")
    node.attrs["class"] = value if existing is None else f"{existing} {value}"


__all__ = [
    "ACCUMULATING_ATTRIBUTES",
    "Attr",
    "Child",
    "ClassToken",
    "Fragment",
    "Node",
    "Raw",
    "Text",
    "VOID_ELEMENTS",
    "add_class",
    "set_attribute",
]
