"""A small element tree for the HTML produced by the rich-text editor."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import Union

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

_BLOCK_ELEMENTS = frozenset(
    {
        "p",
        "div",
        "ul",
        "ol",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "pre",
        "blockquote",
        "table",
        "hr",
    }
)


@dataclass(eq=False)
class Text:
    """A run of character data."""

    value: str
    parent: Element | None = field(default=None, repr=False)

    def text_content(self) -> str:
        return self.value


@dataclass(eq=False)
class Element:
    """An HTML element with its attributes and child nodes."""

    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    parent: Element | None = field(default=None, repr=False)

    def _adopt(self, node: Node) -> Node:
        node.parent = self
        self.children.append(node)
        return node

    @property
    def element_children(self) -> list[Element]:
        """Child nodes that are elements, in document order."""
        return [child for child in self.children if isinstance(child, Element)]

    @property
    def descendants(self) -> Iterator[Element]:
        """Every element below this one, depth first in document order."""
        for child in self.element_children:
            yield child
            yield from child.descendants

    def text_content(self) -> str:
        """All character data inside the element, concatenated."""
        return "".join(child.text_content() for child in self.children)

    def find(self, tag: str) -> Element | None:
        """The first descendant element with this tag name, or None."""
        wanted = tag.lower()
        return next((el for el in self.descendants if el.tag == wanted), None)

    def style_value(self, prop: str) -> str:
        """The value of an inline style property, or "" when it is not set.

        The property may be given as a CSS name ("font-weight") or in
        camel case ("fontWeight").
        """
        name = re.sub(r"([A-Z])", r"-\1", prop).lower()
        value = ""
        for declaration in self.attrs.get("style", "").split(";"):
            key, sep, raw = declaration.partition(":")
            if sep and key.strip().lower() == name:
                value = raw.strip()
        return value


Node = Union[Text, Element]


class _TreeBuilder(HTMLParser):
    def __init__(self, root: Element) -> None:
        super().__init__(convert_charrefs=True)
        self._stack = [root]

    @property
    def _top(self) -> Element:
        return self._stack[-1]

    def _close_implied(self, tag: str) -> None:
        top = self._top
        if len(self._stack) < 2:
            return
        if tag == "li" and top.tag == "li":
            self._stack.pop()
        elif top.tag == "p" and tag in _BLOCK_ELEMENTS:
            self._stack.pop()

    def _start(self, tag: str, attrs: list[tuple[str, str | None]], push: bool) -> None:
        tag = tag.lower()
        self._close_implied(tag)
        element = Element(tag, {name.lower(): value or "" for name, value in attrs})
        self._top._adopt(element)
        if push and tag not in VOID_ELEMENTS:
            self._stack.append(element)

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._start(tag, attrs, push=True)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._start(tag, attrs, push=False)

    def handle_endtag(self, tag: str) -> None:
        tag = tag.lower()
        if tag in VOID_ELEMENTS:
            return
        for depth in range(len(self._stack) - 1, 0, -1):
            if self._stack[depth].tag == tag:
                del self._stack[depth:]
                return

    def handle_data(self, data: str) -> None:
        if not data:
            return
        children = self._top.children
        if children and isinstance(children[-1], Text):
            children[-1].value += data
        else:
            self._top._adopt(Text(data))


def parse_html(html: str) -> Element:
    """Parse an HTML fragment into a tree under a ``div`` standing for the editor."""
    root = Element("div")
    builder = _TreeBuilder(root)
    builder.feed(html)
    builder.close()
    return root