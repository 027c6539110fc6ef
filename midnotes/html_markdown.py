"""Conversion of the rich-text editor's HTML back into Markdown."""

from __future__ import annotations

import re

from midnotes.domtree import Element, Node, Text, parse_html

COPY_BUTTON_CLASS = "code-copy-btn"

_HEADING_MARKS = {"h1": "#", "h2": "##", "h3": "###"}
_BOLD_WEIGHTS = frozenset({"bold", "700", "800", "900"})
_EXCESS_NEWLINES = re.compile(r"\n{3,}")


def _has_class(element: Element, name: str) -> bool:
    return name in element.attrs.get("class", "").split()


def _is_checkbox(element: Element) -> bool:
    return element.tag == "input" and element.attrs.get("type", "").lower() == "checkbox"


def _find_checkbox(element: Element) -> Element | None:
    return next((el for el in element.descendants if _is_checkbox(el)), None)


def _wrap(marker_open: str, text: str, marker_close: str) -> str:
    """Wrap trimmed text in markers, or drop it when it is blank."""
    trimmed = text.strip()
    return f"{marker_open}{trimmed}{marker_close}" if trimmed else ""


def _pre_to_markdown(element: Element) -> str:
    code = "".join(
        child.text_content()
        for child in element.children
        if not (isinstance(child, Element) and _has_class(child, COPY_BUTTON_CLASS))
    )
    return f"\n```\n{code.strip()}\n```\n"


def _span_to_markdown(element: Element, children: str) -> str:
    result = children
    if element.style_value("fontWeight") in _BOLD_WEIGHTS:
        result = f"**{result.strip()}**"
    if element.style_value("fontStyle") == "italic":
        result = f"*{result.strip()}*"
    decoration = element.style_value("textDecoration")
    decoration_line = element.style_value("textDecorationLine")
    if "underline" in decoration or "underline" in decoration_line:
        result = f"<u>{result.strip()}</u>"
    return result


def _li_to_markdown(element: Element, children: str) -> str:
    checkbox = _find_checkbox(element)
    if checkbox is not None:
        mark = "x" if "checked" in checkbox.attrs else " "
        text = "".join(
            node_to_markdown(child)
            for child in element.children
            if not (isinstance(child, Element) and _is_checkbox(child))
        )
        return f"\n- [{mark}] {text.strip()}"
    parent = element.parent
    if parent is not None and parent.tag == "ol":
        position = next(
            number
            for number, sibling in enumerate(parent.element_children, start=1)
            if sibling is element
        )
        return f"\n{position}. {children.strip()}"
    return f"\n- {children.strip()}"


def node_to_markdown(node: Node) -> str:
    """Markdown for one node of the editor's tree and everything below it."""
    if isinstance(node, Text):
        return node.value

    tag = node.tag
    if tag == "pre":
        return _pre_to_markdown(node)
    if tag == "code":
        if node.parent is not None and node.parent.tag != "pre":
            return f"`{node.text_content()}`"
        return node.text_content()

    children = "".join(node_to_markdown(child) for child in node.children)

    if tag in _HEADING_MARKS:
        return f"\n{_HEADING_MARKS[tag]} {children.strip()}\n"
    if tag in ("strong", "b"):
        return _wrap("**", children, "**")
    if tag in ("em", "i"):
        return _wrap("*", children, "*")
    if tag == "u":
        return _wrap("<u>", children, "</u>")
    if tag == "span":
        return _span_to_markdown(node, children)
    if tag in ("p", "div"):
        text = children.strip()
        return f"\n{text}\n" if text else ""
    if tag == "br":
        return "\n"
    if tag in ("ul", "ol"):
        return f"\n{children}\n"
    if tag == "li":
        return _li_to_markdown(node, children)
    if tag == "blockquote":
        return f"\n> {children.strip()}\n"
    if tag == "hr":
        return "\n---\n"
    return children


def html_to_markdown(html: str) -> str:
    """Markdown for the whole editor content given as HTML."""
    markdown = node_to_markdown(parse_html(html))
    return _EXCESS_NEWLINES.sub("\n\n", markdown).strip()