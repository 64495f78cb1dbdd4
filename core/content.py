"""Rich-text document conversion.

Chapters are edited as TipTap/ProseMirror JSON documents. On save the
document is rendered to HTML for readers and flattened to plain text for
previews and search. Conversion is one-way and pure.
"""
import html
import logging
import re

from bs4 import BeautifulSoup

logger = logging.getLogger("uwrite")

_BLOCK_TAGS = {
    "paragraph": "p",
    "blockquote": "blockquote",
    "bulletList": "ul",
    "orderedList": "ol",
    "listItem": "li",
}

_MARK_TAGS = {
    "bold": "strong",
    "italic": "em",
    "strike": "s",
    "code": "code",
    "underline": "u",
}


def _render_text(node: dict) -> str:
    out = html.escape(node.get("text", ""), quote=False)
    for mark in node.get("marks") or []:
        kind = mark.get("type")
        if kind == "link":
            href = html.escape((mark.get("attrs") or {}).get("href") or "", quote=True)
            out = f'<a href="{href}" rel="noopener noreferrer nofollow">{out}</a>'
        elif kind in _MARK_TAGS:
            tag = _MARK_TAGS[kind]
            out = f"<{tag}>{out}</{tag}>"
    return out


def _render_node(node: dict) -> str:
    if not isinstance(node, dict):
        raise TypeError(f"expected a node object, got {type(node).__name__}")
    kind = node.get("type")
    if kind == "text":
        return _render_text(node)
    if kind == "hardBreak":
        return "<br>"
    if kind == "horizontalRule":
        return "<hr>"

    inner = "".join(_render_node(child) for child in node.get("content") or [])
    attrs = node.get("attrs") or {}
    if kind == "heading":
        level = attrs.get("level", 1)
        if not isinstance(level, int) or not 1 <= level <= 6:
            level = 1
        return f"<h{level}>{inner}</h{level}>"
    if kind == "codeBlock":
        return f"<pre><code>{inner}</code></pre>"
    if kind == "orderedList" and attrs.get("start", 1) != 1:
        return f'<ol start="{int(attrs["start"])}">{inner}</ol>'
    if kind in _BLOCK_TAGS:
        tag = _BLOCK_TAGS[kind]
        return f"<{tag}>{inner}</{tag}>"
    # doc and unknown node types contribute only their children
    return inner


def json_to_html(doc) -> str:
    """Render a document to HTML, or ``""`` when it cannot be rendered."""
    if not doc:
        return ""
    try:
        return _render_node(doc)
    except (TypeError, ValueError, AttributeError) as exc:
        logger.warning("Could not render chapter document: %s", exc)
        return ""


_WS_RE = re.compile(r"\s+")


def html_to_plain_text(markup: str) -> str:
    if not markup:
        return ""
    text = BeautifulSoup(markup, "html.parser").get_text(" ", strip=True)
    return _WS_RE.sub(" ", text).strip()
