import re

from bs4 import NavigableString, Tag

from f95postparser.elements import ElementType, PostElement, create_empty_element
from f95postparser.node_type import NodeKind, classify

SPOILER_NAME_SELECTOR = "button.bbCodeSpoiler-button"

RX_MULTIPLE_SPACES = re.compile(r"\s\s+")
# Zero-width space/joiners, word joiner, BOM and soft hyphen
RX_INVISIBLE_CHARS = re.compile("[\u200b\u200c\u200d\u2060\ufeff\u00ad]")


def clean_text(text):
    """Collapses whitespace runs and trims the string."""
    return RX_MULTIPLE_SPACES.sub(" ", text or "").strip()


def remove_invisible_characters(text):
    return RX_INVISIBLE_CHARS.sub("", text)


def _own_text(node):
    """Text of the node excluding any descendant element."""
    if isinstance(node, NavigableString):
        return str(node)
    return "".join(str(c) for c in node.contents if classify(c) == NodeKind.TEXT)


def _parse_text_node(node):
    return PostElement(type=ElementType.TEXT, text=clean_text(_own_text(node)))


def _parse_spoiler_node(node):
    # <div class="bbCodeSpoiler"><button class="bbCodeSpoiler-button">NAME</button>
    # <div class="bbCodeSpoiler-content">...</div></div>
    button = node.select_one(SPOILER_NAME_SELECTOR)
    name = button.get_text().strip() if button else ""
    return PostElement(type=ElementType.SPOILER, name=name)


def _link_text(node):
    """
    Text of a link where a <noscript> fallback counts as its raw markup, so a
    link wrapping a lazy image reads as `<img ...`.
    """
    parts = []
    for child in node.contents:
        kind = classify(child)
        if kind == NodeKind.NOSCRIPT:
            parts.append(child.decode_contents())
        elif kind == NodeKind.TEXT:
            parts.append(str(child))
        elif isinstance(child, Tag):
            parts.append(_link_text(child))
    return "".join(parts)


def _parse_link_node(node):
    if node.name == "img":
        # Lazy-loaded images keep a placeholder in `src`, the real source is in `data-src`
        return PostElement(
            type=ElementType.IMAGE,
            text=node.get("alt") or "",
            href=node.get("data-src") or "",
        )
    return PostElement(
        type=ElementType.LINK,
        text=clean_text(_link_text(node)),
        href=node.get("href") or "",
    )


_CONVERTERS = {
    NodeKind.TEXT: _parse_text_node,
    NodeKind.FORMATTED: _parse_text_node,
    NodeKind.SPOILER: _parse_spoiler_node,
    NodeKind.LINK: _parse_link_node,
}


def convert(node, kind) -> PostElement:
    """Builds the PostElement for a single node. Children are not visited."""
    converter = _CONVERTERS.get(kind)
    if converter is None or (kind == NodeKind.LINK and not isinstance(node, Tag)):
        return create_empty_element()

    element = converter(node)
    element.text = remove_invisible_characters(element.text).strip()
    element.name = remove_invisible_characters(element.name).strip()
    return element
