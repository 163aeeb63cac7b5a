from enum import Enum

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString, Script, Stylesheet

FORMATTING_TAGS = ("b", "i")
LINK_TAGS = ("a", "img")
LIST_TAGS = ("ul", "li")
SPOILER_CLASS = "bbCodeSpoiler"


class NodeKind(Enum):
    TEXT = "Text"
    FORMATTED = "Formatted"
    SPOILER = "Spoiler"
    LINK = "Link"
    LIST = "List"
    NOSCRIPT = "Noscript"
    UNKNOWN = "Unknown"


def _is_tag(node, *names):
    return isinstance(node, Tag) and node.name in names


def _is_text_node(node):
    # Comments, doctypes, CDATA and script/style bodies are NavigableStrings too but carry no post text
    return isinstance(node, NavigableString) and not isinstance(node, (PreformattedString, Script, Stylesheet))


def _is_spoiler(node):
    if not isinstance(node, Tag):
        return False
    classes = node.get("class")
    if isinstance(classes, (list, tuple)):
        classes = " ".join(classes)
    return classes == SPOILER_CLASS


def _is_noscript_text(node):
    # Text inside <noscript> repeats an image placeholder captured elsewhere
    return _is_text_node(node) and _is_tag(node.parent, "noscript")


def classify(node) -> NodeKind:
    """Identifies the kind of a BeautifulSoup node, first matching rule wins."""
    if _is_tag(node, *FORMATTING_TAGS):
        return NodeKind.FORMATTED
    if _is_text_node(node) and not _is_noscript_text(node):
        return NodeKind.TEXT
    if _is_spoiler(node):
        return NodeKind.SPOILER
    if _is_tag(node, *LINK_TAGS):
        return NodeKind.LINK
    if _is_tag(node, *LIST_TAGS):
        return NodeKind.LIST
    if _is_tag(node, "noscript"):
        return NodeKind.NOSCRIPT
    return NodeKind.UNKNOWN
