import re
from dataclasses import replace

from f95postparser.elements import ElementType, create_empty_element
from f95postparser.errors import ParameterError
from f95postparser.tree import TreeNode, elements_to_content

OVERVIEW_PREFIX = "Overview:\n"
# Titles whose text lines must stay separate elements
SPECIAL_TITLE_NAMES = ("CHANGELOG", "CHANGE-LOG")

RX_ENDS_SPECIAL_CHARS = re.compile(r"[-:]$")
RX_STARTS_COLON = re.compile(r"^:")


def _check_root(node):
    if node.element.type != ElementType.ROOT:
        raise ParameterError("The node must be a root node")


def _is_punctuation(element):
    return element.type == ElementType.TEXT and element.text.strip() == ":"


def is_title(element, next_element=None):
    """
    Check if `element` identifies the content that follows it, i.e. it is a
    text ending with a colon or the next element starts with one.
    """
    if element.type != ElementType.TEXT or _is_punctuation(element):
        return False
    next_starts_with_colon = next_element is not None and next_element.text.strip().startswith(":")
    return element.text.endswith(":") or next_starts_with_colon


def parse_title_element(title):
    """Moves the text of a title into its name and folds its content."""
    parsed = replace(title, content=list(title.content))
    parsed.name = RX_ENDS_SPECIAL_CHARS.sub("", parsed.text, count=1).strip()
    parsed.text = ""

    # A lone spoiler only wraps the real content of the title
    if len(parsed.content) == 1 and parsed.content[0].type == ElementType.SPOILER and parsed.content[0].content:
        parsed.content = list(parsed.content[0].content)

    if parsed.name.upper() not in SPECIAL_TITLE_NAMES:
        texts = [RX_STARTS_COLON.sub("", e.text).strip() for e in parsed.content if e.type == ElementType.TEXT]
        parsed.text = " ".join(t for t in texts if t)
        parsed.content = [e for e in parsed.content if e.type != ElementType.TEXT]

    return parsed


def parse_cover_and_previews(root: TreeNode):
    """Extracts the cover (first image) and the previews (other images) of the root."""
    _check_root(root)

    images = [elements_to_content(c) for c in root.children if c.element.type == ElementType.IMAGE]
    if not images:
        return []

    cover = replace(images[0], name="Cover")
    result = [cover]

    if len(images) > 1:
        # Previews is the one Empty element allowed a name and content, it only groups the other images
        previews = create_empty_element()
        previews.name = "Previews"
        previews.content = images[1:]
        result.append(previews)

    return result


def pair_up_title_with_content(root: TreeNode):
    """
    Given the tree root, returns the list of elements with the data of the post.

    The scheme is: textual element "TITLE", optional textual element ":",
    then any number of CONTENT elements up to the next title.
    """
    _check_root(root)

    images = parse_cover_and_previews(root)
    pairs = []
    children = [c for c in root.children if c.element.type != ElementType.IMAGE]

    active_title = None
    for index, child in enumerate(children):
        element = elements_to_content(child)
        next_element = children[index + 1].element if index + 1 < len(children) else None

        if element.type == ElementType.TEXT and element.text.startswith(OVERVIEW_PREFIX):
            pairs.append(replace(
                element,
                name="Overview",
                text=element.text[len(OVERVIEW_PREFIX):].strip(),
            ))
        elif is_title(element, next_element):
            if active_title is not None:
                pairs.append(parse_title_element(active_title))
            active_title = element
        elif active_title is not None and not _is_punctuation(element):
            active_title.content.append(element)

    if active_title is not None:
        pairs.append(parse_title_element(active_title))

    return images + [p for p in pairs if p.text != "" or p.content]
