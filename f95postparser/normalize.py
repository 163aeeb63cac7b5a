from f95postparser.elements import ElementType
from f95postparser.errors import ParameterError
from f95postparser.tree import TreeNode

DEFAULT_SPOILER_TITLE = "Spoiler"


def _remove_first(children, predicate):
    for index, child in enumerate(children):
        if predicate(child):
            return children[:index] + children[index + 1:]
    return children


# --- Links ---

def clean_link_text_children(node: TreeNode) -> TreeNode:
    """Removes the child that replicates the text of this link."""
    if node.element.type != ElementType.LINK:
        raise ParameterError("This node is not a link")

    children = _remove_first(node.children, lambda c: c.element.text == node.element.text)
    return node.with_children(children)


def clean_link_image(node: TreeNode) -> list:
    """
    Returns the nodes replacing this link in its parent: the link itself,
    or its children when the link only wraps an `<img` fragment or images.
    """
    if node.element.type != ElementType.LINK:
        raise ParameterError("This node is not a link")

    wraps_images = (
        node.element.text == ""
        and node.children
        and all(c.element.type == ElementType.IMAGE for c in node.children)
    )
    if node.element.text.startswith("<img") or wraps_images:
        for child in node.children:
            child.parent = node.parent
        return list(node.children)
    return [node]


def clean_link_node(node: TreeNode) -> TreeNode:
    """Recursively cleans every `Link` node of the tree."""
    children = []
    for child in node.children:
        cleaned = clean_link_node(child)
        if cleaned.element.type == ElementType.LINK:
            children.extend(clean_link_image(cleaned))
        else:
            children.append(cleaned)

    node = node.with_children(children)
    if node.element.type == ElementType.LINK:
        return clean_link_text_children(node)
    return node


# --- Formatted text ---

def clean_formatted_text(node: TreeNode) -> TreeNode:
    """
    A text node with children is a formatted element (i.e. `<b>`) whose text
    already includes the text of its direct text children, drop those leaves.
    """
    children = node.children
    if node.element.type == ElementType.TEXT:
        children = [c for c in children if c.element.type != ElementType.TEXT or c.children]
    return node.with_children([clean_formatted_text(c) for c in children])


# --- Spoilers ---

def parse_single_spoiler(node: TreeNode) -> TreeNode:
    """Removes the default "Spoiler" label (or a repeated title) from a spoiler."""
    if node.element.type != ElementType.SPOILER:
        raise ParameterError("This node is not a spoiler")

    labels = {DEFAULT_SPOILER_TITLE, node.element.name}
    children = _remove_first(
        node.children,
        lambda c: c.element.type == ElementType.TEXT and not c.children and c.element.text in labels,
    )
    return node.with_children(children)


def parse_spoilers(node: TreeNode) -> TreeNode:
    """Recursively cleans every `Spoiler` node of the tree."""
    if node.element.type == ElementType.SPOILER:
        node = parse_single_spoiler(node)
    return node.with_children([parse_spoilers(c) for c in node.children])
