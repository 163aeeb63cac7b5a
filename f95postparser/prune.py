"""
Removal of the tree nodes that bring no information.

Forum templates wrap the useful text in several layers of presentational
markup. Purging one of those wrappers never loses its descendants: they take
the place of the wrapper in its parent, keeping the document order.
"""

import re

from f95postparser.elements import ElementType
from f95postparser.tree import TreeNode, is_uninformative

RX_UNNECESSARY_CHARS = re.compile(r"[*\-,|]")


def prune_tree(node: TreeNode):
    """
    Removes the uninformative nodes of the tree.

    Returns the cleaned node, or None when the node itself has been purged.
    The root is never purged.
    """
    replacement = _prune(node)
    if len(replacement) == 1 and replacement[0].id == node.id:
        return replacement[0]
    return None


def _prune(node):
    """Returns the list of nodes that replace `node` in its parent."""
    children = []
    for child in node.children:
        if is_uninformative(child):
            continue
        children.extend(_prune(child))

    pruned = node.with_children(children)
    if pruned.is_root:
        return [pruned]

    if is_uninformative(pruned) or pruned.element.type == ElementType.EMPTY:
        return _promote(children, node.parent)
    return [pruned]


def _promote(children, parent_id):
    for child in children:
        child.parent = parent_id
    return children


def _is_unnecessary(node):
    if node.element.type == ElementType.SPOILER:
        return not node.children
    if node.element.type == ElementType.TEXT:
        return RX_UNNECESSARY_CHARS.sub("", node.element.text).strip() == ""
    return False


def prune_nodes_with_unnecessary_values(node: TreeNode) -> TreeNode:
    """
    Purges the leftovers of the bulletin board markup: spoilers without
    children and texts made only of `* - , |` characters.

    Children of a purged node are promoted like in `prune_tree`.
    """
    children = []
    for child in node.children:
        children.extend(_prune_unnecessary(child))
    return node.with_children(children)


def _prune_unnecessary(node):
    children = []
    for child in node.children:
        children.extend(_prune_unnecessary(child))

    cleaned = node.with_children(children)
    if not cleaned.is_root and _is_unnecessary(cleaned):
        return _promote(children, node.parent)
    return [cleaned]
