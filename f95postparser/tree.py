from dataclasses import dataclass, field, replace
from typing import Optional

from bs4 import Tag

from f95postparser.elements import ElementType, PostElement
from f95postparser.errors import ParameterError
from f95postparser.node_parse import convert
from f95postparser.node_type import NodeKind, classify


@dataclass
class TreeNode:
    """
    Node of the working tree built from a post body.

    `parent` is the id of the parent node (None for the root), ids are
    assigned in pre-order so the root always has id 0.
    """
    id: int
    element: PostElement
    parent: Optional[int] = None
    children: list = field(default_factory=list)

    @property
    def is_root(self):
        return self.element.type == ElementType.ROOT

    def with_children(self, children):
        """Returns a shallow copy of this node owning `children`."""
        node = replace(self, children=list(children))
        for child in node.children:
            child.parent = node.id
        return node


def is_uninformative(node):
    """A node without name, text, content and children carries nothing."""
    return node.element.is_empty() and not node.children


def build_tree(fragment) -> TreeNode:
    """Converts a BeautifulSoup fragment into a TreeNode tree rooted at the fragment."""
    if fragment is None:
        raise ParameterError("A DOM fragment is required to build the tree")

    root, _ = _build_node(fragment, None, 0)
    root.element.type = ElementType.ROOT
    return root


def _build_node(dom_node, parent_id, next_id):
    kind = classify(dom_node)
    node = TreeNode(id=next_id, element=convert(dom_node, kind), parent=parent_id)
    next_id += 1

    # The <noscript> fallback repeats the lazy-loaded image that precedes it
    if isinstance(dom_node, Tag) and kind != NodeKind.NOSCRIPT:
        for dom_child in dom_node.contents:
            child, next_id = _build_node(dom_child, node.id, next_id)
            node.children.append(child)

    return node, next_id


def count_nodes(node):
    return 1 + sum(count_nodes(child) for child in node.children)


def format_tree(node, indent=0):
    """Renders the tree one node per line, used for debug logging."""
    data = node.element.text or node.element.name
    lines = [f"{' ' * indent}└─ [{node.element.type.value}] ({node.id}) {data}".rstrip()]
    for child in node.children:
        lines.append(format_tree(child, indent + 1))
    return "\n".join(lines)


def elements_to_content(node) -> PostElement:
    """Folds a subtree into its element, children becoming `content`."""
    return replace(node.element, content=[elements_to_content(c) for c in node.children])
