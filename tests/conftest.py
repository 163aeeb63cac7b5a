import logging

import pytest
from bs4 import BeautifulSoup

from f95postparser.elements import ElementType, PostElement
from f95postparser.logging_config import LOGGER_NAME
from f95postparser.tree import TreeNode


def _assign_ids(node, parent_id, next_id):
    node.id = next_id
    node.parent = parent_id
    next_id += 1
    for child in node.children:
        next_id = _assign_ids(child, node.id, next_id)
    return next_id


@pytest.fixture
def fragment():
    """Parses an HTML snippet and returns its first top-level tag."""
    def _fragment(html):
        soup = BeautifulSoup(html, "html.parser")
        return soup.find(True)
    return _fragment


@pytest.fixture
def node():
    """Creates a detached TreeNode, ids are assigned by `make_root`."""
    def _node(element, *children):
        return TreeNode(id=-1, element=element, children=list(children))
    return _node


@pytest.fixture
def make_root(node):
    """Creates a Root TreeNode with pre-order ids over the given children."""
    def _make_root(*children):
        root = node(PostElement(type=ElementType.ROOT), *children)
        _assign_ids(root, None, 0)
        return root
    return _make_root


@pytest.fixture
def text():
    def _text(value):
        return PostElement(type=ElementType.TEXT, text=value)
    return _text


@pytest.fixture(autouse=True)
def restore_logger_level():
    """The command line can change the package logger level, restore it after each test."""
    logger = logging.getLogger(LOGGER_NAME)
    original_level = logger.level
    yield
    logger.setLevel(original_level)
