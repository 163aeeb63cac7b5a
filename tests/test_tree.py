import pytest

from f95postparser.elements import ElementType, PostElement
from f95postparser.errors import ParameterError
from f95postparser.tree import build_tree, count_nodes, elements_to_content, format_tree


def _flatten(node):
    yield node
    for child in node.children:
        yield from _flatten(child)


def test_ids_follow_document_order(fragment):
    root = build_tree(fragment("<div><p>a<b>b</b></p>c</div>"))
    nodes = list(_flatten(root))

    assert [n.id for n in nodes] == [0, 1, 2, 3, 4, 5]
    assert [n.element.text for n in nodes] == ["", "", "a", "b", "b", "c"]


def test_parent_is_stored_as_id(fragment):
    root = build_tree(fragment("<div><p>a<b>b</b></p>c</div>"))
    p = root.children[0]
    b = p.children[1]

    assert root.parent is None
    assert p.parent == root.id
    assert b.parent == p.id
    assert b.children[0].parent == b.id


def test_first_node_is_forced_to_root(fragment):
    root = build_tree(fragment("<a href='https://f95zone.to'>link</a>"))

    assert root.id == 0
    assert root.element.type == ElementType.ROOT
    assert root.is_root


def test_counter_restarts_on_every_build(fragment):
    first = build_tree(fragment("<div>a<span>b</span></div>"))
    second = build_tree(fragment("<div>c</div>"))

    assert first.id == 0
    assert second.id == 0
    assert second.children[0].id == 1


def test_missing_fragment_is_an_error():
    with pytest.raises(ParameterError):
        build_tree(None)


def test_count_nodes(fragment):
    assert count_nodes(build_tree(fragment("<div><p>a<b>b</b></p>c</div>"))) == 6


def test_format_tree(fragment):
    rendered = format_tree(build_tree(fragment("<div>Version<b>Bold</b></div>")))

    assert rendered.splitlines() == [
        "└─ [Root] (0)",
        " └─ [Text] (1) Version",
        " └─ [Text] (2) Bold",
        "  └─ [Text] (3) Bold",
    ]


def test_elements_to_content_does_not_touch_the_tree(fragment):
    root = build_tree(fragment("<div><b>Bold</b></div>"))
    element = elements_to_content(root)

    assert element.content == [
        PostElement(type=ElementType.TEXT, text="Bold", content=[
            PostElement(type=ElementType.TEXT, text="Bold"),
        ]),
    ]
    assert root.element.content == []


def test_noscript_fallback_is_not_visited(fragment):
    root = build_tree(fragment(
        '<div><img data-src="https://attachments.f95zone.to/cover.png" alt="cover.png">'
        '<noscript><img src="https://attachments.f95zone.to/cover.png" alt="cover.png"></noscript></div>'
    ))
    image, noscript = root.children

    assert image.element.type == ElementType.IMAGE
    assert noscript.element.type == ElementType.EMPTY
    assert noscript.children == []
    assert count_nodes(root) == 3
