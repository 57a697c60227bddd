from marco.ast import Node, text_node


def test_new_node_is_empty():
    node = Node("heading")
    assert node.node_type == "heading"
    assert node.attributes == {}
    assert node.children == []


def test_nodes_do_not_share_containers():
    first = Node("paragraph")
    second = Node("paragraph")
    first.add_attribute("depth", "1")
    first.add_child(Node("text"))
    assert second.attributes == {}
    assert second.children == []


def test_add_attribute_overwrites():
    node = Node("heading")
    node.add_attribute("depth", "1")
    node.add_attribute("depth", "3")
    assert node.attributes == {"depth": "3"}


def test_add_child_preserves_order():
    parent = Node("root")
    children = [Node("heading"), Node("paragraph"), Node("thematicBreak")]
    for child in children:
        parent.add_child(child)
    assert [c.node_type for c in parent.children] == [
        "heading",
        "paragraph",
        "thematicBreak",
    ]


def test_text_node_carries_value():
    node = text_node("Hello World")
    assert node.node_type == "text"
    assert node.attributes["value"] == "Hello World"
    assert node.children == []


def test_text_node_empty_string():
    node = text_node("")
    assert node.attributes == {"value": ""}


def test_nested_tree_structure():
    root = Node("root")
    para = Node("paragraph")
    para.add_child(text_node("inner"))
    root.add_child(para)
    assert root.children[0].children[0].attributes["value"] == "inner"
    assert root == Node("root", {}, [Node("paragraph", {}, [text_node("inner")])])