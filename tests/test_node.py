import pytest

from dragstage.errors import PrecursorError
from dragstage.node import AbsoluteBox, LocalBox, Node, Point, RectNode, new_node_id


def test_new_node_ids_are_unique():
    ids = {new_node_id() for _ in range(200)}
    assert len(ids) == 200


def test_id_is_read_only():
    node = Node()
    with pytest.raises(AttributeError):
        node.id = "other"


def test_absolute_position_sums_ancestor_offsets(scene):
    root = scene.add_node(20, 100)
    middle = scene.attach(Node(5, 7), root)
    leaf = scene.attach(RectNode(10, 10, x=3, y=4), middle)

    assert root.absolute_position() == Point(20, 100)
    assert middle.absolute_position() == Point(25, 107)
    assert leaf.absolute_position() == Point(28, 111)


def test_unattached_node_is_its_own_origin():
    node = Node(12, 34)
    assert node.parent is None
    assert node.absolute_position() == Point(12, 34)


def test_set_local_position_is_relative_to_parent(scene):
    root = scene.add_node(20, 100)
    rect = scene.add_rect(root, 50, 50)
    rect.set_local_position(20, 20)

    assert rect.position == Point(20, 20)
    assert rect.absolute_position() == Point(40, 120)


def test_set_local_position_without_parent_fails(scene):
    root = scene.add_node(20, 100)
    with pytest.raises(PrecursorError) as excinfo:
        root.set_local_position(1, 1)
    assert excinfo.value.node_id == root.id

    with pytest.raises(PrecursorError):
        Node().set_local_position(1, 1)


def test_translate_absolute_on_nested_node(scene):
    root = scene.add_node(20, 100)
    middle = scene.attach(Node(30, 30), root)
    rect = scene.attach(RectNode(10, 10), middle)

    rect.translate_absolute(300, 250)

    assert rect.absolute_position() == Point(300, 250)
    assert rect.position == Point(250, 120)
    # Ancestors are untouched
    assert middle.absolute_position() == Point(50, 130)


def test_translate_absolute_on_root(scene):
    root = scene.add_node(20, 100)
    root.translate_absolute(5, 6)
    assert root.position == Point(5, 6)


def test_plain_node_boxes_are_points(scene):
    root = scene.add_node(20, 100)
    child = scene.attach(Node(1, 2), root)

    assert child.local_bounding_box() == LocalBox(1, 2, 0, 0)
    assert child.absolute_bounding_box() == AbsoluteBox(child.id, 21, 102, 21, 102)
    assert not child.is_hit_target


def test_rect_boxes(stage):
    scene, root, a, b = stage

    assert a.local_bounding_box() == LocalBox(0, 0, 200, 200)
    assert a.absolute_bounding_box() == AbsoluteBox(a.id, 20, 100, 220, 300)
    assert b.local_bounding_box() == LocalBox(20, 20, 50, 50)
    assert b.absolute_bounding_box() == AbsoluteBox(b.id, 40, 120, 90, 170)
    assert a.is_hit_target


def test_rect_missing_or_negative_dimensions_default_to_zero():
    rect = RectNode(None, -5)
    assert rect.width == 0
    assert rect.height == 0
    box = rect.absolute_bounding_box()
    assert (box.width, box.height) == (0, 0)


def test_color_does_not_affect_geometry():
    red = RectNode(10, 10, "red", node_id="same")
    blue = RectNode(10, 10, "blue", node_id="same")
    assert red.absolute_bounding_box() == blue.absolute_bounding_box()


def test_rect_draw_fills_and_strokes_outline(scene, surface):
    root = scene.add_node(20, 100)
    rect = scene.attach(RectNode(30, 40, "green", outline="black"), root)

    rect.draw(surface)

    assert surface.calls == [
        ("fill", 20, 100, 30, 40, "green"),
        ("stroke", 20, 100, 30, 40, "black"),
    ]


def test_children_resolve_through_graph(stage):
    scene, root, a, b = stage
    assert root.children == [a, b]
    assert a.parent is root
    assert root.child_ids == [a.id, b.id]


def test_surface_offsets_use_absolute_position(stage, surface):
    scene, root, a, b = stage
    assert b.surface_offsets(surface) == Point(800 - 40, 600 - 120)
    assert root.surface_offsets(surface) == Point(780, 500)
