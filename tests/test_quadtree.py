from codecity.citygen.dataclass import Bounds
from codecity.utils.quadtree import QuadTree


def _overlapping(tree, query):
    return {item for rect, item in tree.retrieve(query) if query.overlaps(rect)}


def test_split_moves_objects_into_children():
    tree = QuadTree(Bounds(-50, -50, 100, 100), max_objects=2, max_levels=4)
    for i in range(10):
        tree.insert(Bounds(i * 10 - 50, i * 10 - 50, 5, 5), i)

    assert any(tree.nodes)
    assert tree.objects == []
    assert _overlapping(tree, Bounds(-1, -1, 2, 2)) == {5}
    assert _overlapping(tree, Bounds(-50, -50, 100, 100)) == set(range(10))


def test_retrieve_returns_only_nearby_leaves():
    tree = QuadTree(Bounds(0, 0, 100, 100), max_objects=1, max_levels=3)
    tree.insert(Bounds(10, 10, 2, 2), 'near')
    tree.insert(Bounds(80, 80, 2, 2), 'far')

    items = [item for _, item in tree.retrieve(Bounds(5, 5, 10, 10))]
    assert items == ['near']


def test_straddling_item_is_stored_in_each_quadrant():
    tree = QuadTree(Bounds(0, 0, 10, 10), max_objects=1, max_levels=3)
    tree.insert(Bounds(4, 4, 2, 2), 'center')
    tree.insert(Bounds(0, 0, 1, 1), 'corner')

    assert [item for _, item in tree.retrieve(Bounds(0, 0, 10, 10))].count('center') == 4
    assert _overlapping(tree, Bounds(3, 3, 4, 4)) == {'center'}
