"""Quadtree implementation for efficient spatial partitioning and querying."""
from typing import Generic, List, Optional, Tuple, TypeVar

from codecity.citygen.dataclass import Bounds

T = TypeVar('T')


class QuadTree(Generic[T]):
    """Quadtree data structure for efficient spatial partitioning and querying.

    A quadtree recursively divides space into four quadrants to efficiently store and
    query spatial data. An item whose bounds straddle a split line is stored in every
    child it touches, so query results may repeat items.

    Attributes:
        bounds: The spatial bounds of this quadtree node.
        max_objects: Maximum number of objects before splitting.
        max_levels: Maximum depth of the quadtree.
        level: Current depth level of this node.
        objects: List of object bounds in this node.
        items: List of items corresponding to the bounds.
        nodes: Child nodes of this quadtree.
    """

    def __init__(self, bounds: Bounds, max_objects=10, max_levels=4, level=0):
        """Initialize a new quadtree node.

        Args:
            bounds: The spatial bounds of this quadtree node.
            max_objects: Maximum number of objects before splitting.
            max_levels: Maximum depth of the quadtree.
            level: Current depth level of this node.
        """
        self.bounds = bounds
        self.max_objects = max_objects
        self.max_levels = max_levels
        self.level = level
        self.objects: List[Bounds] = []
        self.items: List[T] = []
        self.nodes: List[Optional[QuadTree]] = [None] * 4

    def split(self):
        """Split this node into four child nodes and redistribute its objects."""
        width = self.bounds.width / 2
        height = self.bounds.height / 2
        x = self.bounds.x
        y = self.bounds.y

        quadrants = [
            Bounds(x + width, y, width, height),
            Bounds(x, y, width, height),
            Bounds(x, y + height, width, height),
            Bounds(x + width, y + height, width, height),
        ]
        for i, quadrant in enumerate(quadrants):
            self.nodes[i] = QuadTree(quadrant, self.max_objects, self.max_levels, self.level + 1)

        for rect, item in zip(self.objects, self.items):
            for node in self.get_relevant_nodes(rect):
                node.insert(rect, item)
        self.objects = []
        self.items = []

    def get_relevant_nodes(self, rect: Bounds) -> List['QuadTree[T]']:
        """Get the child nodes that intersect with the given rectangle.

        Args:
            rect: The bounding rectangle to test intersection with.

        Returns:
            List of child nodes that intersect with the rectangle.
        """
        nodes = []
        mid_x = self.bounds.x + self.bounds.width / 2
        mid_y = self.bounds.y + self.bounds.height / 2

        top = rect.y <= mid_y
        bottom = rect.y + rect.height > mid_y

        if rect.x <= mid_x:
            if top:
                nodes.append(self.nodes[1])
            if bottom:
                nodes.append(self.nodes[2])
        if rect.x + rect.width > mid_x:
            if top:
                nodes.append(self.nodes[0])
            if bottom:
                nodes.append(self.nodes[3])
        return [n for n in nodes if n is not None]

    def insert(self, rect: Bounds, item: T):
        """Insert an item with its bounds into the quadtree.

        Args:
            rect: The bounding rectangle of the item.
            item: The item to insert.
        """
        if any(self.nodes):
            for node in self.get_relevant_nodes(rect):
                node.insert(rect, item)
            return
        self.objects.append(rect)
        self.items.append(item)

        if len(self.objects) > self.max_objects and self.level < self.max_levels:
            self.split()

    def retrieve(self, rect: Bounds) -> List[Tuple[Bounds, T]]:
        """Retrieve all (bounds, item) pairs that might intersect with the given rectangle.

        Args:
            rect: The bounding rectangle to query.

        Returns:
            Candidate pairs from every leaf the rectangle touches.
        """
        if any(self.nodes):
            result = []
            for node in self.get_relevant_nodes(rect):
                result.extend(node.retrieve(rect))
            return result
        return list(zip(self.objects, self.items))
