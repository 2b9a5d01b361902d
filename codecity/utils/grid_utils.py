"""Block grid geometry shared by district packing, building placement and road synthesis.

A district's content is a grid of square cells. Cells are grouped into blocks of
`block_size` x `block_size`, and a road allowance separates neighbouring blocks. All
three consumers derive positions from this one class, so the gaps left between
blocks by building placement are exactly where the internal roads go.
"""
from typing import List

from codecity.utils.math_utils import MathUtils


class BlockGrid:
    """Cell, block and road-allowance geometry along one axis of a district."""

    def __init__(self, config):
        """Initialize the grid geometry from configuration.

        Args:
            config: Configuration with `citygen.building`, `citygen.block` and
                `citygen.road` sections.
        """
        self.cell_size = config['citygen.building.max_width'] + config['citygen.building.gap']
        self.block_size = int(config['citygen.block.size'])
        self.road_allowance = config['citygen.road.width'] + 2 * config['citygen.road.sidewalk_width']

    def block_count(self, cells: int) -> int:
        """Number of blocks needed to hold `cells` cells along one axis."""
        return MathUtils.ceil_div(cells, self.block_size) if cells > 0 else 0

    def content_extent(self, cells: int) -> float:
        """Length of the content box holding `cells` cells plus inter-block roads."""
        if cells <= 0:
            return 0.0
        return cells * self.cell_size + (self.block_count(cells) - 1) * self.road_allowance

    def cell_center(self, index: int) -> float:
        """Local coordinate of a cell's centre, measured from the content box edge."""
        block = index // self.block_size
        return index * self.cell_size + block * self.road_allowance + self.cell_size / 2

    def block_road_centers(self, cells: int) -> List[float]:
        """Local coordinates of the road centre lines between adjacent blocks."""
        centers = []
        for block in range(1, self.block_count(cells)):
            gap_start = block * self.block_size * self.cell_size + (block - 1) * self.road_allowance
            centers.append(gap_start + self.road_allowance / 2)
        return centers
