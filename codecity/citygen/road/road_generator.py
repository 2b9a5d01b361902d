"""Road network generation module.

Roads are derived from district geometry rather than grown procedurally: every
district proposes roads along its outer edges and along the gaps between its
internal blocks, using the same block grid the building placer used, so block
roads always fall in the space the buildings left free.
"""
from typing import List, Sequence

from codecity.citygen.dataclass import District, RoadSegment
from codecity.citygen.road.road_manager import RoadManager
from codecity.utils.grid_utils import BlockGrid
from codecity.utils.logger import Logger
from codecity.utils.math_utils import MathUtils


class RoadGenerator:
    """Synthesizes the full-span road network for a set of districts."""

    def __init__(self, config):
        """Initialize the road generator.

        Args:
            config: Configuration with the `citygen.road` and `citygen.block` sections.
        """
        self.config = config
        self.grid = BlockGrid(config)
        self.road_manager = RoadManager(config)

        self.logger = Logger.get_logger('RoadGenerator')

    def propose_district_roads(self, district: District, include_edges: bool = True) -> None:
        """Propose the edge and internal block roads of one district.

        Args:
            district: The district to propose roads for.
            include_edges: Whether to propose the four outer-edge roads.
        """
        if include_edges:
            edge_offset = self.grid.road_allowance / 2
            self.road_manager.propose_vertical(district.x - district.width / 2 - edge_offset)
            self.road_manager.propose_vertical(district.x + district.width / 2 + edge_offset)
            self.road_manager.propose_horizontal(district.z - district.depth / 2 - edge_offset)
            self.road_manager.propose_horizontal(district.z + district.depth / 2 + edge_offset)

        cols, rows = MathUtils.grid_shape(district.file_count)
        left = district.x - self.grid.content_extent(cols) / 2
        top = district.z - self.grid.content_extent(rows) / 2
        for center in self.grid.block_road_centers(cols):
            self.road_manager.propose_vertical(left + center)
        for center in self.grid.block_road_centers(rows):
            self.road_manager.propose_horizontal(top + center)

    def generate(self, districts: Sequence[District], extent: float) -> List[RoadSegment]:
        """Generate the deduplicated road network.

        A lone district has no neighbours to be separated from, so it proposes
        only its internal block roads.

        Args:
            districts: All districts of the city.
            extent: Half-length of every road.

        Returns:
            Vertical roads in ascending x followed by horizontal roads in ascending z.
        """
        include_edges = len(districts) > 1
        for district in districts:
            self.propose_district_roads(district, include_edges)

        proposed = len(self.road_manager.vertical_proposals) + len(self.road_manager.horizontal_proposals)
        roads = self.road_manager.build_segments(extent)
        self.logger.info(f'Generated {len(roads)} roads from {proposed} proposals')
        return roads
