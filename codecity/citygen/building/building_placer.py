"""Building placer module for laying out one district's files on its block grid."""
import random
from typing import List, Sequence

from codecity.citygen.building.building_classifier import BuildingClassifier
from codecity.citygen.dataclass import BuildingData, District, RepoFile
from codecity.utils.grid_utils import BlockGrid
from codecity.utils.logger import Logger
from codecity.utils.math_utils import MathUtils


class BuildingPlacer:
    """Places buildings on a district's cell grid and derives their geometry."""

    def __init__(self, config, rng: random.Random):
        """Initialize the building placer.

        Args:
            config: Configuration with the `citygen.building` and `citygen.emissive` sections.
            rng: Random source shared with the rest of one generation run.
        """
        self.config = config
        self.rng = rng
        self.grid = BlockGrid(config)
        self.classifier = BuildingClassifier(config, rng)
        self.max_buildings = int(config['citygen.max_buildings'])

        self.logger = Logger.get_logger('BuildingPlacer')

    def truncate(self, files: Sequence[RepoFile]) -> List[RepoFile]:
        """Keep only the first `citygen.max_buildings` files.

        Args:
            files: Files in the order supplied by the retrieval layer.

        Returns:
            At most `max_buildings` files, order preserved.
        """
        files = list(files)
        if len(files) > self.max_buildings:
            self.logger.info(f'Truncating {len(files)} files to the first {self.max_buildings}')
            return files[:self.max_buildings]
        return files

    def building_height(self, lines: int) -> float:
        """Height from line count, clamped to the configured range."""
        return MathUtils.clamp(
            lines * self.config['citygen.building.height_scale'],
            self.config['citygen.building.min_height'],
            self.config['citygen.building.max_height'],
        )

    def building_width(self, size: int) -> float:
        """Width from byte size, clamped to the configured range."""
        return MathUtils.clamp(
            size * self.config['citygen.building.width_scale'],
            self.config['citygen.building.min_width'],
            self.config['citygen.building.max_width'],
        )

    def place_district(self, files: Sequence[RepoFile], district: District) -> List[BuildingData]:
        """Lay out a district's files as buildings.

        Files fill the grid row by row. Each cell's centre is offset by the road
        allowance of every block boundary before it, then the grid is centred in the
        district's content box and moved to the district's world position.

        Args:
            files: The district's files in grid order.
            district: The district the buildings belong to.

        Returns:
            One building per file, in the same order.
        """
        cols, rows = MathUtils.grid_shape(len(files))
        half_width = self.grid.content_extent(cols) / 2
        half_depth = self.grid.content_extent(rows) / 2

        buildings = []
        for index, file in enumerate(files):
            col = index % cols
            row = index // cols

            height = self.building_height(file.lines)
            width = self.building_width(file.size)
            # Slightly rectangular, but never wider than a cell allows
            depth = MathUtils.clamp(
                width * MathUtils.uniform(self.rng, self.config['citygen.building.depth_jitter']),
                self.config['citygen.building.min_width'],
                self.config['citygen.building.max_width'],
            )

            if file.is_frequently_updated:
                emissive_intensity = MathUtils.uniform(self.rng, self.config['citygen.emissive.frequent'])
            else:
                emissive_intensity = MathUtils.uniform(self.rng, self.config['citygen.emissive.idle'])

            style = self.classifier.style(height, width)
            wall_tint = self.rng.random()

            buildings.append(BuildingData.from_file(
                file,
                height=height,
                width=width,
                depth=depth,
                x=district.x + self.grid.cell_center(col) - half_width,
                y=height / 2,
                z=district.z + self.grid.cell_center(row) - half_depth,
                emissive_intensity=emissive_intensity,
                building_type=style.building_type,
                has_setback=style.has_setback,
                setback_ratio=style.setback_ratio,
                setback_height=style.setback_height,
                roof_type=style.roof_type,
                wall_tint=wall_tint,
                district=district.name,
            ))

        self.logger.debug(f'Placed {len(buildings)} buildings in district {district.name!r} ({cols}x{rows} grid)')
        return buildings
