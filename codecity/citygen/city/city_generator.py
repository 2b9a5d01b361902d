"""City generator module: turns repository data into a complete city layout."""
import random
from enum import Enum, auto
from typing import List

import numpy as np

from codecity.citygen.building.building_placer import BuildingPlacer
from codecity.citygen.city.layout_checker import LayoutChecker
from codecity.citygen.dataclass import (BuildingData, CityLayout, District,
                                        FolderGroup, RepoData, RepoFile,
                                        RoadSegment)
from codecity.citygen.district.district_packer import DistrictPacker
from codecity.citygen.district.folder_grouper import group_by_folder
from codecity.citygen.road.road_generator import RoadGenerator
from codecity.config import Config
from codecity.utils.grid_utils import BlockGrid
from codecity.utils.logger import Logger
from codecity.utils.seeds import derive_seed


class GenerationState(Enum):
    """Enum to track the generation state."""
    GROUPING_FOLDERS = auto()
    PACKING_DISTRICTS = auto()
    PLACING_BUILDINGS = auto()
    GENERATING_ROADS = auto()
    COMPLETED = auto()


class CityGenerator:
    """Runs the layout pipeline: folders, districts, buildings, roads, extent.

    Every call to `generate` starts from a fresh random generator, so the generator
    holds no state that leaks from one repository into the next.
    """

    def __init__(self, config=None, seed: int = None):
        """Initialize the city generator with configuration.

        Args:
            config: Configuration for the city generation; defaults are used when None.
            seed: Seed for the random draws. When None, `codecity.seed` is used, and
                when that is null too the seed is derived from ``owner/repo``.
        """
        self.config = config if config is not None else Config()
        self.seed = seed
        self.grid = BlockGrid(self.config)
        self.min_grid_size = self.config['citygen.min_grid_size']
        self.validate_layout = self.config.get('citygen.validate_layout', False)

        Logger.configure_from(self.config)
        self.logger = Logger.get_logger('CityGenerator')
        self._reset(None)

    def _reset(self, repo_data):
        self.repo_data = repo_data
        self.generation_state = GenerationState.GROUPING_FOLDERS
        self.rng = random.Random(self.resolve_seed(repo_data)) if repo_data is not None else None
        self.building_placer = None
        self.files: List[RepoFile] = []
        self.folder_groups: List[FolderGroup] = []
        self.districts: List[District] = []
        self.buildings: List[BuildingData] = []
        self.roads: List[RoadSegment] = []
        self.grid_size = float(self.min_grid_size)

    def resolve_seed(self, repo_data: RepoData) -> int:
        """Pick the seed for one run.

        Args:
            repo_data: The repository being laid out.

        Returns:
            The explicit seed, else the configured seed, else a stable hash of ``owner/repo``.
        """
        if self.seed is not None:
            return self.seed
        try:
            configured = self.config['codecity.seed']
        except ValueError:
            configured = None
        if configured is not None:
            return int(configured)
        return derive_seed(repo_data.slug)

    def generate(self, repo_data: RepoData) -> CityLayout:
        """Generate the city layout for a repository.

        Args:
            repo_data: The repository's files and metadata.

        Returns:
            The assembled layout. A repository without files yields empty lists and
            the minimum grid size.
        """
        self._reset(repo_data)
        while not self.is_generation_complete():
            self.generate_step()
        return self.layout

    def generate_step(self) -> bool:
        """Run one stage of the pipeline.

        Returns:
            bool: True if generation is complete.
        """
        if self.generation_state == GenerationState.GROUPING_FOLDERS:
            self.building_placer = BuildingPlacer(self.config, self.rng)
            self.files = self.building_placer.truncate(self.repo_data.files)
            self.folder_groups = group_by_folder(self.files)
            self.generation_state = GenerationState.PACKING_DISTRICTS
            return False

        elif self.generation_state == GenerationState.PACKING_DISTRICTS:
            self.districts = DistrictPacker(self.config).pack(self.folder_groups)
            self.logger.info(f'Packed {len(self.districts)} districts for {self.repo_data.slug}')
            self.generation_state = GenerationState.PLACING_BUILDINGS
            return False

        elif self.generation_state == GenerationState.PLACING_BUILDINGS:
            self.buildings = []
            for group, district in zip(self.folder_groups, self.districts):
                self.buildings.extend(self.building_placer.place_district(group.files, district))
            self.grid_size = self.compute_grid_size(self.buildings)
            self.logger.info(f'Placed {len(self.buildings)} buildings, grid size {self.grid_size:.2f}')
            self.generation_state = GenerationState.GENERATING_ROADS
            return False

        elif self.generation_state == GenerationState.GENERATING_ROADS:
            road_generator = RoadGenerator(self.config)
            self.roads = road_generator.generate(self.districts, self.road_extent())
            self.generation_state = GenerationState.COMPLETED
            if self.validate_layout:
                LayoutChecker(self.config).check(self.layout)
        return True

    def is_generation_complete(self) -> bool:
        """Check if city generation is complete.

        Returns:
            bool: True if generation is complete.
        """
        return self.generation_state == GenerationState.COMPLETED

    def compute_grid_size(self, buildings: List[BuildingData]) -> float:
        """Half-extent of the square holding every building, floored at `citygen.min_grid_size`."""
        if not buildings:
            return float(self.min_grid_size)
        reach = np.array([(abs(b.x) + b.width, abs(b.z) + b.depth) for b in buildings])
        return float(max(reach.max(), self.min_grid_size))

    def road_extent(self) -> float:
        """Half-length of every road: the city plus the outermost edge roads."""
        if not self.districts:
            return self.grid_size
        reach = np.array([
            (abs(d.x) + d.width / 2, abs(d.z) + d.depth / 2) for d in self.districts
        ])
        return float(max(reach.max() + self.grid.road_allowance, self.grid_size))

    @property
    def layout(self) -> CityLayout:
        """Get the layout assembled so far.

        Returns:
            CityLayout: Immutable snapshot of buildings, districts and roads.
        """
        return CityLayout(
            buildings=tuple(self.buildings),
            districts=tuple(self.districts),
            roads=tuple(self.roads),
            grid_size=self.grid_size,
        )


def generate_city_layout(repo_data: RepoData, config=None, seed: int = None) -> CityLayout:
    """Generate a city layout in one call.

    Args:
        repo_data: The repository's files and metadata.
        config: Optional configuration; defaults are used when None.
        seed: Optional seed overriding the configured or derived one.

    Returns:
        The generated CityLayout.
    """
    return CityGenerator(config, seed).generate(repo_data)
