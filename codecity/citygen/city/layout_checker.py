"""Structural checks for a generated city layout.

The generator guarantees these properties by construction; the checker exists to
confirm them on real inputs and to catch regressions when constants are tuned.
"""
from dataclasses import dataclass
from typing import Dict, List

from codecity.citygen.dataclass import Bounds, CityLayout
from codecity.utils.logger import Logger
from codecity.utils.quadtree import QuadTree

BUILDING_OVERLAP = 'building_overlap'
OUTSIDE_DISTRICT = 'outside_district'
DISTRICT_OVERLAP = 'district_overlap'
ROADS_TOO_CLOSE = 'roads_too_close'


@dataclass(frozen=True)
class LayoutIssue:
    """One violated layout property."""
    kind: str
    message: str


class LayoutChecker:
    """Checks overlap, containment and road spacing of a city layout."""

    def __init__(self, config):
        """Initialize the layout checker.

        Args:
            config: Configuration with the `citygen.quadtree` and `citygen.road` sections.
        """
        self.config = config
        self.max_objects = config['citygen.quadtree.max_objects']
        self.max_levels = config['citygen.quadtree.max_levels']
        self.merge_tolerance = config['citygen.road.merge_tolerance']

        self.logger = Logger.get_logger('LayoutChecker')

    def check(self, layout: CityLayout) -> List[LayoutIssue]:
        """Run every check and log each issue found.

        Args:
            layout: The layout to check.

        Returns:
            All issues found; empty for a valid layout.
        """
        issues = (
            self.check_building_overlaps(layout)
            + self.check_district_containment(layout)
            + self.check_district_overlaps(layout)
            + self.check_road_spacing(layout)
        )
        for issue in issues:
            self.logger.warning(issue.message)
        return issues

    def check_building_overlaps(self, layout: CityLayout) -> List[LayoutIssue]:
        """Find pairs of buildings whose footprints overlap."""
        extent = max(layout.grid_size, 1.0)
        quadtree = QuadTree(Bounds(-extent, -extent, 2 * extent, 2 * extent), self.max_objects, self.max_levels)
        for index, building in enumerate(layout.buildings):
            quadtree.insert(building.footprint, index)

        issues = []
        reported = set()
        for index, building in enumerate(layout.buildings):
            footprint = building.footprint
            for other_rect, other in quadtree.retrieve(footprint):
                pair = (min(index, other), max(index, other))
                if other == index or pair in reported:
                    continue
                if footprint.overlaps(other_rect):
                    reported.add(pair)
                    issues.append(LayoutIssue(
                        BUILDING_OVERLAP,
                        f'Buildings {building.path!r} and {layout.buildings[other].path!r} overlap',
                    ))
        return issues

    def check_district_containment(self, layout: CityLayout) -> List[LayoutIssue]:
        """Find buildings that stick out of their owning district."""
        districts: Dict[str, Bounds] = {d.name: d.bounds for d in layout.districts}
        issues = []
        for building in layout.buildings:
            bounds = districts.get(building.district)
            if bounds is None:
                issues.append(LayoutIssue(
                    OUTSIDE_DISTRICT, f'Building {building.path!r} has unknown district {building.district!r}'))
            elif not bounds.contains(building.footprint):
                issues.append(LayoutIssue(
                    OUTSIDE_DISTRICT, f'Building {building.path!r} lies outside district {building.district!r}'))
        return issues

    def check_district_overlaps(self, layout: CityLayout) -> List[LayoutIssue]:
        """Find pairs of districts whose footprints overlap."""
        issues = []
        districts = layout.districts
        for i, district in enumerate(districts):
            for other in districts[i + 1:]:
                if district.bounds.overlaps(other.bounds):
                    issues.append(LayoutIssue(
                        DISTRICT_OVERLAP, f'Districts {district.name!r} and {other.name!r} overlap'))
        return issues

    def check_road_spacing(self, layout: CityLayout) -> List[LayoutIssue]:
        """Find roads of the same orientation closer than the merge tolerance."""
        issues = []
        vertical = sorted(r.x for r in layout.roads if r.is_vertical)
        horizontal = sorted(r.z for r in layout.roads if not r.is_vertical)
        for axis, coords in (('x', vertical), ('z', horizontal)):
            for a, b in zip(coords, coords[1:]):
                if b - a < self.merge_tolerance:
                    issues.append(LayoutIssue(
                        ROADS_TOO_CLOSE, f'Roads at {axis}={a:.3f} and {axis}={b:.3f} are closer than {self.merge_tolerance}'))
        return issues
