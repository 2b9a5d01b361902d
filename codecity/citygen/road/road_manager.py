"""Road network management module.

Collects proposed road centre coordinates, collapses near-duplicates and turns the
survivors into full-span road segments.
"""
from typing import Iterable, List

from codecity.citygen.dataclass import RoadSegment


def merge_coordinates(values: Iterable[float], tolerance: float) -> List[float]:
    """Sort coordinates and merge neighbours that lie within `tolerance`.

    Values are folded left to right; a value within `tolerance` of the last kept
    value replaces it with their average. Sorting first makes the result
    independent of the order values were proposed in.

    Args:
        values: Proposed coordinates along one axis.
        tolerance: Maximum distance at which two coordinates are merged.

    Returns:
        Ascending coordinates, any two of which are more than `tolerance` apart.
    """
    merged: List[float] = []
    for value in sorted(values):
        if merged and value - merged[-1] <= tolerance:
            merged[-1] = (merged[-1] + value) / 2
        else:
            merged.append(value)
    return merged


class RoadManager:
    """Manages proposed road coordinates and the resulting road segments."""

    def __init__(self, config):
        """Initialize the road manager.

        Args:
            config: Configuration with the `citygen.road` section.
        """
        self.config = config
        self.road_width = config['citygen.road.width']
        self.merge_tolerance = config['citygen.road.merge_tolerance']

        self.vertical_proposals: List[float] = []
        self.horizontal_proposals: List[float] = []

    def propose_vertical(self, x: float) -> None:
        """Propose a north-south road through world coordinate x."""
        self.vertical_proposals.append(x)

    def propose_horizontal(self, z: float) -> None:
        """Propose an east-west road through world coordinate z."""
        self.horizontal_proposals.append(z)

    def build_segments(self, extent: float) -> List[RoadSegment]:
        """Deduplicate the proposals and create one road per surviving coordinate.

        Args:
            extent: Half-length of every road; roads span [-extent, extent].

        Returns:
            Vertical roads in ascending x, then horizontal roads in ascending z.
        """
        roads = []
        for x in merge_coordinates(self.vertical_proposals, self.merge_tolerance):
            roads.append(RoadSegment(x=x, z=0.0, width=self.road_width, depth=2 * extent))
        for z in merge_coordinates(self.horizontal_proposals, self.merge_tolerance):
            roads.append(RoadSegment(x=0.0, z=z, width=2 * extent, depth=self.road_width))
        return roads
