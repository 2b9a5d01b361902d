"""Road package: synthesis of the full-span road network between districts and blocks."""
from codecity.citygen.road.road_generator import RoadGenerator
from codecity.citygen.road.road_manager import RoadManager, merge_coordinates

__all__ = ['RoadGenerator', 'RoadManager', 'merge_coordinates']
