"""Dataclass module for the city generation."""
from codecity.citygen.dataclass.dataclass import (Bounds, BuildingData,
                                                  BuildingType, CityLayout,
                                                  District, FolderGroup,
                                                  RepoData, RepoFile,
                                                  RoadSegment, RoofType,
                                                  estimate_lines)

__all__ = ['Bounds', 'BuildingData', 'BuildingType', 'CityLayout', 'District', 'FolderGroup',
           'RepoData', 'RepoFile', 'RoadSegment', 'RoofType', 'estimate_lines']
