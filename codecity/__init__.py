"""CodeCity package for laying out repositories as miniature cities.

This package turns a flat list of repository files into districts, buildings and
roads. The layout engine is pure: it performs no I/O and owns its random source.
"""

from codecity.citygen.city.city_generator import CityGenerator, generate_city_layout
from codecity.citygen.dataclass import CityLayout, RepoData, RepoFile
from codecity.config import Config
from codecity.utils.logger import Logger

__all__ = [
    'CityGenerator',
    'CityLayout',
    'Config',
    'Logger',
    'RepoData',
    'RepoFile',
    'generate_city_layout',
]
